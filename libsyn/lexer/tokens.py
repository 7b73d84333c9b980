from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, TypeAlias, assert_never

if TYPE_CHECKING:
    from collections.abc import Iterable


class TokenKind(IntEnum):
    """Kind of an lexical token classified by the host lexer.

    Single-character punctuation has no kind at all (see `LiteralToken`),
    same as host language tokenizer emits them as bare characters.
    """

    # Template mode (outside of `<?php ... ?>`)
    OPEN_TAG = auto()
    CLOSE_TAG = auto()
    INLINE_HTML = auto()

    # Trivia
    WHITESPACE = auto()
    COMMENT = auto()
    DOC_COMMENT = auto()

    # Language
    VARIABLE = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()

    # Literals
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()

    # Multi-character operators (e.g `->`, `===`, `=>`)
    OPERATOR = auto()


# Token kinds that are skipped by the matcher when pattern does not expect them
TRIVIA_KINDS = frozenset(
    (
        TokenKind.WHITESPACE,
        TokenKind.COMMENT,
        TokenKind.DOC_COMMENT,
    ),
)


@dataclass(frozen=True)
class LiteralToken:
    """Bare token with no kind, e.g single character punctuation like `(` or `;`."""

    text: str


@dataclass(frozen=True)
class LexedToken:
    """Lexical token classified by the host lexer."""

    kind: TokenKind

    # Real text of an token within source code
    text: str

    # Line within source (1-based), informative only
    line: int = 1


Token: TypeAlias = LiteralToken | LexedToken


@dataclass(frozen=True)
class CapturePlaceholder:
    """Pattern element that binds input tokens under an capture name."""

    # Index of an capture within pattern, in order of appearance
    index: int
    name: str

    @property
    def marker(self) -> str:
        return capture_marker(self.index)


@dataclass(frozen=True)
class VariableReference:
    """Replacement element that is substituted with captured tokens."""

    name: str

    @property
    def marker(self) -> str:
        return f"$({self.name})"


PatternElement: TypeAlias = Token | CapturePlaceholder
ReplacementElement: TypeAlias = Token | VariableReference


CAPTURE_MARKER_PREFIX = "__CAPTURE_"
CAPTURE_MARKER_SUFFIX = "__"


def capture_marker(index: int) -> str:
    """Reserved textual form of an capture placeholder within raw pattern text."""
    return f"{CAPTURE_MARKER_PREFIX}{index}{CAPTURE_MARKER_SUFFIX}"


def token_text(token: PatternElement | ReplacementElement) -> str:
    """Textual value of an token, placeholders are represented by their markers."""
    match token:
        case LiteralToken(text=text) | LexedToken(text=text):
            return text
        case CapturePlaceholder() | VariableReference():
            return token.marker
        case _:
            assert_never(token)


def tokens_match(expected: PatternElement, token: Token) -> bool:
    """Compare tokens by their textual value only (kind is informative)."""
    if isinstance(expected, CapturePlaceholder):
        return False
    return token_text(expected) == token.text


def is_whitespace(token: PatternElement | ReplacementElement) -> bool:
    """Is given token an trivia (whitespace or comment) token."""
    match token:
        case LexedToken(kind=kind):
            return kind in TRIVIA_KINDS
        case LiteralToken() | CapturePlaceholder() | VariableReference():
            return False
        case _:
            assert_never(token)


def is_plain_space(token: PatternElement | ReplacementElement) -> bool:
    """Is given token exactly one space character."""
    return is_whitespace(token) and token_text(token) == " "


def tokens_to_string(tokens: Iterable[Token]) -> str:
    """Serialize tokens back to source text (no whitespace added)."""
    return "".join(token.text for token in tokens)
