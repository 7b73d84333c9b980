"""Tokenization of macro pattern and replacement bodies."""

from __future__ import annotations

from libsyn.lexer.lexer import tokenize_from_raw
from libsyn.lexer.tokens import (
    CAPTURE_MARKER_PREFIX,
    CAPTURE_MARKER_SUFFIX,
    Token,
)

GENERIC_DELIMITERS = frozenset("(){}[]")


def tokenize_pattern(text: str) -> list[Token]:
    """Tokenize pattern text with same lexical rules as an real input, so they are comparable token-for-token."""
    return list(tokenize_from_raw(text, inline_html=False))


def tokenize_generic(text: str) -> list[str]:
    """Split raw macro body into runs, keeping capture markers and single bracket delimiters atomic.

    Whitespace only separates tokens and is dropped, everything else is accumulated into
    maximal runs between delimiters, whitespace and capture markers.
    """
    tokens: list[str] = []
    current: list[str] = []

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    idx = 0
    end = len(text)
    while idx < end:
        if text.startswith(CAPTURE_MARKER_PREFIX, idx):
            marker_ends_at = text.find(
                CAPTURE_MARKER_SUFFIX,
                idx + len(CAPTURE_MARKER_PREFIX),
            )
            if marker_ends_at != -1:
                flush()
                marker_ends_at += len(CAPTURE_MARKER_SUFFIX)
                tokens.append(text[idx:marker_ends_at])
                idx = marker_ends_at
                continue

        symbol = text[idx]
        if symbol in GENERIC_DELIMITERS:
            flush()
            tokens.append(symbol)
        elif symbol.isspace():
            flush()
        else:
            current.append(symbol)
        idx += 1

    flush()
    return [token for token in tokens if token]
