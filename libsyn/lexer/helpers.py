from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


ESCAPE_SYMBOL = "\\"
NAMESPACE_SEPARATOR = "\\"

# Multi-character operators, longest first as they are matched greedily
OPERATORS = tuple(
    sorted(
        (
            "<<=",
            ">>=",
            "**=",
            "...",
            "<=>",
            "===",
            "!==",
            "??=",
            "?->",
            "->",
            "=>",
            "::",
            "++",
            "--",
            "==",
            "!=",
            "<>",
            "<=",
            ">=",
            "&&",
            "||",
            "??",
            "+=",
            "-=",
            "*=",
            "/=",
            ".=",
            "%=",
            "&=",
            "|=",
            "^=",
            "<<",
            ">>",
            "**",
            "#[",
        ),
        key=len,
        reverse=True,
    ),
)


def is_identifier_start(symbol: str) -> bool:
    return bool(symbol) and (symbol.isalpha() or symbol == "_" or ord(symbol) >= 0x80)


def is_identifier_part(symbol: str) -> bool:
    return is_identifier_start(symbol) or symbol.isdigit()


def find_whitespace_end(text: str, start: int) -> int:
    """Find index where whitespace run that begins at start ends."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_identifier_end(text: str, start: int) -> int:
    """Find index where identifier (possibly namespace qualified) ends."""
    idx = start
    end = len(text)
    while idx < end:
        symbol = text[idx]
        if is_identifier_part(symbol):
            idx += 1
            continue
        if symbol == NAMESPACE_SEPARATOR and idx + 1 < end and is_identifier_start(text[idx + 1]):
            idx += 1
            continue
        break
    return idx


def find_line_comment_end(text: str, start: int) -> int:
    """Find where single line comment ends (before newline or close tag)."""
    idx = start
    end = len(text)
    while idx < end:
        if text[idx] in "\r\n" or text.startswith("?>", idx):
            return idx
        idx += 1
    return end


def find_block_comment_end(text: str, start: int) -> int:
    """Find index after block comment terminator, or end of text if comment is not closed."""
    ends_at = text.find("*/", start + 2)
    if ends_at == -1:
        return len(text)
    return ends_at + 2


def find_quoted_literal_end(text: str, start: int, *, quote: str) -> int:
    """Find index after close quote of an literal that opens at start, or end of text if not closed."""
    idx = start + 1
    end = len(text)
    while idx < end:
        current = text[idx]
        if current == ESCAPE_SYMBOL:
            idx += 2
            continue
        if current == quote:
            return idx + 1
        idx += 1
    return end


HEREDOC_START = "<<<"


def find_heredoc_end(text: str, start: int) -> int | None:
    """Find index after closing label of an heredoc (`<<<ID`, `<<<"ID"`) or nowdoc (`<<<'ID'`).

    Closing label may be indented and must not be followed by an identifier character.
    Returns None if there is no valid heredoc header at start (so `<<<` is not an heredoc),
    unterminated heredoc is consumed until end of text.
    """
    end = len(text)
    idx = _find_column(text, start + len(HEREDOC_START), lambda s: s not in " \t")

    quote = text[idx] if idx < end and text[idx] in "'\"" else ""
    if quote:
        idx += 1

    if idx >= end or not is_identifier_start(text[idx]):
        return None
    label_ends_at = _find_column(text, idx, lambda s: not is_identifier_part(s))
    label = text[idx:label_ends_at]

    idx = label_ends_at
    if quote:
        if not text.startswith(quote, idx):
            return None
        idx += 1

    if text.startswith("\r\n", idx):
        idx += 2
    elif text.startswith("\n", idx):
        idx += 1
    else:
        return None

    line_starts_at = idx
    while line_starts_at < end:
        label_at = _find_column(text, line_starts_at, lambda s: s not in " \t")
        label_ends_at = label_at + len(label)
        if text.startswith(label, label_at) and not (
            label_ends_at < end and is_identifier_part(text[label_ends_at])
        ):
            return label_ends_at

        newline_at = text.find("\n", line_starts_at)
        if newline_at == -1:
            break
        line_starts_at = newline_at + 1
    return end


def find_number_end(text: str, start: int) -> tuple[int, bool]:
    """Find where numeric literal ends and whether it is an floating point one."""
    end = len(text)
    prefix = text[start : start + 2].lower()
    if prefix in ("0x", "0b", "0o"):
        alphabet = {"0x": "0123456789abcdefABCDEF_", "0b": "01_", "0o": "01234567_"}[prefix]
        return _find_column(text, start + 2, lambda s: s not in alphabet), False

    idx = _find_column(text, start, lambda s: not (s.isdigit() or s == "_"))
    is_fp = False
    if idx < end and text[idx] == "." and idx + 1 < end and text[idx + 1].isdigit():
        is_fp = True
        idx = _find_column(text, idx + 1, lambda s: not (s.isdigit() or s == "_"))

    if idx < end and text[idx] in "eE":
        exponent = idx + 1
        if exponent < end and text[exponent] in "+-":
            exponent += 1
        if exponent < end and text[exponent].isdigit():
            is_fp = True
            idx = _find_column(text, exponent, lambda s: not s.isdigit())
    return idx, is_fp


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start
