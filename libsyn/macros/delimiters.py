"""Delimiter pairs used by balanced captures and definition-line parsing."""

CLOSING_TO_OPENING = {
    ")": "(",
    "}": "{",
    "]": "[",
}

BRACE_OPEN = "{"
BRACE_CLOSE = "}"


def is_closing_delimiter(text: str) -> bool:
    return text in CLOSING_TO_OPENING


def get_opening_delimiter(closing: str) -> str | None:
    """Get opening pair for given closing delimiter or None if it is not an closing delimiter."""
    return CLOSING_TO_OPENING.get(closing)


def find_matching_brace(text: str, open_index: int) -> int | None:
    """Find index of `}` that closes `{` located at given index, or None if text ends first.

    Only curly braces are counted, other bracket kinds are treated as plain text.
    """
    depth = 1
    for idx in range(open_index + 1, len(text)):
        symbol = text[idx]
        if symbol == BRACE_OPEN:
            depth += 1
        elif symbol == BRACE_CLOSE:
            depth -= 1
            if depth == 0:
                return idx
    return None
