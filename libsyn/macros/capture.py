from __future__ import annotations

from typing import TYPE_CHECKING

from .delimiters import get_opening_delimiter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libsyn.lexer.tokens import Token


def capture_until_closing(
    tokens: Sequence[Token],
    start: int,
    close: str,
) -> list[Token]:
    """Capture tokens from start up to (not including) closing delimiter that is not nested.

    Only delimiter pair of given `close` is depth-tracked, other brackets are opaque content.
    When closing delimiter is never found, whole remainder of tokens is captured.
    """
    opening = get_opening_delimiter(close)
    assert opening is not None, f"Expected closing delimiter for balanced capture, got `{close}`"

    captured: list[Token] = []
    depth = 0
    for token in tokens[start:]:
        if token.text == opening:
            depth += 1
        elif token.text == close:
            if depth == 0:
                break
            depth -= 1
        captured.append(token)
    return captured
