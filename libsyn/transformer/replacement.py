from __future__ import annotations

from typing import TYPE_CHECKING

from libsyn.lexer.tokens import (
    LiteralToken,
    Token,
    VariableReference,
    is_plain_space,
    is_whitespace,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from libsyn.lexer.tokens import ReplacementElement


def generate_replacement(
    parsed_replacement: Sequence[ReplacementElement],
    captures: Mapping[str, Sequence[Token]],
) -> list[Token]:
    """Generate replacement tokens by substituting captures into references.

    Whitespace around substituted captures is adjusted so captures that carry their own
    surrounding whitespace do not produce double spaces.
    Unresolved references are emitted as their literal `$(<name>)` text.
    """
    result: list[Token] = []
    skip_next_space = False

    for element in parsed_replacement:
        if skip_next_space:
            skip_next_space = False
            if is_plain_space(element):
                continue

        if not isinstance(element, VariableReference):
            result.append(element)
            continue

        captured = captures.get(element.name)
        if captured is None:
            result.append(LiteralToken(text=element.marker))
            continue

        if captured and is_whitespace(captured[0]) and result and is_plain_space(result[-1]):
            result.pop()

        result.extend(captured)
        skip_next_space = bool(captured) and is_whitespace(captured[-1])

    return result
