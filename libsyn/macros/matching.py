from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libsyn.lexer.tokens import (
    CapturePlaceholder,
    Token,
    is_whitespace,
    token_text,
    tokens_match,
)

from .capture import capture_until_closing
from .delimiters import is_closing_delimiter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .macro import MacroDefinition


@dataclass(frozen=True)
class MatchCandidate:
    """Result of an successful match of single macro at single position."""

    macro: MacroDefinition

    # Capture name -> captured tokens
    captures: dict[str, list[Token]]

    # How much input tokens are consumed by that match
    consumed: int


def find_macros_for_token_sequence(
    macros: Iterable[MacroDefinition],
    tokens: Sequence[Token],
    position: int,
) -> list[MatchCandidate]:
    """Find all macros that match token sequence starting at given position, in order of given macros.

    Macro is tried only if first element of its pattern matches token at position.
    """
    if not 0 <= position < len(tokens):
        return []

    current = tokens[position]
    candidates: list[MatchCandidate] = []
    for macro in macros:
        if not tokens_match(macro.first_pattern_element, current):
            continue

        if macro.has_captures:
            candidate = _match_pattern_with_captures(macro, tokens, position)
        else:
            candidate = _match_exact_pattern(macro, tokens, position)

        if candidate is not None:
            candidates.append(candidate)
    return candidates


def _match_exact_pattern(
    macro: MacroDefinition,
    tokens: Sequence[Token],
    position: int,
) -> MatchCandidate | None:
    """Match pattern without captures, it must be equal to input text-for-text (whitespace included)."""
    pattern = macro.parsed_pattern
    window = tokens[position : position + len(pattern)]
    if len(window) != len(pattern):
        return None

    if not all(tokens_match(expected, token) for expected, token in zip(pattern, window, strict=True)):
        return None
    return MatchCandidate(macro=macro, captures={}, consumed=len(pattern))


def _match_pattern_with_captures(
    macro: MacroDefinition,
    tokens: Sequence[Token],
    position: int,
) -> MatchCandidate | None:
    """Walk pattern with captures against input, capturing tokens for each placeholder."""
    pattern = macro.parsed_pattern
    captures: dict[str, list[Token]] = {}

    input_idx = position
    pattern_idx = 0
    while pattern_idx < len(pattern) and input_idx < len(tokens):
        element = pattern[pattern_idx]

        if not isinstance(element, CapturePlaceholder):
            # Input trivia is skipped unless pattern explicitly expects an space
            if token_text(element) != " ":
                input_idx = _skip_whitespace(tokens, input_idx)
            if input_idx >= len(tokens) or not tokens_match(element, tokens[input_idx]):
                return None
            input_idx += 1
            pattern_idx += 1
            continue

        if pattern_idx + 1 == len(pattern):
            # Trailing capture consumes everything that is left
            captures[element.name] = list(tokens[input_idx:])
            input_idx = len(tokens)
            pattern_idx += 1
            continue

        terminator = pattern[pattern_idx + 1]
        close = token_text(terminator)
        if is_closing_delimiter(close):
            captured = capture_until_closing(tokens, input_idx, close)
            input_idx += len(captured)
            if input_idx >= len(tokens):
                # Closing delimiter was never found
                return None

            captures[element.name] = captured
            # Closing delimiter is matched right away, both in pattern and input
            input_idx += 1
            pattern_idx += 2
            continue

        input_idx = _skip_whitespace(tokens, input_idx)
        captured_from = input_idx
        while input_idx < len(tokens) and not tokens_match(terminator, tokens[input_idx]):
            input_idx += 1

        captures[element.name] = list(tokens[captured_from:input_idx])
        pattern_idx += 1

    if pattern_idx < len(pattern):
        # Input is exhausted before pattern is satisfied
        return None

    return MatchCandidate(
        macro=macro,
        captures=captures,
        consumed=input_idx - position,
    )


def _skip_whitespace(tokens: Sequence[Token], idx: int) -> int:
    while idx < len(tokens) and is_whitespace(tokens[idx]):
        idx += 1
    return idx
