from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libsyn.lexer.lexer import OPEN_TAG, tokenize_from_raw
from libsyn.lexer.tokens import Token, tokens_match, tokens_to_string
from libsyn.macros.matching import MatchCandidate, find_macros_for_token_sequence

from .config import TransformerConfig
from .replacement import generate_replacement

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libsyn.macros.macro import MacroDefinition
    from libsyn.macros.registry import MacrosRegistry


@dataclass(frozen=True)
class TransformResult:
    """Tokens produced by the transformer with diagnostics of the loop."""

    tokens: list[Token]

    # How much iterations the loop performed
    iterations: int

    # False if loop was stopped by the iteration limit while buffer still was changing,
    # so more macros may have applied
    converged: bool

    @property
    def text(self) -> str:
        return tokens_to_string(self.tokens)


def transform_tokens(
    tokens: Sequence[Token],
    registry: MacrosRegistry,
    config: TransformerConfig | None = None,
) -> TransformResult:
    """Apply all registered macros onto tokens until nothing changes or iteration limit is hit.

    Each iteration performs one full rebuild pass per registered macro, so macro applied earlier
    within iteration may create or remove matches for the next passes.
    """
    config = config or TransformerConfig()
    buffer = list(tokens)

    macros = registry.all()
    if not macros:
        return TransformResult(tokens=buffer, iterations=0, converged=True)

    iteration = 0
    changed = True
    while changed and iteration < config.max_iterations:
        changed = False
        for _ in macros:
            rebuilt = _rebuild_buffer(buffer, macros, config)
            changed |= _texts(rebuilt) != _texts(buffer)
            buffer = rebuilt
        iteration += 1

    return TransformResult(tokens=buffer, iterations=iteration, converged=not changed)


def transform_source(
    code: str,
    registry: MacrosRegistry,
    config: TransformerConfig | None = None,
) -> TransformResult:
    """Tokenize host language source, transform it and keep result serializable via `.text`.

    Source that begins with open tag (`<?php`) is lexed in template mode, so the tag and any
    inline HTML are preserved, otherwise whole source is treated as code.
    """
    inline_html = code.lstrip().lower().startswith(OPEN_TAG)
    tokens = list(tokenize_from_raw(code, inline_html=inline_html))
    return transform_tokens(tokens, registry, config)


def _rebuild_buffer(
    buffer: Sequence[Token],
    macros: Sequence[MacroDefinition],
    config: TransformerConfig,
) -> list[Token]:
    """Rebuild buffer left-to-right, replacing first applicable macro match at each position."""
    rebuilt: list[Token] = []

    idx = 0
    while idx < len(buffer):
        candidates = find_macros_for_token_sequence(macros, buffer, idx)
        if not candidates and config.legacy_single_token_fallback:
            candidates = _find_single_token_candidates(macros, buffer[idx])

        if not candidates:
            rebuilt.append(buffer[idx])
            idx += 1
            continue

        # Candidates are in registry order, so highest priority one wins
        candidate = candidates[0]
        rebuilt.extend(
            generate_replacement(candidate.macro.parsed_replacement, candidate.captures),
        )

        # Always advance, even for (unlikely) empty consumption
        idx += max(candidate.consumed, 1)

    return rebuilt


def _find_single_token_candidates(
    macros: Sequence[MacroDefinition],
    token: Token,
) -> list[MatchCandidate]:
    return [
        MatchCandidate(macro=macro, captures={}, consumed=1)
        for macro in macros
        if tokens_match(macro.first_pattern_element, token)
    ]


def _texts(tokens: Sequence[Token]) -> list[str]:
    return [token.text for token in tokens]
