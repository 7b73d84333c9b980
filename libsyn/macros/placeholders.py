"""Parsing of capture placeholders in patterns and variable references in replacements.

Pattern captures are written as `$(layer() as <name>)`, replacement references as `$(<name>)`.
Both are turned into explicit elements (`CapturePlaceholder`, `VariableReference`) here,
so later stages never have to re-recognize them by their text.
"""

from __future__ import annotations

import re

from libsyn.lexer.tokens import (
    CapturePlaceholder,
    LiteralToken,
    PatternElement,
    ReplacementElement,
    VariableReference,
    is_whitespace,
)

from .tokenization import GENERIC_DELIMITERS, tokenize_generic, tokenize_pattern

CAPTURE_PATTERN = re.compile(r"\$\(layer\(\)\s+as\s+(?P<name>\w+)\)")
REFERENCE_PATTERN = re.compile(r"\$\((?P<name>\w+)\)")


def parse_pattern(pattern: str) -> tuple[list[PatternElement], dict[str, str]]:
    """Parse pattern text into pattern elements and capture table (marker -> capture name).

    Patterns without captures are tokenized as-is (whitespace is significant and matched exactly).
    Patterns with captures are split by generic tokenizer, and each run between delimiters and captures
    is tokenized with host lexer rules with whitespace dropped.
    """
    placeholders: dict[str, CapturePlaceholder] = {}

    def substitute_capture(match: re.Match[str]) -> str:
        placeholder = CapturePlaceholder(index=len(placeholders), name=match["name"])
        placeholders[placeholder.marker] = placeholder
        return placeholder.marker

    marked = CAPTURE_PATTERN.sub(substitute_capture, pattern)
    captures = {marker: placeholder.name for marker, placeholder in placeholders.items()}

    if not placeholders:
        return tokenize_pattern(pattern), captures

    elements: list[PatternElement] = []
    for chunk in tokenize_generic(marked):
        if placeholder := placeholders.get(chunk):
            elements.append(placeholder)
            continue

        if chunk in GENERIC_DELIMITERS:
            elements.append(LiteralToken(text=chunk))
            continue

        elements.extend(
            token for token in tokenize_pattern(chunk) if not is_whitespace(token)
        )

    return elements, captures


def parse_replacement(replacement: str) -> list[ReplacementElement]:
    """Parse replacement text into tokens with variable references in place of `$(<name>)`."""
    elements: list[ReplacementElement] = []

    cursor = 0
    for match in REFERENCE_PATTERN.finditer(replacement):
        elements.extend(tokenize_pattern(replacement[cursor : match.start()]))
        elements.append(VariableReference(name=match["name"]))
        cursor = match.end()

    elements.extend(tokenize_pattern(replacement[cursor:]))
    return elements
