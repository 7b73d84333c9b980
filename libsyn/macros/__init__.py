"""Macro definitions, matching and storage."""

from .capture import capture_until_closing
from .definitions import parse_macro_from_line, parse_macros_from_text
from .macro import MacroDefinition
from .matching import MatchCandidate, find_macros_for_token_sequence
from .registry import MacrosRegistry

__all__ = (
    "MacroDefinition",
    "MacrosRegistry",
    "MatchCandidate",
    "capture_until_closing",
    "find_macros_for_token_sequence",
    "parse_macro_from_line",
    "parse_macros_from_text",
)
