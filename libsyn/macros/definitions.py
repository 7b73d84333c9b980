"""Parser of macro definition lines: `$(macro) { <pattern> } >> { <replacement> }`."""

from __future__ import annotations

import re

from .delimiters import BRACE_OPEN, find_matching_brace
from .exceptions import MacroDefinitionError
from .macro import MacroDefinition

DEFINITION_PREFIX = re.compile(r"^\$\(macro\)\s*\{")
DEFINITION_ARROW = ">>"
COMMENT_MARKS = ("#", "//")


def parse_macro_from_line(
    line: str,
    source_file: str | None = None,
    line_number: int | None = None,
) -> MacroDefinition | None:
    """Parse single definition line into macro, or None if line does not define (valid) macro.

    Malformed definitions (unmatched brace, missing arrow or replacement) does not raise,
    so partially malformed definition files still load their valid entries.
    """
    line = line.strip()
    if not line or line.startswith(COMMENT_MARKS):
        return None

    if not DEFINITION_PREFIX.match(line):
        return None

    pattern_starts_at = line.index(BRACE_OPEN)
    pattern_ends_at = find_matching_brace(line, pattern_starts_at)
    if pattern_ends_at is None:
        return None
    pattern = line[pattern_starts_at + 1 : pattern_ends_at].strip()

    remaining = line[pattern_ends_at + 1 :].strip()
    if not remaining.startswith(DEFINITION_ARROW):
        return None

    remaining = remaining.removeprefix(DEFINITION_ARROW).strip()
    if not remaining.startswith(BRACE_OPEN):
        return None

    replacement_ends_at = find_matching_brace(remaining, 0)
    if replacement_ends_at is None:
        return None
    replacement = remaining[1:replacement_ends_at].strip()

    try:
        return MacroDefinition(
            pattern=pattern,
            replacement=replacement,
            file=source_file,
            line=line_number,
        )
    except MacroDefinitionError:
        return None


def parse_macros_from_text(
    content: str,
    source_file: str | None = None,
) -> list[MacroDefinition]:
    """Parse all macro definitions from an definitions file content, line by line."""
    macros: list[MacroDefinition] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        if macro := parse_macro_from_line(line, source_file, line_number):
            macros.append(macro)
    return macros
