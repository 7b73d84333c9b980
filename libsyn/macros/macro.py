from __future__ import annotations

from dataclasses import dataclass, field

from libsyn.lexer.tokens import (
    CapturePlaceholder,
    PatternElement,
    ReplacementElement,
    VariableReference,
)

from .exceptions import MacroEmptyPatternError, MacroLeadingCaptureError
from .placeholders import parse_pattern, parse_replacement


@dataclass(eq=False)
class MacroDefinition:
    """Pattern/replacement rule applied by the transformer onto an token stream.

    Pattern is an sequence of tokens with optional captures, written as `$(layer() as <name>)`.
    Replacement is an sequence of tokens with optional references to captures, written as `$(<name>)`.

    Language workflow:
        Macro definition file (`.syn`) contains line like:
        `$(macro) { unless ($(layer() as condition)) { $(layer() as body) } } >> { if (!($(condition))) { $(body) } }`

        Transformer encounters `unless` token within input, matches rest of the pattern
        capturing tokens between parentheses and braces, e.g:
        `unless ($x === 1) { echo "x"; }`
        And emits replacement with captured tokens substituted:
        `if (!($x === 1)) { echo "x"; }`

    Pattern and replacement are parsed once at construction, definition is immutable after that
    except an explicit priority override via registry.
    """

    pattern: str
    replacement: str

    # Optional human-readable name (e.g given by plugins)
    name: str | None = None

    # Where is that definition comes from, if it was loaded from an file
    file: str | None = None
    line: int | None = None

    # Higher priority macros are applied first
    priority: int = 0

    parsed_pattern: list[PatternElement] = field(init=False, repr=False)
    # Capture marker (e.g `__CAPTURE_0__`) -> capture name
    captures: dict[str, str] = field(init=False, repr=False)
    parsed_replacement: list[ReplacementElement] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.parsed_pattern, self.captures = parse_pattern(self.pattern)
        self.parsed_replacement = parse_replacement(self.replacement)

        if not self.parsed_pattern:
            raise MacroEmptyPatternError(file=self.file, line=self.line)

        if isinstance(self.parsed_pattern[0], CapturePlaceholder):
            raise MacroLeadingCaptureError(
                pattern=self.pattern,
                file=self.file,
                line=self.line,
            )

    @property
    def has_captures(self) -> bool:
        return bool(self.captures)

    @property
    def first_pattern_element(self) -> PatternElement:
        return self.parsed_pattern[0]

    @property
    def unresolved_references(self) -> list[str]:
        """Names referenced within replacement that are not captured by pattern."""
        captured = set(self.captures.values())
        return [
            element.name
            for element in self.parsed_replacement
            if isinstance(element, VariableReference) and element.name not in captured
        ]
