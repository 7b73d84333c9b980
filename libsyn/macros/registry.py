from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import MacroEmptyPatternError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .macro import MacroDefinition


class MacrosRegistry:
    """Ordered storage of macro definitions for single processing session.

    Macros are always served in descending priority, insertion order is preserved among equal priorities.
    Registry is not shared: each session (e.g each processed file set) owns its own registry.
    """

    def __init__(self, macros: Iterable[MacroDefinition] = ()) -> None:
        # Insertion order, sorted view is derived from it
        self._macros: list[MacroDefinition] = []
        self._sorted: list[MacroDefinition] | None = None
        for macro in macros:
            self.add(macro)

    def add(self, macro: MacroDefinition) -> None:
        """Register macro, it must have an non-empty pattern."""
        if not macro.parsed_pattern:
            raise MacroEmptyPatternError(file=macro.file, line=macro.line)
        self._macros.append(macro)
        self._sorted = None

    def extend(self, macros: Iterable[MacroDefinition]) -> None:
        for macro in macros:
            self.add(macro)

    def all(self) -> list[MacroDefinition]:
        """Get all macros in order they must be tried (priority descending)."""
        if self._sorted is None:
            # Sort is stable, so insertion order is kept for same priorities
            self._sorted = sorted(self._macros, key=lambda macro: -macro.priority)
        return list(self._sorted)

    def override_priority(self, macro: MacroDefinition, priority: int) -> None:
        """Explicitly change priority of an registered macro."""
        assert any(m is macro for m in self._macros), "Cannot override priority of an unregistered macro"
        macro.priority = priority
        self._sorted = None

    def clear(self) -> None:
        self._macros.clear()
        self._sorted = None

    def count(self) -> int:
        return len(self._macros)

    def is_empty(self) -> bool:
        return not self._macros

    def copy(self) -> MacrosRegistry:
        return MacrosRegistry(self._macros)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[MacroDefinition]:
        return iter(self.all())
