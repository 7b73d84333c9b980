import pytest

from libsyn.macros.exceptions import MacroEmptyPatternError
from libsyn.macros.macro import MacroDefinition
from libsyn.macros.registry import MacrosRegistry


def test_registry_priority_order_is_stable() -> None:
    low = MacroDefinition(pattern="a", replacement="1", priority=1)
    first = MacroDefinition(pattern="b", replacement="2", priority=5)
    second = MacroDefinition(pattern="c", replacement="3", priority=5)
    registry = MacrosRegistry([low, first, second])

    assert registry.all() == [first, second, low]
    assert list(registry) == [first, second, low]


def test_registry_override_priority() -> None:
    a = MacroDefinition(pattern="a", replacement="1")
    b = MacroDefinition(pattern="b", replacement="2")
    registry = MacrosRegistry([a, b])
    assert registry.all() == [a, b]

    registry.override_priority(b, 10)
    assert registry.all() == [b, a]


def test_registry_override_priority_unregistered() -> None:
    registry = MacrosRegistry()
    with pytest.raises(AssertionError):
        registry.override_priority(MacroDefinition(pattern="a", replacement="1"), 1)


def test_registry_rejects_empty_pattern() -> None:
    macro = MacroDefinition(pattern="a", replacement="1")
    macro.parsed_pattern = []

    registry = MacrosRegistry()
    with pytest.raises(MacroEmptyPatternError):
        registry.add(macro)
    assert registry.is_empty()


def test_registry_copy_is_independent() -> None:
    registry = MacrosRegistry([MacroDefinition(pattern="a", replacement="1")])
    copied = registry.copy()
    copied.add(MacroDefinition(pattern="b", replacement="2"))

    assert registry.count() == 1
    assert len(copied) == 2

    copied.clear()
    assert copied.is_empty()
    assert not registry.is_empty()
