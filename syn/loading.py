"""Loading of macro definitions (`.syn` files) into an registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libsyn.macros.definitions import parse_macros_from_text
from libsyn.macros.exceptions import (
    MacroDirectoryNotFoundError,
    MacroFileNotFoundError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from libsyn.macros.registry import MacrosRegistry

MACRO_FILE_GLOB = "*.syn"


def load_macros_from_string(
    registry: MacrosRegistry,
    content: str,
    source_file: str | None = None,
) -> int:
    """Load all valid macro definitions from given content, returns count of loaded macros."""
    macros = parse_macros_from_text(content, source_file=source_file)
    registry.extend(macros)
    return len(macros)


def load_macros_from_file(registry: MacrosRegistry, path: Path) -> int:
    """Load macro definitions from an definitions file, which must exist."""
    if not path.is_file():
        raise MacroFileNotFoundError(path=path)

    content = path.read_text(encoding="utf-8")
    return load_macros_from_string(registry, content, source_file=str(path))


def load_macros_from_directory(registry: MacrosRegistry, path: Path) -> int:
    """Load macro definitions from all definition files directly inside directory (in name order)."""
    if not path.is_dir():
        raise MacroDirectoryNotFoundError(path=path)

    return sum(
        load_macros_from_file(registry, file)
        for file in sorted(path.glob(MACRO_FILE_GLOB))
        if file.is_file()
    )
