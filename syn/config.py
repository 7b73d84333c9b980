from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

from libsyn.transformer.config import DEFAULT_MAX_ITERATIONS, TransformerConfig

from .exceptions import (
    ConfigurationFileInvalidError,
    ConfigurationFileNotFoundError,
    InvalidMaxIterationsError,
)


@dataclass
class Configuration:
    """Configuration of an processing session (where macros come from and how transformer behaves)."""

    macro_directories: list[Path] = field(default_factory=list[Path])
    macro_files: list[Path] = field(default_factory=list[Path])

    # Import paths of plugin classes (e.g `package.module:PluginClass`)
    plugins: list[str] = field(default_factory=list[str])
    # Plugin name -> settings passed into plugin on initialization
    plugin_settings: dict[str, dict[str, Any]] = field(default_factory=dict[str, dict[str, Any]])

    verbose: bool = False

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    legacy_single_token_fallback: bool = False

    def transformer_config(self) -> TransformerConfig:
        if self.max_iterations < 1:
            raise InvalidMaxIterationsError(value=self.max_iterations)
        return TransformerConfig(
            max_iterations=self.max_iterations,
            legacy_single_token_fallback=self.legacy_single_token_fallback,
        )


def load_configuration_from_file(path: Path) -> Configuration:
    """Load configuration from an TOML file, relative paths are resolved against file directory."""
    if not path.is_file():
        raise ConfigurationFileNotFoundError(path=path)

    try:
        document = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationFileInvalidError(path=path, reason=str(e)) from e

    known = {f.name for f in dataclasses.fields(Configuration)}
    if unknown := sorted(set(document) - known):
        raise ConfigurationFileInvalidError(
            path=path,
            reason=f"unknown keys {', '.join(unknown)}",
        )

    base = path.parent
    try:
        config = Configuration(
            macro_directories=[base / p for p in _list_of(document, "macro_directories", str)],
            macro_files=[base / p for p in _list_of(document, "macro_files", str)],
            plugins=_list_of(document, "plugins", str),
            plugin_settings=dict(document.get("plugin_settings", {})),
            verbose=bool(document.get("verbose", False)),
            max_iterations=int(document.get("max_iterations", DEFAULT_MAX_ITERATIONS)),
            legacy_single_token_fallback=bool(
                document.get("legacy_single_token_fallback", False),
            ),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationFileInvalidError(path=path, reason=str(e)) from e

    if config.max_iterations < 1:
        raise ConfigurationFileInvalidError(
            path=path,
            reason=f"`max_iterations` must be at least 1, got {config.max_iterations}",
        )
    return config


def merge_into_configuration(
    config: Configuration,
    from_object: object,
) -> Configuration:
    """Override configuration fields with non-empty attributes of same name from given object (e.g CLI arguments)."""
    for config_field in dataclasses.fields(Configuration):
        if not hasattr(from_object, config_field.name):
            continue
        value = getattr(from_object, config_field.name)
        if value is None or value == [] or value is False:
            continue
        if isinstance(value, list):
            value = [*getattr(config, config_field.name), *value]
        setattr(config, config_field.name, value)
    return config


T = TypeVar("T")


def _list_of(document: dict[str, Any], key: str, item_type: type[T]) -> list[T]:
    value = document.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, item_type) for item in value):
        msg = f"`{key}` must be an list of {item_type.__name__}"
        raise TypeError(msg)
    return value
