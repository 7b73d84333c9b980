from pathlib import Path

from libsyn.exceptions import SynError


class ConfigurationFileNotFoundError(SynError):
    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"""Configuration file '{self.path}' not found!

{self.generic_error_name}"""


class ConfigurationFileInvalidError(SynError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Configuration file '{self.path}' is invalid: {self.reason}

Configuration must be an TOML document with known keys, e.g:
  macro_directories = ["macros/"]
  max_iterations = 3

{self.generic_error_name}"""


class PluginNotFoundError(SynError):
    def __init__(self, plugin: str) -> None:
        self.plugin = plugin

    def __repr__(self) -> str:
        return f"""Plugin '{self.plugin}' not found!

Plugins are referenced by import path of their class, e.g `package.module:PluginClass`.

{self.generic_error_name}"""


class PluginInterfaceError(SynError):
    def __init__(self, plugin: str) -> None:
        self.plugin = plugin

    def __repr__(self) -> str:
        return f"""Plugin '{self.plugin}' does not implement macro plugin interface!

Plugin must provide `name`, `version`, `enabled` and `initialize`, `get_macros`, `get_metadata` methods.

{self.generic_error_name}"""


class InputPathNotFoundError(SynError):
    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"""Input file or directory '{self.path}' not found!

{self.generic_error_name}"""


class InvalidMaxIterationsError(SynError):
    def __init__(self, value: int) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"""Maximum iterations must be at least 1, got {self.value}!

Transformer must perform at least one iteration to apply macros.

{self.generic_error_name}"""
