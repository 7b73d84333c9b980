"""Plugins that feed additional macro definitions into an processing session."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .exceptions import PluginInterfaceError, PluginNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libsyn.macros.macro import MacroDefinition


@runtime_checkable
class MacroPlugin(Protocol):
    """Provider of an macro definitions set."""

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    @property
    def enabled(self) -> bool: ...

    def initialize(self, settings: Mapping[str, Any]) -> None:
        """Configure plugin with its settings before macros are requested."""
        ...

    def get_macros(self) -> list[MacroDefinition]: ...

    def get_metadata(self) -> dict[str, Any]: ...


class PluginManager:
    """Registry of plugins for single processing session."""

    def __init__(self) -> None:
        self._plugins: dict[str, MacroPlugin] = {}

    def register_plugin(self, import_path: str) -> MacroPlugin:
        """Import plugin class by path (`module:Class` or `module.Class`), instantiate and register it."""
        plugin_class = _import_plugin_class(import_path)

        try:
            plugin = plugin_class()
        except TypeError as e:
            raise PluginInterfaceError(plugin=import_path) from e

        if not isinstance(plugin, MacroPlugin):
            raise PluginInterfaceError(plugin=import_path)

        self.register_plugin_instance(plugin)
        return plugin

    def register_plugin_instance(self, plugin: MacroPlugin) -> None:
        self._plugins[plugin.name] = plugin

    def get_plugin(self, name: str) -> MacroPlugin | None:
        return self._plugins.get(name)

    @property
    def plugins(self) -> dict[str, MacroPlugin]:
        return dict(self._plugins)

    def initialize_plugins(
        self,
        settings: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        """Initialize each plugin with settings under its name (empty if there is none)."""
        settings = settings or {}
        for name, plugin in self._plugins.items():
            plugin.initialize(settings.get(name, {}))

    def get_all_macros(self) -> list[MacroDefinition]:
        """Macros of all enabled plugins, in plugin registration order."""
        return [
            macro
            for plugin in self._plugins.values()
            if plugin.enabled
            for macro in plugin.get_macros()
        ]

    def get_macros_by_plugin(self, name: str) -> list[MacroDefinition]:
        plugin = self.get_plugin(name)
        if plugin is None or not plugin.enabled:
            return []
        return plugin.get_macros()

    def get_plugins_metadata(self) -> dict[str, dict[str, Any]]:
        return {
            name: {
                "name": plugin.name,
                "version": plugin.version,
                "enabled": plugin.enabled,
                "macros_count": len(plugin.get_macros()),
                "metadata": plugin.get_metadata(),
            }
            for name, plugin in self._plugins.items()
        }

    def clear(self) -> None:
        self._plugins.clear()


def _import_plugin_class(import_path: str) -> type:
    if ":" in import_path:
        module_name, _, class_name = import_path.partition(":")
    else:
        module_name, _, class_name = import_path.rpartition(".")

    if not module_name or not class_name:
        raise PluginNotFoundError(plugin=import_path)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PluginNotFoundError(plugin=import_path) from e

    plugin_class = getattr(module, class_name, None)
    if not isinstance(plugin_class, type):
        raise PluginNotFoundError(plugin=import_path)
    return plugin_class
