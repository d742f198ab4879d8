from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .contracts import PluginInterface


@dataclass
class PluginRegistry:
    """In-memory registry for loaded plugins, keyed by plugin_id.

    Security notes:
    - Plugins are code execution. Only load trusted plugins.
    """

    _plugins: Dict[str, PluginInterface] = field(default_factory=dict, init=False, repr=False)

    def register(self, plugin: PluginInterface) -> None:
        pid = plugin.metadata.plugin_id
        if pid in self._plugins:
            raise RuntimeError(f"Duplicate plugin_id: {pid}")
        self._plugins[pid] = plugin

    def list_plugins(self) -> List[PluginInterface]:
        """List plugins in insertion order."""
        return list(self._plugins.values())

    def iter_plugins(self) -> Iterable[PluginInterface]:
        return self._plugins.values()
