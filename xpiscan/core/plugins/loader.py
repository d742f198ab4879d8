from __future__ import annotations

from xpiscan.core.plugins.registry import PluginRegistry
from xpiscan.core.plugins.builtin.install_rdf_inspector import InstallRdfFileInspector
from xpiscan.core.plugins.builtin.xpi_inspector import XpiFileInspector


def load_builtin_plugins(registry: PluginRegistry) -> None:
    """Load built-in (trusted) plugins into the registry."""
    plugins = [
        XpiFileInspector(),
        InstallRdfFileInspector(),
    ]

    for p in plugins:
        p.initialize()
        registry.register(p)
