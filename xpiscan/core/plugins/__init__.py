from .contracts import PluginInterface, PluginMetadata
from .file_info import FileInfo, sniff_file_info
from .loader import load_builtin_plugins
from .manifest_inspector import ManifestInspection, ManifestInspectorPlugin
from .registry import PluginRegistry
from .selectors import select_manifest_inspector

__all__ = [
    "PluginMetadata",
    "PluginInterface",
    "PluginRegistry",
    "load_builtin_plugins",
    "ManifestInspectorPlugin",
    "ManifestInspection",
    "FileInfo",
    "sniff_file_info",
    "select_manifest_inspector",
]
