from __future__ import annotations

from typing import List

from .file_info import FileInfo, sniff_file_info
from .manifest_inspector import ManifestInspectorPlugin
from .registry import PluginRegistry


def select_manifest_inspector(registry: PluginRegistry, path: str) -> ManifestInspectorPlugin:
    """Select the best manifest inspector for a given path.

    Selection rules:
    1) Compute FileInfo (size, extension, sniffed mime) once.
    2) Keep inspectors whose can_handle_file(FileInfo) is true.
    3) Choose the highest match_score_file, tie-breaking by plugin_id.
    """

    info: FileInfo = sniff_file_info(path)

    candidates: List[ManifestInspectorPlugin] = []
    for plugin in registry.iter_plugins():
        if not isinstance(plugin, ManifestInspectorPlugin):
            continue
        if plugin.can_handle_file(info):
            candidates.append(plugin)

    if not candidates:
        raise RuntimeError(f"No manifest inspector plugin found for: {path}")

    candidates.sort(key=lambda p: (p.match_score_file(info), p.metadata.plugin_id), reverse=True)
    return candidates[0]
