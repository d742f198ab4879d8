from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, runtime_checkable

from xpiscan.core.manifest import ManifestMetadata, MessageCollector

from .contracts import PluginInterface
from .file_info import FileInfo


@dataclass(frozen=True)
class ManifestInspection:
    """Outcome of inspecting one package or manifest file."""

    plugin_id: str
    file: Dict[str, Any]
    metadata: ManifestMetadata
    messages: MessageCollector = field(default_factory=MessageCollector)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plugin_id": self.plugin_id,
            "file": dict(self.file),
            "metadata": self.metadata.to_dict(),
            "messages": self.messages.to_dict(),
        }


@runtime_checkable
class ManifestInspectorPlugin(PluginInterface, Protocol):
    """Plugin contract for extracting install.rdf metadata from a local file.

    Security notes:
    - Treat file content as untrusted input.
    - Enforce size limits before parsing.

    Structural manifest failures propagate as ManifestError subclasses;
    field-level problems end up in ManifestInspection.messages.
    """

    def can_handle_file(self, info: FileInfo) -> bool: ...

    def match_score_file(self, info: FileInfo) -> int:
        """Return a relative match score; higher is better. Must not read the file."""
        ...

    def inspect_file(self, path: str, *, namespace: str | None = None) -> ManifestInspection: ...
