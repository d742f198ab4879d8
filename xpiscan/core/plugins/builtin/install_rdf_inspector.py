from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from xpiscan.core.manifest import (
    RDF_DEFAULT_NAMESPACE,
    InstallRdfParser,
    ManifestMetadata,
    ManifestParseError,
    MessageCollector,
    parse_install_rdf,
)
from xpiscan.core.manifest.document import MAX_MANIFEST_BYTES
from xpiscan.core.plugins.contracts import PluginMetadata
from xpiscan.core.plugins.file_info import FileInfo, sha256_file
from xpiscan.core.plugins.manifest_inspector import ManifestInspection, ManifestInspectorPlugin

_META = PluginMetadata(
    plugin_id="builtin.install_rdf_inspector",
    name="install.rdf Inspector",
    version="1.0.0",
    author="xpiscan",
    allowed_actions=frozenset({"inspect_file"}),
    created_at=datetime.now(timezone.utc),
)


def extract_from_bytes(data: bytes, namespace: str | None = None) -> Tuple[ManifestMetadata, MessageCollector]:
    """Parse install.rdf bytes and extract metadata against a fresh collector.

    Raises ManifestParseError / ManifestStructureError on hard failures.
    """
    document = parse_install_rdf(data)
    collector = MessageCollector()
    parser = InstallRdfParser(document, collector, namespace=namespace or RDF_DEFAULT_NAMESPACE)
    return parser.get_metadata(), collector


def file_summary(path: str) -> Dict[str, Any]:
    st = os.stat(path)
    return {
        "path": path,
        "size_bytes": int(st.st_size),
        "sha256": sha256_file(path),
    }


class InstallRdfFileInspector(ManifestInspectorPlugin):
    """Built-in inspector for a bare install.rdf file.

    Security considerations:
    - Refuses files above the manifest size limit before reading them
    - XML parsing via defusedxml
    """

    @property
    def metadata(self) -> PluginMetadata:
        return _META

    def initialize(self) -> None:
        return

    def can_handle_file(self, info: FileInfo) -> bool:
        return self.match_score_file(info) > 0

    def match_score_file(self, info: FileInfo) -> int:
        if info.size_bytes > MAX_MANIFEST_BYTES:
            return 0
        score = 0
        if info.filename.lower() == "install.rdf":
            score += 100
        elif info.extension == ".rdf":
            score += 60
        if info.mime_type in {"application/xml", "application/rdf+xml"}:
            score += 20
        return score

    def inspect_file(self, path: str, *, namespace: str | None = None) -> ManifestInspection:
        abs_path = os.path.abspath(path)
        summary = file_summary(abs_path)
        if summary["size_bytes"] > MAX_MANIFEST_BYTES:
            raise ManifestParseError(f"install.rdf too large: {summary['size_bytes']} bytes")

        with open(abs_path, "rb") as f:
            data = f.read()

        metadata, collector = extract_from_bytes(data, namespace)
        return ManifestInspection(
            plugin_id=_META.plugin_id,
            file=summary,
            metadata=metadata,
            messages=collector,
        )
