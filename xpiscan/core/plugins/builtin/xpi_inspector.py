from __future__ import annotations

import os
import zipfile
from datetime import datetime, timezone

from xpiscan.core.manifest import ManifestParseError
from xpiscan.core.manifest.document import MAX_MANIFEST_BYTES
from xpiscan.core.plugins.builtin.install_rdf_inspector import extract_from_bytes, file_summary
from xpiscan.core.plugins.contracts import PluginMetadata
from xpiscan.core.plugins.file_info import FileInfo
from xpiscan.core.plugins.manifest_inspector import ManifestInspection, ManifestInspectorPlugin

# Zip safety limits
_MAX_ZIP_ENTRIES = 5000
_MAX_TOTAL_UNCOMPRESSED_BYTES = 200 * 1024 * 1024  # 200MB

INSTALL_RDF_MEMBER = "install.rdf"

_META = PluginMetadata(
    plugin_id="builtin.xpi_inspector",
    name="XPI Package Inspector",
    version="1.0.0",
    author="xpiscan",
    allowed_actions=frozenset({"inspect_file"}),
    created_at=datetime.now(timezone.utc),
)


class XpiFileInspector(ManifestInspectorPlugin):
    """
    Built-in inspector for .xpi packages (ZIP archives).

    Security considerations:
    - Zip bomb limits: entry count, total uncompressed size, manifest size
    - XML parsing via defusedxml
    - Only reads the top-level install.rdf member
    """

    @property
    def metadata(self) -> PluginMetadata:
        return _META

    def initialize(self) -> None:
        return

    def can_handle_file(self, info: FileInfo) -> bool:
        return self.match_score_file(info) > 0

    def match_score_file(self, info: FileInfo) -> int:
        score = 0
        if info.extension == ".xpi":
            score += 80
        # MIME sniffing sees a plain ZIP for packages.
        if info.mime_type == "application/zip":
            score += 40
        return score

    def inspect_file(self, path: str, *, namespace: str | None = None) -> ManifestInspection:
        abs_path = os.path.abspath(path)
        summary = file_summary(abs_path)

        try:
            with zipfile.ZipFile(abs_path, "r") as zf:
                self._enforce_zip_limits(zf)
                data = self._read_install_rdf(zf)
        except zipfile.BadZipFile as e:
            raise ManifestParseError(f"not a valid XPI archive: {e}") from e

        metadata, collector = extract_from_bytes(data, namespace)
        return ManifestInspection(
            plugin_id=_META.plugin_id,
            file={**summary, "member": INSTALL_RDF_MEMBER},
            metadata=metadata,
            messages=collector,
        )

    def _enforce_zip_limits(self, zf: zipfile.ZipFile) -> None:
        infos = zf.infolist()
        if len(infos) > _MAX_ZIP_ENTRIES:
            raise ManifestParseError(f"ZIP has too many entries: {len(infos)} > {_MAX_ZIP_ENTRIES}")

        total = 0
        for info in infos:
            total += info.file_size
            if total > _MAX_TOTAL_UNCOMPRESSED_BYTES:
                raise ManifestParseError(f"ZIP total too large: {total} bytes")

    def _read_install_rdf(self, zf: zipfile.ZipFile) -> bytes:
        try:
            info = zf.getinfo(INSTALL_RDF_MEMBER)
        except KeyError:
            raise ManifestParseError("install.rdf not found in package") from None
        if info.file_size > MAX_MANIFEST_BYTES:
            raise ManifestParseError(f"install.rdf too large: {info.file_size} bytes")
        with zf.open(info, "r") as f:
            return f.read(MAX_MANIFEST_BYTES + 1)
