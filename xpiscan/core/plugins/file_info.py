from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata-only view of a local file used for plugin selection.

    Security notes:
    - File contents are untrusted. Selection should not execute code.
    - Sniffing reads only a small prefix (bounded).
    """

    path: str
    filename: str
    size_bytes: int
    extension: str
    mime_type: str


def sniff_file_info(path: str, *, prefix_bytes: int = 512) -> FileInfo:
    """Compute FileInfo for a path from its extension and leading bytes."""

    abs_path = os.path.abspath(path)
    st = os.stat(abs_path)
    ext = os.path.splitext(abs_path)[1].lower()

    with open(abs_path, "rb") as f:
        head = f.read(prefix_bytes)

    mime = _magic_mime(head) or _extension_mime(ext) or "application/octet-stream"
    return FileInfo(
        path=abs_path,
        filename=os.path.basename(abs_path),
        size_bytes=int(st.st_size),
        extension=ext,
        mime_type=mime,
    )


def _magic_mime(prefix: bytes) -> Optional[str]:
    if prefix.startswith(b"PK\x03\x04"):
        return "application/zip"
    p = prefix
    if p.startswith(b"\xef\xbb\xbf"):
        p = p[3:]
    if p.lstrip().startswith(b"<"):
        return "application/xml"
    return None


def _extension_mime(ext: str) -> Optional[str]:
    if ext == ".xpi":
        return "application/x-xpinstall"
    if ext in {".rdf", ".xml"}:
        return "application/rdf+xml"
    return None


def sha256_file(path: str, *, chunk_size: int = 1024 * 1024) -> str:
    """Stream a file and return its SHA-256 (no full-file load)."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()
