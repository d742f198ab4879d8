from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from xpiscan.api.models import ApiError, FileOut, InspectOut, MessagesOut, MetadataOut
from xpiscan.core.manifest import RDF_DEFAULT_NAMESPACE, ManifestError
from xpiscan.core.plugins import (
    ManifestInspection,
    PluginRegistry,
    load_builtin_plugins,
    select_manifest_inspector,
)

log = logging.getLogger("xpiscan.api")


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Configuration for the API service."""

    namespace: str = RDF_DEFAULT_NAMESPACE
    max_upload_bytes: int = 25 * 1024 * 1024


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring non-integer %s=%r", name, raw)
        return int(default)


def load_service_config() -> ServiceConfig:
    return ServiceConfig(
        namespace=os.environ.get("XPISCAN_RDF_NAMESPACE") or RDF_DEFAULT_NAMESPACE,
        max_upload_bytes=_env_int("XPISCAN_MAX_UPLOAD_BYTES", 25 * 1024 * 1024),
    )


def _to_out(inspection: ManifestInspection, filename: str) -> InspectOut:
    file_md: Dict[str, Any] = inspection.file
    return InspectOut(
        plugin_id=inspection.plugin_id,
        file=FileOut(
            filename=filename,
            size_bytes=int(file_md.get("size_bytes", 0)),
            sha256=file_md.get("sha256"),
            member=file_md.get("member"),
        ),
        metadata=MetadataOut(**inspection.metadata.to_dict()),
        messages=MessagesOut(**inspection.messages.to_dict()),
    )


def create_app(cfg: Optional[ServiceConfig] = None) -> FastAPI:
    """Create the FastAPI app."""

    cfg = cfg or load_service_config()

    level = os.environ.get("XPISCAN_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        log.warning("Ignoring unknown XPISCAN_LOG_LEVEL=%r", level)
        level = "INFO"
    log.setLevel(level)

    app = FastAPI(title="xpiscan API", version="0.1")
    app.state.cfg = cfg

    registry = PluginRegistry()
    load_builtin_plugins(registry)
    app.state.registry = registry

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True, "namespace": cfg.namespace}

    def _save_upload_to_temp(upload: UploadFile, tmpdir: Path) -> Path:
        """Persist an UploadFile under tmpdir, reading in bounded chunks.

        The client filename is reduced to its basename; it only steers
        inspector selection (e.g. "install.rdf" vs ".xpi").
        """

        safe_name = os.path.basename(upload.filename or "upload")[:255] or "upload"
        out = tmpdir / safe_name
        total = 0
        with out.open("wb") as f:
            while True:
                chunk = upload.file.read(1024 * 1024)
                if not chunk:
                    break
                total += len(chunk)
                if total > cfg.max_upload_bytes:
                    raise HTTPException(status_code=413, detail="upload_too_large")
                f.write(chunk)
        return out

    def _inspect_path(path: Path) -> ManifestInspection:
        plugin = select_manifest_inspector(registry, str(path))
        return plugin.inspect_file(str(path), namespace=cfg.namespace)

    @app.post(
        "/inspect",
        response_model=InspectOut,
        responses={415: {"model": ApiError}, 422: {"model": ApiError}},
    )
    def inspect_endpoint(file: UploadFile = File(...)):
        """Extract install.rdf metadata from an uploaded .xpi or install.rdf.

        Field-level problems are reported in `messages`; a structurally
        broken manifest yields 422 with the failure kind as `error`.
        """

        tmpdir = Path(tempfile.mkdtemp(prefix="xpiscan_api_"))
        try:
            path = _save_upload_to_temp(file, tmpdir)
            try:
                inspection = _inspect_path(path)
            except RuntimeError as e:
                return JSONResponse(
                    status_code=415,
                    content=ApiError(error="unsupported_file", detail=str(e)).model_dump(),
                )
            except ManifestError as e:
                log.info("Manifest rejected: %s", type(e).__name__)
                return JSONResponse(
                    status_code=422,
                    content=ApiError(error=type(e).__name__, detail=str(e)).model_dump(),
                )
            log.info(
                "Inspected upload via %s (%d diagnostics)",
                inspection.plugin_id,
                inspection.messages.length,
            )
            return _to_out(inspection, path.name)
        finally:
            shutil.rmtree(tmpdir, ignore_errors=True)

    return app
