import zipfile
from pathlib import Path

import pytest

from xpiscan.core.manifest import DuplicateFieldElement, ManifestParseError
from xpiscan.core.plugins import (
    ManifestInspectorPlugin,
    PluginRegistry,
    load_builtin_plugins,
    select_manifest_inspector,
)


def _registry() -> PluginRegistry:
    registry = PluginRegistry()
    load_builtin_plugins(registry)
    return registry


def test_builtin_plugins_are_manifest_inspectors():
    plugins = _registry().list_plugins()
    assert [p.metadata.plugin_id for p in plugins] == [
        "builtin.xpi_inspector",
        "builtin.install_rdf_inspector",
    ]
    assert all(isinstance(p, ManifestInspectorPlugin) for p in plugins)


def test_registering_twice_is_rejected():
    registry = _registry()
    with pytest.raises(RuntimeError):
        load_builtin_plugins(registry)


def test_xpi_inspector_extracts_metadata(make_xpi, install_rdf):
    p = make_xpi(install_rdf())

    plugin = select_manifest_inspector(_registry(), str(p))
    assert plugin.metadata.plugin_id == "builtin.xpi_inspector"

    inspection = plugin.inspect_file(str(p))
    assert inspection.metadata.guid == "@my-addon"
    assert inspection.metadata.restartless is True
    assert inspection.messages.length == 0
    assert inspection.file["member"] == "install.rdf"
    assert len(inspection.file["sha256"]) == 64


def test_zip_without_xpi_extension_is_still_selected(make_xpi, install_rdf):
    p = make_xpi(install_rdf(), name="package.zip")
    plugin = select_manifest_inspector(_registry(), str(p))
    assert plugin.metadata.plugin_id == "builtin.xpi_inspector"


def test_xpi_without_install_rdf_fails(make_xpi):
    p = make_xpi(None)
    plugin = select_manifest_inspector(_registry(), str(p))
    with pytest.raises(ManifestParseError):
        plugin.inspect_file(str(p))


def test_corrupt_xpi_fails(tmp_path: Path):
    p = tmp_path / "broken.xpi"
    p.write_bytes(b"PK\x03\x04 definitely not a zip")
    plugin = select_manifest_inspector(_registry(), str(p))
    with pytest.raises(ManifestParseError):
        plugin.inspect_file(str(p))


def test_structural_errors_propagate_from_xpi(make_xpi, install_rdf):
    p = make_xpi(install_rdf([("id", "a"), ("id", "b")]))
    plugin = select_manifest_inspector(_registry(), str(p))
    with pytest.raises(DuplicateFieldElement):
        plugin.inspect_file(str(p))


def test_bare_install_rdf_is_inspected(tmp_path: Path, install_rdf):
    p = tmp_path / "install.rdf"
    p.write_bytes(install_rdf([("id", "x@y"), ("type", "banana")]))

    plugin = select_manifest_inspector(_registry(), str(p))
    assert plugin.metadata.plugin_id == "builtin.install_rdf_inspector"

    inspection = plugin.inspect_file(str(p))
    assert inspection.metadata.guid == "x@y"
    assert inspection.messages.codes() == ["RDF_NAME_MISSING", "RDF_TYPE_INVALID", "RDF_VERSION_MISSING"]

    out = inspection.to_dict()
    assert out["metadata"]["type"] is None
    assert out["messages"]["count"] == 3


def test_namespace_override_reaches_the_parser(tmp_path: Path, install_rdf):
    p = tmp_path / "install.rdf"
    p.write_bytes(install_rdf(em_ns="urn:custom"))
    plugin = select_manifest_inspector(_registry(), str(p))

    inspection = plugin.inspect_file(str(p), namespace="urn:custom")
    assert inspection.metadata.name == "My Add-on"


def test_unrelated_files_have_no_inspector(tmp_path: Path):
    p = tmp_path / "notes.txt"
    p.write_text("hello", encoding="utf-8")
    with pytest.raises(RuntimeError):
        select_manifest_inspector(_registry(), str(p))


def test_oversized_manifest_member_is_rejected(tmp_path: Path):
    p = tmp_path / "big.xpi"
    with zipfile.ZipFile(p, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("install.rdf", b"<RDF>" + b" " * (2 * 1024 * 1024) + b"</RDF>")
    plugin = select_manifest_inspector(_registry(), str(p))
    with pytest.raises(ManifestParseError):
        plugin.inspect_file(str(p))


def test_inspection_reports_only_errors_and_notices(make_xpi, install_rdf):
    p = make_xpi(install_rdf([("id", "@x"), ("name", "N"), ("version", "1"), ("type", "7")]))
    inspection = select_manifest_inspector(_registry(), str(p)).inspect_file(str(p))

    messages = inspection.to_dict()["messages"]
    assert set(messages) == {"count", "errors", "notices"}
    assert [m["code"] for m in messages["errors"]] == ["RDF_TYPE_INVALID"]
    assert messages["count"] == 1
