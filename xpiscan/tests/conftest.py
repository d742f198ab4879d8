from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

import pytest

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
EM_NS = "http://www.mozilla.org/2004/em-rdf#"

VALID_FIELDS = (
    ("id", "@my-addon"),
    ("name", "My Add-on"),
    ("type", "2"),
    ("version", "1.0.1"),
    ("bootstrap", "true"),
)


def build_install_rdf(
    fields: Iterable[Tuple[str, Optional[str]]] = VALID_FIELDS,
    *,
    em_ns: str = EM_NS,
    extra: str = "",
) -> bytes:
    """Render an install.rdf with one <em:*> child per (name, text) pair.

    A text of None renders an empty element.
    """

    body = []
    for name, text in fields:
        if text is None:
            body.append(f"    <em:{name}/>")
        else:
            body.append(f"    <em:{name}>{text}</em:{name}>")
    xml = (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<RDF xmlns="{RDF_NS}" xmlns:em="{em_ns}">\n'
        '  <Description about="urn:mozilla:install-manifest">\n'
        + "\n".join(body)
        + f"\n{extra}"
        + "\n  </Description>\n"
        "</RDF>\n"
    )
    return xml.encode("utf-8")


@pytest.fixture
def install_rdf() -> Callable[..., bytes]:
    return build_install_rdf


@pytest.fixture
def make_xpi(tmp_path: Path) -> Callable[..., Path]:
    def _make(manifest: Optional[bytes], name: str = "addon.xpi") -> Path:
        p = tmp_path / name
        with zipfile.ZipFile(p, "w") as zf:
            zf.writestr("chrome.manifest", "content addon chrome/\n")
            if manifest is not None:
                zf.writestr("install.rdf", manifest)
        return p

    return _make
