from __future__ import annotations

from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET

from .errors import ManifestParseError

MAX_MANIFEST_BYTES = 1 * 1024 * 1024  # 1MB


def parse_install_rdf(data: bytes, *, max_bytes: int = MAX_MANIFEST_BYTES) -> Element:
    """Parse raw install.rdf bytes into an ElementTree element.

    Security:
    - defusedxml rejects entity expansion and external entity tricks
    - size is checked before parsing

    Malformed XML is never repaired; it surfaces as ManifestParseError.
    """

    if len(data) > max_bytes:
        raise ManifestParseError(f"install.rdf too large: {len(data)} > {max_bytes} bytes")
    try:
        return DefusedET.fromstring(data)
    except ParseError as e:
        raise ManifestParseError(f"install.rdf is not well-formed XML: {e}") from e
    except DefusedXmlException as e:
        raise ManifestParseError(f"install.rdf rejected by XML parser: {e}") from e
