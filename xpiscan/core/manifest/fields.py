from __future__ import annotations

import logging
from typing import Optional

from . import messages
from .categories import resolve_addon_type
from .collector import Collector
from .navigator import Document, find_unique_field
from .nodes import node_text, qualified_name

log = logging.getLogger("xpiscan.manifest")

MAX_GUID_LENGTH = 255

# Local names of the <em:*> fields read from <Description>.
FIELD_NAMES = ("id", "name", "type", "version", "bootstrap")


class FieldExtractor:
    """Reads individual <em:*> fields and reports per-field diagnostics.

    Absent or invalid values are recorded on the collector and surfaced as
    None/False; only structural violations raised by the navigator abort.
    """

    def __init__(self, document: Document, collector: Collector, namespace: str) -> None:
        self.document = document
        self.collector = collector
        self.namespace = namespace

    def _field_text(self, name: str) -> Optional[str]:
        tag = qualified_name(self.namespace, name)
        return node_text(find_unique_field(self.document, tag))

    def guid(self) -> Optional[str]:
        raw = self._field_text("id")
        guid = raw.strip() if raw is not None else None
        if not guid:
            self.collector.add_error(messages.RDF_ID_MISSING)
            return None
        if len(guid) > MAX_GUID_LENGTH:
            self.collector.add_error(messages.RDF_GUID_TOO_LONG)
        return guid

    def name(self) -> Optional[str]:
        name = self._field_text("name")
        if name is None:
            self.collector.add_error(messages.RDF_NAME_MISSING)
        return name

    def version(self) -> Optional[str]:
        version = self._field_text("version")
        if version is None:
            self.collector.add_error(messages.RDF_VERSION_MISSING)
        return version

    def addon_type(self) -> Optional[str]:
        token = self._field_text("type")
        if token is None:
            log.warning("<em:type> was not found in install.rdf")
            self.collector.add_notice(messages.RDF_TYPE_MISSING)
            return None

        addon_type = resolve_addon_type(token)
        if addon_type is None:
            log.debug("Invalid type value %r", token)
            self.collector.add_error(messages.RDF_TYPE_INVALID)
            return None

        log.debug("Mapping original <em:type> value %r -> %r", token, addon_type.value)
        return addon_type.value

    def restartless(self) -> bool:
        return self._field_text("bootstrap") == "true"
