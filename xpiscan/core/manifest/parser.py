from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .collector import Collector
from .errors import ManifestStructureError
from .fields import FIELD_NAMES, FieldExtractor
from .navigator import Document, find_metadata_container, find_unique_field
from .nodes import qualified_name

RDF_DEFAULT_NAMESPACE = "http://www.mozilla.org/2004/em-rdf#"


@dataclass(frozen=True)
class ManifestMetadata:
    """
    Normalized metadata extracted from one install.rdf.

    Immutable; produced fresh per extraction and owned by the caller.
    """

    guid: Optional[str]
    name: Optional[str]
    type: Optional[str]
    version: Optional[str]
    restartless: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guid": self.guid,
            "name": self.name,
            "type": self.type,
            "version": self.version,
            "restartless": self.restartless,
        }


class InstallRdfParser:
    """Extract ManifestMetadata from a parsed install.rdf document.

    Field diagnostics go straight to the collector. Structural violations
    (missing/duplicate <RDF>, duplicate <Description>, duplicate field tags)
    raise a ManifestStructureError subclass and no metadata is returned.
    """

    def __init__(
        self,
        document: Document,
        collector: Collector,
        *,
        namespace: str = RDF_DEFAULT_NAMESPACE,
    ) -> None:
        self.document = document
        self.collector = collector
        self.namespace = namespace

    def get_metadata(self) -> ManifestMetadata:
        # Validate the whole shape before any diagnostic reaches the collector.
        find_metadata_container(self.document)
        for name in FIELD_NAMES:
            find_unique_field(self.document, qualified_name(self.namespace, name))

        fields = FieldExtractor(self.document, self.collector, self.namespace)
        # Fixed order keeps diagnostic emission deterministic.
        guid = fields.guid()
        name = fields.name()
        addon_type = fields.addon_type()
        version = fields.version()
        restartless = fields.restartless()

        return ManifestMetadata(
            guid=guid,
            name=name,
            type=addon_type,
            version=version,
            restartless=restartless,
        )


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extract_metadata.

    Exactly one of metadata/error is set.
    """

    ok: bool
    metadata: Optional[ManifestMetadata] = None
    error: Optional[ManifestStructureError] = None


def extract_metadata(
    document: Document,
    collector: Collector,
    *,
    namespace: str = RDF_DEFAULT_NAMESPACE,
) -> ExtractionResult:
    """Result-returning wrapper around InstallRdfParser.get_metadata."""

    parser = InstallRdfParser(document, collector, namespace=namespace)
    try:
        metadata = parser.get_metadata()
    except ManifestStructureError as e:
        return ExtractionResult(ok=False, error=e)
    return ExtractionResult(ok=True, metadata=metadata)
