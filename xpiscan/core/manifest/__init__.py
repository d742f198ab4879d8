"""install.rdf metadata extraction.

Maps the legacy RDF/XML install manifest of an add-on package into a small,
stable metadata record.

Security notes:
- Manifests are untrusted input; parse only through defusedxml.
- Structural violations fail the extraction; per-field problems are reported
  as diagnostics and extraction carries on.
"""

from .categories import ADDON_TYPE_MAP, AddonType, AddonTypeCode, resolve_addon_type
from .collector import Collector, MessageCollector
from .document import parse_install_rdf
from .errors import (
    DuplicateFieldElement,
    DuplicateMetadataContainer,
    DuplicateRootContainer,
    ManifestError,
    ManifestParseError,
    ManifestStructureError,
    RootContainerMissing,
)
from .messages import Message
from .navigator import find_field_elements, find_metadata_container, find_root_container, find_unique_field
from .parser import RDF_DEFAULT_NAMESPACE, ExtractionResult, InstallRdfParser, ManifestMetadata, extract_metadata

__all__ = [
    "ADDON_TYPE_MAP",
    "AddonType",
    "AddonTypeCode",
    "resolve_addon_type",
    "Collector",
    "MessageCollector",
    "Message",
    "parse_install_rdf",
    "ManifestError",
    "ManifestParseError",
    "ManifestStructureError",
    "RootContainerMissing",
    "DuplicateRootContainer",
    "DuplicateMetadataContainer",
    "DuplicateFieldElement",
    "find_root_container",
    "find_metadata_container",
    "find_field_elements",
    "find_unique_field",
    "RDF_DEFAULT_NAMESPACE",
    "InstallRdfParser",
    "ManifestMetadata",
    "ExtractionResult",
    "extract_metadata",
]
