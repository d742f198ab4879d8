from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

INSTALL_RDF = "install.rdf"


@dataclass(frozen=True)
class Message:
    """
    Immutable diagnostic definition.

    Messages are catalog constants: collectors store references to them, the
    extractor never builds ad-hoc text.
    """

    code: str
    message: str
    description: str
    file: str = INSTALL_RDF

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "description": self.description,
            "file": self.file,
        }


RDF_ID_MISSING = Message(
    code="RDF_ID_MISSING",
    message="The <em:id> element is missing.",
    description="The required <em:id> element is missing from install.rdf.",
)

RDF_GUID_TOO_LONG = Message(
    code="RDF_GUID_TOO_LONG",
    message="The add-on ID is too long.",
    description="The <em:id> value must be 255 characters or fewer.",
)

RDF_NAME_MISSING = Message(
    code="RDF_NAME_MISSING",
    message="The <em:name> element is missing.",
    description="The required <em:name> element is missing from install.rdf.",
)

RDF_VERSION_MISSING = Message(
    code="RDF_VERSION_MISSING",
    message="The <em:version> element is missing.",
    description="The required <em:version> element is missing from install.rdf.",
)

RDF_TYPE_MISSING = Message(
    code="RDF_TYPE_MISSING",
    message="The <em:type> element is missing.",
    description="No <em:type> element was found in install.rdf.",
)

RDF_TYPE_INVALID = Message(
    code="RDF_TYPE_INVALID",
    message="<em:type> is not valid.",
    description="The <em:type> value is not one of the recognized add-on type codes.",
)
