from __future__ import annotations

from typing import List, Optional, Union
from xml.etree.ElementTree import Element, ElementTree

from .errors import (
    DuplicateFieldElement,
    DuplicateMetadataContainer,
    DuplicateRootContainer,
    RootContainerMissing,
)
from .nodes import child_elements, local_name

Document = Union[Element, ElementTree]

ROOT_CONTAINER_TAG = "RDF"
METADATA_CONTAINER_TAG = "Description"


def _document_element(doc: Document) -> Element:
    if isinstance(doc, ElementTree):
        return doc.getroot()
    return doc


def find_root_container(doc: Document) -> Element:
    """Locate the single <RDF> element anywhere in the document.

    Matching is by local name, so both a default-namespaced <RDF> and a
    prefixed <RDF:RDF> qualify.

    Raises:
    - RootContainerMissing when no <RDF> exists
    - DuplicateRootContainer when more than one exists
    """

    nodes = [el for el in _document_element(doc).iter() if local_name(el.tag) == ROOT_CONTAINER_TAG]
    if not nodes:
        raise RootContainerMissing()
    if len(nodes) > 1:
        raise DuplicateRootContainer(len(nodes))
    return nodes[0]


def find_metadata_container(doc: Document) -> Optional[Element]:
    """Return the <Description> directly under <RDF>, or None when absent.

    A missing <Description> is tolerated so that field lookups simply come
    back empty; a duplicated one is not.
    """

    root = find_root_container(doc)
    nodes = [el for el in child_elements(root) if local_name(el.tag) == METADATA_CONTAINER_TAG]
    if len(nodes) > 1:
        raise DuplicateMetadataContainer(len(nodes))
    return nodes[0] if nodes else None


def find_field_elements(doc: Document, tag: str) -> List[Element]:
    """Direct children of <Description> whose qualified tag equals tag."""
    container = find_metadata_container(doc)
    if container is None:
        return []
    return [el for el in child_elements(container) if el.tag == tag]


def find_unique_field(doc: Document, tag: str) -> Optional[Element]:
    nodes = find_field_elements(doc, tag)
    # Field tags are unique by contract.
    if len(nodes) > 1:
        raise DuplicateFieldElement(tag, len(nodes))
    return nodes[0] if nodes else None
