import pytest

from xpiscan.core.manifest import (
    DuplicateFieldElement,
    DuplicateMetadataContainer,
    DuplicateRootContainer,
    ManifestStructureError,
    RootContainerMissing,
    find_field_elements,
    find_metadata_container,
    find_root_container,
    find_unique_field,
    parse_install_rdf,
)
from xpiscan.core.manifest.nodes import node_text

EM = "{http://www.mozilla.org/2004/em-rdf#}"
RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


def test_root_container_is_found_when_it_is_the_document_element(install_rdf):
    doc = parse_install_rdf(install_rdf())
    root = find_root_container(doc)
    assert root is doc


def test_root_container_missing_raises():
    doc = parse_install_rdf(b"<manifest><Description/></manifest>")
    with pytest.raises(RootContainerMissing):
        find_root_container(doc)


def test_multiple_root_containers_raise():
    doc = parse_install_rdf(f'<wrap xmlns="{RDF}"><RDF/><RDF/></wrap>'.encode())
    with pytest.raises(DuplicateRootContainer) as exc:
        find_root_container(doc)
    assert exc.value.count == 2
    assert isinstance(exc.value, ManifestStructureError)


def test_prefixed_rdf_elements_match_by_local_name():
    xml = (
        f'<RDF:RDF xmlns:RDF="{RDF}" xmlns:em="http://www.mozilla.org/2004/em-rdf#">'
        '<RDF:Description><em:id>a@b</em:id></RDF:Description>'
        "</RDF:RDF>"
    )
    doc = parse_install_rdf(xml.encode())
    node = find_unique_field(doc, EM + "id")
    assert node_text(node) == "a@b"


def test_missing_metadata_container_is_tolerated():
    doc = parse_install_rdf(f'<RDF xmlns="{RDF}"/>'.encode())
    assert find_metadata_container(doc) is None
    assert find_field_elements(doc, EM + "id") == []
    assert find_unique_field(doc, EM + "id") is None


def test_duplicate_metadata_container_raises():
    doc = parse_install_rdf(f'<RDF xmlns="{RDF}"><Description/><Description/></RDF>'.encode())
    with pytest.raises(DuplicateMetadataContainer):
        find_metadata_container(doc)


def test_duplicate_field_names_the_tag(install_rdf):
    doc = parse_install_rdf(install_rdf([("id", "a@b"), ("id", "c@d")]))
    with pytest.raises(DuplicateFieldElement) as exc:
        find_unique_field(doc, EM + "id")
    assert exc.value.tag == EM + "id"
    assert exc.value.count == 2


def test_field_elements_are_returned_in_document_order(install_rdf):
    doc = parse_install_rdf(install_rdf([("name", "first"), ("name", "second")]))
    nodes = find_field_elements(doc, EM + "name")
    assert [node_text(n) for n in nodes] == ["first", "second"]


def test_nested_target_application_fields_are_not_top_level(install_rdf):
    target = (
        "    <em:targetApplication><Description>"
        "<em:id>{ec8030f7-c20a-464f-9b0e-13a3a9e97384}</em:id>"
        "<em:minVersion>3.0</em:minVersion>"
        "</Description></em:targetApplication>"
    )
    doc = parse_install_rdf(install_rdf(extra=target))
    node = find_unique_field(doc, EM + "id")
    assert node_text(node) == "@my-addon"


def test_node_text_reads_empty_elements_as_absent(install_rdf):
    doc = parse_install_rdf(install_rdf([("name", None)]))
    assert node_text(find_unique_field(doc, EM + "name")) is None
    assert node_text(None) is None
