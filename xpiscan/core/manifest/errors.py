class ManifestError(Exception):
    """
    Base exception for all manifest-related failures.
    """

    pass


class ManifestParseError(ManifestError):
    """
    Raised when raw manifest bytes cannot be turned into a document.
    """

    pass


class ManifestStructureError(ManifestError):
    """
    Raised when a parsed document violates a structural invariant.

    Structural errors are fatal to one extraction attempt; no partial
    metadata is produced.
    """

    pass


class RootContainerMissing(ManifestStructureError):
    def __init__(self) -> None:
        super().__init__("RDF Node is not defined")


class DuplicateRootContainer(ManifestStructureError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Multiple RDF tags found ({count})")
        self.count = count


class DuplicateMetadataContainer(ManifestStructureError):
    def __init__(self, count: int) -> None:
        super().__init__(f"RDF node should only have a single descendant <Description> ({count} found)")
        self.count = count


class DuplicateFieldElement(ManifestStructureError):
    """Raised when a field tag occurs more than once under <Description>."""

    def __init__(self, tag: str, count: int) -> None:
        super().__init__(f"Multiple <{tag}> elements found ({count})")
        self.tag = tag
        self.count = count
