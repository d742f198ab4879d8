from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class AddonType(str, Enum):
    """
    Canonical add-on categories.

    Using str Enum keeps serialization stable (`AddonType.THEME == "theme"`).
    """

    EXTENSION = "extension"
    THEME = "theme"
    LOCALE = "locale"
    MULTIPACKAGE = "multipackage"
    DICTIONARY = "dictionary"


class AddonTypeCode(str, Enum):
    """Raw <em:type> tokens understood by install.rdf consumers."""

    EXTENSION = "2"
    THEME = "4"
    LOCALE = "8"
    MULTIPACKAGE = "32"
    DICTIONARY = "64"
    # "Experiment" types, treated as extensions.
    EXPERIMENT = "128"
    WEBEXTENSION_EXPERIMENT = "256"


ADDON_TYPE_MAP: Mapping[AddonTypeCode, AddonType] = MappingProxyType(
    {
        AddonTypeCode.EXTENSION: AddonType.EXTENSION,
        AddonTypeCode.THEME: AddonType.THEME,
        AddonTypeCode.LOCALE: AddonType.LOCALE,
        AddonTypeCode.MULTIPACKAGE: AddonType.MULTIPACKAGE,
        AddonTypeCode.DICTIONARY: AddonType.DICTIONARY,
        AddonTypeCode.EXPERIMENT: AddonType.EXTENSION,
        AddonTypeCode.WEBEXTENSION_EXPERIMENT: AddonType.EXTENSION,
    }
)


def resolve_addon_type(token: Optional[str]) -> Optional[AddonType]:
    """Map a raw <em:type> token to its canonical AddonType.

    Lookup is by exact token; surrounding whitespace or unknown codes yield
    None. Pure function: callers decide how to report an unresolved token.
    """

    if token is None:
        return None
    try:
        code = AddonTypeCode(token)
    except ValueError:
        return None
    return ADDON_TYPE_MAP[code]
