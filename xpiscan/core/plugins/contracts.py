from dataclasses import dataclass
from typing import FrozenSet, Protocol
from datetime import datetime

@dataclass(frozen=True)
class PluginMetadata:
    """
    Immutable metadata describing a plugin.
    """
    plugin_id: str                 # Unique identifier
    name: str                      # Human-readable name
    version: str                   # Plugin version
    author: str
    allowed_actions: FrozenSet[str]
    created_at: datetime

# ------------------------------
# Plugin Interface / Protocol
# ------------------------------

class PluginInterface(Protocol):
    """
    Protocol all plugins must implement.
    """

    @property
    def metadata(self) -> PluginMetadata:
        ...

    def initialize(self) -> None:
        """
        Called once when the plugin is registered.
        """
        ...
