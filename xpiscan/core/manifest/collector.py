from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, runtime_checkable

from .messages import Message


@runtime_checkable
class Collector(Protocol):
    """Diagnostics sink consumed by the manifest extractor.

    Both calls are fire-and-forget; the extractor never reads back.
    """

    def add_error(self, message: Message) -> None: ...

    def add_notice(self, message: Message) -> None: ...


@dataclass
class MessageCollector:
    """In-memory collector keeping diagnostics in insertion order.

    Not thread-safe: share one instance across concurrent extractions only
    with external locking.
    """

    errors: List[Message] = field(default_factory=list)
    notices: List[Message] = field(default_factory=list)

    def add_error(self, message: Message) -> None:
        self.errors.append(message)

    def add_notice(self, message: Message) -> None:
        self.notices.append(message)

    @property
    def length(self) -> int:
        return len(self.errors) + len(self.notices)

    def codes(self) -> List[str]:
        """All codes, errors first, then notices."""
        return [m.code for m in (*self.errors, *self.notices)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.length,
            "errors": [m.to_dict() for m in self.errors],
            "notices": [m.to_dict() for m in self.notices],
        }
