from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


def to_jsonable(obj: Any) -> Any:
    """
    Convert inspection outputs to JSON-serializable equivalents.

    Objects exposing to_dict() are serialized through it so their own field
    selection wins over a raw dataclass dump.
    """
    if isinstance(obj, Enum):
        return to_jsonable(obj.value)

    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj

    if isinstance(obj, Path):
        return str(obj)

    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_jsonable(to_dict())

    if is_dataclass(obj) and not isinstance(obj, type):
        return to_jsonable(asdict(obj))

    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(x) for x in obj]

    # fallback: string representation
    return str(obj)
