from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List, Optional


class ApiError(BaseModel):
    """Standard API error payload."""

    error: str
    detail: Optional[str] = None


class FileOut(BaseModel):
    filename: str
    size_bytes: int
    sha256: Optional[str] = None
    member: Optional[str] = None


class MetadataOut(BaseModel):
    """Extracted install.rdf metadata."""

    guid: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    version: Optional[str] = None
    restartless: bool = False


class MessageOut(BaseModel):
    code: str
    message: str
    description: str
    file: str


class MessagesOut(BaseModel):
    count: int = 0
    errors: List[MessageOut] = Field(default_factory=list)
    notices: List[MessageOut] = Field(default_factory=list)


class InspectOut(BaseModel):
    """Inspection result for one uploaded package or manifest."""

    plugin_id: str
    file: FileOut
    metadata: MetadataOut
    messages: MessagesOut
