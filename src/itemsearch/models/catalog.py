from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CatalogRecord(BaseModel):
    """Single entry in the catalog JSON array, as read from the source."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class Item(BaseModel):
    """Indexed catalog item. Owned by the index for the process lifetime."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    # Lowercased name split on single spaces; never serialized
    keywords: tuple[str, ...] = Field(default=(), exclude=True)
