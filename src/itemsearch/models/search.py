from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class MatchMode(StrEnum):
    ALL = "all"  # every token must match (intersection)
    ANY = "any"  # at least one token must match (union)


class SearchInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    query: str
    mode: MatchMode = MatchMode.ALL


class ItemOut(BaseModel):
    id: int
    name: str


class SearchOutput(BaseModel):
    count: int
    items: list[ItemOut]


class HealthOutput(BaseModel):
    status: str
    items: int
    keywords: int
