from __future__ import annotations

from itemsearch.models.catalog import CatalogRecord, Item
from itemsearch.models.search import (
    HealthOutput,
    ItemOut,
    MatchMode,
    SearchInput,
    SearchOutput,
)

__all__ = [
    # catalog
    "CatalogRecord",
    "Item",
    # search
    "MatchMode",
    "SearchInput",
    "SearchOutput",
    "ItemOut",
    "HealthOutput",
]
