"""Application state shared by request handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from itemsearch.catalog import load_catalog
from itemsearch.index import build_index

if TYPE_CHECKING:
    from itemsearch.config import Settings
    from itemsearch.index import CatalogIndex


@dataclass(frozen=True)
class AppState:
    """Everything a request needs, built once before the server accepts traffic."""

    settings: Settings
    index: CatalogIndex


async def build_state(settings: Settings, client: httpx.AsyncClient | None = None) -> AppState:
    """Load the catalog and build the index. Any failure is fatal to startup."""
    records = await load_catalog(
        settings.catalog.source,
        client=client,
        timeout=settings.catalog.fetch_timeout_seconds,
    )
    return AppState(settings=settings, index=build_index(records))
