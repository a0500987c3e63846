"""Catalog loading: read the JSON array of items once at startup.

The source is either a filesystem path or an ``http(s)://`` URL. Every
failure here is fatal to startup and is raised as ``ItemSearchError`` with
the underlying exception chained; no partial catalog is ever returned.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from itemsearch.errors import ErrorCode, ItemSearchError
from itemsearch.models.catalog import CatalogRecord

log = structlog.get_logger()

_records_adapter = TypeAdapter(list[CatalogRecord])


def is_remote_source(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_catalog(raw: str | bytes, source: str = "<memory>") -> list[CatalogRecord]:
    """Decode and validate a catalog document.

    Raises ``ItemSearchError`` (``CATALOG_INVALID``) if the payload is not a
    JSON array of ``{id: int, name: str}`` objects, or if ids repeat.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ItemSearchError(
            ErrorCode.CATALOG_INVALID,
            f"Catalog {source} is not valid JSON: {exc}",
        ) from exc

    try:
        records = _records_adapter.validate_python(data)
    except ValidationError as exc:
        raise ItemSearchError(
            ErrorCode.CATALOG_INVALID,
            f"Catalog {source} has invalid entries: {exc.error_count()} error(s)",
        ) from exc

    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise ItemSearchError(
                ErrorCode.CATALOG_INVALID,
                f"Catalog {source} contains duplicate item id {record.id}",
            )
        seen.add(record.id)

    return records


def _read_local(source: str) -> bytes:
    path = Path(source).expanduser()
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ItemSearchError(
            ErrorCode.CATALOG_NOT_FOUND,
            f"Catalog file not found: {path}",
        ) from exc
    except OSError as exc:
        raise ItemSearchError(
            ErrorCode.CATALOG_NOT_FOUND,
            f"Catalog file could not be read: {path}: {exc}",
        ) from exc


async def _fetch_remote(source: str, client: httpx.AsyncClient) -> bytes:
    try:
        response = await client.get(source)
    except httpx.HTTPError as exc:
        raise ItemSearchError(
            ErrorCode.CATALOG_FETCH_FAILED,
            f"Failed to fetch catalog from {source}: {exc}",
            recoverable=True,
        ) from exc

    if response.status_code == 404:
        raise ItemSearchError(
            ErrorCode.CATALOG_NOT_FOUND,
            f"Catalog not found at {source} (HTTP 404)",
        )
    if response.status_code != 200:
        raise ItemSearchError(
            ErrorCode.CATALOG_FETCH_FAILED,
            f"Failed to fetch catalog from {source}: HTTP {response.status_code}",
            recoverable=True,
        )
    return response.content


async def load_catalog(
    source: str,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> list[CatalogRecord]:
    """Load and validate the catalog from a local path or a URL.

    A caller-supplied ``client`` is used as-is and left open; otherwise a
    short-lived client is created for the single fetch.
    """
    if is_remote_source(source):
        if client is not None:
            raw = await _fetch_remote(source, client)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
                raw = await _fetch_remote(source, owned)
    else:
        raw = _read_local(source)

    records = parse_catalog(raw, source)
    if not records:
        raise ItemSearchError(ErrorCode.CATALOG_EMPTY, f"Catalog {source} contains no items")

    log.info("catalog_loaded", source=source, items=len(records))
    return records
