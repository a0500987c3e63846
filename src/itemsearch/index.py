"""Keyword index: built once from the catalog at startup, never mutated."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import structlog

from itemsearch.errors import ErrorCode, ItemSearchError
from itemsearch.models.catalog import CatalogRecord, Item

log = structlog.get_logger()


@dataclass(frozen=True)
class CatalogIndex:
    """In-memory lookup structures built from the catalog in a single pass.

    ``vocabulary`` is always the sorted key set of ``keyword_index``.
    """

    # keyword (lowercase) → ids of items whose name contains it
    keyword_index: Mapping[str, frozenset[int]]

    # distinct keywords in ascending codepoint order, for binary search
    vocabulary: tuple[str, ...]

    # item id → owned item record
    items_by_id: Mapping[int, Item]


def extract_keywords(name: str) -> tuple[str, ...]:
    """Lowercase ``name`` and split it on single spaces.

    Consecutive spaces yield empty keywords; they are kept as-is.
    """
    return tuple(name.lower().split(" "))


def build_index(records: Sequence[CatalogRecord]) -> CatalogIndex:
    """Build the keyword index, sorted vocabulary and id lookup.

    Raises ``ItemSearchError`` for an empty catalog or a repeated id.
    """
    if not records:
        raise ItemSearchError(ErrorCode.CATALOG_EMPTY, "Cannot build an index from an empty catalog")

    buckets: defaultdict[str, set[int]] = defaultdict(set)
    items_by_id: dict[int, Item] = {}

    for record in records:
        if record.id in items_by_id:
            raise ItemSearchError(
                ErrorCode.CATALOG_INVALID,
                f"Duplicate item id {record.id}",
            )
        item = Item(id=record.id, name=record.name, keywords=extract_keywords(record.name))
        for keyword in item.keywords:
            buckets[keyword].add(item.id)
        items_by_id[item.id] = item

    keyword_index = {keyword: frozenset(ids) for keyword, ids in buckets.items()}
    vocabulary = tuple(sorted(keyword_index))

    log.info(
        "index_built",
        items=len(items_by_id),
        keywords=len(vocabulary),
    )
    return CatalogIndex(
        keyword_index=MappingProxyType(keyword_index),
        vocabulary=vocabulary,
        items_by_id=MappingProxyType(items_by_id),
    )
