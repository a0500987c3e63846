"""Query resolution against a ``CatalogIndex``.

All functions here are pure and read-only: they never touch I/O and never
mutate the index, so one index can serve any number of concurrent queries.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

from itemsearch.models.search import MatchMode

if TYPE_CHECKING:
    from itemsearch.index import CatalogIndex
    from itemsearch.models.catalog import Item


def tokenize(query: str) -> list[str]:
    """Split a query on runs of whitespace. Empty tokens are never produced."""
    return query.lower().split()


def _matching_keywords(index: CatalogIndex, token: str) -> list[str]:
    vocabulary = index.vocabulary
    start = bisect_left(vocabulary, token)
    matched: list[str] = []
    # Prefix matches of a token form one contiguous run in sorted order
    for position in range(start, len(vocabulary)):
        keyword = vocabulary[position]
        if not keyword.startswith(token):
            break
        matched.append(keyword)
    return matched


def lookup_prefix(index: CatalogIndex, token: str) -> list[Item]:
    """Return items having a keyword that starts with ``token``.

    Items reachable through several matching keywords appear once per keyword.
    """
    token = token.lower()
    items: list[Item] = []
    for keyword in _matching_keywords(index, token):
        items.extend(index.items_by_id[item_id] for item_id in index.keyword_index[keyword])
    return items


def _match_ids(index: CatalogIndex, token: str) -> set[int]:
    ids: set[int] = set()
    for keyword in _matching_keywords(index, token.lower()):
        ids.update(index.keyword_index[keyword])
    return ids


def _materialize(index: CatalogIndex, ids: set[int]) -> list[Item]:
    return [index.items_by_id[item_id] for item_id in sorted(ids)]


def resolve_all(index: CatalogIndex, query: str) -> list[Item]:
    """Items matching every token of ``query`` (AND). Empty query → no items."""
    matching: set[int] | None = None
    for token in tokenize(query):
        current = _match_ids(index, token)
        matching = current if matching is None else matching & current
        if not matching:
            return []
    if matching is None:
        return []
    return _materialize(index, matching)


def resolve_any(index: CatalogIndex, query: str) -> list[Item]:
    """Items matching at least one token of ``query`` (OR)."""
    matching: set[int] = set()
    for token in tokenize(query):
        matching |= _match_ids(index, token)
    return _materialize(index, matching)


def resolve(index: CatalogIndex, query: str, mode: MatchMode = MatchMode.ALL) -> list[Item]:
    """Resolve ``query`` with AND or OR semantics depending on ``mode``."""
    if mode is MatchMode.ANY:
        return resolve_any(index, query)
    return resolve_all(index, query)
