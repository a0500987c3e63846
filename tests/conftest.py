"""Shared fixtures: a small catalog and the index built from it."""

from __future__ import annotations

import pytest

from itemsearch.index import CatalogIndex, build_index
from itemsearch.models.catalog import CatalogRecord


@pytest.fixture()
def sample_records() -> list[CatalogRecord]:
    return [
        CatalogRecord(id=1, name="Red Shoes"),
        CatalogRecord(id=2, name="Red Hat"),
        CatalogRecord(id=3, name="Blue Shoes"),
    ]


@pytest.fixture()
def index(sample_records: list[CatalogRecord]) -> CatalogIndex:
    return build_index(sample_records)


@pytest.fixture()
def large_records() -> list[CatalogRecord]:
    """Catalog with shared prefixes, repeated words and mixed case."""
    names = [
        "Running Shoes Red",
        "Running Shorts",
        "Run Club Tee",
        "Rain Jacket",
        "Red Rain Hat",
        "Shoe Horn",
        "shoelace pack shoelace",
        "Running  Socks",
        "Blue Runner",
    ]
    return [CatalogRecord(id=i + 10, name=name) for i, name in enumerate(names)]
