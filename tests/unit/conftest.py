"""Unit-specific fixtures (no I/O beyond tmp_path)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    """A valid products.json on disk."""
    path = tmp_path / "products.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "name": "Red Shoes"},
                {"id": 2, "name": "Red Hat"},
                {"id": 3, "name": "Blue Shoes"},
            ]
        ),
        encoding="utf-8",
    )
    return path
