"""Integration test fixtures.

Provides an AppState built from the shared sample catalog and an httpx
client wired to the FastAPI app in-process. Catalog fixtures come from
tests/conftest.py (sample_records, index).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import httpx
import pytest

from itemsearch.config import Settings
from itemsearch.server import create_app
from itemsearch.state import AppState

if TYPE_CHECKING:
    from pathlib import Path

    from itemsearch.index import CatalogIndex


@pytest.fixture()
def app_state(index: CatalogIndex) -> AppState:
    return AppState(settings=Settings(), index=index)


@pytest.fixture()
async def client(app_state: AppState):
    """httpx client talking to the app over ASGI, no socket involved."""
    transport = httpx.ASGITransport(app=create_app(app_state))
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment for running the server as a child process."""
    env = os.environ.copy()
    for key in list(env):
        if key.startswith("ITEMSEARCH__"):
            del env[key]
    env["ITEMSEARCH__CATALOG__SOURCE"] = str(tmp_path / "products.json")
    env["ITEMSEARCH__SERVER__HOST"] = "127.0.0.1"
    return env
