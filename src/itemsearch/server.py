"""HTTP entry point.

    python -m itemsearch.server

Startup order: settings → logging → catalog load + index build → bind socket.
A catalog that cannot be loaded stops the process with exit status 1 before
any request is accepted.
"""

from __future__ import annotations

import asyncio
import sys
import time

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from itemsearch import __version__
from itemsearch.config import Settings
from itemsearch.errors import ErrorCode, ItemSearchError
from itemsearch.logging_config import setup_logging
from itemsearch.models.search import HealthOutput, ItemOut, SearchInput, SearchOutput
from itemsearch.resolver import resolve
from itemsearch.state import AppState, build_state

log = structlog.get_logger()


def _validate_search_input(query: str | None, mode: str | None, settings: Settings) -> SearchInput:
    if query is None:
        raise ItemSearchError(ErrorCode.INVALID_INPUT, "query parameter is required")
    if len(query) > settings.search.max_query_length:
        raise ItemSearchError(
            ErrorCode.INVALID_INPUT,
            f"query must not exceed {settings.search.max_query_length} characters",
        )
    try:
        return SearchInput(query=query, mode=mode or settings.search.default_mode)
    except ValidationError as exc:
        raise ItemSearchError(ErrorCode.INVALID_INPUT, f"mode must be 'all' or 'any', got {mode!r}") from exc


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app around an already-built ``AppState``."""
    app = FastAPI(title="itemsearch", version=__version__)
    app.state.app_state = state

    @app.exception_handler(ItemSearchError)
    async def _item_search_error_handler(request: Request, exc: ItemSearchError) -> JSONResponse:
        log.info("request_rejected", path=request.url.path, code=exc.code.value, message=exc.message)
        return JSONResponse(status_code=400, content=exc.to_dict())

    @app.get("/health", response_model=HealthOutput)
    async def health() -> HealthOutput:
        return HealthOutput(
            status="ok",
            items=len(state.index.items_by_id),
            keywords=len(state.index.vocabulary),
        )

    @app.get("/data", response_model=SearchOutput)
    async def search(query: str | None = None, mode: str | None = None) -> SearchOutput:
        search_input = _validate_search_input(query, mode, state.settings)

        start = time.perf_counter()
        items = resolve(state.index, search_input.query, search_input.mode)
        elapsed_ms = (time.perf_counter() - start) * 1000

        log.info(
            "query_resolved",
            query=search_input.query,
            mode=search_input.mode.value,
            count=len(items),
            elapsed_ms=round(elapsed_ms, 3),
        )
        return SearchOutput(
            count=len(items),
            items=[ItemOut(id=item.id, name=item.name) for item in items],
        )

    return app


def main() -> None:
    settings = Settings()
    setup_logging(settings.logging)

    try:
        state = asyncio.run(build_state(settings))
    except ItemSearchError as exc:
        log.error("startup_failed", code=exc.code.value, message=exc.message)
        sys.exit(1)

    log.info(
        "server_starting",
        host=settings.server.host,
        port=settings.server.port,
        version=__version__,
    )
    uvicorn.run(
        create_app(state),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
