"""Typed errors shared by the catalog loader, index builder and HTTP layer."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    CATALOG_NOT_FOUND = "CATALOG_NOT_FOUND"
    CATALOG_INVALID = "CATALOG_INVALID"
    CATALOG_EMPTY = "CATALOG_EMPTY"
    CATALOG_FETCH_FAILED = "CATALOG_FETCH_FAILED"


class ItemSearchError(Exception):
    """Error with a stable code, surfaced to clients as a JSON envelope."""

    def __init__(self, code: ErrorCode, message: str, recoverable: bool = False) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "recoverable": self.recoverable,
            }
        }
