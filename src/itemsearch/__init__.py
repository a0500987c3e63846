"""Prefix keyword search over a static item catalog."""

from __future__ import annotations

__version__ = "0.1.0"
