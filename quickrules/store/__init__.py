"""Destinations for generated page collections."""

from .base import MemoryPageStore, PageStore
from .sqlite import SQLitePageConfig, SQLitePageStore

__all__ = [
    "MemoryPageStore",
    "PageStore",
    "SQLitePageConfig",
    "SQLitePageStore",
]
