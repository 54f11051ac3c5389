from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from quickrules.models.page import Page


class PageStore(ABC):
    """Destination of generated pages, keyed by collection."""

    @abstractmethod
    async def replace_all(self, collection_key: str, pages: Sequence[Page]) -> int:
        """Swap the whole collection for ``pages`` and return the committed count."""


class MemoryPageStore(PageStore):
    """Dict-backed store for dry runs and tests."""

    def __init__(self) -> None:
        self.collections: Dict[str, List[Page]] = {}

    async def replace_all(self, collection_key: str, pages: Sequence[Page]) -> int:
        self.collections[collection_key] = list(pages)
        return len(pages)

    def fetch_pages(self, collection_key: str) -> List[Page]:
        return list(self.collections.get(collection_key, []))


__all__ = ["MemoryPageStore", "PageStore"]
