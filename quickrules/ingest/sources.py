from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from quickrules.models.source import SourceDocument


class SourceNotFound(LookupError):
    """A source collection or one of its sub-documents is missing."""


class SourceCollection(ABC):
    """Asynchronous provider of titled sub-documents."""

    @abstractmethod
    async def document_ids(self) -> List[str]:
        """Return sub-document identifiers in build order."""

    @abstractmethod
    async def load(self, document_id: str) -> SourceDocument:
        """Fetch one sub-document, raising :class:`SourceNotFound` when absent."""


class StaticSource(SourceCollection):
    """Wrap already-loaded documents."""

    def __init__(self, documents: Iterable[SourceDocument]) -> None:
        self.documents = list(documents)

    async def document_ids(self) -> List[str]:
        return [str(index) for index in range(len(self.documents))]

    async def load(self, document_id: str) -> SourceDocument:
        try:
            return self.documents[int(document_id)]
        except (ValueError, IndexError) as exc:
            raise SourceNotFound(f"Sub-document '{document_id}' not found") from exc


def _title_from_stem(path: Path) -> str:
    return path.stem.replace("_", " ").replace("-", " ").strip() or path.stem


class DirectorySource(SourceCollection):
    """HTML files under a directory, one sub-document per file."""

    def __init__(self, root: Path, pattern: str = "**/*.html") -> None:
        self.root = root
        self.pattern = pattern

    async def document_ids(self) -> List[str]:
        if not self.root.is_dir():
            raise SourceNotFound(f"Source directory not found: {self.root}")
        paths = sorted(path for path in self.root.glob(self.pattern) if path.is_file())
        return [path.relative_to(self.root).as_posix() for path in paths]

    async def load(self, document_id: str) -> SourceDocument:
        path = self.root / document_id
        if not path.is_file():
            raise SourceNotFound(f"Source file not found: {path}")
        markup = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return SourceDocument(title=_title_from_stem(path), raw_markup=markup)


class JournalExportSource(SourceCollection):
    """Text pages of a journal entry exported as JSON.

    The file holds either a single entry or a list of entries; ``journal`` picks
    one by ``_id`` or ``name``. Pages are taken in ``sort`` order and only
    non-empty ``text`` pages are used.
    """

    def __init__(self, path: Path, journal: Optional[str] = None) -> None:
        self.path = path
        self.journal = journal
        self._pages: Optional[Dict[str, SourceDocument]] = None

    def _read_entries(self) -> List[Dict[str, Any]]:
        if not self.path.is_file():
            raise SourceNotFound(f"Journal export not found: {self.path}")
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError(f"Journal export {self.path} must contain an object or a list")
        return [entry for entry in data if isinstance(entry, dict)]

    def _select_entry(self, entries: List[Dict[str, Any]]) -> Dict[str, Any]:
        if self.journal is None:
            if len(entries) == 1:
                return entries[0]
            raise SourceNotFound(f"{self.path} holds {len(entries)} journals; select one by id or name")
        for entry in entries:
            if self.journal in (entry.get("_id"), entry.get("name")):
                return entry
        raise SourceNotFound(f"Journal '{self.journal}' not found in {self.path}")

    def _collect_pages(self) -> Dict[str, SourceDocument]:
        entry = self._select_entry(self._read_entries())
        raw_pages = sorted(entry.get("pages") or [], key=lambda page: page.get("sort", 0))
        pages: Dict[str, SourceDocument] = {}
        for index, page in enumerate(raw_pages):
            if page.get("type", "text") != "text":
                continue
            content = (page.get("text") or {}).get("content")
            if not content:
                continue
            page_id = str(page.get("_id") or index)
            pages[page_id] = SourceDocument(title=page.get("name") or "", raw_markup=content)
        return pages

    async def _ensure_pages(self) -> Dict[str, SourceDocument]:
        if self._pages is None:
            self._pages = await asyncio.to_thread(self._collect_pages)
        return self._pages

    async def document_ids(self) -> List[str]:
        return list((await self._ensure_pages()).keys())

    async def load(self, document_id: str) -> SourceDocument:
        pages = await self._ensure_pages()
        try:
            return pages[document_id]
        except KeyError as exc:
            raise SourceNotFound(f"Journal page '{document_id}' not found in {self.path}") from exc


def open_source(path: Path, *, journal: Optional[str] = None, pattern: str = "**/*.html") -> SourceCollection:
    """Pick a source implementation for ``path``."""

    if path.suffix.lower() == ".json":
        return JournalExportSource(path, journal=journal)
    if path.is_file():
        return DirectorySource(path.parent, pattern=path.name)
    return DirectorySource(path, pattern=pattern)


__all__ = [
    "DirectorySource",
    "JournalExportSource",
    "SourceCollection",
    "SourceNotFound",
    "StaticSource",
    "open_source",
]
