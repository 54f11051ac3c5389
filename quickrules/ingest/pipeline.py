from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from quickrules.ingest.segmenter import SectionSegmenter
from quickrules.ingest.sources import SourceCollection, SourceNotFound, StaticSource
from quickrules.logging import logger
from quickrules.models.configs import QuickRulesConfig
from quickrules.models.page import BuildMode, Page, PageOrigin
from quickrules.models.source import SourceDocument
from quickrules.store.base import PageStore


@dataclass(slots=True)
class RebuildResult:
    """Summarizes one rebuild of a generated collection."""

    collection_key: str
    documents_processed: int
    documents_failed: int
    pages_written: int
    skipped: bool = False
    warnings: List[str] = field(default_factory=list)


@dataclass(slots=True)
class CollectedPages:
    pages: List[Page]
    documents_processed: int
    documents_failed: int


class RebuildPipeline:
    """Segments every sub-document of a source and replaces the target collection."""

    def __init__(
        self,
        store: PageStore,
        *,
        config: Optional[QuickRulesConfig] = None,
        segmenter: Optional[SectionSegmenter] = None,
    ) -> None:
        self.store = store
        self.config = config or QuickRulesConfig()
        self.segmenter = segmenter or SectionSegmenter(self.config.segmenter)

    async def collect(self, source: SourceCollection | Iterable[SourceDocument]) -> CollectedPages:
        """Segment all sub-documents in order and number the rule pages."""

        if not isinstance(source, SourceCollection):
            source = StaticSource(source)

        try:
            document_ids = await source.document_ids()
        except SourceNotFound as exc:
            logger.error(f"Source not found: {exc}")
            return CollectedPages(pages=[], documents_processed=0, documents_failed=0)

        pages: List[Page] = []
        processed = 0
        failed = 0
        for document_id in document_ids:
            try:
                document = await source.load(document_id)
                pages.extend(self.segmenter.segment_document(document))
                processed += 1
            except Exception:
                failed += 1
                logger.exception(f"Failed to process sub-document '{document_id}'")

        return CollectedPages(
            pages=_assign_order(pages),
            documents_processed=processed,
            documents_failed=failed,
        )

    async def rebuild(
        self,
        source: SourceCollection | Iterable[SourceDocument],
        mode: BuildMode | str = BuildMode.ALL,
    ) -> RebuildResult:
        collection_key = self.config.collection_for(mode)
        logger.info(f"Build started ({collection_key})")

        collected = await self.collect(source)
        result = RebuildResult(
            collection_key=collection_key,
            documents_processed=collected.documents_processed,
            documents_failed=collected.documents_failed,
            pages_written=0,
        )

        if not collected.pages:
            message = f"No content generated; '{collection_key}' left unchanged."
            logger.warning(message)
            result.skipped = True
            result.warnings.append(message)
            return result

        if collected.documents_failed:
            result.warnings.append(f"{collected.documents_failed} sub-document(s) failed and were skipped.")

        result.pages_written = await self.store.replace_all(collection_key, collected.pages)
        logger.info(f"Build complete: {result.pages_written} pages written to '{collection_key}'")
        return result


def _assign_order(pages: Iterable[Page]) -> List[Page]:
    ordered: List[Page] = []
    counter = 0
    for page in pages:
        if page.flags.origin is PageOrigin.RULE:
            counter += 1
            page = page.with_order(counter)
        ordered.append(page)
    return ordered


__all__ = ["CollectedPages", "RebuildPipeline", "RebuildResult"]
