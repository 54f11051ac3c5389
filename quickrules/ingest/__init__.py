"""Segmentation of rich-text sub-documents into topic pages."""

from .context import ContextAccumulator, ContextBuffer
from .extractors import CalloutExtractor, GlossaryExtractor
from .nodes import BlockKind, Classification, classify, parse_markup
from .pipeline import CollectedPages, RebuildPipeline, RebuildResult
from .segmenter import SectionSegmenter, segment
from .sources import (
    DirectorySource,
    JournalExportSource,
    SourceCollection,
    SourceNotFound,
    StaticSource,
    open_source,
)
from .titles import TitleNormalizer, normalize_title

__all__ = [
    "BlockKind",
    "CalloutExtractor",
    "Classification",
    "CollectedPages",
    "ContextAccumulator",
    "ContextBuffer",
    "DirectorySource",
    "GlossaryExtractor",
    "JournalExportSource",
    "RebuildPipeline",
    "RebuildResult",
    "SectionSegmenter",
    "SourceCollection",
    "SourceNotFound",
    "StaticSource",
    "TitleNormalizer",
    "classify",
    "normalize_title",
    "open_source",
    "parse_markup",
    "segment",
]
