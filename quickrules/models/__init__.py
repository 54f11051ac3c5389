"""Data records shared by the segmenter, stores and API."""

from .configs import QuickRulesConfig, SegmenterConfig
from .page import BuildMode, Page, PageFlags, PageOrigin, TitleDisplay
from .source import SourceDocument, SourceNode

__all__ = [
    "BuildMode",
    "Page",
    "PageFlags",
    "PageOrigin",
    "QuickRulesConfig",
    "SegmenterConfig",
    "SourceDocument",
    "SourceNode",
    "TitleDisplay",
]
