"""Rulebook segmentation into a searchable topic-page index."""

from .models.page import BuildMode, Page
from .ingest.titles import normalize_title

__all__ = ["BuildMode", "Page", "normalize_title"]
