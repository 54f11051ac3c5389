from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class PageOrigin(str, Enum):
    RULE = "rule"
    CATALOG_ITEM = "catalog_item"


class BuildMode(str, Enum):
    ALL = "all"
    RULES = "rules"


@dataclass(frozen=True, slots=True)
class TitleDisplay:
    show: bool = False
    level: int = 1


@dataclass(frozen=True, slots=True)
class PageFlags:
    origin: PageOrigin = PageOrigin.RULE
    source_tag: Optional[str] = None
    order: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Page:
    """A single topic page produced by the segmenter."""

    name: str
    content_html: str
    title_display: TitleDisplay = field(default_factory=TitleDisplay)
    flags: PageFlags = field(default_factory=PageFlags)

    @property
    def order(self) -> Optional[int]:
        return self.flags.order

    def with_order(self, order: int) -> "Page":
        """Return a copy carrying the given navigation order."""

        return replace(self, flags=replace(self.flags, order=order))


__all__ = ["BuildMode", "Page", "PageFlags", "PageOrigin", "TitleDisplay"]
