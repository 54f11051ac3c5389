from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from quickrules.models.page import Page


class PageSummary(BaseModel):
    name: str
    order: Optional[int] = None
    origin: str


class PageDetail(PageSummary):
    content_html: str
    show_title: bool = False
    title_level: int = 1
    source_tag: Optional[str] = None


class PageListResponse(BaseModel):
    collection: str
    items: List[PageSummary] = Field(default_factory=list)


class RebuildResponse(BaseModel):
    collection: str
    documents_processed: int
    documents_failed: int
    pages_written: int
    skipped: bool
    warnings: List[str] = Field(default_factory=list)


def page_summary(page: Page) -> PageSummary:
    return PageSummary(name=page.name, order=page.order, origin=page.flags.origin.value)


def page_detail(page: Page) -> PageDetail:
    return PageDetail(
        name=page.name,
        order=page.order,
        origin=page.flags.origin.value,
        content_html=page.content_html,
        show_title=page.title_display.show,
        title_level=page.title_display.level,
        source_tag=page.flags.source_tag,
    )


__all__ = [
    "PageDetail",
    "PageListResponse",
    "PageSummary",
    "RebuildResponse",
    "page_detail",
    "page_summary",
]
