from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """One titled sub-document of the source corpus."""

    title: str
    raw_markup: str


@dataclass(frozen=True, slots=True)
class SourceNode:
    """Immutable snapshot of one parsed markup node."""

    tag: str
    heading_level: int = 0
    inner_text: str = ""
    inner_html: str = ""
    outer_html: str = ""
    children: Tuple["SourceNode", ...] = field(default_factory=tuple)

    def iter_descendants(self) -> Iterator["SourceNode"]:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_first(self, *tags: str) -> Optional["SourceNode"]:
        """Return the first descendant (document order) whose tag is in ``tags``."""

        wanted = {tag.lower() for tag in tags}
        for node in self.iter_descendants():
            if node.tag in wanted:
                return node
        return None


__all__ = ["SourceDocument", "SourceNode"]
