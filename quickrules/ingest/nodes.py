from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from quickrules.models.source import SourceNode


_HEADING_PATTERN = re.compile(r"^h([1-6])$")
_QUOTE_TAGS = {"blockquote", "q"}
_LIST_TAGS = {"ul", "ol"}
# Elements innerText separates from their neighbours with a line break.
_BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure",
    "footer", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "ol", "p", "pre",
    "section", "table", "tr", "ul",
}
DEFAULT_CALLOUT_MARKER = "Optional Rule"


class BlockKind(str, Enum):
    HEADING = "heading"
    CALLOUT = "callout"
    LIST = "list"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class Classification:
    kind: BlockKind
    level: int = 0


def heading_level(tag_name: str | None) -> int:
    """Return 1-6 for h1..h6 tag names, 0 otherwise."""

    if not tag_name:
        return 0
    match = _HEADING_PATTERN.match(tag_name.lower())
    return int(match.group(1)) if match else 0


def _is_content(element) -> bool:
    # Comments, doctypes and CDATA are PreformattedString subclasses.
    if isinstance(element, Tag):
        return True
    return isinstance(element, NavigableString) and not isinstance(element, PreformattedString)


def _inner_text(element: Tag) -> str:
    """Rendered text with line breaks for ``<br>`` and nested block elements."""

    parts: List[str] = []
    for child in element.children:
        if isinstance(child, Tag):
            name = (child.name or "").lower()
            if name == "br":
                parts.append("\n")
            elif name in _BLOCK_TAGS:
                parts.append("\n" + _inner_text(child) + "\n")
            else:
                parts.append(_inner_text(child))
        elif _is_content(child):
            parts.append(str(child))
    return "".join(parts)


def _to_source_node(element) -> SourceNode:
    if isinstance(element, NavigableString):
        text = str(element)
        return SourceNode(tag="", inner_text=text, inner_html=text, outer_html=text)

    name = (element.name or "").lower()
    children = tuple(_to_source_node(child) for child in element.children if _is_content(child))
    return SourceNode(
        tag=name,
        heading_level=heading_level(name),
        inner_text=_inner_text(element),
        inner_html=element.decode_contents(),
        outer_html=str(element),
        children=children,
    )


def parse_markup(raw_markup: str) -> List[SourceNode]:
    """Parse one sub-document's markup into its top-level element forest.

    Only element children of the body are returned; loose text between blocks
    is not a block of its own.
    """

    soup = BeautifulSoup(raw_markup or "", "html5lib")
    body = soup.body or soup
    return [_to_source_node(child) for child in body.children if isinstance(child, Tag)]


def classify(node: SourceNode, marker: str = DEFAULT_CALLOUT_MARKER) -> Classification:
    """Report the structural kind of a single node."""

    tag = (getattr(node, "tag", None) or "").lower()
    if not tag:
        return Classification(BlockKind.PLAIN)

    level = heading_level(tag)
    if level:
        return Classification(BlockKind.HEADING, level)
    if tag in _QUOTE_TAGS and marker in (node.inner_text or ""):
        return Classification(BlockKind.CALLOUT)
    if tag in _LIST_TAGS:
        return Classification(BlockKind.LIST)
    return Classification(BlockKind.PLAIN)


__all__ = [
    "BlockKind",
    "Classification",
    "DEFAULT_CALLOUT_MARKER",
    "classify",
    "heading_level",
    "parse_markup",
]
