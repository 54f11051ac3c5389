from __future__ import annotations

import re
from typing import List, Optional

from quickrules.ingest.titles import TitleNormalizer
from quickrules.models.configs import SegmenterConfig
from quickrules.models.page import Page
from quickrules.models.source import SourceNode


_GLOSSARY_PATTERN = re.compile(r"^([^.:]+)([:.])\s+(.+)$")


class GlossaryExtractor:
    """Turn ``Term: body`` list items into standalone pages."""

    def __init__(self, config: SegmenterConfig | None = None, normalizer: TitleNormalizer | None = None) -> None:
        self.config = config or SegmenterConfig()
        self.normalizer = normalizer or TitleNormalizer(self.config)

    def extract(self, list_node: SourceNode) -> List[Page]:
        pages: List[Page] = []
        for item in list_node.children:
            if item.tag != "li":
                continue
            term = self.match_term(item.inner_text)
            if term is None:
                continue
            pages.append(
                Page(
                    name=self.normalizer.normalize(term),
                    content_html=f"<p>{item.inner_html}</p>",
                )
            )
        return pages

    def match_term(self, text: str) -> Optional[str]:
        """Return the glossary term of ``text`` or ``None`` if it is not an entry."""

        match = _GLOSSARY_PATTERN.match(text.strip())
        if not match:
            return None
        term = match.group(1).strip()
        if not term or term[0] in self.config.quote_characters:
            return None
        if len(term.split()) > self.config.glossary_max_term_words:
            return None
        if any(token in term for token in self.config.link_tokens):
            return None
        return term


class CalloutExtractor:
    """Build a page from a blockquote already known to carry the callout marker."""

    def __init__(self, config: SegmenterConfig | None = None, normalizer: TitleNormalizer | None = None) -> None:
        self.config = config or SegmenterConfig()
        self.normalizer = normalizer or TitleNormalizer(self.config)
        self._marker_pattern = re.compile(re.escape(self.config.callout_marker) + ":?", re.IGNORECASE)

    def extract(self, quote_node: SourceNode) -> Page:
        return Page(name=self.title_for(quote_node), content_html=quote_node.outer_html)

    def title_for(self, quote_node: SourceNode) -> str:
        marker = self.config.callout_marker
        bold = quote_node.find_first("strong", "b")
        if bold is not None:
            return self.normalizer.normalize(bold.inner_text)

        remainder = self._marker_pattern.sub("", quote_node.inner_text, count=1).strip()
        if remainder:
            words = remainder.split()[: self.config.callout_title_words]
            return f"{marker}: {self.normalizer.normalize(' '.join(words))}"
        return marker


__all__ = ["CalloutExtractor", "GlossaryExtractor"]
