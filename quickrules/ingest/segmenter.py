from __future__ import annotations

from typing import List, Sequence

from quickrules.ingest.context import ContextAccumulator
from quickrules.ingest.extractors import CalloutExtractor, GlossaryExtractor
from quickrules.ingest.nodes import BlockKind, classify, parse_markup
from quickrules.ingest.titles import TitleNormalizer
from quickrules.models.configs import SegmenterConfig
from quickrules.models.page import Page, TitleDisplay
from quickrules.models.source import SourceDocument, SourceNode


class SectionSegmenter:
    """Split one sub-document into whole-document, intro, section, glossary and callout pages."""

    def __init__(self, config: SegmenterConfig | None = None) -> None:
        self.config = config or SegmenterConfig()
        self.normalizer = TitleNormalizer(self.config)
        self.glossary = GlossaryExtractor(self.config, self.normalizer)
        self.callouts = CalloutExtractor(self.config, self.normalizer)

    def segment_document(self, document: SourceDocument) -> List[Page]:
        return self.segment(document.raw_markup, document.title)

    def segment(self, raw_markup: str, doc_title: str) -> List[Page]:
        doc_name = self.normalizer.normalize(doc_title)
        pages: List[Page] = [
            Page(
                name=doc_name,
                content_html=raw_markup,
                title_display=TitleDisplay(show=True),
            )
        ]

        children = parse_markup(raw_markup)
        if not children:
            return pages

        intro = self._intro_page(children, doc_name)
        if intro is not None:
            pages.append(intro)

        accumulator = ContextAccumulator(self.config.context_group_class)
        for index, node in enumerate(children):
            classification = classify(node, self.config.callout_marker)
            level = classification.level

            if classification.kind is BlockKind.LIST:
                pages.extend(self.glossary.extract(node))
            elif classification.kind is BlockKind.CALLOUT:
                pages.append(self.callouts.extract(node))
            elif classification.kind is BlockKind.HEADING:
                context = accumulator.context_for(level)
                pages.append(self._section_page(children, index, level, context))

            accumulator.advance(node, level)

        return pages

    def _intro_page(self, children: Sequence[SourceNode], doc_name: str) -> Page | None:
        if children[0].heading_level:
            return None
        parts: List[str] = []
        for node in children:
            if node.heading_level:
                break
            parts.append(node.outer_html)
        return Page(
            name=doc_name + self.config.intro_suffix,
            content_html="".join(parts),
            title_display=TitleDisplay(show=False),
        )

    def _section_page(self, children: Sequence[SourceNode], start: int, level: int, context: str) -> Page:
        heading = children[start]
        parts = [heading.outer_html]
        for sibling in children[start + 1:]:
            # Deeper headings stay inside the running section.
            if 0 < sibling.heading_level <= level:
                break
            parts.append(sibling.outer_html)

        body = "".join(parts)
        if context:
            body = self._context_block(context) + body

        title = heading.inner_text.strip() or self.config.section_fallback_title
        return Page(
            name=self.normalizer.normalize(title),
            content_html=body,
            title_display=TitleDisplay(show=False),
        )

    def _context_block(self, context: str) -> str:
        return (
            f'<details class="{self.config.context_details_class}">'
            f"<summary>{self.config.context_summary}</summary>"
            f"{context}"
            "</details>"
        )


def segment(raw_markup: str, doc_title: str, config: SegmenterConfig | None = None) -> List[Page]:
    """Convenience wrapper around :class:`SectionSegmenter`."""

    return SectionSegmenter(config).segment(raw_markup, doc_title)


__all__ = ["SectionSegmenter", "segment"]
