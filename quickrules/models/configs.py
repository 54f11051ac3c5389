from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from quickrules.models.page import BuildMode


DEFAULT_ACRONYMS = ["NPC", "NPCS", "GM", "GMS", "HP", "AP", "DC"]
DEFAULT_MINOR_WORDS = ["is", "your", "a", "the", "on", "in", "to", "of", "an", "and", "with"]


class SegmenterConfig(BaseModel):
    """Tables and markers the segmenter relies on."""

    protected_acronyms: List[str] = Field(default_factory=lambda: list(DEFAULT_ACRONYMS))
    minor_words: List[str] = Field(default_factory=lambda: list(DEFAULT_MINOR_WORDS))
    untitled_placeholder: str = "Untitled"
    section_fallback_title: str = "Section"
    intro_suffix: str = " (Intro)"
    callout_marker: str = "Optional Rule"
    callout_title_words: int = Field(default=4, ge=1)
    glossary_max_term_words: int = Field(default=8, ge=1)
    link_tokens: List[str] = Field(default_factory=lambda: ["@UUID", "@Compendium"])
    quote_characters: str = "\"'“‘"
    context_group_class: str = "dh-context-group"
    context_details_class: str = "dh-context-details"
    context_summary: str = "Show Context (Parent Section)"

    model_config = {
        "frozen": True,
    }

    @field_validator("protected_acronyms", mode="before")
    @classmethod
    def _upper_acronyms(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_ACRONYMS)
        return [str(item).strip().upper() for item in value if str(item).strip()]

    @field_validator("minor_words", mode="before")
    @classmethod
    def _lower_minor_words(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_MINOR_WORDS)
        return [str(item).strip().lower() for item in value if str(item).strip()]


def _default_collections() -> Dict[str, str]:
    return {
        BuildMode.ALL.value: "SRD - All",
        BuildMode.RULES.value: "SRD - Rules",
    }


class QuickRulesConfig(BaseModel):
    segmenter: SegmenterConfig = Field(default_factory=SegmenterConfig)
    collections: Dict[str, str] = Field(default_factory=_default_collections)
    batch_size: int = Field(default=50, ge=1)

    @field_validator("collections", mode="before")
    @classmethod
    def _merge_collections(cls, value: object) -> Dict[str, str]:
        merged = _default_collections()
        if value:
            merged.update({str(key).lower(): str(name) for key, name in dict(value).items()})
        return merged

    def collection_for(self, mode: BuildMode | str) -> str:
        key = mode.value if isinstance(mode, BuildMode) else str(mode).lower()
        try:
            return self.collections[key]
        except KeyError as exc:
            raise ValueError(f"Unknown build mode '{mode}'") from exc


__all__ = ["QuickRulesConfig", "SegmenterConfig"]
