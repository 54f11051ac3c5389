from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from quickrules.models.configs import SegmenterConfig


_LABEL_PATTERN = re.compile(r"\{([^}]+)\}")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_NON_WORD_PATTERN = re.compile(r"[^\w\s]")
_WORD_RUN_PATTERN = re.compile(r"\w+")


class TitleNormalizer:
    """Title-case page names using fixed acronym and minor-word tables."""

    def __init__(self, config: SegmenterConfig | None = None) -> None:
        self.config = config or SegmenterConfig()
        self._acronyms = frozenset(self.config.protected_acronyms)
        self._minor_words = frozenset(self.config.minor_words)

    def __call__(self, raw: Optional[str]) -> str:
        return self.normalize(raw)

    def normalize(self, raw: Optional[str]) -> str:
        if not raw:
            return self.config.untitled_placeholder

        working = raw.strip()
        label = _LABEL_PATTERN.search(working)
        if label:
            working = label.group(1)
        working = _WHITESPACE_PATTERN.sub(" ", working).strip()
        if not working:
            return self.config.untitled_placeholder

        return " ".join(self._format_word(word, index) for index, word in enumerate(working.split(" ")))

    def _format_word(self, word: str, index: int) -> str:
        clean = _NON_WORD_PATTERN.sub("", word)
        run = _WORD_RUN_PATTERN.search(word)
        if run and clean.upper() in self._acronyms:
            # Only the leading word run is uppercased: "gm's" -> "GM's", "hp," -> "HP,".
            return word[: run.start()] + run.group(0).upper() + word[run.end():]
        if index > 0 and clean.lower() in self._minor_words:
            return word.lower()
        return word[:1].upper() + word[1:].lower()


@lru_cache(maxsize=1)
def _default_normalizer() -> TitleNormalizer:
    return TitleNormalizer()


def normalize_title(raw: Optional[str], config: SegmenterConfig | None = None) -> str:
    """Normalize a raw heading/term into a page name."""

    normalizer = TitleNormalizer(config) if config is not None else _default_normalizer()
    return normalizer.normalize(raw)


__all__ = ["TitleNormalizer", "normalize_title"]
