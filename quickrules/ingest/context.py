from __future__ import annotations

from dataclasses import dataclass

from quickrules.models.source import SourceNode


@dataclass(slots=True)
class ContextBuffer:
    level2: str = ""
    level3: str = ""
    prior_level2: str = ""


class ContextAccumulator:
    """Rolling record of the enclosing H2/H3 markup seen during one pass.

    Callers must read with :meth:`context_for` before calling :meth:`advance`
    for the same node, so the context reflects the state prior to entering the
    new section.
    """

    def __init__(self, group_class: str = "dh-context-group") -> None:
        self.group_class = group_class
        self.buffer = ContextBuffer()

    def _wrap(self, html: str) -> str:
        if not html:
            return ""
        return f'<div class="{self.group_class}">{html}</div>'

    def context_for(self, level: int) -> str:
        if level == 3:
            return self._wrap(self.buffer.level2)
        if level == 4:
            return self._wrap(self.buffer.level2) + self._wrap(self.buffer.level3)
        return ""

    def advance(self, node: SourceNode, level: int) -> None:
        buffer = self.buffer
        if level == 1:
            buffer.level2 = ""
            buffer.level3 = ""
            buffer.prior_level2 = ""
        elif level == 2:
            buffer.prior_level2 = buffer.level2
            buffer.level2 = node.outer_html
            buffer.level3 = ""
        elif level == 3:
            buffer.level3 = node.outer_html
        elif level == 0:
            if buffer.level3:
                buffer.level3 += node.outer_html
            elif buffer.level2:
                buffer.level2 += node.outer_html


__all__ = ["ContextAccumulator", "ContextBuffer"]
