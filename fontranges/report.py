"""Per-family summaries of unicode-range statistics."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from .fontface import FamilyStats


@dataclass
class FamilySummary:
    family: str
    chunks: list[int] = field(default_factory=list)  # codepoints per @font-face rule

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)

    @property
    def total(self) -> int:
        return sum(self.chunks)


def summarize(stats: FamilyStats) -> list[FamilySummary]:
    return [FamilySummary(family, list(chunks)) for family, chunks in stats.items()]


def format_summary(summaries: list[FamilySummary], show_chunks: bool = False) -> str:
    """Render summaries as text, one line per family.

    With show_chunks, each @font-face rule's count follows on its own line.
    """
    if not summaries:
        return "  (no @font-face rules with a font-family)"
    width = max(len(s.family) for s in summaries)
    lines = []
    for s in summaries:
        noun = "chunk" if s.chunk_count == 1 else "chunks"
        lines.append(f"  {s.family:<{width}}  {s.chunk_count:>4} {noun:<6} {s.total:>8} codepoints")
        if show_chunks:
            for i, count in enumerate(s.chunks):
                lines.append(f"    {i + 1:>4}. {count}")
    return "\n".join(lines)


def to_json(data: FamilyStats | dict[str, FamilyStats]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
