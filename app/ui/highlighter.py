"""
Anchor model-reported differences into the document text.

This is best-effort string matching, not a diff: each difference's
``content`` is searched for verbatim from a moving cursor, and anything that
cannot be found is skipped.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from app.models.comparison import Difference
from app.ui.state import Slot

# original document shows what was removed, the modified one what is new
SIDE_TYPES = {
    Slot.DOC1: ("deletion",),
    Slot.DOC2: ("addition", "modification"),
}

HIGHLIGHT_CLASSES = {
    "addition": "hl-addition",
    "deletion": "hl-deletion",
    "modification": "hl-modification",
}


@dataclass(frozen=True)
class Segment:
    text: str
    difference: Optional[Difference] = None

    @property
    def highlighted(self) -> bool:
        return self.difference is not None

    @property
    def css_class(self) -> str:
        if self.difference is None:
            return "plain"
        return HIGHLIGHT_CLASSES[self.difference.type]

    @property
    def tooltip(self) -> str:
        return self.difference.significance if self.difference else ""


def relevant_differences(differences: Sequence[Difference], slot: Slot) -> List[Difference]:
    types = SIDE_TYPES[slot]
    return [d for d in differences if d.type in types]


def order_by_position(text: str, differences: Sequence[Difference]) -> List[Difference]:
    """
    Sort by first occurrence in ``text``. Contents that are empty or absent
    go last; ``sorted`` is stable so ties keep the model's order.
    """
    def position(diff: Difference):
        index = text.find(diff.content) if diff.content else -1
        return (index < 0, index)

    return sorted(differences, key=position)


def build_segments(text: str, differences: Sequence[Difference], slot: Slot) -> List[Segment]:
    segments: List[Segment] = []
    cursor = 0
    for diff in order_by_position(text, relevant_differences(differences, slot)):
        if not diff.content:
            continue
        index = text.find(diff.content, cursor)
        if index == -1:
            continue
        if index > cursor:
            segments.append(Segment(text[cursor:index]))
        end = index + len(diff.content)
        segments.append(Segment(text[index:end], diff))
        cursor = end

    if cursor < len(text):
        segments.append(Segment(text[cursor:]))
    return segments
