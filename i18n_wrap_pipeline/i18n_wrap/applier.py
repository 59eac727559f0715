# i18n_wrap/applier.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

class EditConflict(Exception):
    pass

@dataclass(frozen=True)
class Edit:
    """Replace text[start:end] of the original snapshot with replacement."""
    start: int
    end: int
    replacement: str

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"Edit range must be non-empty: start={self.start} end={self.end}")

    @property
    def delta(self) -> int:
        return len(self.replacement) - (self.end - self.start)

def dedupe_edits(edits: Iterable[Edit]) -> List[Edit]:
    """
    Order by start descending and keep only the first edit seen at each start.
    Ties keep input order, so the earlier-collected edit wins.
    """
    ordered = sorted(edits, key=lambda e: -e.start)
    kept: List[Edit] = []
    for e in ordered:
        if kept and kept[-1].start == e.start:
            continue
        kept.append(e)
    return kept

def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    kept = dedupe_edits(edits)
    # kept is descending: each edit must end before the previous (higher) one starts
    for hi, lo in zip(kept, kept[1:]):
        if lo.end > hi.start:
            raise EditConflict(f"Overlapping edits [{lo.start}, {lo.end}) and [{hi.start}, {hi.end})")
    if kept and kept[0].end > len(text):
        raise EditConflict(f"Edit [{kept[0].start}, {kept[0].end}) past end of text ({len(text)})")
    for e in kept:
        text = text[:e.start] + e.replacement + text[e.end:]
    return text

def map_offset(edits: Iterable[Edit], offset: int) -> int:
    """Where an offset of the original text lands after apply_edits."""
    shifted = offset
    for e in dedupe_edits(edits):
        if e.end <= offset:
            shifted += e.delta
        elif e.start < offset:
            # offset falls inside a replaced range; pin it to the range start
            shifted -= offset - e.start
    return shifted

def insert_text(text: str, offset: int, snippet: str) -> str:
    return text[:offset] + snippet + text[offset:]
