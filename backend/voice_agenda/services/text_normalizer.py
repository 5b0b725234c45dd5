"""Transcript clean-up ahead of pattern matching."""
from __future__ import annotations
import re
from typing import List

PUNCTUATION_RE = re.compile(r"[.,;:!?]")
WHITESPACE_RE = re.compile(r"\s+")

# title, date, time
STRUCTURED_SEGMENT_COUNT = 3


def normalize(text: str) -> str:
    """Lowercase, blank out sentence punctuation and collapse whitespace."""
    text = PUNCTUATION_RE.sub(" ", (text or "").lower())
    return WHITESPACE_RE.sub(" ", text).strip()


def segment(text: str) -> List[str]:
    """Split a transcript on commas into normalized, non-empty segments.

    Splitting happens before punctuation is stripped, otherwise the commas
    would already be gone.
    """
    pieces = (normalize(p) for p in (text or "").lower().split(","))
    return [p for p in pieces if p]


def is_structured(segments: List[str]) -> bool:
    return len(segments) >= STRUCTURED_SEGMENT_COUNT
