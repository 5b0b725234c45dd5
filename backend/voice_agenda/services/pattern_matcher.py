"""Locale-parameterized matcher cascade for spoken appointments.

Strategies are tried from most to least specific and the first one that
locates a date wins:

  1. structured   - "title, date, time" (three or more comma segments)
  2. anchored     - an inline "D/M" / "D of M" expression; title before it,
                    time searched in what follows
  3. digit_stream - no separators at all, just a run of numbers

The matcher only recovers candidates. Range checks belong to the validator.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence, Tuple

from ..domain.enums import Locale, MatchStrategy
from ..domain.models import DateCandidate, MatchOutcome, TimeCandidate
from .locale_config import LocaleConfig, get_locale_config
from .text_normalizer import is_structured, normalize, segment

DIGITS_RE = re.compile(r"\d+")
FIRST_DIGIT_RE = re.compile(r"\d")
FOUR_DIGIT_TIME_RE = re.compile(r"^(\d{2})(\d{2})(?!\d)")
MIN_DIGIT_STREAM_TOKENS = 4
# no day, month, hour or minute needs more digits than this
MAX_FIELD_DIGITS = 6
OUT_OF_RANGE = 10 ** MAX_FIELD_DIGITS


def _alternation(words: Sequence[str]) -> str:
    # longest first so "de" never shadows a longer connector
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


@dataclass(frozen=True)
class LocalePatterns:
    structured_date: Tuple[Pattern[str], ...]
    structured_time: Tuple[Pattern[str], ...]
    inline_date: Pattern[str]
    trailing_time: Tuple[Pattern[str], ...]

    @classmethod
    def build(cls, config: LocaleConfig) -> "LocalePatterns":
        dc = _alternation(config.date_connectors)
        tc = _alternation(config.time_connectors)
        bare_pair = re.compile(r"(\d+)\s+(\d+)")
        return cls(
            structured_date=(
                re.compile(rf"(\d+)\s*(?:{dc})\s*(\d+)"),
                bare_pair,
            ),
            # colons are blanked by normalize(), so "14:30" reaches the bare pair as "14 30"
            structured_time=(
                re.compile(rf"(\d+)\s*(?:{tc})\s*(\d+)"),
                bare_pair,
            ),
            inline_date=re.compile(rf"(\d{{1,2}})\s*(?:{dc})\s*(\d{{1,2}})"),
            trailing_time=(
                FOUR_DIGIT_TIME_RE,
                re.compile(rf"(\d{{1,2}})\s*(?:{tc})\s*(\d{{2}})"),
                re.compile(r"(\d{1,2})\s+(\d{2})"),
            ),
        )


@lru_cache(maxsize=None)
def patterns_for(locale: Locale) -> LocalePatterns:
    return LocalePatterns.build(get_locale_config(locale))


def to_field(digits: str) -> int:
    """int() for a captured digit run, clamped so huge runs stay out of every range."""
    significant = digits.lstrip("0")
    if len(significant) > MAX_FIELD_DIGITS:
        return OUT_OF_RANGE
    return int(significant or "0")


def _first_pair(text: str, patterns: Sequence[Pattern[str]]) -> Optional[Tuple[int, int]]:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return to_field(m.group(1)), to_field(m.group(2))
    return None


def _as_date(pair: Optional[Tuple[int, int]]) -> Optional[DateCandidate]:
    return DateCandidate(day=pair[0], month=pair[1]) if pair else None


def _as_time(pair: Optional[Tuple[int, int]]) -> Optional[TimeCandidate]:
    return TimeCandidate(hour=pair[0], minute=pair[1]) if pair else None


def match_structured(segments: List[str], patterns: LocalePatterns) -> MatchOutcome:
    title, date_part, time_part = segments[0], segments[1], segments[2]
    return MatchOutcome(
        title=title.strip(),
        date=_as_date(_first_pair(date_part, patterns.structured_date)),
        time=_as_time(_first_pair(time_part, patterns.structured_time)),
        strategy=MatchStrategy.STRUCTURED,
    )


def match_anchored(normalized: str, patterns: LocalePatterns) -> Optional[MatchOutcome]:
    m = patterns.inline_date.search(normalized)
    # a date at position 0 leaves no room for a title; let the digit stream try
    if not m or m.start() == 0:
        return None
    remainder = normalized[m.end():].strip()
    return MatchOutcome(
        title=normalized[: m.start()].strip(),
        date=DateCandidate(day=to_field(m.group(1)), month=to_field(m.group(2))),
        time=_as_time(_first_pair(remainder, patterns.trailing_time)),
        strategy=MatchStrategy.ANCHORED,
    )


def digit_stream_time(tokens: Sequence[str]) -> Optional[TimeCandidate]:
    """Pick hour/minute out of the numeric tokens of a separator-less utterance."""
    last = tokens[-1] if tokens else ""
    if len(last) == 4:
        return TimeCandidate(hour=to_field(last[:2]), minute=to_field(last[2:]))
    if len(tokens) >= 4:
        return TimeCandidate(hour=to_field(tokens[-2]), minute=to_field(tokens[-1]))
    if len(tokens) == 3:
        return TimeCandidate(hour=to_field(tokens[1]), minute=to_field(tokens[2]))
    return None


def match_digit_stream(normalized: str) -> Optional[MatchOutcome]:
    tokens = DIGITS_RE.findall(normalized)
    if len(tokens) < MIN_DIGIT_STREAM_TOKENS:
        return None
    first_digit = FIRST_DIGIT_RE.search(normalized)
    return MatchOutcome(
        title=normalized[: first_digit.start()].strip(),
        date=DateCandidate(day=to_field(tokens[0]), month=to_field(tokens[1])),
        time=digit_stream_time(tokens),
        strategy=MatchStrategy.DIGIT_STREAM,
    )


def match_transcript(text: str, locale: Locale | str) -> MatchOutcome:
    """Run the cascade for ``locale`` over a raw transcript."""
    patterns = patterns_for(Locale(locale))
    segments = segment(text)
    if is_structured(segments):
        return match_structured(segments, patterns)

    normalized = normalize(text)
    outcome = match_anchored(normalized, patterns) or match_digit_stream(normalized)
    if outcome is None:
        return MatchOutcome(title="", date=None, time=None, strategy=MatchStrategy.NONE)
    return outcome
