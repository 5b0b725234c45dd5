"""Value objects exchanged between the voice parser, the materializer and the API layer."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .enums import MatchStrategy, ParseErrorCode


@dataclass(frozen=True)
class ParsedAppointment:
    title: str
    day: int
    month: int
    hour: int
    minute: int


@dataclass(frozen=True)
class ParseSuccess:
    appointment: ParsedAppointment
    success: bool = True


@dataclass(frozen=True)
class ParseFailure:
    code: ParseErrorCode
    message: str
    success: bool = False


ParseResult = Union[ParseSuccess, ParseFailure]


@dataclass(frozen=True)
class MaterializedEvent:
    date: date
    time: str  # "HH:MM"


@dataclass(frozen=True)
class DateCandidate:
    day: int
    month: int


@dataclass(frozen=True)
class TimeCandidate:
    hour: int
    minute: int


@dataclass(frozen=True)
class MatchOutcome:
    """What the matcher cascade recovered from a transcript, before validation."""
    title: str
    date: Optional[DateCandidate]
    time: Optional[TimeCandidate]
    strategy: MatchStrategy
