from __future__ import annotations
import logging
from typing import Optional

from ..domain.enums import Locale, ParseErrorCode
from ..domain.models import MatchOutcome, ParsedAppointment, ParseFailure, ParseResult, ParseSuccess
from .locale_config import LocaleConfig, get_locale_config
from .pattern_matcher import match_transcript

logger = logging.getLogger(__name__)

DAY_RANGE = (1, 31)
MONTH_RANGE = (1, 12)
HOUR_RANGE = (0, 23)
MINUTE_RANGE = (0, 59)


def _within(value: int, bounds: tuple) -> bool:
    return bounds[0] <= value <= bounds[1]


class VoiceAppointmentParser:
    """Rule-based bilingual (pt/en) parser for dictated appointments.
    Extracts title, day, month, hour and minute. Never raises on bad input;
    every problem comes back as a ParseFailure carrying a localized message.
    """

    @classmethod
    def validate(cls, outcome: MatchOutcome) -> Optional[ParseErrorCode]:
        # order matters: it decides which message the user sees when several fields are wrong
        if outcome.date is None:
            return ParseErrorCode.INVALID_DATE_FORMAT
        if not _within(outcome.date.day, DAY_RANGE):
            return ParseErrorCode.INVALID_DAY
        if not _within(outcome.date.month, MONTH_RANGE):
            return ParseErrorCode.INVALID_MONTH
        if outcome.time is None:
            return ParseErrorCode.INVALID_TIME_FORMAT
        if not outcome.title.strip():
            return ParseErrorCode.TITLE_NOT_FOUND
        if not _within(outcome.time.hour, HOUR_RANGE):
            return ParseErrorCode.INVALID_HOUR
        if not _within(outcome.time.minute, MINUTE_RANGE):
            return ParseErrorCode.INVALID_MINUTE
        return None

    @classmethod
    def _fail(cls, config: LocaleConfig, code: ParseErrorCode) -> ParseFailure:
        return ParseFailure(code=code, message=config.message(code))

    @classmethod
    def parse(cls, text: str, locale: Locale | str = Locale.PT) -> ParseResult:
        config = get_locale_config(locale)
        if not text or not text.strip():
            return cls._fail(config, ParseErrorCode.EMPTY_INPUT)

        outcome = match_transcript(text, config.locale)
        error = cls.validate(outcome)
        logger.debug(
            "voice parse locale=%s strategy=%s error=%s",
            config.locale.value, outcome.strategy.value, error.value if error else None,
        )
        if error is not None:
            return cls._fail(config, error)

        # validate() guarantees both candidates are present here
        return ParseSuccess(
            appointment=ParsedAppointment(
                title=outcome.title.strip(),
                day=outcome.date.day,
                month=outcome.date.month,
                hour=outcome.time.hour,
                minute=outcome.time.minute,
            )
        )


def parse_voice_text(text: str, locale: Locale | str = Locale.PT) -> ParseResult:
    """Public helper used by API layer."""
    return VoiceAppointmentParser.parse(text, locale)
