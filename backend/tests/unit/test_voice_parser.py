import pytest

from voice_agenda.domain.enums import Locale, MatchStrategy, ParseErrorCode
from voice_agenda.domain.models import (
    DateCandidate,
    MatchOutcome,
    ParsedAppointment,
    ParseFailure,
    ParseSuccess,
    TimeCandidate,
)
from voice_agenda.services.locale_config import EN_MESSAGES, PT_MESSAGES
from voice_agenda.services.nlp_service import VoiceAppointmentParser, parse_voice_text


def _error(text, locale):
    result = parse_voice_text(text, locale)
    assert isinstance(result, ParseFailure), result
    assert result.success is False
    return result.code


def test_portuguese_structured_utterance():
    result = parse_voice_text("Reunião, 15 de 12, 14 e 30", "pt")
    assert isinstance(result, ParseSuccess)
    assert result.success is True
    assert result.appointment == ParsedAppointment(title="reunião", day=15, month=12, hour=14, minute=30)


def test_english_structured_utterance():
    result = parse_voice_text("Dentist, 15 of 12, 14:30", "en")
    assert result.appointment == ParsedAppointment(title="dentist", day=15, month=12, hour=14, minute=30)


def test_four_digit_time_after_inline_date():
    result = parse_voice_text("dentist appointment 15/12 1430", "en")
    assert result.appointment == ParsedAppointment(
        title="dentist appointment", day=15, month=12, hour=14, minute=30
    )


@pytest.mark.parametrize("locale", ["pt", "en"])
@pytest.mark.parametrize(
    "text,expected",
    [
        ("Dentist, 15/12, 14:30", ParsedAppointment("dentist", 15, 12, 14, 30)),
        ("Gym, 1/2, 7:05", ParsedAppointment("gym", 1, 2, 7, 5)),
        ("Board meeting, 31/1, 0:00", ParsedAppointment("board meeting", 31, 1, 0, 0)),
    ],
)
def test_title_slash_date_colon_time_in_both_locales(locale, text, expected):
    result = parse_voice_text(text, locale)
    assert isinstance(result, ParseSuccess)
    assert result.appointment == expected


def test_empty_input_english():
    result = parse_voice_text("", "en")
    assert result.code == ParseErrorCode.EMPTY_INPUT
    assert result.message == "No text was captured. Please try again."


def test_blank_input_portuguese():
    result = parse_voice_text("   ", "pt")
    assert result.code == ParseErrorCode.EMPTY_INPUT
    assert result.message == "Nenhum texto foi capturado. Tente novamente."


def test_date_without_time():
    assert _error("dentist appointment 15/12", "en") == ParseErrorCode.INVALID_TIME_FORMAT


def test_no_date_at_all():
    result = parse_voice_text("buy milk tomorrow", "en")
    assert result.code == ParseErrorCode.INVALID_DATE_FORMAT
    assert '"15 of 12"' in result.message


def test_invalid_day():
    assert _error("appointment 32/12 14:30", "en") == ParseErrorCode.INVALID_DAY
    assert _error("consulta 0/5 10 30", "pt") == ParseErrorCode.INVALID_DAY


def test_invalid_month():
    assert _error("appointment 12/13 14:30", "en") == ParseErrorCode.INVALID_MONTH


def test_invalid_hour():
    assert _error("meeting 10/5 25 30", "en") == ParseErrorCode.INVALID_HOUR


def test_invalid_minute():
    assert _error("meeting 10/5 10 75", "en") == ParseErrorCode.INVALID_MINUTE


def test_range_errors_from_digit_stream_are_specific():
    assert _error("gym 40 11 18 45", "en") == ParseErrorCode.INVALID_DAY
    assert _error("gym 10 14 18 45", "en") == ParseErrorCode.INVALID_MONTH
    assert _error("gym 10 11 24 45", "en") == ParseErrorCode.INVALID_HOUR
    assert _error("gym 10 11 18 60", "en") == ParseErrorCode.INVALID_MINUTE


def test_range_errors_from_structured_mode_are_specific():
    assert _error("Consulta, 32 de 1, 10 e 00", "pt") == ParseErrorCode.INVALID_DAY
    assert _error("Consulta, 3 de 13, 10 e 00", "pt") == ParseErrorCode.INVALID_MONTH
    assert _error("Consulta, 3 de 1, 24 e 00", "pt") == ParseErrorCode.INVALID_HOUR
    assert _error("Consulta, 3 de 1, 10 e 60", "pt") == ParseErrorCode.INVALID_MINUTE


def test_day_error_wins_over_missing_title():
    assert _error("32/12 14 30", "en") == ParseErrorCode.INVALID_DAY


def test_missing_title_wins_over_bad_hour():
    assert _error("15/12 25 30", "en") == ParseErrorCode.TITLE_NOT_FOUND


def test_missing_time_wins_over_missing_title():
    outcome = MatchOutcome(title="", date=DateCandidate(1, 1), time=None, strategy=MatchStrategy.ANCHORED)
    assert VoiceAppointmentParser.validate(outcome) == ParseErrorCode.INVALID_TIME_FORMAT


def test_validate_accepts_boundaries():
    outcome = MatchOutcome(
        title="x", date=DateCandidate(31, 12), time=TimeCandidate(23, 59), strategy=MatchStrategy.STRUCTURED
    )
    assert VoiceAppointmentParser.validate(outcome) is None


def test_day_is_not_checked_against_month_length():
    result = parse_voice_text("meeting 31/11 10 00", "en")
    assert result.appointment == ParsedAppointment("meeting", 31, 11, 10, 0)


def test_locale_selects_connectors():
    text = "reunião 15 de 12 às 14"
    # "de" only links day and month in Portuguese
    assert _error(text, "pt") == ParseErrorCode.INVALID_TIME_FORMAT
    assert _error(text, "en") == ParseErrorCode.INVALID_DATE_FORMAT


def test_failure_messages_follow_locale():
    assert parse_voice_text("appointment 32/12 14:30", Locale.EN).message == EN_MESSAGES[ParseErrorCode.INVALID_DAY]
    assert parse_voice_text("consulta 32/12 14:30", Locale.PT).message == PT_MESSAGES[ParseErrorCode.INVALID_DAY]


def test_default_locale_is_portuguese():
    assert parse_voice_text("").message == PT_MESSAGES[ParseErrorCode.EMPTY_INPUT]


def test_unknown_locale_is_rejected():
    with pytest.raises(ValueError):
        parse_voice_text("dentist 15/12 14 30", "fr")


def test_structured_date_without_time():
    assert _error("Consulta, 3 de 1, sem hora", "pt") == ParseErrorCode.INVALID_TIME_FORMAT


def test_very_long_numbers_are_range_errors():
    huge = "1" * 5000
    assert _error(f"gym {huge} 11 18 45", "en") == ParseErrorCode.INVALID_DAY
    assert _error(f"gym, {huge} 11, 18 45", "en") == ParseErrorCode.INVALID_DAY
    assert _error(f"gym, 1 {huge}, 18 45", "en") == ParseErrorCode.INVALID_MONTH
    assert _error(f"gym, 1 11, {huge} 45", "en") == ParseErrorCode.INVALID_HOUR
    assert _error(f"gym 10 11 18 {huge}", "en") == ParseErrorCode.INVALID_MINUTE


def test_leading_zeros_do_not_count_toward_length():
    result = parse_voice_text("gym 10 11 " + "0" * 5000 + " 45", "en")
    assert result.appointment == ParsedAppointment("gym", 10, 11, 0, 45)
