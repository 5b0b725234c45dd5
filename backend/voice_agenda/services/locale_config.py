"""Per-locale vocabulary for the voice parser.

A single matcher cascade is parameterized by one of these records: the words
or symbols allowed between day and month, those allowed between hour and
minute, and the user-facing message for each parse error.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple

from ..domain.enums import Locale, ParseErrorCode


@dataclass(frozen=True)
class LocaleConfig:
    locale: Locale
    date_connectors: Tuple[str, ...]
    time_connectors: Tuple[str, ...]
    messages: Dict[ParseErrorCode, str]

    def message(self, code: ParseErrorCode) -> str:
        return self.messages[code]


EN_MESSAGES: Dict[ParseErrorCode, str] = {
    ParseErrorCode.EMPTY_INPUT: "No text was captured. Please try again.",
    ParseErrorCode.INVALID_DATE_FORMAT: 'Invalid date format. Use: "day of month" or "day/month". Example: "15 of 12" or "15/12"',
    ParseErrorCode.INVALID_DAY: "Invalid day. Use a day between 1 and 31.",
    ParseErrorCode.INVALID_MONTH: "Invalid month. Use a month between 1 and 12.",
    ParseErrorCode.INVALID_TIME_FORMAT: 'Invalid time format. Use: "hour and minute" or "hour:minute". Example: "14 and 35" or "14:35"',
    ParseErrorCode.TITLE_NOT_FOUND: "Title not found. Speak the appointment title before the date.",
    ParseErrorCode.INVALID_HOUR: "Invalid hour. Use an hour between 0 and 23.",
    ParseErrorCode.INVALID_MINUTE: "Invalid minute. Use a minute between 0 and 59.",
}

PT_MESSAGES: Dict[ParseErrorCode, str] = {
    ParseErrorCode.EMPTY_INPUT: "Nenhum texto foi capturado. Tente novamente.",
    ParseErrorCode.INVALID_DATE_FORMAT: 'Formato de data inválido. Use: "dia do mês" ou "dia/mês". Exemplo: "19 do 11" ou "19/12"',
    ParseErrorCode.INVALID_DAY: "Dia inválido. Use um dia entre 1 e 31.",
    ParseErrorCode.INVALID_MONTH: "Mês inválido. Use um mês entre 1 e 12.",
    ParseErrorCode.INVALID_TIME_FORMAT: 'Formato de horário inválido. Use: "hora e minuto" ou "hora:minuto". Exemplo: "14 e 35" ou "14:35"',
    ParseErrorCode.TITLE_NOT_FOUND: "Título não encontrado. Fale o título do compromisso antes da data.",
    ParseErrorCode.INVALID_HOUR: "Hora inválida. Use uma hora entre 0 e 23.",
    ParseErrorCode.INVALID_MINUTE: "Minuto inválido. Use um minuto entre 0 e 59.",
}

LOCALE_CONFIGS: Dict[Locale, LocaleConfig] = {
    Locale.EN: LocaleConfig(
        locale=Locale.EN,
        date_connectors=("of", "/"),
        time_connectors=("and", ":"),
        messages=EN_MESSAGES,
    ),
    Locale.PT: LocaleConfig(
        locale=Locale.PT,
        date_connectors=("do", "de", "/"),
        time_connectors=("e", ":", "h"),
        messages=PT_MESSAGES,
    ),
}


def get_locale_config(locale: Locale | str) -> LocaleConfig:
    return LOCALE_CONFIGS[Locale(locale)]


def resolve_locale(tag: str | None, default: Locale = Locale.PT) -> Locale:
    """Map a UI language tag onto a parse locale.

    English tags (``en``, ``en-US``, ``EN_gb``) parse as English; any other UI
    language (``pt``, ``fr``, ``es``...) parses as Portuguese. An empty tag
    falls back to ``default``.
    """
    if not tag or not tag.strip():
        return default
    primary = tag.strip().lower().replace("_", "-").split("-")[0]
    return Locale.EN if primary == Locale.EN.value else Locale.PT
