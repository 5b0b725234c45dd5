"""Domain enumerations for strong typing & validation."""
from enum import Enum

class Locale(str, Enum):
    PT = "pt"
    EN = "en"

class ParseErrorCode(str, Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_DAY = "INVALID_DAY"
    INVALID_MONTH = "INVALID_MONTH"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    TITLE_NOT_FOUND = "TITLE_NOT_FOUND"
    INVALID_HOUR = "INVALID_HOUR"
    INVALID_MINUTE = "INVALID_MINUTE"

class MatchStrategy(str, Enum):
    STRUCTURED = "structured"
    ANCHORED = "anchored"
    DIGIT_STREAM = "digit_stream"
    # no strategy located a date
    NONE = "none"
