"""Turn a parsed appointment into a concrete calendar date and clock string."""
from __future__ import annotations
from datetime import date, timedelta

from ..domain.models import MaterializedEvent, ParsedAppointment


def format_clock(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def materialize(parsed: ParsedAppointment, reference_year: int) -> MaterializedEvent:
    """Combine day/month with the caller's year.

    Days past the end of the month roll over into the next one (31/11 becomes
    1 December) instead of raising, so this never fails on parser output.
    """
    first_of_month = date(reference_year, parsed.month, 1)
    return MaterializedEvent(
        date=first_of_month + timedelta(days=parsed.day - 1),
        time=format_clock(parsed.hour, parsed.minute),
    )
