from datetime import date

from fastapi import APIRouter, Body
from pydantic import BaseModel, Field, ConfigDict
from prometheus_client import Counter, Histogram

from ..config import get_settings
from ..domain.models import ParsedAppointment, ParseSuccess
from ..errors import ValidationAppError
from ..services.locale_config import resolve_locale
from ..services.materializer import materialize
from ..services.nlp_service import parse_voice_text

router = APIRouter(prefix="/nlp", tags=["nlp"])

NLP_PARSE_COUNT = Counter(
    "voice_agenda_parse_total", "Voice transcript parse attempts", ["locale", "outcome"]
)
NLP_PARSE_DURATION = Histogram(
    "voice_agenda_parse_duration_seconds", "Latency of voice transcript parse"
)


class AppointmentIn(BaseModel):
    title: str = Field(..., min_length=1)
    day: int = Field(..., ge=1, le=31)
    month: int = Field(..., ge=1, le=12)
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)


class MaterializeRequest(BaseModel):
    appointment: AppointmentIn
    reference_year: int = Field(..., alias="referenceYear", ge=1, le=9999)

    model_config = ConfigDict(populate_by_name=True)


def _event_out(appointment: ParsedAppointment, reference_year: int) -> dict:
    event = materialize(appointment, reference_year)
    return {"date": event.date.isoformat(), "time": event.time}


@router.post("/parse-voice")
async def parse_voice(payload: dict = Body(...)):
    text = payload.get("input", "")
    if text is None:
        text = ""
    if not isinstance(text, str):
        raise ValidationAppError("INVALID_INPUT", "input must be a string")
    reference_year = payload.get("referenceYear")
    if reference_year is None:
        reference_year = date.today().year
    elif not isinstance(reference_year, int) or isinstance(reference_year, bool) or not 1 <= reference_year <= 9999:
        raise ValidationAppError("INVALID_REFERENCE_YEAR", "referenceYear must be an integer between 1 and 9999")
    locale_tag = payload.get("locale")
    if locale_tag is not None and not isinstance(locale_tag, str):
        raise ValidationAppError("INVALID_LOCALE", "locale must be a language tag string")
    locale = resolve_locale(locale_tag, get_settings().default_locale)

    with NLP_PARSE_DURATION.time():
        result = parse_voice_text(text, locale)

    if isinstance(result, ParseSuccess):
        NLP_PARSE_COUNT.labels(locale=locale.value, outcome="success").inc()
        a = result.appointment
        return {
            "success": True,
            "locale": locale.value,
            "data": {"title": a.title, "day": a.day, "month": a.month, "hour": a.hour, "minute": a.minute},
            "event": _event_out(a, reference_year),
        }
    NLP_PARSE_COUNT.labels(locale=locale.value, outcome=result.code.value).inc()
    return {
        "success": False,
        "locale": locale.value,
        "error": {"code": result.code.value, "message": result.message},
    }


@router.post("/materialize")
async def materialize_appointment(body: MaterializeRequest):
    a = body.appointment
    parsed = ParsedAppointment(title=a.title.strip(), day=a.day, month=a.month, hour=a.hour, minute=a.minute)
    return _event_out(parsed, body.reference_year)
