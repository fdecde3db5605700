# app/core/dates.py
import re
from datetime import date, datetime
from app.core.errors import InvalidDateFormat

# (patrón completo, formato strptime) en orden de prioridad
DATE_FORMATS = [
    (re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}"), "%Y-%m-%d"),   # yyyy-MM-dd
    (re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}"), "%d-%m-%Y"),   # dd-MM-yyyy
]

def parse_date(text: str) -> date:
    """Acepta yyyy-MM-dd o dd-MM-yyyy. None es responsabilidad del llamador."""
    s = str(text)
    for pattern, fmt in DATE_FORMATS:
        if not pattern.fullmatch(s):
            continue
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise InvalidDateFormat(text)

def parse_optional_date(text: str | None, field: str) -> date | None:
    """Como parse_date, pero deja pasar None y prefija el error con el campo."""
    if text is None:
        return None
    try:
        return parse_date(text)
    except InvalidDateFormat as exc:
        raise exc.for_field(field) from exc
