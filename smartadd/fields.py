from __future__ import annotations

from datetime import datetime

from .date.types import EventData, ParsedDateTime


def format_display_date(d: datetime) -> str:
    """Calendar editor display format, e.g. "Wednesday, January 7"."""
    return f"{d:%A}, {d:%B} {d.day}"


def format_iso_date(d: datetime) -> str:
    return d.strftime("%Y-%m-%d")


def format_time(d: datetime) -> str:
    """12-hour clock as the editor shows it, e.g. "3:00pm", "12:30am"."""
    hour = d.hour % 12 or 12
    suffix = "am" if d.hour < 12 else "pm"
    return f"{hour}:{d.minute:02d}{suffix}"


def _fields_for(prefix: str, p: ParsedDateTime) -> dict[str, str]:
    out: dict[str, str] = {}
    if p.has_date:
        out[f"{prefix}_date"] = format_display_date(p.instant)
        out[f"iso_{prefix}_date"] = format_iso_date(p.instant)
    if p.has_time:
        out[f"{prefix}_time"] = format_time(p.instant)
    return out


def form_fields(event: EventData) -> dict[str, str]:
    """Field values to write into the event editor.

    Only parts the text actually specified are present; a missing key means
    "leave that field alone".
    """

    out: dict[str, str] = {}
    if event.start is None:
        return out
    out.update(_fields_for("start", event.start))
    if event.end is not None:
        out.update(_fields_for("end", event.end))
    return out
