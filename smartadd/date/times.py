"""Clock-time recognizers: "3pm", "at 15:30", "noon", "from 10 to 11 AM".

A bare "12:00" with neither an "at"/"@" prefix nor am/pm is not treated as a
time, so "jan 12:00" stays plain text.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from .repair import midnight
from .types import Pattern, Resolution, reject

_MERIDIEM = r"[ap](?:\.m\.?|m\b)"
_AT = r"(?:\bat\s+|@\s*)"

TIME_MERIDIEM_RE = re.compile(
    rf"(?:{_AT})?(?<![\d:/.])\b(?P<hour>\d{{1,2}})(?::(?P<minute>\d{{2}}))?\s*(?P<mer>{_MERIDIEM})",
    re.IGNORECASE,
)

TIME_AT_RE = re.compile(
    rf"{_AT}(?P<hour>\d{{1,2}})(?::(?P<minute>\d{{2}}))?\b(?![:/.]?\d)",
    re.IGNORECASE,
)

TIME_WORD_RE = re.compile(r"(?:\bat\s+)?\b(?P<word>noon|midnight)\b", re.IGNORECASE)

TIME_RANGE_RE = re.compile(
    rf"(?P<from>\bfrom\s+)?(?<![\d:/.-])\b"
    rf"(?P<h1>\d{{1,2}})(?::(?P<m1>\d{{2}}))?\s*(?P<mer1>{_MERIDIEM})?\s*"
    r"(?:-|–|\bto\b|\buntil\b|\btill\b)\s*"
    rf"(?P<h2>\d{{1,2}})(?::(?P<m2>\d{{2}}))?\s*(?P<mer2>{_MERIDIEM})?"
    r"(?![\d:/])",
    re.IGNORECASE,
)


def to_24h(hour: int, minute: int, meridiem: str | None) -> tuple[int, int] | None:
    """Clock reading as (hour, minute) in 24h form, or None when out of range."""
    if not 0 <= minute <= 59:
        return None
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        pm = meridiem.lower().startswith("p")
        return (hour % 12) + (12 if pm else 0), minute
    if not 0 <= hour <= 23:
        return None
    return hour, minute


def _minute(tok: str | None) -> int:
    return int(tok) if tok else 0


def _at(now: datetime, hm: tuple[int, int]) -> datetime:
    return midnight(now).replace(hour=hm[0], minute=hm[1])


def _resolve_clock(m: re.Match, now: datetime) -> Resolution:
    mer = m.groupdict().get("mer")
    hm = to_24h(int(m.group("hour")), _minute(m.group("minute")), mer)
    if hm is None:
        return reject("magnitude")
    return Resolution(d=_at(now, hm))


def _resolve_word(m: re.Match, now: datetime) -> Resolution:
    hour = 12 if m.group("word").lower() == "noon" else 0
    return Resolution(d=_at(now, (hour, 0)))


def _opposite(meridiem: str) -> str:
    return "am" if meridiem.lower().startswith("p") else "pm"


def _resolve_range(m: re.Match, now: datetime) -> Resolution:
    h1, h2 = int(m.group("h1")), int(m.group("h2"))
    m1, m2 = _minute(m.group("m1")), _minute(m.group("m2"))
    mer1, mer2 = m.group("mer1"), m.group("mer2")

    # "10-11" alone is more likely a count or a score than a time range.
    if not (m.group("from") or mer1 or mer2 or m.group("m1") or m.group("m2")):
        return reject("context")

    start: tuple[int, int] | None
    end: tuple[int, int] | None
    if mer1 and mer2:
        start, end = to_24h(h1, m1, mer1), to_24h(h2, m2, mer2)
    elif mer2:
        end = to_24h(h2, m2, mer2)
        start = to_24h(h1, m1, mer2)
        if start and end and start > end:
            start = to_24h(h1, m1, _opposite(mer2))
    elif mer1:
        start = to_24h(h1, m1, mer1)
        end = to_24h(h2, m2, mer1)
        if start and end and end <= start:
            end = to_24h(h2, m2, _opposite(mer1))
    else:
        start, end = to_24h(h1, m1, None), to_24h(h2, m2, None)
        if start and end and end <= start and end[0] < 12 and (end[0] + 12, end[1]) > start:
            # "from 9 to 5" is a working day, not an overnight shift
            end = (end[0] + 12, end[1])

    if start is None or end is None:
        return reject("magnitude")

    d0, d1 = _at(now, start), _at(now, end)
    if d1 <= d0:
        if not (mer1 or mer2):
            return reject("context")
        # Runs past midnight ("10pm to 1am").
        d1 += timedelta(days=1)
    return Resolution(d=d0, end=d1)


TIME_PATTERNS: tuple[Pattern, ...] = (
    Pattern("time-range", TIME_RANGE_RE, _resolve_range, has_date=False, has_time=True),
    Pattern("time", TIME_MERIDIEM_RE, _resolve_clock, has_date=False, has_time=True),
    Pattern("time-at", TIME_AT_RE, _resolve_clock, has_date=False, has_time=True),
    Pattern("time-word", TIME_WORD_RE, _resolve_word, has_date=False, has_time=True),
)
