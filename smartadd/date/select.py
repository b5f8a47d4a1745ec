from __future__ import annotations

import re
from datetime import datetime

from ..logger import get_logger
from .types import Candidate, Resolution

log = get_logger(__name__)

# What may sit between a date and a time that belong together:
# "tomorrow at 3pm", "jan 27, 10am", "3pm on friday", "fri @ 9am"
_JOIN_GAP_RE = re.compile(r"[\s,]*(?:(?:at|on)\b[\s,]*|@\s*)?", re.IGNORECASE)


def resolve_overlaps(cands: list[Candidate]) -> list[Candidate]:
    """Keep a non-overlapping subset, preferring the longest match at each start.

    Result is ordered by position.
    """

    ordered = sorted(cands, key=lambda c: (c.start, -c.length))
    kept: list[Candidate] = []
    cursor = 0
    for c in ordered:
        if c.start < cursor:
            continue
        kept.append(c)
        cursor = c.end
    return kept


def _combine(day: datetime, clock: datetime) -> datetime:
    return day.replace(hour=clock.hour, minute=clock.minute, second=0, microsecond=0)


def _join(text: str, date_c: Candidate, time_c: Candidate) -> Candidate:
    first, last = (date_c, time_c) if date_c.start < time_c.start else (time_c, date_c)

    start = _combine(date_c.resolution.d, time_c.resolution.d)
    end = None
    if time_c.range_end is not None:
        end = start + (time_c.range_end - time_c.resolution.d)

    return Candidate(
        start=first.start,
        end=last.end,
        raw=text[first.start : last.end],
        resolution=Resolution(d=start, end=end),
        pattern=f"{first.pattern}+{last.pattern}",
        has_date=True,
        has_time=True,
    )


def _is_date_only(c: Candidate) -> bool:
    return c.has_date and not c.has_time


def _is_time_only(c: Candidate) -> bool:
    return c.has_time and not c.has_date


def join_adjacent(text: str, cands: list[Candidate]) -> list[Candidate]:
    """Merge neighbouring date-only and time-only candidates into one expression.

    Expects the position-ordered, non-overlapping output of resolve_overlaps.
    """

    out: list[Candidate] = []
    for c in cands:
        if out:
            prev = out[-1]
            pair = (_is_date_only(prev) and _is_time_only(c)) or (_is_time_only(prev) and _is_date_only(c))
            if pair and _JOIN_GAP_RE.fullmatch(text, prev.end, c.start):
                date_c, time_c = (prev, c) if _is_date_only(prev) else (c, prev)
                out[-1] = _join(text, date_c, time_c)
                continue
        out.append(c)
    return out


def pick_anchor(cands: list[Candidate]) -> Candidate | None:
    """The expression that appears last in the text drives the event."""

    if not cands:
        return None
    anchor = max(cands, key=lambda c: c.start)
    log.debug("anchor %s %r at %d", anchor.pattern, anchor.raw, anchor.start)
    return anchor
