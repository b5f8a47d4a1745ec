from __future__ import annotations

from ..config import ParserPolicy
from .types import Candidate, EventData, ParsedDateTime


def to_event(anchor: Candidate | None, policy: ParserPolicy, *, fill_end: bool = False) -> EventData:
    """Wrap the anchor's instant with what the text actually specified.

    An explicit range always yields an end. Otherwise an end is only made up
    when fill_end=True:
    - timed start: start + policy.default_duration
    - date-only start: same day, all-day
    """

    if anchor is None or anchor.resolution.d is None:
        return EventData()

    start = ParsedDateTime(anchor.resolution.d, has_date=anchor.has_date, has_time=anchor.has_time)

    if anchor.range_end is not None:
        end = ParsedDateTime(anchor.range_end, has_date=start.has_date, has_time=True)
        return EventData(start=start, end=end)

    if not fill_end:
        return EventData(start=start)

    if start.has_time:
        end = ParsedDateTime(start.instant + policy.default_duration, has_date=start.has_date, has_time=True)
    else:
        end = ParsedDateTime(start.instant, has_date=True, has_time=False)
    return EventData(start=start, end=end)
