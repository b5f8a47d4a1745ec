from __future__ import annotations

from datetime import datetime, timedelta

from .types import Resolution, reject


def midnight(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def build_date(year: int, month: int, day: int) -> Resolution:
    """Midnight of the given calendar day, or a `calendar` rejection if it does not exist."""
    try:
        return Resolution(d=datetime(year, month, day))
    except ValueError:
        return reject("calendar")


def swap_month_day(first: int, second: int, *, month_first: bool = True) -> tuple[int, int] | None:
    """Return (month, day) for an ambiguous numeric pair, or None if no reading works.

    The nominal order is kept unless the nominal month cannot be a month
    (> 12); then the two are swapped when the nominal day fits as a month.
    `13/5` reads as the 13th of May.
    """

    month, day = (first, second) if month_first else (second, first)
    if month > 12:
        if day > 12 or month > 31:
            return None
        month, day = day, month
    if not (1 <= month <= 12 and 1 <= day <= 31):
        return None
    return month, day


def expand_year(year: int, now: datetime) -> int:
    """Map a 2-digit year to whichever century puts it closest to `now`.

    Only the current and the previous century are considered; ties go to the
    current century. Years >= 100 are returned unchanged.
    """

    if year >= 100:
        return year
    century = (now.year // 100) * 100
    current = century + year
    previous = century - 100 + year
    if abs(previous - now.year) < abs(current - now.year):
        return previous
    return current


def nearest_year(month: int, day: int, now: datetime) -> Resolution:
    """Complete a year-less day/month with the year that lands closest to `now`.

    Checks now.year, then now.year + 1, then now.year - 1; the first of equally
    close candidates wins. Years where the day does not exist (Feb 29) are skipped.
    """

    best: tuple[timedelta, datetime] | None = None
    for y in (now.year, now.year + 1, now.year - 1):
        r = build_date(y, month, day)
        if r.d is None:
            continue
        dist = abs(r.d - now)
        if best is None or dist < best[0]:
            best = (dist, r.d)
    if best is None:
        return reject("calendar")
    return Resolution(d=best[1])


def plausible_year(year: int, now: datetime, *, window: int = 100) -> bool:
    """True for 2-digit years and for 4-digit years within `window` years of `now`."""
    if year < 100:
        return True
    return abs(year - now.year) <= window


def next_weekday(target: int, now: datetime) -> datetime:
    """Next date falling on `target` (Monday=0); today counts if it already matches."""
    delta = (target - now.weekday()) % 7
    return midnight(now) + timedelta(days=delta)


def resolve_month_day(month: int, day: int, year: int | None, now: datetime) -> Resolution:
    """Shared tail of every day/month resolver: range check, then year handling."""

    if not (1 <= month <= 12 and 1 <= day <= 31):
        return reject("magnitude")
    if year is None:
        return nearest_year(month, day, now)
    return build_date(expand_year(year, now), month, day)
