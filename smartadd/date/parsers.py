from __future__ import annotations

import re
from datetime import datetime, timedelta

from ..logger import get_logger
from .lexicon import (
    MONTH_PATTERN,
    ORDINAL_WORD_PATTERN,
    WEEKDAY_PATTERN,
    day_token_to_int,
    month_to_int,
    weekday_to_int,
)
from .repair import (
    build_date,
    expand_year,
    midnight,
    nearest_year,
    next_weekday,
    plausible_year,
    resolve_month_day,
    swap_month_day,
)
from .times import TIME_PATTERNS
from .types import Candidate, Pattern, Resolution, reject

log = get_logger(__name__)

RELATIVE_DAYS = {
    "today": 0,
    "tod": 0,
    "tomorrow": 1,
    "tom": 1,
    "yesterday": -1,
}

RELATIVE_RE = re.compile(r"\b(?P<word>today|tod|tomorrow|tom|yesterday)\b", re.IGNORECASE)

WEEKDAY_RE = re.compile(rf"\b(?P<dow>{WEEKDAY_PATTERN})\b\.?", re.IGNORECASE)

ISO_RE = re.compile(r"\b(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})\b")

SLASH_YEAR_RE = re.compile(
    r"(?<![\d/])\b(?P<first>\d{1,2})/(?P<second>\d{1,2})/(?P<year>\d{4}|\d{2})\b(?!/)",
)

SLASH_RE = re.compile(r"(?<![\d/])\b(?P<first>\d{1,2})/(?P<second>\d{1,2})\b(?![/\d])")

# Day of month: "27", "27th", "twenty-seventh"
_DAY = rf"(?:\d{{1,2}}(?:st|nd|rd|th)?(?!\d)|(?:{ORDINAL_WORD_PATTERN})\b)"
# Explicit year: "2025", "'25", or a bare "25" that ends the phrase ("jan 27 25", "jan 27, 25.")
_YEAR = r"(?:\d{4}|'\d{2}|\d{2}(?=\s*(?:$|[.,;!?)\]](?!\d))))"
# What a day number must not be followed by: "jan 12:00", "jan 12pm", "jan 12 a.m.",
# and the start of a clock range ("jan 5-6pm", where 5 is an hour)
CLOCK_SUFFIX = r"\s*(?:[ap](?:\.m|m\b)|:\d|[-–]\s*\d{1,2}(?::\d{2})?\s*[ap](?:\.m|m\b))"

_MONTH_DAY = rf"\b(?P<month>{MONTH_PATTERN})\b\.?\s+(?:the\s+)?(?P<day>{_DAY})(?!{CLOCK_SUFFIX})"
_DAY_MONTH = rf"(?<![:\d])\b(?P<day>{_DAY})\s+(?:of\s+)?(?P<month>{MONTH_PATTERN})\b\.?"
_WITH_YEAR = rf"\s*,?\s*(?P<year>{_YEAR})\b(?!{CLOCK_SUFFIX})"

# Year-less and with-year shapes are separate recognizers so that a rejected
# year ("jan 27 1530") still leaves the plain "jan 27" match standing.
MONTH_DAY_RE = re.compile(_MONTH_DAY, re.IGNORECASE)
MONTH_DAY_YEAR_RE = re.compile(_MONTH_DAY + _WITH_YEAR, re.IGNORECASE)
DAY_MONTH_RE = re.compile(_DAY_MONTH, re.IGNORECASE)
DAY_MONTH_YEAR_RE = re.compile(_DAY_MONTH + _WITH_YEAR, re.IGNORECASE)


def _resolve_relative(m: re.Match, now: datetime) -> Resolution:
    offset = RELATIVE_DAYS[m.group("word").lower()]
    return Resolution(d=midnight(now) + timedelta(days=offset))


def _resolve_weekday(m: re.Match, now: datetime) -> Resolution:
    want = weekday_to_int(m.group("dow"))
    if want is None:
        return reject("context")
    return Resolution(d=next_weekday(want, now))


def _resolve_iso(m: re.Match, now: datetime) -> Resolution:
    # ISO order is unambiguous: no swapping, anything impossible is rejected.
    return build_date(int(m.group("year")), int(m.group("month")), int(m.group("day")))


def _resolve_slash_year(m: re.Match, now: datetime) -> Resolution:
    md = swap_month_day(int(m.group("first")), int(m.group("second")))
    if md is None:
        return reject("magnitude")
    month, day = md
    return build_date(expand_year(int(m.group("year")), now), month, day)


def _resolve_slash(m: re.Match, now: datetime) -> Resolution:
    md = swap_month_day(int(m.group("first")), int(m.group("second")))
    if md is None:
        return reject("magnitude")
    month, day = md
    return nearest_year(month, day, now)


def _year_token(tok: str | None) -> int | None:
    if not tok:
        return None
    return int(tok.lstrip("'"))


def _resolve_named_month(m: re.Match, now: datetime) -> Resolution:
    month = month_to_int(m.group("month"))
    day = day_token_to_int(m.group("day"))
    if month is None or day is None:
        return reject("context")
    year = _year_token(m.groupdict().get("year"))
    if year is not None and not plausible_year(year, now):
        # "jan 27 1530" is a day and a clock, not the year 1530
        return reject("context")
    return resolve_month_day(month, day, year, now)


# Order decides which resolver runs on a raw match, not which match wins.
PATTERNS: tuple[Pattern, ...] = (
    Pattern("relative-day", RELATIVE_RE, _resolve_relative),
    Pattern("weekday", WEEKDAY_RE, _resolve_weekday),
    Pattern("iso-date", ISO_RE, _resolve_iso),
    Pattern("slash-date-year", SLASH_YEAR_RE, _resolve_slash_year),
    Pattern("slash-date", SLASH_RE, _resolve_slash),
    Pattern("month-day", MONTH_DAY_RE, _resolve_named_month),
    Pattern("month-day-year", MONTH_DAY_YEAR_RE, _resolve_named_month),
    Pattern("day-month", DAY_MONTH_RE, _resolve_named_month),
    Pattern("day-month-year", DAY_MONTH_YEAR_RE, _resolve_named_month),
) + TIME_PATTERNS


def scan_candidates(
    text: str,
    now: datetime,
    *,
    patterns: tuple[Pattern, ...] = PATTERNS,
    include_rejected: bool = False,
) -> list[Candidate]:
    """Run every recognizer over `text` and resolve each raw match.

    Rejected matches are dropped unless include_rejected=True (useful to see why
    something did not parse).
    """

    out: list[Candidate] = []
    for p in patterns:
        for m in p.regex.finditer(text):
            res = p.resolve(m, now)
            if not res.ok:
                log.debug("rejected %s %r (%s)", p.name, m.group(0), res.reason)
                if not include_rejected:
                    continue
            out.append(
                Candidate(
                    start=m.start(),
                    end=m.end(),
                    raw=m.group(0),
                    resolution=res,
                    pattern=p.name,
                    has_date=p.has_date,
                    has_time=p.has_time,
                )
            )
    return out
