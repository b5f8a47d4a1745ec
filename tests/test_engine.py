from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from smartadd import InputParser, ParserPolicy, parse
from smartadd.date.types import ParsedDateTime

# Monday
NOW = datetime(2025, 1, 20, 9, 30)

SAMPLES = [
    "",
    "Regular meeting notes",
    "Team standup tomorrow",
    "tomorrow Team standup",
    "Meeting jan 27 with John",
    "  Lunch   with  Sam  fri  at noon ",
    "Meeting jan 27 with John born in jan",
    "Release notes due 13/5/2025",
    "Sync from 10 to 11 AM tomorrow",
    "Meeting jan 12:00",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_tokens_reassemble_input(text: str) -> None:
    res = parse(text, NOW)
    assert "".join(t.raw for t in res.tokens) == text
    pos = 0
    for t in res.tokens:
        assert t.start == pos
        assert text[t.start : t.end] == t.raw
        pos = t.end
    assert pos == len(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_at_most_one_date_token(text: str) -> None:
    res = parse(text, NOW)
    assert sum(1 for t in res.tokens if t.kind == "date") <= 1


@pytest.mark.parametrize("text", SAMPLES)
def test_clean_title_has_no_date_left(text: str) -> None:
    res = parse(text, NOW)
    if res.anchor is not None:
        assert res.anchor.raw not in res.clean_title
        assert parse(res.clean_title, NOW).anchor is None


def test_relative_days() -> None:
    assert parse("Meeting today", NOW).event.start.instant == datetime(2025, 1, 20)
    assert parse("Meeting tomorrow", NOW).event.start.instant == datetime(2025, 1, 21)
    assert parse("Meeting yesterday", NOW).event.start.instant == datetime(2025, 1, 19)
    assert parse("Meeting today", NOW).clean_title == "Meeting"


@pytest.mark.parametrize(
    "name,weekday",
    [
        ("monday", 0),
        ("tue", 1),
        ("wednesday", 2),
        ("thu", 3),
        ("friday", 4),
        ("sat", 5),
        ("sunday", 6),
    ],
)
def test_weekdays(name: str, weekday: int) -> None:
    start = parse(f"Meeting {name}", NOW).event.start
    assert start.instant.weekday() == weekday
    assert timedelta(0) <= start.instant - datetime(2025, 1, 20) < timedelta(days=7)
    assert start.has_date and not start.has_time


def test_weekday_today_is_not_pushed_a_week() -> None:
    assert parse("Meeting monday", NOW).event.start.instant == datetime(2025, 1, 20)


def test_numeric_formats() -> None:
    assert parse("Meeting 2025-01-27", NOW).event.start.instant == datetime(2025, 1, 27)
    assert parse("Meeting 01/27/2025", NOW).event.start.instant == datetime(2025, 1, 27)
    assert parse("Meeting 01/27/25", NOW).event.start.instant == datetime(2025, 1, 27)
    assert parse("Meeting 2025-01-27", NOW).clean_title == "Meeting"


def test_day_month_swap() -> None:
    start = parse("Meeting 13/5/2025", NOW).event.start
    assert (start.instant.month, start.instant.day) == (5, 13)


@pytest.mark.parametrize("now", [NOW, datetime(2031, 6, 1), datetime(2099, 12, 31)])
def test_two_digit_year_is_reference_year(now: datetime) -> None:
    res = parse(f"Meeting 01/15/{now.year % 100:02d}", now)
    assert res.event.start.instant.year == now.year


def test_month_names() -> None:
    for i, name in enumerate(["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]):
        start = parse(f"Meeting {name} 15", NOW).event.start
        assert start.instant.month == i + 1
        assert start.instant.day == 15


def test_month_day_with_year_prefers_full_span() -> None:
    res = parse("Meeting jan 27 2026", NOW)
    assert res.anchor.raw == "jan 27 2026"
    assert res.event.start.instant == datetime(2026, 1, 27)
    assert res.clean_title == "Meeting"


def test_bare_two_digit_year_after_month_day() -> None:
    for text in ["Meeting jan 27 26", "Meeting jan 27, 26"]:
        res = parse(text, NOW)
        assert res.event.start.instant == datetime(2026, 1, 27), text
        assert res.clean_title == "Meeting", text

    res = parse("Meeting jan 27 10 people", NOW)
    assert res.event.start.instant == datetime(2025, 1, 27)
    assert res.clean_title == "Meeting 10 people"


def test_four_digit_number_far_from_now_is_not_a_year() -> None:
    res = parse("Meeting jan 27 1530", NOW)
    assert res.anchor.raw == "jan 27"
    assert res.event.start.instant == datetime(2025, 1, 27)
    assert res.clean_title == "Meeting 1530"


def test_clock_suffix_is_not_a_date() -> None:
    res = parse("Meeting jan 12:00", NOW)
    assert res.anchor is None
    assert res.event.start is None
    assert res.clean_title == "Meeting jan 12:00"


def test_clean_title_examples() -> None:
    assert parse("Team standup tomorrow", NOW).clean_title == "Team standup"
    assert parse("Meeting jan 27 with John", NOW).clean_title == "Meeting with John"
    assert parse("tomorrow Team standup", NOW).clean_title == "Team standup"


def test_no_match_passthrough() -> None:
    res = parse("Regular meeting notes", NOW)
    assert res.event.start is None
    assert res.event.end is None
    assert res.clean_title == "Regular meeting notes"
    assert [t.kind for t in res.tokens] == ["text"]


def test_no_match_normalizes_whitespace() -> None:
    assert parse("  Regular   meeting\tnotes ", NOW).clean_title == "Regular meeting notes"


def test_empty_input() -> None:
    res = parse("", NOW)
    assert res.tokens == ()
    assert res.clean_title == ""


def test_tokens_for_date_at_end_and_middle() -> None:
    res = parse("Meeting tomorrow", NOW)
    assert [(t.kind, t.raw) for t in res.tokens] == [("text", "Meeting "), ("date", "tomorrow")]

    res = parse("Call jan 27 with Bob", NOW)
    assert [t.kind for t in res.tokens] == ["text", "date", "text"]
    assert res.tokens[1].raw == "jan 27"


def test_last_expression_is_the_anchor() -> None:
    res = parse("Move 2025-03-04 review to fri", NOW)
    assert res.anchor.raw == "fri"
    assert res.clean_title == "Move 2025-03-04 review to"


def test_date_and_time() -> None:
    start = parse("Meeting tomorrow at 3pm", NOW).event.start
    assert start.has_date and start.has_time
    assert start.instant == datetime(2025, 1, 21, 15, 0)
    assert parse("Meeting tomorrow at 3pm", NOW).clean_title == "Meeting"


def test_time_only() -> None:
    start = parse("Meeting at 3pm", NOW).event.start
    assert start.has_time
    assert not start.has_date
    assert start.instant.hour == 15


def test_explicit_range() -> None:
    ev = parse("Meeting tomorrow from 10 to 11 AM", NOW).event
    assert ev.start.instant == datetime(2025, 1, 21, 10, 0)
    assert ev.end.instant == datetime(2025, 1, 21, 11, 0)
    assert ev.end.has_date and ev.end.has_time


def test_range_without_meridiem_reads_end_as_afternoon() -> None:
    ev = parse("Work from 9 to 5", NOW).event
    assert ev.start.instant == datetime(2025, 1, 20, 9, 0)
    assert ev.end.instant == datetime(2025, 1, 20, 17, 0)


def test_clock_range_after_month_name() -> None:
    res = parse("Meeting jan 5-6pm", NOW)
    assert res.anchor.raw == "5-6pm"
    assert res.event.start.instant == datetime(2025, 1, 20, 17, 0)
    assert res.event.end.instant == datetime(2025, 1, 20, 18, 0)
    assert res.clean_title == "Meeting jan"


def test_date_only_has_no_end_unless_asked() -> None:
    ev = parse("Meeting tomorrow", NOW).event
    assert ev.start.has_date and not ev.start.has_time
    assert ev.end is None


def test_fill_end_defaults() -> None:
    ev = parse("Meeting tomorrow at 3pm", NOW, fill_end=True).event
    assert ev.end.instant == datetime(2025, 1, 21, 16, 0)
    assert ev.end.has_date and ev.end.has_time

    ev = parse("Meeting at 3pm", NOW, fill_end=True).event
    assert ev.end.instant == datetime(2025, 1, 20, 16, 0)
    assert not ev.end.has_date

    ev = parse("Offsite jan 27", NOW, fill_end=True).event
    assert ev.end.instant == ev.start.instant
    assert ev.end.has_date and not ev.end.has_time

    assert parse("Regular meeting notes", NOW, fill_end=True).event.end is None


def test_policy_duration_and_join() -> None:
    p = InputParser(ParserPolicy(default_duration_minutes=30))
    ev = p.parse("Call fri 9am", NOW, fill_end=True).event
    assert ev.start.instant == datetime(2025, 1, 24, 9, 0)
    assert ev.end.instant == datetime(2025, 1, 24, 9, 30)

    res = parse("Meeting tomorrow at 3pm", NOW, policy=ParserPolicy(join_date_time=False))
    assert res.anchor.raw == "at 3pm"
    assert res.clean_title == "Meeting tomorrow"
    assert not res.event.start.has_date


def test_parsed_datetime_needs_a_component() -> None:
    with pytest.raises(ValueError):
        ParsedDateTime(NOW, has_date=False, has_time=False)


def test_parser_default_now_is_used() -> None:
    res = InputParser().parse("Meeting today")
    assert res.event.start.instant.date() == datetime.now().date()
