from __future__ import annotations

import re

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

# Abbreviations accepted on top of the full names.
MONTH_ABBREVIATIONS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Python weekday numbering: Monday=0 .. Sunday=6
WEEKDAYS = {
    "monday": 0,
    "mon": 0,
    "tuesday": 1,
    "tues": 1,
    "tue": 1,
    "wednesday": 2,
    "wed": 2,
    "thursday": 3,
    "thurs": 3,
    "thur": 3,
    "thu": 3,
    "friday": 4,
    "fri": 4,
    "saturday": 5,
    "sat": 5,
    "sunday": 6,
    "sun": 6,
}

_ORDINAL_UNITS = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "sixth": 6,
    "seventh": 7,
    "eighth": 8,
    "ninth": 9,
}

_ORDINAL_TEENS = {
    "tenth": 10,
    "eleventh": 11,
    "twelfth": 12,
    "thirteenth": 13,
    "fourteenth": 14,
    "fifteenth": 15,
    "sixteenth": 16,
    "seventeenth": 17,
    "eighteenth": 18,
    "nineteenth": 19,
}


def _build_ordinals() -> dict[str, int]:
    out: dict[str, int] = {}
    out.update(_ORDINAL_UNITS)
    out.update(_ORDINAL_TEENS)
    out["twentieth"] = 20
    out["thirtieth"] = 30
    for word, n in _ORDINAL_UNITS.items():
        out[f"twenty-{word}"] = 20 + n
    out["thirty-first"] = 31
    return out


ORDINAL_WORDS = _build_ordinals()


def _alternation(words: list[str]) -> str:
    # Longest first so "tues" wins over "tue", "twenty-first" over "twenty".
    return "|".join(sorted(words, key=len, reverse=True))


MONTH_PATTERN = _alternation(list(MONTHS) + list(MONTH_ABBREVIATIONS))
WEEKDAY_PATTERN = _alternation(list(WEEKDAYS))
# Compound ordinals may be written "twenty-seventh" or "twenty seventh".
ORDINAL_WORD_PATTERN = _alternation([w.replace("-", r"[\s-]") for w in ORDINAL_WORDS])


def month_to_int(tok: str) -> int | None:
    tok = tok.strip().lower().rstrip(".")
    if not tok:
        return None
    return MONTHS.get(tok) or MONTH_ABBREVIATIONS.get(tok)


def weekday_to_int(tok: str) -> int | None:
    return WEEKDAYS.get(tok.strip().lower())


def ordinal_word_to_int(tok: str) -> int | None:
    key = re.sub(r"[\s-]+", "-", tok.strip().lower())
    return ORDINAL_WORDS.get(key)


def day_token_to_int(tok: str) -> int | None:
    """Day of month from "27", "27th" or "twenty-seventh" (no range check)."""

    tok = tok.strip().lower()
    m = re.fullmatch(r"(\d{1,2})(?:st|nd|rd|th)?", tok)
    if m:
        return int(m.group(1))
    return ordinal_word_to_int(tok)
