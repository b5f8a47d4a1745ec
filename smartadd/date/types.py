from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Literal

TokenKind = Literal["text", "date"]

# magnitude: day/month/hour/minute out of range (after any swap)
# calendar: numbers in range but the day does not exist (2025-02-30)
# context: shape matched but the surroundings say it is not a date/time
RejectReason = Literal["magnitude", "calendar", "context"]


@dataclass(frozen=True)
class Resolution:
    """Outcome of a resolver: a concrete instant, or a rejection with its reason."""

    d: datetime | None
    reason: RejectReason | None = None
    end: datetime | None = None  # only for explicit ranges ("from 10 to 11am")

    @property
    def ok(self) -> bool:
        return self.d is not None


def reject(reason: RejectReason) -> Resolution:
    return Resolution(d=None, reason=reason)


Resolver = Callable[[re.Match, datetime], Resolution]


@dataclass(frozen=True)
class Pattern:
    """One registry entry: a recognizer and the resolver for its matches."""

    name: str
    regex: re.Pattern[str]
    resolve: Resolver
    has_date: bool = True
    has_time: bool = False


@dataclass(frozen=True)
class Candidate:
    """A span matched by one recognizer, with its resolver's verdict."""

    start: int
    end: int
    raw: str
    resolution: Resolution
    pattern: str
    has_date: bool = True
    has_time: bool = False

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def range_end(self) -> datetime | None:
        return self.resolution.end


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    raw: str
    start: int
    end: int


@dataclass(frozen=True)
class ParsedDateTime:
    """A resolved instant plus which parts of it the text actually specified.

    - has_date=False: only the clock part of `instant` is meaningful.
    - has_time=False: only the calendar part of `instant` is meaningful.
    """

    instant: datetime
    has_date: bool
    has_time: bool

    def __post_init__(self) -> None:
        if not (self.has_date or self.has_time):
            raise ValueError("ParsedDateTime needs has_date or has_time")


@dataclass(frozen=True)
class EventData:
    start: ParsedDateTime | None = None
    end: ParsedDateTime | None = None


@dataclass(frozen=True)
class ParseResult:
    tokens: tuple[Token, ...]
    event: EventData = field(default_factory=EventData)
    clean_title: str = ""

    @property
    def anchor(self) -> Token | None:
        for t in self.tokens:
            if t.kind == "date":
                return t
        return None
