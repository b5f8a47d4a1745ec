from __future__ import annotations

from datetime import datetime

from ..config import ParserPolicy
from ..logger import get_logger
from .parsers import scan_candidates
from .select import join_adjacent, pick_anchor, resolve_overlaps
from .semantics import to_event
from .tokens import build_tokens, clean_title
from .types import ParseResult

log = get_logger(__name__)


class InputParser:
    """Turns a typed event title into tokens, event times and a clean title.

    Stateless apart from its policy: the same instance can be shared freely.
    """

    def __init__(self, policy: ParserPolicy | None = None) -> None:
        self.policy = policy or ParserPolicy()

    def parse(self, text: str, now: datetime | None = None, *, fill_end: bool = False) -> ParseResult:
        now = now or datetime.now()

        cands = resolve_overlaps(scan_candidates(text, now))
        if self.policy.join_date_time:
            cands = join_adjacent(text, cands)
        anchor = pick_anchor(cands)

        tokens = build_tokens(text, anchor)
        event = to_event(anchor, self.policy, fill_end=fill_end)
        title = clean_title(tokens)

        if anchor is None:
            log.debug("no date in %r", text)
        return ParseResult(tokens=tokens, event=event, clean_title=title)


def parse(
    text: str,
    now: datetime | None = None,
    *,
    fill_end: bool = False,
    policy: ParserPolicy | None = None,
) -> ParseResult:
    """Parse with a one-off InputParser (default policy unless given)."""
    return InputParser(policy).parse(text, now, fill_end=fill_end)
