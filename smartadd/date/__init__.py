"""Date/time extraction from free-form event titles.

Pipeline: scan every registered pattern -> drop overlaps (longest wins) ->
join adjacent date + time -> anchor on the last expression -> tokens, clean
title and event times.
"""

from .engine import InputParser, parse
from .types import Candidate, EventData, ParsedDateTime, ParseResult, Resolution, Token
