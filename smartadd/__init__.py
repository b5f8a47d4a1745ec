"""Natural-language quick add: pull the date/time out of an event title."""

from .config import ParserPolicy
from .date import EventData, InputParser, ParsedDateTime, ParseResult, Token, parse
