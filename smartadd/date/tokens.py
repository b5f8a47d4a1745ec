from __future__ import annotations

from .types import Candidate, Token


def build_tokens(text: str, anchor: Candidate | None) -> tuple[Token, ...]:
    """Split `text` into text/date tokens around the anchor.

    Joining every token's `raw` gives back `text` exactly.
    """

    if anchor is None:
        return (Token("text", text, 0, len(text)),) if text else ()

    tokens: list[Token] = []
    if anchor.start > 0:
        tokens.append(Token("text", text[: anchor.start], 0, anchor.start))
    tokens.append(Token("date", text[anchor.start : anchor.end], anchor.start, anchor.end))
    if anchor.end < len(text):
        tokens.append(Token("text", text[anchor.end :], anchor.end, len(text)))
    return tuple(tokens)


def clean_title(tokens: tuple[Token, ...]) -> str:
    """Text tokens only, with runs of whitespace collapsed to one space."""
    parts = [" ".join(t.raw.split()) for t in tokens if t.kind == "text"]
    return " ".join(p for p in parts if p)
