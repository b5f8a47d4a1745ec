from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ParserPolicy:
    """Controls optional parser behaviour.

    - default_duration_minutes: length of a timed event when the text gives a
      start but no end and the caller asks for one.
    - join_date_time: merge "tomorrow" + "at 3pm" into one expression.
    """

    default_duration_minutes: int = 60
    join_date_time: bool = True

    @property
    def default_duration(self) -> timedelta:
        return timedelta(minutes=self.default_duration_minutes)

    @classmethod
    def from_env(cls) -> "ParserPolicy":
        load_dotenv(find_dotenv(usecwd=True))
        kwargs: dict[str, object] = {}

        raw = os.environ.get("SMARTADD_DEFAULT_DURATION_MINUTES", "").strip()
        if raw:
            try:
                minutes = int(raw)
            except ValueError:
                raise RuntimeError(f"SMARTADD_DEFAULT_DURATION_MINUTES must be an integer, got {raw!r}") from None
            if minutes <= 0:
                raise RuntimeError(f"SMARTADD_DEFAULT_DURATION_MINUTES must be positive, got {minutes}")
            kwargs["default_duration_minutes"] = minutes

        raw = os.environ.get("SMARTADD_JOIN_DATE_TIME", "").strip().lower()
        if raw:
            if raw not in _TRUE | _FALSE:
                raise RuntimeError(f"SMARTADD_JOIN_DATE_TIME must be a boolean, got {raw!r}")
            kwargs["join_date_time"] = raw in _TRUE

        return cls(**kwargs)  # type: ignore[arg-type]
