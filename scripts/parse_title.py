#!/usr/bin/env python3
"""Parse event titles and show what the quick-add parser pulls out.

Usage:
  python3 scripts/parse_title.py "Team standup tomorrow at 10am"
  python3 scripts/parse_title.py --now 2025-01-20T09:30 --fill-end "Dinner fri 7pm"
  python3 scripts/parse_title.py --in titles.txt --json > parsed.jsonl
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime
from pathlib import Path

from smartadd import ParserPolicy, ParseResult, parse
from smartadd.fields import form_fields
from smartadd.logger import configure_logging


def _parse_now(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise SystemExit(f"--now must be an ISO date/time (e.g. 2025-01-20T09:30), got: {raw}") from None


def result_to_dict(text: str, res: ParseResult) -> dict[str, object]:
    def pdt(p):
        if p is None:
            return None
        return {"instant": p.instant.isoformat(), "has_date": p.has_date, "has_time": p.has_time}

    return {
        "text": text,
        "clean_title": res.clean_title,
        "tokens": [{"kind": t.kind, "raw": t.raw, "start": t.start, "end": t.end} for t in res.tokens],
        "start": pdt(res.event.start),
        "end": pdt(res.event.end),
        "fields": form_fields(res.event),
    }


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("text", nargs="*", help="Title text (joined with spaces).")
    ap.add_argument("--in", dest="inp", default=None, help="File with one title per line.")
    ap.add_argument("--now", default=None, help="Reference time (ISO); defaults to the current time.")
    ap.add_argument("--fill-end", action="store_true", help="Make up an end when the title has none.")
    ap.add_argument("--json", action="store_true", help="One JSON object per title.")
    ap.add_argument("--log-level", default=None)
    args = ap.parse_args()

    configure_logging(args.log_level)
    policy = ParserPolicy.from_env()
    now = _parse_now(args.now)

    titles: list[str] = []
    if args.inp:
        raw = Path(args.inp).read_text(encoding="utf-8", errors="replace")
        titles.extend(ln for ln in raw.splitlines() if ln.strip())
    if args.text:
        titles.append(" ".join(args.text))
    if not titles:
        raise SystemExit("No input")

    for text in titles:
        res = parse(text, now, fill_end=args.fill_end, policy=policy)
        if args.json:
            print(json.dumps(result_to_dict(text, res), ensure_ascii=False))
            continue

        anchor = res.anchor
        print(f"{text}")
        print(f"  title: {res.clean_title}")
        if anchor is None:
            print("  date:  (none)")
            continue
        print(f"  date:  {anchor.raw!r} [{anchor.start}:{anchor.end}]")
        for k, v in form_fields(res.event).items():
            print(f"  {k}: {v}")


if __name__ == "__main__":
    main()
