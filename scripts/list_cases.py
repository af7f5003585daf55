#!/usr/bin/env python3
"""
Print the registered cases in display order (hearing date, undated last).

Usage:
  python scripts/list_cases.py [--query crim] [--json]
"""
from __future__ import annotations

import argparse
import json
from dataclasses import asdict

from docket.app import build_controller
from docket.core.config import get_settings
from docket.core.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="List registered cases")
    ap.add_argument("--query", default="", help="Filter by case ID, title or parties")
    ap.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    controller = build_controller(settings)
    controller.startup()
    listing = controller.search(args.query)

    if args.json:
        print(json.dumps([asdict(row) for row in listing.rows], ensure_ascii=False, indent=2))
        return
    if listing.is_empty:
        print(listing.empty_message)
        return
    for row in listing.rows:
        print(f"{row.case_id:<16} {row.hearing_date or '-':<12} {row.status:<12} {row.title} | {row.parties}")


if __name__ == "__main__":
    main()
