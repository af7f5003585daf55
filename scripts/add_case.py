#!/usr/bin/env python3
"""
Register a case directly in the storage file used by the web app.

Usage:
  python scripts/add_case.py --case-id CRIM-01 [--title "..."] [--parties "..."]
                             [--status Filed] [--hearing-date 2024-05-01]
"""
from __future__ import annotations

import argparse
import sys

from docket.app import build_controller
from docket.core.config import get_settings
from docket.core.logging import configure_logging
from docket.domain.cases import KNOWN_STATUSES, STATUS_FILED, normalize_case_id


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Register a judiciary case")
    ap.add_argument("--case-id", required=True, help="Case ID (stored upper-cased)")
    ap.add_argument("--title", default="", help="Case title")
    ap.add_argument("--parties", default="", help="Parties involved")
    ap.add_argument("--status", default=STATUS_FILED, help=f"One of: {', '.join(KNOWN_STATUSES)}")
    ap.add_argument("--hearing-date", default="", help="Hearing date (YYYY-MM-DD)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    controller = build_controller(settings)
    controller.startup()
    notice = controller.register_case(
        args.case_id, args.title, args.parties, args.status, args.hearing_date
    )
    print(f"OK: {notice.message}")
    print(f"  Case ID: {normalize_case_id(args.case_id)}")
    print(f"  Storage: {settings.storage_path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"{exc}\n")
        raise SystemExit(1)
