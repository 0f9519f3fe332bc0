#!/usr/bin/env python3
"""
Voice Code Command Line Tool

Prints the PTI voice pick code for a GTIN, lot and pack date.

Usage:
    python -m pti.cli 61414100734933 32ABCD --date 2001-01-01
    python -m pti.cli 12345678901244 LOT123 --yy 03 --mm 01 --dd 02 --json
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import List, Optional

from pti import config
from pti.voice_code import VoiceCodeValidationError, compute_voice_code, compute_voice_code_for_date

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%Y-%m-%d", "%m/%d/%Y", "%m%d%Y"]


def parse_pack_date(value: str) -> date:
    """
    Parse a pack date given on the command line.

    Accepts 2003-01-02, 01/02/2003 or 01022003.
    """
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(
        f"invalid pack date {value!r}, use YYYY-MM-DD, MM/DD/YYYY or MMDDYYYY"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute the PTI voice pick code for a case label")
    parser.add_argument("gtin", help="GTIN-8, -12, -13 or -14")
    parser.add_argument("lot", help="Lot code (case sensitive)")
    parser.add_argument("--date", type=parse_pack_date, help="Pack date, e.g. 2003-01-02")
    parser.add_argument("--yy", help="Pack date year (1-2 digits)")
    parser.add_argument("--mm", help="Pack date month (1-2 digits)")
    parser.add_argument("--dd", help="Pack date day (1-2 digits)")
    parser.add_argument("--strict-gtin", action="store_true", default=None,
                        help="Only accept 14-digit GTINs (default: PTI_STRICT_GTIN)")
    parser.add_argument("--json", action="store_true", help="Print the full record as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level(), format="%(levelname)s %(name)s: %(message)s")

    parts = (args.yy, args.mm, args.dd)
    if args.date is not None and any(p is not None for p in parts):
        parser.error("use either --date or --yy/--mm/--dd, not both")
    if args.date is None and any(p is None for p in parts):
        parser.error("a pack date is required: --date or all of --yy, --mm and --dd")

    try:
        if args.date is not None:
            record = compute_voice_code_for_date(args.gtin, args.lot, args.date, strict_gtin=args.strict_gtin)
        else:
            record = compute_voice_code(args.gtin, args.lot, args.yy, args.mm, args.dd,
                                        strict_gtin=args.strict_gtin)
    except VoiceCodeValidationError as e:
        logger.debug(f"Rejected {e.field}: {e.value!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(record.model_dump(), indent=2))
    else:
        print(f"Voice Code: {record.voice_code} "
              f"(major {record.voice_code_major}, minor {record.voice_code_minor})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
