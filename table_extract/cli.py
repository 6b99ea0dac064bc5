# table_extract/cli.py
# Command-line wrapper:
#   python -m table_extract --file page.html --headers Name Age
#   python -m table_extract --file page.html --id prices --csv-out outputs/prices.csv

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .export import to_payload, write_csv
from .settings import get_settings
from .table import find_all, find_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="table_extract", description="Extract a table from saved HTML.")
    parser.add_argument("--file", required=True, help="Path to a saved HTML file")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--id", help="Select the table with this id")
    group.add_argument("--headers", nargs="+", help="Select the first table whose header row has all these names")
    group.add_argument("--all", action="store_true", help="Print every table in the document")
    parser.add_argument("--csv-out", help="Write the table to this CSV path instead of printing JSON")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_settings().LOG_LEVEL).upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    html = Path(args.file).read_text(encoding="utf-8")

    if args.all:
        if args.csv_out:
            print("--csv-out cannot be combined with --all", file=sys.stderr)
            return 2
        tables = find_all(html)
        print(json.dumps([to_payload(t) for t in tables], ensure_ascii=False))
        return 0

    table = find_table(html, id=args.id, headers=args.headers or ())
    if table is None:
        print("No matching table found", file=sys.stderr)
        return 1

    if args.csv_out:
        res = write_csv(table, args.csv_out)
        print(json.dumps(res, ensure_ascii=False))
    else:
        print(json.dumps(to_payload(table), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
