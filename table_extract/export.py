# table_extract/export.py
# Render a Table as plain Python structures or CSV.

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List

from .table import Table


def header_names(table: Table) -> List[str]:
    """
    Header row laid out by column position. A position no header claims (e.g. the
    earlier of two duplicate names) is left as "".
    """
    headers = table.headers
    if not headers:
        return []
    names = [""] * (max(headers.values()) + 1)
    for name, i in headers.items():
        names[i] = name
    return names


def to_records(table: Table) -> List[Dict[str, str]]:
    """One dict per row, keyed by header. Cells past the header row are dropped."""
    return [row.to_dict() for row in table]


def to_payload(table: Table) -> Dict[str, Any]:
    """JSON-serializable view of the table."""
    return {
        "headers": dict(table.headers),
        "rows": [list(row) for row in table],
        "records": to_records(table),
    }


def write_csv(table: Table, csv_out: str) -> Dict[str, Any]:
    """
    Write the table to CSV: the header row first (if any), then every data row as-is.
    Returns meta info with row count and output path.
    """
    out = Path(csv_out)
    out.parent.mkdir(parents=True, exist_ok=True)

    with out.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        names = header_names(table)
        if names:
            writer.writerow(names)
        for row in table:
            writer.writerow(row.as_slice())

    return {"ok": True, "rows": len(table), "file": str(out)}
