# table_extract/__init__.py
# Re-export the public API for convenience.

from .document import parse_html
from .table import Headers, Row, Table, find_all, find_by_headers, find_by_id, find_first, find_table

__all__ = [
    "parse_html",
    "Headers",
    "Row",
    "Table",
    "find_first",
    "find_by_id",
    "find_by_headers",
    "find_all",
    "find_table",
]
