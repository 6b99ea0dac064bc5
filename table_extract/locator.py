# table_extract/locator.py
# Pick a single <table> element out of a parsed document or subtree.

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from . import document

logger = logging.getLogger(__name__)


def iter_table_elements(root: Tag) -> Iterator[Tag]:
    """All <table> elements under root, lazily, in document order."""
    return document.iter_select(root, "table")


def find_first_element(root: Tag) -> Optional[Tag]:
    return next(iter_table_elements(root), None)


def find_element_by_id(root: Tag, id: str) -> Optional[Tag]:
    """
    Return the first table#id under root, or None.
    The id is CSS-escaped; a selector that still fails to compile (e.g. an empty id)
    counts as no match.
    """
    selector = f"table#{root.css.escape(id)}"
    try:
        return next(document.iter_select(root, selector), None)
    except SelectorSyntaxError as e:
        logger.debug("Selector %r did not compile: %s", selector, e)
        return None


def header_cells(table: Tag) -> set:
    """Set of <th> texts in the table's first row (empty if there is no row)."""
    tr = document.first_row(table)
    if tr is None:
        return set()
    return set(document.cell_texts(tr, "th"))


def find_element_by_headers(root: Tag, headers: Iterable[str]) -> Optional[Tag]:
    """
    Return the first table whose first row has <th> cells covering every name in
    `headers`. Order and repeats in `headers` don't matter. Empty `headers` means
    the first table.
    """
    # a bare string is one header name, not a set of characters
    required = {headers} if isinstance(headers, str) else set(headers)
    if not required:
        return find_first_element(root)

    for i, table in enumerate(iter_table_elements(root)):
        if required <= header_cells(table):
            logger.debug("Table #%d matches headers %s", i, sorted(required))
            return table
    logger.debug("No table matches headers %s", sorted(required))
    return None
