# table_extract/document.py
# Thin adapter over BeautifulSoup: parse markup, run selector queries, read cell text.

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .settings import get_settings

logger = logging.getLogger(__name__)

# Anything the find_* helpers accept: raw markup, a parsed document, or a subtree.
Source = Union[str, bytes, Tag]


def parse_html(html: Union[str, bytes], parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse an HTML document or fragment into a BeautifulSoup tree.
    Malformed input never raises; BeautifulSoup builds whatever tree it can.
    """
    parser = parser or get_settings().HTML_PARSER
    logger.debug("Parsing %d characters of markup with %s", len(html), parser)
    return BeautifulSoup(html, parser)


def as_root(source: Source) -> Tag:
    """Return a queryable tree for markup, or the element itself if already parsed."""
    if isinstance(source, Tag):
        return source
    return parse_html(source)


def iter_select(root: Tag, selector: str) -> Iterator[Tag]:
    """
    Lazily yield elements matching selector, in document order.
    An element root is itself a candidate, so a pre-selected <table> can be passed
    straight to the find_* helpers.
    """
    if not isinstance(root, BeautifulSoup) and root.css.match(selector):
        yield root
    yield from root.css.iselect(selector)


def first_row(table: Tag) -> Optional[Tag]:
    return table.select_one("tr")


def cell_text(el: Tag) -> str:
    """Inner text of a cell with surrounding whitespace trimmed."""
    return el.get_text().strip()


def cell_texts(el: Tag, tag: str) -> List[str]:
    """Trimmed text of every `tag` cell under el, in document order."""
    return [cell_text(c) for c in el.select(tag)]
