# table_extract/table.py
# The Table value built from a <table> element, and the Row view handed out on iteration.

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from bs4 import Tag

from . import document, locator
from .document import Source

logger = logging.getLogger(__name__)

# Header-cell text -> zero-based column position in the header row.
Headers = Dict[str, int]


class Row:
    """
    A row in a Table.

    A row holds a reference to its table's headers and to its own tuple of cells;
    nothing is copied. If the row has as many cells as the header row, cells can be
    looked up safely by header name with get(). Otherwise use as_slice() or
    positional indexing.
    """

    __slots__ = ("_headers", "_cells")

    def __init__(self, headers: Mapping[str, int], cells: Tuple[str, ...]):
        self._headers = headers
        self._cells = cells

    def __len__(self) -> int:
        return len(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def get(self, header: str, default: Optional[str] = None) -> Optional[str]:
        """
        Return the cell underneath `header`.

        Returns `default` if there is no such header, and also if the row has no cell
        at that header's position. The two misses look the same to the caller.
        """
        i = self._headers.get(header)
        if i is None or i >= len(self._cells):
            return default
        return self._cells[i]

    def __getitem__(self, key: Union[str, int, slice]):
        if isinstance(key, str):
            value = self.get(key)
            if value is None:
                raise KeyError(key)
            return value
        return self._cells[key]

    def as_slice(self) -> Tuple[str, ...]:
        return self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def to_dict(self) -> Dict[str, str]:
        """Header -> cell for every header that falls inside this row."""
        return {h: self._cells[i] for h, i in self._headers.items() if i < len(self._cells)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._cells == other._cells and dict(self._headers) == dict(other._headers)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Row({list(self._cells)!r})"


class Table:
    """
    A parsed HTML table.

    Build one with Table.find_first / find_by_id / find_by_headers, or from an
    already-selected element with Table.from_element. Cell text is copied out of
    the document, so a Table stays valid after the soup is discarded. Tables are
    read-only.
    """

    __slots__ = ("_headers", "_data")

    def __init__(self, headers: Optional[Mapping[str, int]] = None, data: Iterable[Sequence[str]] = ()):
        self._headers: Headers = dict(headers or {})
        self._data: Tuple[Tuple[str, ...], ...] = tuple(tuple(r) for r in data)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_element(cls, element: Tag) -> "Table":
        """
        Build a Table from a <table> element.

        If the first <tr> contains at least one <th>, those cells become the headers
        and that row is left out of the data. Every other row contributes the text
        of its <td> cells only.
        """
        rows = document.iter_select(element, "tr")
        head = next(rows, None)

        headers: Headers = {}
        data: List[List[str]] = []
        if head is not None:
            for i, text in enumerate(document.cell_texts(head, "th")):
                # duplicate header text: last position wins
                headers[text] = i
            if not headers:
                data.append(document.cell_texts(head, "td"))
        data.extend(document.cell_texts(tr, "td") for tr in rows)

        logger.debug("Built table: %d headers, %d data rows", len(headers), len(data))
        return cls(headers, data)

    @classmethod
    def find_first(cls, source: Source) -> Optional["Table"]:
        """Finds the first table in `source`."""
        el = locator.find_first_element(document.as_root(source))
        return cls.from_element(el) if el is not None else None

    @classmethod
    def find_by_id(cls, source: Source, id: str) -> Optional["Table"]:
        """Finds the table in `source` with an id of `id`."""
        el = locator.find_element_by_id(document.as_root(source), id)
        return cls.from_element(el) if el is not None else None

    @classmethod
    def find_by_headers(cls, source: Source, headers: Iterable[str]) -> Optional["Table"]:
        """
        Finds the table in `source` whose first row contains all of `headers`.
        The order does not matter. If `headers` is empty this is find_first.
        """
        el = locator.find_element_by_headers(document.as_root(source), headers)
        return cls.from_element(el) if el is not None else None

    @classmethod
    def find_all(cls, source: Source) -> List["Table"]:
        """Every table in `source`, in document order."""
        return [cls.from_element(el) for el in locator.iter_table_elements(document.as_root(source))]

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    @property
    def headers(self) -> Mapping[str, int]:
        """
        Read-only header map. Empty if the first row had no <th> cells.
        """
        return MappingProxyType(self._headers)

    @property
    def data(self) -> Tuple[Tuple[str, ...], ...]:
        return self._data

    def rows(self) -> Iterator[Row]:
        """
        Iterate over the data rows. Only <td> cells are included; if the table had a
        header row, iteration starts on the second <tr>. Each call starts over.
        """
        headers = self.headers
        return (Row(headers, cells) for cells in self._data)

    def __iter__(self) -> Iterator[Row]:
        return self.rows()

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._headers == other._headers and self._data == other._data

    __hash__ = None

    def __repr__(self) -> str:
        return f"Table(headers={self._headers!r}, rows={len(self._data)})"


# Module-level shortcuts, matching the classmethods.
def find_first(source: Source) -> Optional[Table]:
    return Table.find_first(source)


def find_by_id(source: Source, id: str) -> Optional[Table]:
    return Table.find_by_id(source, id)


def find_by_headers(source: Source, headers: Iterable[str]) -> Optional[Table]:
    return Table.find_by_headers(source, headers)


def find_all(source: Source) -> List[Table]:
    return Table.find_all(source)


def find_table(source: Source, id: Optional[str] = None, headers: Iterable[str] = ()) -> Optional[Table]:
    """Dispatch on whichever criterion is given: id first, then headers, else the first table."""
    if id is not None:
        return find_by_id(source, id)
    return find_by_headers(source, headers)
