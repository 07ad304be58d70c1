"""A column-oriented table of loosely typed values."""

from __future__ import annotations

import sys
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TextIO

__all__ = ["TableError", "Table", "new"]


class TableError(ValueError):
    """Raised when a table breaks its invariants or is given malformed rows."""


class Table:
    """Columns of values addressed by header name.

    Every header maps to the position of its column, no two headers share a
    position, and all columns hold the same number of values.
    """

    def __init__(
        self,
        headers: Mapping[str, int] | None = None,
        columns: Iterable[Iterable[Any]] | None = None,
    ) -> None:
        self._headers: dict[str, int] = dict(headers or {})
        self._columns: list[list[Any]] = [list(col) for col in (columns or [])]

    @property
    def headers(self) -> dict[str, int]:
        """A copy of the header-to-column-position mapping."""
        return dict(self._headers)

    @property
    def num_rows(self) -> int:
        """Number of values held by each column."""
        return len(self._columns[0]) if self._columns else 0

    def column(self, name: str) -> list[Any]:
        """Return a copy of the values of column ``name``."""
        try:
            idx = self._headers[name]
        except KeyError:
            raise KeyError(f"no such column: {name!r}") from None
        return list(self._columns[idx])

    def insert_rows(self, headers: Sequence[str], *rows: Sequence[Any]) -> Table:
        """Append ``rows`` whose values are laid out in ``headers`` order.

        Values for headers the table lacks are skipped, columns not named in
        ``headers`` get ``None``, and extra values at the end of a row are
        ignored. Nothing is inserted unless at least one header is known.
        """
        if not rows:
            return self
        if not any(h in self._headers for h in headers):
            return self

        known = [(pos, self._headers[h]) for pos, h in enumerate(headers) if h in self._headers]
        needed = max(pos for pos, _ in known) + 1
        for row in rows:
            if len(row) < needed:
                raise TableError(
                    f"row has {len(row)} values but at least {needed} are required"
                )

        new_columns = [[None] * len(rows) for _ in self._columns]
        for row_idx, row in enumerate(rows):
            for pos, col_idx in known:
                new_columns[col_idx][row_idx] = row[pos]

        for col, added in zip(self._columns, new_columns):
            col.extend(added)
        return self

    def update_column(self, name: str, value: Any) -> Table:
        """Set every value of column ``name``, creating the column if needed.

        ``value`` is either a plain value or a callable taking no arguments,
        which is called once per row to produce that row's value.
        """
        idx = self._headers.get(name)
        if idx is None:
            idx = len(self._headers)
            self._headers[name] = idx
            self._columns.append([None] * self.num_rows)
        elif value is None:
            self._columns[idx] = [None] * self.num_rows

        if value is None:
            return self

        produce: Callable[[], Any] = value if callable(value) else (lambda: value)
        self._columns[idx] = [produce() for _ in self._columns[idx]]
        return self

    def validate(self) -> None:
        """Raise :class:`TableError` if any table invariant does not hold."""
        if len(self._headers) != len(self._columns):
            raise TableError(
                "number of headers does not match number of columns "
                f"({len(self._headers)} != {len(self._columns)})"
            )

        by_index: dict[int, list[str]] = defaultdict(list)
        for name, idx in self._headers.items():
            by_index[idx].append(name)
        duplicates = {idx: names for idx, names in by_index.items() if len(names) > 1}
        if duplicates:
            raise TableError(f"found duplicate indexes for some columns. {duplicates}")

        out_of_range = {
            name: idx
            for name, idx in self._headers.items()
            if not 0 <= idx < len(self._columns)
        }
        if out_of_range:
            raise TableError(f"some columns have out of range indexes. {out_of_range}")

        if self._columns:
            expected = len(self._columns[0])
            mismatched = {
                name: len(self._columns[idx])
                for name, idx in self._headers.items()
                if len(self._columns[idx]) != expected
            }
            if mismatched:
                raise TableError(
                    "some columns have unequal number of values "
                    f"(expected {expected} values). {mismatched}"
                )

    def dump(self, file: TextIO | None = None) -> None:
        """Write a human-readable listing of the table to ``file``."""
        self.validate()
        out = file if file is not None else sys.stdout
        print("headers: ", self._headers, file=out)
        for name, idx in self._headers.items():
            col = self._columns[idx]
            values = "".join(f"  {v}, " for v in col)
            print(f"  {name} ({len(col)}): {values}", file=out)
        print(file=out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        try:
            self.validate()
            other.validate()
        except TableError:
            return False
        if self._headers.keys() != other._headers.keys():
            return False
        if len(self._columns) != len(other._columns):
            return False
        return all(
            self._columns[idx] == other._columns[other._headers[name]]
            for name, idx in self._headers.items()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Table(headers={self._headers!r}, columns={self._columns!r})"


def new(headers: Sequence[str] | None, *rows: Sequence[Any]) -> Table:
    """Build a table from ``rows``, keeping only the first ``len(headers)`` values of each."""
    headers = list(headers or [])
    width = len(headers)
    for row in rows:
        if len(row) < width:
            raise TableError(f"row has {len(row)} values but {width} headers were given")
    columns = [[row[col_idx] for row in rows] for col_idx in range(width)]
    return Table({name: idx for idx, name in enumerate(headers)}, columns)