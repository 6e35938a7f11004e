"""
Sheet builders.

Two strategies accumulate cell writes and materialize them into an ArraySheet:

- BoundedBuilder: extents are known up front; values are written straight
  into a pre-allocated list.
- UnboundedBuilder: extents are discovered from the writes; each write is
  logged as a (row, column, value) triple and scattered into a freshly
  allocated grid by build(). Later writes to the same cell win.

Both share the bulk helpers of SheetBuilder (row, column, table, map), which
are expressed in terms of the single-cell ``value`` primitive.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence

from sheetgrid.exceptions import CellIndexError
from sheetgrid.spreadsheet.sheet import ArraySheet
from sheetgrid.spreadsheet.values import CellValue, normalize_value

logger = logging.getLogger(__name__)


def _check_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Sheet name must be a string, got {type(name).__name__}")
    return name


class SheetBuilder(ABC):
    """Write contract shared by every sheet builder.

    Builders are mutable and not thread-safe. All write methods return the
    builder itself so calls can be chained::

        sheet = ArraySheet.builder().name("data").row(0, 0, "a", 1).build()
    """

    @abstractmethod
    def name(self, name: str) -> "SheetBuilder":
        """Set the name of the sheet being built."""

    @abstractmethod
    def clear(self) -> "SheetBuilder":
        """Forget every written value and reset the name to ""."""

    @abstractmethod
    def value(self, row_index: int, column_index: int, value: Any) -> "SheetBuilder":
        """Normalize ``value`` and write it at (row_index, column_index)."""

    @abstractmethod
    def build(self) -> ArraySheet:
        """Materialize the current content into an ArraySheet."""

    def row(self, row_index: int, column_index: int, *values: Any) -> "SheetBuilder":
        """Write values left to right starting at (row_index, column_index)."""
        for j, value in enumerate(values):
            self.value(row_index, column_index + j, value)
        return self

    def column(self, row_index: int, column_index: int, *values: Any) -> "SheetBuilder":
        """Write values top to bottom starting at (row_index, column_index)."""
        for i, value in enumerate(values):
            self.value(row_index + i, column_index, value)
        return self

    def table(
        self,
        row_index: int,
        column_index: int,
        table: Sequence[Optional[Sequence[Any]]],
    ) -> "SheetBuilder":
        """Write a list of rows with its top-left corner at (row_index, column_index).

        None rows are skipped and leave their cells untouched.
        """
        for i, values in enumerate(table):
            if values is not None:
                self.row(row_index + i, column_index, *values)
        return self

    def map(self, row_index: int, column_index: int, mapping: Mapping[Any, Any]) -> "SheetBuilder":
        """Write each key/value pair as a two-cell row, in iteration order."""
        for i, (key, value) in enumerate(mapping.items()):
            self.row(row_index + i, column_index, key, value)
        return self


class BoundedBuilder(SheetBuilder):
    """Builder for a sheet whose extents are known in advance.

    Attributes:
        row_count: Fixed number of rows
        column_count: Fixed number of columns
    """

    def __init__(self, row_count: int, column_count: int) -> None:
        if row_count < 0 or column_count < 0:
            raise ValueError("Sheet dimensions must be non-negative integers")
        self.row_count = row_count
        self.column_count = column_count
        self._values: List[Optional[CellValue]] = [None] * (row_count * column_count)
        self._name = ""

    def name(self, name: str) -> "BoundedBuilder":
        self._name = _check_name(name)
        return self

    def clear(self) -> "BoundedBuilder":
        self._values[:] = [None] * len(self._values)
        self._name = ""
        return self

    def value(self, row_index: int, column_index: int, value: Any) -> "BoundedBuilder":
        """Write a value inside the fixed extents.

        Raises:
            CellIndexError: If the position is outside the fixed extents
        """
        if not (0 <= row_index < self.row_count and 0 <= column_index < self.column_count):
            raise CellIndexError(row_index, column_index, self.row_count, self.column_count)
        self._values[row_index * self.column_count + column_index] = normalize_value(value)
        return self

    def build(self) -> ArraySheet:
        logger.debug("Building %dx%d sheet %r", self.row_count, self.column_count, self._name)
        return ArraySheet._wrap(self._name, self.row_count, self.column_count, tuple(self._values))


class UnboundedBuilder(SheetBuilder):
    """Builder that grows the sheet to fit every written position.

    Writes are recorded in three parallel lists together with the highest
    row and column index seen so far (-1 while nothing was written).
    """

    def __init__(self) -> None:
        self._rows: List[int] = []
        self._cols: List[int] = []
        self._values: List[Optional[CellValue]] = []
        self._max_row_index = -1
        self._max_column_index = -1
        self._name = ""

    def name(self, name: str) -> "UnboundedBuilder":
        self._name = _check_name(name)
        return self

    def clear(self) -> "UnboundedBuilder":
        self._rows.clear()
        self._cols.clear()
        self._values.clear()
        self._max_row_index = -1
        self._max_column_index = -1
        self._name = ""
        return self

    def value(self, row_index: int, column_index: int, value: Any) -> "UnboundedBuilder":
        """Record a value at any non-negative position.

        Raises:
            CellIndexError: If either index is negative
        """
        if row_index < 0 or column_index < 0:
            raise CellIndexError(row_index, column_index)
        if self._max_row_index < row_index:
            self._max_row_index = row_index
        if self._max_column_index < column_index:
            self._max_column_index = column_index
        self._rows.append(row_index)
        self._cols.append(column_index)
        self._values.append(normalize_value(value))
        return self

    def row(self, row_index: int, column_index: int, *values: Any) -> "UnboundedBuilder":
        if not values:
            return self
        if row_index < 0 or column_index < 0:
            raise CellIndexError(row_index, column_index)
        if self._max_row_index < row_index:
            self._max_row_index = row_index
        last_column_index = column_index + len(values) - 1
        if self._max_column_index < last_column_index:
            self._max_column_index = last_column_index
        self._rows.extend([row_index] * len(values))
        self._cols.extend(range(column_index, last_column_index + 1))
        self._values.extend(normalize_value(value) for value in values)
        return self

    def build(self) -> ArraySheet:
        row_count = self._max_row_index + 1
        column_count = self._max_column_index + 1
        logger.debug(
            "Building %dx%d sheet %r from %d writes",
            row_count, column_count, self._name, len(self._values),
        )
        values: List[Optional[CellValue]] = [None] * (row_count * column_count)
        for row_index, column_index, value in zip(self._rows, self._cols, self._values):
            values[row_index * column_count + column_index] = value
        return ArraySheet._wrap(self._name, row_count, column_count, tuple(values))
