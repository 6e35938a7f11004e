"""
Sheet contracts and the dense in-memory sheet.

This module provides:
- Sheet: the read contract every sheet implementation satisfies
- SheetSource: the minimal protocol a foreign sheet must offer to be copied
- ArraySheet: an immutable row-major grid of normalized cell values

ArraySheet is the canonical representation shared by format adapters,
in-memory fixtures and tests. Values are kept in a tuple of length
``row_count * column_count``; the value for ``(row, col)`` lives at index
``row * column_count + col``.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Sequence, Tuple

from sheetgrid.exceptions import CellIndexError
from sheetgrid.spreadsheet.cell import Cell, FlyweightCell
from sheetgrid.spreadsheet.values import CellValue, normalize_value

if TYPE_CHECKING:
    from sheetgrid.spreadsheet.book import ArrayBook
    from sheetgrid.spreadsheet.builders import SheetBuilder


class SheetSource(Protocol):
    """Anything that can be copied into an ArraySheet."""

    @property
    def name(self) -> str:
        ...

    @property
    def row_count(self) -> int:
        ...

    @property
    def column_count(self) -> int:
        ...

    def get_cell_value(self, row_index: int, column_index: int) -> Any:
        ...


class Sheet(ABC):
    """Read contract of a single spreadsheet tab."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def row_count(self) -> int:
        ...

    @property
    @abstractmethod
    def column_count(self) -> int:
        ...

    @abstractmethod
    def get_cell_value(self, row_index: int, column_index: int) -> Optional[CellValue]:
        """Return the raw value at (row_index, column_index), or None if empty.

        Raises:
            CellIndexError: If the position is outside the sheet
        """

    @abstractmethod
    def get_cell(self, row_index: int, column_index: int) -> Optional[Cell]:
        """Return a typed view of the cell, or None if the cell is empty.

        Raises:
            CellIndexError: If the position is outside the sheet
        """


class ArraySheet(Sheet):
    """Immutable dense sheet backed by a row-major tuple of values.

    Each instance owns one FlyweightCell returned by ``get_cell``. Concurrent
    ``get_cell`` calls on the same instance race on that cell; use
    ``get_cell_value`` or hand out independent instances via ``copy()``.

    Attributes:
        name: The sheet name
        row_count: Number of rows
        column_count: Number of columns
    """

    def __init__(
        self,
        name: str,
        row_count: int,
        column_count: int,
        values: Sequence[Optional[CellValue]],
    ) -> None:
        """Initialize an ArraySheet.

        Args:
            name: Sheet name (may be empty, never None)
            row_count: Number of rows (non-negative)
            column_count: Number of columns (non-negative)
            values: Values in row-major order; each one goes through
                normalize_value and the result is stored in a tuple

        Raises:
            TypeError: If name or values is None
            ValueError: If extents are negative or do not match len(values)
        """
        if values is None:
            raise TypeError("Sheet values must not be None")
        self._init(name, row_count, column_count, tuple(normalize_value(v) for v in values))

    @classmethod
    def _wrap(
        cls,
        name: str,
        row_count: int,
        column_count: int,
        values: Tuple[Optional[CellValue], ...],
    ) -> "ArraySheet":
        """Build a sheet around a tuple of already normalized values."""
        sheet = cls.__new__(cls)
        sheet._init(name, row_count, column_count, values)
        return sheet

    def _init(
        self,
        name: str,
        row_count: int,
        column_count: int,
        values: Tuple[Optional[CellValue], ...],
    ) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Sheet name must be a string, got {type(name).__name__}")
        if row_count < 0 or column_count < 0:
            raise ValueError("Sheet dimensions must be non-negative integers")
        if len(values) != row_count * column_count:
            raise ValueError(
                f"Expected {row_count * column_count} values for a "
                f"{row_count}x{column_count} sheet, got {len(values)}"
            )
        self._name = name
        self._row_count = row_count
        self._column_count = column_count
        self._values: Tuple[Optional[CellValue], ...] = values
        self._flyweight_cell = FlyweightCell()

    @property
    def name(self) -> str:
        return self._name

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._column_count

    def get_cell_value(self, row_index: int, column_index: int) -> Optional[CellValue]:
        if not (0 <= row_index < self._row_count and 0 <= column_index < self._column_count):
            raise CellIndexError(row_index, column_index, self._row_count, self._column_count)
        return self._values[row_index * self._column_count + column_index]

    def get_cell(self, row_index: int, column_index: int) -> Optional[Cell]:
        value = self.get_cell_value(row_index, column_index)
        return self._flyweight_cell.with_value(value) if value is not None else None

    def rename(self, name: str) -> "ArraySheet":
        """Return a sheet with the given name.

        Returns this instance if the name is unchanged, otherwise a new sheet
        sharing the same (immutable) values.
        """
        if self._name == name:
            return self
        return ArraySheet._wrap(name, self._row_count, self._column_count, self._values)

    def copy(self) -> "ArraySheet":
        """Return an equal sheet with its own FlyweightCell."""
        return ArraySheet._wrap(self._name, self._row_count, self._column_count, self._values)

    def to_book(self) -> "ArrayBook":
        """Wrap a copy of this sheet into a single-sheet book."""
        from sheetgrid.spreadsheet.book import ArrayBook

        return ArrayBook([self.copy()])

    def to_values(self) -> List[List[Optional[CellValue]]]:
        """Return the cell values as a list of rows."""
        cols = self._column_count
        return [list(self._values[i * cols:(i + 1) * cols]) for i in range(self._row_count)]

    @staticmethod
    def copy_of(sheet: SheetSource) -> "ArraySheet":
        """Copy any sheet-like object into an ArraySheet.

        Every cell is read in row-major order and normalized. An ArraySheet
        source is simply copied.

        Raises:
            TypeError: If sheet is None
        """
        if sheet is None:
            raise TypeError("Cannot copy a None sheet")
        if isinstance(sheet, ArraySheet):
            return sheet.copy()
        row_count = sheet.row_count
        column_count = sheet.column_count
        values = [
            normalize_value(sheet.get_cell_value(i, j))
            for i in range(row_count)
            for j in range(column_count)
        ]
        return ArraySheet._wrap(sheet.name, row_count, column_count, tuple(values))

    @staticmethod
    def from_table(name: str, table: Sequence[Optional[Sequence[Any]]]) -> "ArraySheet":
        """Build a sheet from a possibly ragged list of rows.

        The column count is the length of the longest row. Shorter rows leave
        trailing cells empty and None rows are entirely empty.

        Raises:
            TypeError: If table is None
        """
        if table is None:
            raise TypeError("Cannot copy a None table")
        row_count = len(table)
        column_count = max((len(row) for row in table if row is not None), default=0)
        values: List[Optional[CellValue]] = [None] * (row_count * column_count)
        for i, row in enumerate(table):
            if row is not None:
                for j, value in enumerate(row):
                    values[i * column_count + j] = normalize_value(value)
        return ArraySheet._wrap(name, row_count, column_count, tuple(values))

    @staticmethod
    def builder(row_count: Optional[int] = None, column_count: Optional[int] = None) -> "SheetBuilder":
        """Create a sheet builder.

        Without extents the builder grows to fit whatever is written. With
        both extents it is pre-allocated and rejects writes outside them.
        """
        from sheetgrid.spreadsheet.builders import BoundedBuilder, UnboundedBuilder

        if row_count is None and column_count is None:
            return UnboundedBuilder()
        if row_count is None or column_count is None:
            raise ValueError("Both row_count and column_count are required for a bounded builder")
        return BoundedBuilder(row_count, column_count)

    @staticmethod
    def builder_for_bounds(bounds: Optional[str]) -> "SheetBuilder":
        """Create a builder sized from a range such as ``"A1:D20"``.

        Only the bottom-right reference is used. Falls back to an unbounded
        builder when bounds is None or cannot be parsed.
        """
        from sheetgrid.spreadsheet.reference import CellRef

        if bounds is not None:
            references = bounds.split(":")
            if len(references) == 2:
                last = CellRef.parse(references[1])
                if last is not None:
                    return ArraySheet.builder(last.row + 1, last.col + 1)
        return ArraySheet.builder()

    def __repr__(self) -> str:
        return (
            f"ArraySheet(name={self._name!r}, rows={self._row_count}, "
            f"cols={self._column_count})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArraySheet):
            return NotImplemented
        return (
            self._name == other._name
            and self._row_count == other._row_count
            and self._column_count == other._column_count
            and self._values == other._values
        )

    def __hash__(self) -> int:
        return hash((self._name, self._row_count, self._column_count, self._values))
