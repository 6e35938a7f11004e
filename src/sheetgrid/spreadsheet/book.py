"""
In-memory workbook.

ArrayBook is an immutable ordered collection of ArraySheet instances. It is
what whole-workbook writers consume.
"""

from typing import Iterable, Iterator, List, Tuple

from sheetgrid.spreadsheet.sheet import ArraySheet, SheetSource


class ArrayBook:
    """Immutable ordered list of sheets.

    Attributes:
        sheet_count: Number of sheets in the book
    """

    def __init__(self, sheets: Iterable[ArraySheet]) -> None:
        if sheets is None:
            raise TypeError("Book sheets must not be None")
        self._sheets: Tuple[ArraySheet, ...] = tuple(sheets)
        for sheet in self._sheets:
            if not isinstance(sheet, ArraySheet):
                raise TypeError(f"Expected ArraySheet, got {type(sheet).__name__}")

    @property
    def sheet_count(self) -> int:
        return len(self._sheets)

    @property
    def sheet_names(self) -> List[str]:
        return [sheet.name for sheet in self._sheets]

    def get_sheet(self, index: int) -> ArraySheet:
        """Return the sheet at ``index``.

        Raises:
            IndexError: If index is outside [0, sheet_count)
        """
        if not 0 <= index < len(self._sheets):
            raise IndexError(f"Sheet index {index} out of range for {len(self._sheets)} sheets")
        return self._sheets[index]

    def get_sheet_by_name(self, name: str) -> ArraySheet:
        """Return the first sheet called ``name``.

        Raises:
            KeyError: If no sheet has that name
        """
        for sheet in self._sheets:
            if sheet.name == name:
                return sheet
        raise KeyError(name)

    @staticmethod
    def builder() -> "BookBuilder":
        return BookBuilder()

    def __len__(self) -> int:
        return len(self._sheets)

    def __iter__(self) -> Iterator[ArraySheet]:
        return iter(self._sheets)

    def __repr__(self) -> str:
        return f"ArrayBook(sheets={self.sheet_names!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayBook):
            return NotImplemented
        return self._sheets == other._sheets

    def __hash__(self) -> int:
        return hash(self._sheets)


class BookBuilder:
    """Collects sheets in insertion order and builds an ArrayBook."""

    def __init__(self) -> None:
        self._sheets: List[ArraySheet] = []

    def sheet(self, sheet: SheetSource) -> "BookBuilder":
        """Append a copy of ``sheet``; a builder can be reused between calls."""
        self._sheets.append(ArraySheet.copy_of(sheet))
        return self

    def clear(self) -> "BookBuilder":
        self._sheets.clear()
        return self

    def build(self) -> ArrayBook:
        return ArrayBook(self._sheets)
