"""
A1-notation cell references.

This module parses and formats spreadsheet addresses:
- CellRef: a single cell address (e.g., B7, $AA$10)
- Range: a rectangular cell region (e.g., A1:C100)

IMPORTANT: both classes use 0-indexed coordinates internally (Python
convention) and convert to 1-indexed A1 notation on output via to_a1().
"""

import re
from typing import Optional

_CELL_RE = re.compile(r"^\$?([A-Z]+)\$?(\d+)$")


def column_to_letters(col: int) -> str:
    """Convert column number (0-indexed) to letter(s) for A1 notation.

    Args:
        col: Column number (0-indexed: 0 = A, 25 = Z, 26 = AA, etc.)

    Returns:
        Column letter(s) in A1 notation
    """
    if col < 0:
        raise ValueError("Column must be non-negative (0-indexed)")
    col_1indexed = col + 1
    result = ""
    while col_1indexed > 0:
        col_1indexed -= 1
        result = chr(65 + (col_1indexed % 26)) + result
        col_1indexed //= 26
    return result


def letters_to_column(letters: str) -> int:
    """Convert column letter(s) to number (0-indexed).

    Args:
        letters: Column letter(s) in A1 notation (A, Z, AA, etc.)

    Returns:
        Column number (0-indexed: A = 0, Z = 25, AA = 26, etc.)
    """
    col_1indexed = 0
    for char in letters.upper():
        col_1indexed = col_1indexed * 26 + (ord(char) - 64)
    return col_1indexed - 1


class CellRef:
    """A single cell address.

    Attributes:
        row: Row index (0-indexed)
        col: Column index (0-indexed)
    """

    __slots__ = ("row", "col")

    def __init__(self, row: int, col: int) -> None:
        if row < 0 or col < 0:
            raise ValueError("Row and column must be non-negative (0-indexed)")
        self.row = row
        self.col = col

    @classmethod
    def parse(cls, notation: Optional[str]) -> Optional["CellRef"]:
        """Parse a single A1 cell address, returning None if it is malformed.

        Absolute markers (``$``) are accepted and ignored.
        """
        if not notation:
            return None
        match = _CELL_RE.match(notation.strip().upper())
        if not match:
            return None
        col_letters, row_str = match.groups()
        row_1indexed = int(row_str)
        if row_1indexed < 1:
            return None
        return cls(row=row_1indexed - 1, col=letters_to_column(col_letters))

    def to_a1(self) -> str:
        return f"{column_to_letters(self.col)}{self.row + 1}"

    def __repr__(self) -> str:
        return f"CellRef({self.to_a1()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellRef):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))


class Range:
    """Represents a rectangular cell region in A1 notation.

    A Range can be:
    - A single cell: A1 corresponds to (row=0, col=0, row_end=0, col_end=0)
    - A cell range: A1:B10 corresponds to (row=0, col=0, row_end=9, col_end=1)

    Attributes:
        row: Starting row (0-indexed)
        col: Starting column (0-indexed)
        row_end: Ending row (0-indexed, inclusive)
        col_end: Ending column (0-indexed, inclusive)
    """

    def __init__(
        self,
        row: int,
        col: int,
        row_end: Optional[int] = None,
        col_end: Optional[int] = None
    ) -> None:
        """Initialize a Range with 0-indexed coordinates.

        Raises:
            ValueError: If coordinates are invalid
        """
        if row < 0 or col < 0:
            raise ValueError("Row and column must be non-negative (0-indexed)")

        self.row = row
        self.col = col
        self.row_end = row_end if row_end is not None else row
        self.col_end = col_end if col_end is not None else col

        if self.row_end < self.row or self.col_end < self.col:
            raise ValueError("End coordinates must be >= start coordinates")

    def to_a1(self) -> str:
        """Convert Range to A1 notation string (e.g., "A1" or "A1:B10")."""
        start_cell = CellRef(self.row, self.col).to_a1()
        if self.row == self.row_end and self.col == self.col_end:
            return start_cell
        end_cell = CellRef(self.row_end, self.col_end).to_a1()
        return f"{start_cell}:{end_cell}"

    def __repr__(self) -> str:
        return f"Range({self.to_a1()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            self.row == other.row
            and self.col == other.col
            and self.row_end == other.row_end
            and self.col_end == other.col_end
        )
