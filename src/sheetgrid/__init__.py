"""
sheetgrid - in-memory spreadsheet sheets and books.

This package provides the canonical in-memory representation of spreadsheet
data that format readers and writers produce and consume.

Usage:
    >>> from sheetgrid import ArraySheet
    >>> sheet = ArraySheet.builder().name("data").row(0, 0, "hello", 3.14).build()
    >>> sheet.get_cell(0, 1).get_number()
    3.14

Key components:
- ArraySheet: immutable dense sheet of normalized values
- SheetBuilder: bounded and unbounded builders producing ArraySheet
- ArrayBook: ordered collection of sheets
- SheetsClient: Google Sheets adapter (gspread)
"""

from .exceptions import *
from .spreadsheet import (
    ArrayBook,
    ArraySheet,
    BookBuilder,
    BoundedBuilder,
    Cell,
    CellRef,
    FlyweightCell,
    Range,
    Sheet,
    SheetBuilder,
    SheetSource,
    UnboundedBuilder,
    normalize_value,
)

# Version
__version__ = "0.1.0"

__all__ = [
    'ArrayBook',
    'ArraySheet',
    'BookBuilder',
    'BoundedBuilder',
    'Cell',
    'CellRef',
    'CellIndexError',
    'CellTypeError',
    'FlyweightCell',
    'Range',
    'Sheet',
    'SheetBuilder',
    'SheetSource',
    'SheetsAPIError',
    'UnboundedBuilder',
    'normalize_value',
]
