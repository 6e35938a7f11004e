"""
Spreadsheet model module.

This module provides the in-memory representation of spreadsheet data:
dense sheets, their builders, typed cell views, books and A1 references.
"""

from sheetgrid.spreadsheet.book import ArrayBook, BookBuilder
from sheetgrid.spreadsheet.builders import BoundedBuilder, SheetBuilder, UnboundedBuilder
from sheetgrid.spreadsheet.cell import Cell, FlyweightCell
from sheetgrid.spreadsheet.reference import CellRef, Range
from sheetgrid.spreadsheet.sheet import ArraySheet, Sheet, SheetSource
from sheetgrid.spreadsheet.values import CellValue, normalize_value

__all__ = [
    "ArrayBook",
    "ArraySheet",
    "BookBuilder",
    "BoundedBuilder",
    "Cell",
    "CellRef",
    "CellValue",
    "FlyweightCell",
    "Range",
    "Sheet",
    "SheetBuilder",
    "SheetSource",
    "UnboundedBuilder",
    "normalize_value",
]
