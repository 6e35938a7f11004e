"""
Google Sheets adapter for sheetgrid.

``SheetsClient`` reads worksheets into ArraySheet/ArrayBook and writes them
back through gspread.
"""

from sheetgrid.gsheets.client import SheetsClient, WorksheetSheet

__all__ = [
    "SheetsClient",
    "WorksheetSheet",
]
