"""
Google Sheets adapter.

This module reads worksheets into ArraySheet/ArrayBook and writes them back
through gspread, with error wrapping for every API call.
"""

import datetime
import decimal
import logging
import math
import numbers
from typing import Any, List, Optional

import gspread
from gspread.exceptions import APIError
from gspread.utils import ValueRenderOption

from sheetgrid.exceptions import CellIndexError, SheetsAPIError
from sheetgrid.spreadsheet.book import ArrayBook
from sheetgrid.spreadsheet.reference import Range
from sheetgrid.spreadsheet.sheet import ArraySheet

logger = logging.getLogger(__name__)


class WorksheetSheet:
    """Read-only sheet view of a gspread worksheet.

    The worksheet content is fetched once, at construction. Empty strings
    are reported as empty cells and short rows are padded with empty cells.
    Satisfies the SheetSource protocol, so it can be passed to
    ``ArraySheet.copy_of``.
    """

    def __init__(self, worksheet: gspread.Worksheet, unformatted: bool = True) -> None:
        """
        Args:
            worksheet: The worksheet to read
            unformatted: If True, numbers are fetched as numbers instead of
                their displayed text

        Raises:
            SheetsAPIError: If the API call fails
        """
        self._name = worksheet.title
        render = ValueRenderOption.unformatted if unformatted else ValueRenderOption.formatted
        try:
            self._rows: List[List[Any]] = worksheet.get_all_values(value_render_option=render)
        except APIError as e:
            raise SheetsAPIError(f"Failed to read worksheet '{self._name}': {e}") from e
        self._column_count = max((len(row) for row in self._rows), default=0)

    @property
    def name(self) -> str:
        return self._name

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return self._column_count

    def get_cell_value(self, row_index: int, column_index: int) -> Optional[Any]:
        if not (0 <= row_index < len(self._rows) and 0 <= column_index < self._column_count):
            raise CellIndexError(row_index, column_index, len(self._rows), self._column_count)
        row = self._rows[row_index]
        if column_index >= len(row) or row[column_index] == "":
            return None
        return row[column_index]


def _to_sheets_value(value: Any) -> Any:
    """Convert a cell value to something the Sheets API accepts.

    The payload is sent as strict JSON, so NaN and infinities become empty
    cells and numbers other than int/float are sent as float.
    """
    if value is None:
        return ""
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, (numbers.Real, decimal.Decimal)) and not isinstance(value, int):
        value = float(value)
        return value if math.isfinite(value) else ""
    return value


class SheetsClient:
    """
    A wrapper around gspread that moves sheets and books in and out of
    Google Sheets.

    Attributes:
        gc: The authenticated gspread client instance
    """

    def __init__(self, gc: gspread.Client) -> None:
        """
        Initialize the Sheets client with an authenticated gspread client.

        Args:
            gc: An authenticated gspread client, e.g. from ``gspread.service_account()``
                or ``gspread.oauth()``.
        """
        self.gc = gc

    def read_sheet(self, spreadsheet: gspread.Spreadsheet, name: str) -> ArraySheet:
        """
        Copy one worksheet into an ArraySheet.

        Raises:
            SheetsAPIError: If the API call fails
        """
        try:
            worksheet = spreadsheet.worksheet(name)
        except APIError as e:
            raise SheetsAPIError(f"Failed to open worksheet '{name}': {e}") from e
        logger.debug("Reading worksheet %r", name)
        return ArraySheet.copy_of(WorksheetSheet(worksheet))

    def read_book(self, spreadsheet: gspread.Spreadsheet) -> ArrayBook:
        """
        Copy every worksheet of a spreadsheet into an ArrayBook.

        Raises:
            SheetsAPIError: If the API call fails
        """
        try:
            worksheets = spreadsheet.worksheets()
        except APIError as e:
            raise SheetsAPIError(f"Failed to list worksheets: {e}") from e
        builder = ArrayBook.builder()
        for worksheet in worksheets:
            logger.debug("Reading worksheet %r", worksheet.title)
            builder.sheet(WorksheetSheet(worksheet))
        return builder.build()

    def write_sheet(
        self,
        spreadsheet: gspread.Spreadsheet,
        sheet: ArraySheet,
        worksheet: Optional[gspread.Worksheet] = None
    ) -> gspread.Worksheet:
        """
        Write a sheet into a spreadsheet.

        Args:
            spreadsheet: The target spreadsheet
            sheet: The sheet to write
            worksheet: Existing worksheet to reuse (renamed and resized);
                a new worksheet is added when omitted

        Returns:
            The worksheet holding the sheet

        Raises:
            SheetsAPIError: If the API call fails
        """
        rows = max(sheet.row_count, 1)
        cols = max(sheet.column_count, 1)
        try:
            if worksheet is None:
                worksheet = spreadsheet.add_worksheet(title=sheet.name, rows=rows, cols=cols)
            else:
                worksheet.update_title(sheet.name)
                worksheet.resize(rows=rows, cols=cols)
        except APIError as e:
            raise SheetsAPIError(f"Failed to prepare worksheet '{sheet.name}': {e}") from e

        if sheet.row_count and sheet.column_count:
            range_name = Range(0, 0, sheet.row_count - 1, sheet.column_count - 1).to_a1()
            values = [[_to_sheets_value(v) for v in row] for row in sheet.to_values()]
            logger.debug("Writing %s to worksheet %r", range_name, sheet.name)
            try:
                worksheet.update(values, range_name=range_name)
            except APIError as e:
                raise SheetsAPIError(
                    f"Failed to write values to range '{range_name}' of '{sheet.name}': {e}"
                ) from e
        return worksheet

    def write_book(self, title: str, book: ArrayBook) -> gspread.Spreadsheet:
        """
        Create a new spreadsheet holding every sheet of ``book``.

        The default worksheet of the new spreadsheet receives the first sheet.

        Raises:
            SheetsAPIError: If the API call fails
        """
        try:
            spreadsheet = self.gc.create(title)
        except APIError as e:
            raise SheetsAPIError(f"Failed to create spreadsheet '{title}': {e}") from e

        for i, sheet in enumerate(book):
            default = None
            if i == 0:
                try:
                    default = spreadsheet.sheet1
                except APIError as e:
                    raise SheetsAPIError(f"Failed to open default worksheet of '{title}': {e}") from e
            self.write_sheet(spreadsheet, sheet, worksheet=default)
        return spreadsheet
