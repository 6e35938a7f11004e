"""
Exception classes for sheetgrid.

These exceptions are raised synchronously to the immediate caller. Every one of
them signals a broken calling contract or a failed remote call; nothing in the
package retries or recovers from them.
"""


class CellIndexError(IndexError):
    """Raised when a row/column index falls outside a grid's extents.

    Examples:
        - Reading cell (3, 0) of a sheet with 3 rows
        - Writing past the pre-allocated extents of a bounded builder
        - Passing a negative index to an unbounded builder
    """

    def __init__(self, row_index: int, column_index: int, row_count=None, column_count=None) -> None:
        self.row_index = row_index
        self.column_index = column_index
        if row_count is None:
            message = f"Cell index ({row_index}, {column_index}) must be non-negative"
        else:
            message = (
                f"Cell index ({row_index}, {column_index}) out of bounds "
                f"for {row_count}x{column_count} grid"
            )
        super().__init__(message)


class CellTypeError(TypeError):
    """Raised when a typed accessor does not match the cell's value kind.

    Callers are expected to check ``is_date()``/``is_number()``/``is_string()``
    before calling the matching ``get_*`` accessor.
    """
    pass


class SheetsAPIError(Exception):
    """Raised when a Google Sheets API call fails.

    This error wraps exceptions from the Google Sheets API (via gspread) and
    provides context about which operation failed. Common causes include:
        - Authentication failures
        - Rate limiting (HTTP 429)
        - Invalid spreadsheet IDs or permissions errors
    """
    pass
