"""
pandas interop.

Converts between ArraySheet and pandas DataFrame. Missing values in a frame
(NaN, None, NA, NaT) become empty cells; empty cells come back as None in an
object-dtype frame so that ints, floats, dates and text keep their types.
"""

from typing import Any, List, Optional

import pandas as pd

from ..spreadsheet.builders import BoundedBuilder
from ..spreadsheet.sheet import ArraySheet
from ..spreadsheet.values import CellValue


def _frame_value(value: Any) -> Any:
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def sheet_from_dataframe(df: pd.DataFrame, name: str = "", header: bool = True) -> ArraySheet:
    """Copy a DataFrame into a sheet.

    Args:
        df: Frame to copy; its index is ignored
        name: Sheet name
        header: If True, the first row holds the column labels

    Returns:
        ArraySheet with len(df) (+1 with header) rows and len(df.columns) columns
    """
    offset = 1 if header else 0
    builder = BoundedBuilder(len(df) + offset, len(df.columns)).name(name)
    if header:
        builder.row(0, 0, *df.columns)
    for i, record in enumerate(df.itertuples(index=False, name=None)):
        builder.row(i + offset, 0, *(_frame_value(v) for v in record))
    return builder.build()


def sheet_to_dataframe(sheet: ArraySheet, header: bool = False) -> pd.DataFrame:
    """Copy a sheet into an object-dtype DataFrame.

    Args:
        sheet: Sheet to copy
        header: If True, the first sheet row becomes the column labels

    Returns:
        DataFrame with None for every empty cell
    """
    rows: List[List[Optional[CellValue]]] = sheet.to_values()
    if header:
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows[1:], columns=rows[0], dtype=object)
    return pd.DataFrame(rows, columns=range(sheet.column_count), dtype=object)
