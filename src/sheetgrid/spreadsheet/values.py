"""
Cell value normalization.

Every value stored in a sheet goes through ``normalize_value`` first, so a
sheet only ever holds one of four kinds:

- absent (``None``)
- a date (``datetime.date`` or ``datetime.datetime``)
- a number (``int``, ``float``, ``Decimal`` or another real number)
- text (``str``)

Anything else is stored as its ``str()`` form.
"""

import datetime
import decimal
import numbers
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

CellValue = Union[datetime.date, numbers.Real, decimal.Decimal, str]


def is_date_value(value: Any) -> bool:
    return isinstance(value, datetime.date)


def is_number_value(value: Any) -> bool:
    # bool is an int subclass but is not a spreadsheet number
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, decimal.Decimal))


def is_string_value(value: Any) -> bool:
    return isinstance(value, str)


def normalize_value(value: Any) -> Optional[CellValue]:
    """Coerce an arbitrary value into a normalized cell value.

    Args:
        value: Any Python object

    Returns:
        None for absent values (``None``, ``pd.NA``, ``pd.NaT``), the value
        itself for dates, numbers and strings, otherwise ``str(value)``.
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, np.generic):
        if isinstance(value, np.datetime64):
            if np.isnat(value):
                return None
            return pd.Timestamp(value).to_pydatetime()
        value = value.item()
    if is_date_value(value) or is_number_value(value) or is_string_value(value):
        return value
    return str(value)
