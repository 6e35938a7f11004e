"""
Cell views.

A ``Cell`` exposes typed access to one non-empty sheet value. ``ArraySheet``
hands out a single ``FlyweightCell`` per sheet instance that is rebound on
every ``get_cell`` call, so a cell returned by a sheet is only valid until the
next ``get_cell`` call on that same sheet.
"""

import datetime
import numbers
from abc import ABC, abstractmethod
from typing import Any, Optional

from sheetgrid.exceptions import CellTypeError
from sheetgrid.spreadsheet.values import (
    CellValue,
    is_date_value,
    is_number_value,
    is_string_value,
)


class Cell(ABC):
    """Typed view of a non-empty cell value."""

    @abstractmethod
    def is_date(self) -> bool:
        ...

    @abstractmethod
    def is_number(self) -> bool:
        ...

    @abstractmethod
    def is_string(self) -> bool:
        ...

    @abstractmethod
    def get_date(self) -> datetime.date:
        ...

    @abstractmethod
    def get_number(self) -> numbers.Real:
        ...

    @abstractmethod
    def get_string(self) -> str:
        ...

    def get_value(self) -> Any:
        """Return the cell content using whichever typed accessor matches."""
        if self.is_date():
            return self.get_date()
        if self.is_number():
            return self.get_number()
        return self.get_string()


class FlyweightCell(Cell):
    """Reusable cell bound to whatever value was read last.

    The instance is owned by a single sheet. Never keep a reference to it
    across reads: the next ``get_cell`` on the owning sheet overwrites the
    bound value.
    """

    def __init__(self) -> None:
        self._value: Optional[CellValue] = None

    def with_value(self, value: CellValue) -> "FlyweightCell":
        """Bind ``value`` and return this same instance."""
        self._value = value
        return self

    def is_date(self) -> bool:
        return is_date_value(self._value)

    def is_number(self) -> bool:
        return is_number_value(self._value)

    def is_string(self) -> bool:
        return is_string_value(self._value)

    def get_date(self) -> datetime.date:
        if not self.is_date():
            raise CellTypeError(f"Cell value {self._value!r} is not a date")
        return self._value

    def get_number(self) -> numbers.Real:
        if not self.is_number():
            raise CellTypeError(f"Cell value {self._value!r} is not a number")
        return self._value

    def get_string(self) -> str:
        if not self.is_string():
            raise CellTypeError(f"Cell value {self._value!r} is not a string")
        return self._value

    def __str__(self) -> str:
        return str(self._value) if self._value is not None else "Null"

    def __repr__(self) -> str:
        return f"FlyweightCell({self._value!r})"
