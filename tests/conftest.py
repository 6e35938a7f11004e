"""Shared pytest configuration and fixtures for sheetgrid tests."""

import datetime

import pytest

from sheetgrid import ArraySheet


class DictSheet:
    """Foreign sheet backed by a {(row, col): value} dict."""

    def __init__(self, name, row_count, column_count, cells):
        self.name = name
        self.row_count = row_count
        self.column_count = column_count
        self.cells = cells

    def get_cell_value(self, row_index, column_index):
        return self.cells.get((row_index, column_index))


@pytest.fixture
def jan2012() -> datetime.datetime:
    return datetime.datetime(2012, 1, 1)


@pytest.fixture
def mixed_sheet(jan2012) -> ArraySheet:
    return ArraySheet.from_table("mixed", [
        ["hello", 3.14, jan2012],
        [None, 42, "world"],
    ])


@pytest.fixture
def dict_sheet(jan2012) -> DictSheet:
    return DictSheet("foreign", 2, 3, {
        (0, 0): "a",
        (0, 2): jan2012,
        (1, 1): 7,
        (1, 2): True,
    })
