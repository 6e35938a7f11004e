"""
Unit tests for spreadsheet model classes.

Tests cover:
- CellRef: A1 notation parsing and formatting
- Range: A1 notation formatting
- FlyweightCell: typed predicates and accessors
- ArraySheet: bounds, cell views, rename/copy, copy_of/from_table, builders
"""

import datetime
from decimal import Decimal

import pytest

from sheetgrid import ArrayBook, ArraySheet, CellIndexError, CellTypeError
from sheetgrid.spreadsheet.builders import BoundedBuilder, UnboundedBuilder
from sheetgrid.spreadsheet.cell import FlyweightCell
from sheetgrid.spreadsheet.reference import (
    CellRef,
    Range,
    column_to_letters,
    letters_to_column,
)


class TestCellRef:
    """Test Suite for CellRef parsing."""

    def test_parse_single_letter(self):
        ref = CellRef.parse("C10")
        assert ref.row == 9
        assert ref.col == 2

    def test_parse_multi_letter(self):
        ref = CellRef.parse("AA1")
        assert ref.row == 0
        assert ref.col == 26

    def test_parse_absolute_and_lowercase(self):
        assert CellRef.parse("$b$3") == CellRef(2, 1)

    def test_parse_invalid_returns_none(self):
        assert CellRef.parse(None) is None
        assert CellRef.parse("") is None
        assert CellRef.parse("10C") is None
        assert CellRef.parse("A0") is None
        assert CellRef.parse("A1:B2") is None

    def test_to_a1(self):
        assert CellRef(0, 0).to_a1() == "A1"
        assert CellRef(99, 701).to_a1() == "ZZ100"

    def test_column_letters(self):
        assert column_to_letters(0) == "A"
        assert column_to_letters(25) == "Z"
        assert column_to_letters(26) == "AA"
        assert letters_to_column("AZ") == 51
        with pytest.raises(ValueError):
            column_to_letters(-1)


class TestRange:
    """Test Suite for Range class."""

    def test_to_a1(self):
        assert Range(1, 0, 99, 2).to_a1() == "A2:C100"
        assert Range(0, 0).to_a1() == "A1"
        assert Range(1, 1, 1, 1).to_a1() == "B2"

    def test_equality(self):
        assert Range(0, 0, 9, 1) == Range(0, 0, 9, 1)
        assert Range(0, 0) != Range(0, 1)

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError, match="non-negative"):
            Range(row=-1, col=0)
        with pytest.raises(ValueError, match="End coordinates"):
            Range(row=10, col=5, row_end=5, col_end=10)


class TestFlyweightCell:
    """Test Suite for FlyweightCell."""

    def test_with_value_returns_same_instance(self):
        cell = FlyweightCell()
        assert cell.with_value("a") is cell
        assert cell.with_value(1) is cell

    def test_string_cell(self):
        cell = FlyweightCell().with_value("hello")
        assert cell.is_string()
        assert not cell.is_number()
        assert not cell.is_date()
        assert cell.get_string() == "hello"
        assert str(cell) == "hello"

    def test_number_cell(self):
        cell = FlyweightCell().with_value(Decimal("2.5"))
        assert cell.is_number()
        assert cell.get_number() == Decimal("2.5")
        assert cell.get_value() == Decimal("2.5")

    def test_date_cell(self, jan2012):
        cell = FlyweightCell().with_value(jan2012)
        assert cell.is_date()
        assert cell.get_date() == jan2012
        assert cell.get_value() == jan2012

    def test_mismatched_accessor_raises(self):
        cell = FlyweightCell().with_value("text")
        with pytest.raises(CellTypeError, match="not a number"):
            cell.get_number()
        with pytest.raises(CellTypeError, match="not a date"):
            cell.get_date()
        cell.with_value(1)
        with pytest.raises(CellTypeError, match="not a string"):
            cell.get_string()

    def test_unbound_str(self):
        assert str(FlyweightCell()) == "Null"


class TestArraySheet:
    """Test Suite for ArraySheet."""

    def test_extents_and_name(self, mixed_sheet):
        assert mixed_sheet.name == "mixed"
        assert mixed_sheet.row_count == 2
        assert mixed_sheet.column_count == 3

    def test_get_cell_value(self, mixed_sheet, jan2012):
        assert mixed_sheet.get_cell_value(0, 0) == "hello"
        assert mixed_sheet.get_cell_value(0, 2) == jan2012
        assert mixed_sheet.get_cell_value(1, 0) is None
        assert mixed_sheet.get_cell_value(1, 1) == 42

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, mixed_sheet, row, col):
        with pytest.raises(CellIndexError):
            mixed_sheet.get_cell_value(row, col)
        with pytest.raises(IndexError):
            mixed_sheet.get_cell(row, col)

    def test_get_cell_empty_is_none(self, mixed_sheet):
        assert mixed_sheet.get_cell(1, 0) is None

    def test_get_cell_reuses_flyweight(self, mixed_sheet):
        first = mixed_sheet.get_cell(0, 0)
        assert first.get_string() == "hello"
        second = mixed_sheet.get_cell(1, 1)
        assert second is first
        assert first.get_number() == 42

    def test_copy_has_independent_cell(self, mixed_sheet):
        copy = mixed_sheet.copy()
        assert copy == mixed_sheet
        assert copy is not mixed_sheet

        original_cell = mixed_sheet.get_cell(0, 0)
        copy_cell = copy.get_cell(1, 2)
        assert original_cell is not copy_cell
        assert original_cell.get_string() == "hello"
        assert copy_cell.get_string() == "world"

    def test_rename_same_name_returns_self(self, mixed_sheet):
        assert mixed_sheet.rename("mixed") is mixed_sheet

    def test_rename_other_name(self, mixed_sheet):
        renamed = mixed_sheet.rename("other")
        assert renamed is not mixed_sheet
        assert renamed.name == "other"
        assert mixed_sheet.name == "mixed"
        assert renamed.to_values() == mixed_sheet.to_values()

    def test_to_values(self, mixed_sheet, jan2012):
        assert mixed_sheet.to_values() == [
            ["hello", 3.14, jan2012],
            [None, 42, "world"],
        ]

    def test_to_book(self, mixed_sheet):
        book = mixed_sheet.to_book()
        assert isinstance(book, ArrayBook)
        assert book.sheet_count == 1
        assert book.get_sheet(0) == mixed_sheet
        assert book.get_sheet(0) is not mixed_sheet

    def test_constructor_checks(self):
        with pytest.raises(TypeError, match="name"):
            ArraySheet(None, 0, 0, ())
        with pytest.raises(TypeError, match="values"):
            ArraySheet("x", 0, 0, None)
        with pytest.raises(ValueError, match="Expected 4 values"):
            ArraySheet("x", 2, 2, (1, 2, 3))
        with pytest.raises(ValueError, match="non-negative"):
            ArraySheet("x", -1, 0, ())

    def test_constructor_normalizes_values(self):
        """Values passed to the constructor are normalized and cannot change later."""
        row = [1, 2]
        sheet = ArraySheet("x", 1, 3, [row, object, True])
        row.append(3)

        assert sheet.get_cell_value(0, 0) == "[1, 2]"
        assert sheet.get_cell_value(0, 1) == str(object)
        assert sheet.get_cell_value(0, 2) == "True"
        assert sheet.get_cell(0, 0).is_string()
        assert hash(sheet) == hash(ArraySheet("x", 1, 3, ["[1, 2]", str(object), "True"]))

    def test_empty_sheet(self):
        sheet = ArraySheet("empty", 0, 0, ())
        assert sheet.row_count == 0
        assert sheet.to_values() == []
        with pytest.raises(CellIndexError):
            sheet.get_cell_value(0, 0)

    def test_repr(self, mixed_sheet):
        assert repr(mixed_sheet) == "ArraySheet(name='mixed', rows=2, cols=3)"


class TestCopyOf:
    """Test Suite for ArraySheet.copy_of and ArraySheet.from_table."""

    def test_copy_of_foreign_sheet(self, dict_sheet, jan2012):
        sheet = ArraySheet.copy_of(dict_sheet)
        assert sheet.name == "foreign"
        assert sheet.row_count == 2
        assert sheet.column_count == 3
        assert sheet.to_values() == [
            ["a", None, jan2012],
            [None, 7, "True"],
        ]

    def test_copy_of_array_sheet_is_copy(self, mixed_sheet):
        copy = ArraySheet.copy_of(mixed_sheet)
        assert copy == mixed_sheet
        assert copy is not mixed_sheet

    def test_copy_of_round_trip(self, dict_sheet):
        once = ArraySheet.copy_of(dict_sheet)
        twice = ArraySheet.copy_of(once)
        assert twice.name == once.name
        assert twice.row_count == once.row_count
        assert twice.column_count == once.column_count
        for i in range(once.row_count):
            for j in range(once.column_count):
                assert twice.get_cell_value(i, j) == once.get_cell_value(i, j)

    def test_copy_of_none(self):
        with pytest.raises(TypeError):
            ArraySheet.copy_of(None)

    def test_from_table_ragged(self):
        sheet = ArraySheet.from_table("ragged", [["a", "b", "c"], None, ["d"], []])
        assert sheet.row_count == 4
        assert sheet.column_count == 3
        assert sheet.to_values() == [
            ["a", "b", "c"],
            [None, None, None],
            ["d", None, None],
            [None, None, None],
        ]

    def test_from_table_normalizes(self):
        sheet = ArraySheet.from_table("x", [[True, object]])
        assert sheet.get_cell_value(0, 0) == "True"
        assert sheet.get_cell_value(0, 1) == str(object)

    def test_from_table_empty(self):
        sheet = ArraySheet.from_table("empty", [])
        assert sheet.row_count == 0
        assert sheet.column_count == 0

    def test_from_table_none(self):
        with pytest.raises(TypeError):
            ArraySheet.from_table("x", None)


class TestBuilderFactories:
    """Test Suite for ArraySheet.builder / builder_for_bounds."""

    def test_builder_without_extents_is_unbounded(self):
        assert isinstance(ArraySheet.builder(), UnboundedBuilder)

    def test_builder_with_extents_is_bounded(self):
        builder = ArraySheet.builder(3, 4)
        assert isinstance(builder, BoundedBuilder)
        sheet = builder.build()
        assert (sheet.row_count, sheet.column_count) == (3, 4)

    def test_builder_requires_both_extents(self):
        with pytest.raises(ValueError, match="Both"):
            ArraySheet.builder(3)

    def test_builder_for_bounds(self):
        builder = ArraySheet.builder_for_bounds("A1:C10")
        assert isinstance(builder, BoundedBuilder)
        assert builder.row_count == 10
        assert builder.column_count == 3

    @pytest.mark.parametrize("bounds", [None, "", "C10", "A1:", "A1:B2:C3", "A1:10C"])
    def test_builder_for_bounds_falls_back(self, bounds):
        assert isinstance(ArraySheet.builder_for_bounds(bounds), UnboundedBuilder)

    def test_builder_for_bounds_ignores_first_reference(self):
        builder = ArraySheet.builder_for_bounds("garbage:B2")
        assert isinstance(builder, BoundedBuilder)
        assert (builder.row_count, builder.column_count) == (2, 2)
