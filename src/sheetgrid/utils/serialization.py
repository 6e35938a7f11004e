"""
Sheet and book serialization utilities.

Provides JSON serialization and deserialization for ArraySheet and ArrayBook.
The serialized format includes versioning for forward compatibility. Values
that JSON cannot represent natively are tagged:

- datetime -> {"$datetime": "2012-01-01T00:00:00"}
- date     -> {"$date": "2012-01-01"}
- Decimal  -> {"$decimal": "3.14"}
- Fraction -> {"$fraction": "1/3"}

Any other real number is written as a JSON float and may lose precision.
"""

import datetime
import decimal
import fractions
import json
import numbers
from typing import Any, Dict, List, Optional, Union

from ..spreadsheet.book import ArrayBook
from ..spreadsheet.sheet import ArraySheet
from ..spreadsheet.values import CellValue, normalize_value


# Current serialization format version
SERIALIZATION_VERSION = "1.0"


def _encode_value(value: Optional[CellValue]) -> Any:
    if isinstance(value, datetime.datetime):
        return {"$datetime": value.isoformat()}
    if isinstance(value, datetime.date):
        return {"$date": value.isoformat()}
    if isinstance(value, decimal.Decimal):
        return {"$decimal": str(value)}
    if isinstance(value, fractions.Fraction):
        return {"$fraction": str(value)}
    if isinstance(value, numbers.Real) and not isinstance(value, (int, float)):
        return float(value)
    return value


def _decode_value(data: Any) -> Optional[CellValue]:
    if isinstance(data, dict):
        if "$datetime" in data:
            return datetime.datetime.fromisoformat(data["$datetime"])
        if "$date" in data:
            return datetime.date.fromisoformat(data["$date"])
        if "$decimal" in data:
            return decimal.Decimal(data["$decimal"])
        if "$fraction" in data:
            return fractions.Fraction(data["$fraction"])
        raise ValueError(f"Unknown tagged cell value: {data}")
    return normalize_value(data)


def sheet_to_dict(sheet: ArraySheet) -> Dict[str, Any]:
    """Convert a sheet to a JSON-serializable dictionary.

    Raises:
        TypeError: If sheet is not an ArraySheet instance
    """
    if not isinstance(sheet, ArraySheet):
        raise TypeError(f"Expected ArraySheet, got {type(sheet)}")

    return {
        "name": sheet.name,
        "rows": sheet.row_count,
        "cols": sheet.column_count,
        "values": [[_encode_value(v) for v in row] for row in sheet.to_values()],
    }


def sheet_from_dict(data: Dict[str, Any]) -> ArraySheet:
    """Create a sheet from its dictionary representation.

    Raises:
        ValueError: If data is missing fields or rows do not match the extents
    """
    try:
        name = data["name"]
        rows = data["rows"]
        cols = data["cols"]
        table = data["values"]
    except KeyError as e:
        raise ValueError(f"Missing required field in sheet: {e}") from e

    if len(table) != rows or any(len(row) != cols for row in table):
        raise ValueError(f"Sheet '{name}' values do not match {rows}x{cols} extents")

    values: List[Optional[CellValue]] = [_decode_value(v) for row in table for v in row]
    return ArraySheet(name, rows, cols, values)


def book_to_dict(book: ArrayBook) -> Dict[str, Any]:
    """Convert a book to a JSON-serializable dictionary."""
    if not isinstance(book, ArrayBook):
        raise TypeError(f"Expected ArrayBook, got {type(book)}")
    return {"sheets": [sheet_to_dict(sheet) for sheet in book]}


def book_from_dict(data: Dict[str, Any]) -> ArrayBook:
    """Create a book from its dictionary representation."""
    if "sheets" not in data:
        raise ValueError("Serialized book must have 'sheets' field")
    return ArrayBook(sheet_from_dict(sheet) for sheet in data["sheets"])


def serialize(obj: Union[ArraySheet, ArrayBook]) -> Dict[str, Any]:
    """Serialize a sheet or a book to a versioned dictionary.

    Example:
        >>> sheet = ArraySheet.from_table("data", [["a", 1]])
        >>> data = serialize(sheet)
        >>> assert data["version"] == "1.0"
        >>> assert data["type"] == "sheet"
    """
    if isinstance(obj, ArraySheet):
        return {"version": SERIALIZATION_VERSION, "type": "sheet", "data": sheet_to_dict(obj)}
    if isinstance(obj, ArrayBook):
        return {"version": SERIALIZATION_VERSION, "type": "book", "data": book_to_dict(obj)}
    raise TypeError(f"Expected ArraySheet or ArrayBook, got {type(obj)}")


def deserialize(data: Dict[str, Any]) -> Union[ArraySheet, ArrayBook]:
    """Deserialize a sheet or a book from a versioned dictionary.

    Raises:
        ValueError: If data is missing required fields or has invalid structure
        TypeError: If data is not a dictionary
    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected dict, got {type(data)}")

    for field in ("version", "type", "data"):
        if field not in data:
            raise ValueError(f"Serialized payload must have '{field}' field")

    version = data["version"]
    if version != SERIALIZATION_VERSION:
        raise ValueError(
            f"Unsupported serialization version: {version}. "
            f"Expected {SERIALIZATION_VERSION}"
        )

    if data["type"] == "sheet":
        return sheet_from_dict(data["data"])
    if data["type"] == "book":
        return book_from_dict(data["data"])
    raise ValueError(f"Unknown payload type: {data['type']}")


def to_json(obj: Union[ArraySheet, ArrayBook], **kwargs) -> str:
    """Serialize a sheet or a book to a JSON string.

    Args:
        obj: The sheet or book to serialize
        **kwargs: Additional arguments to pass to json.dumps (e.g., indent=2)
    """
    return json.dumps(serialize(obj), **kwargs)


def from_json(json_str: str) -> Union[ArraySheet, ArrayBook]:
    """Deserialize a sheet or a book from a JSON string.

    Raises:
        ValueError: If JSON is invalid or the payload structure is invalid
    """
    if not isinstance(json_str, str):
        raise TypeError(f"Expected str, got {type(json_str)}")

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e

    return deserialize(data)
