"""
Utility functions for sheetgrid.

This module provides utilities for working with sheets and books:
- serialization: JSON serialization/deserialization of sheets and books
- frames: conversion to and from pandas DataFrames
"""

from .frames import sheet_from_dataframe, sheet_to_dataframe
from .serialization import (
    serialize,
    deserialize,
    to_json,
    from_json,
    sheet_to_dict,
    sheet_from_dict,
    book_to_dict,
    book_from_dict,
    SERIALIZATION_VERSION
)

__all__ = [
    'sheet_from_dataframe',
    'sheet_to_dataframe',
    'serialize',
    'deserialize',
    'to_json',
    'from_json',
    'sheet_to_dict',
    'sheet_from_dict',
    'book_to_dict',
    'book_from_dict',
    'SERIALIZATION_VERSION'
]
