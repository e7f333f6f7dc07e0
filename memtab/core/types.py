"""
Data Types Module - Defines supported column data types for memtab

Supports: int, float, string

Cell values are always stored as the text the user supplied. A type only
decides whether that text is acceptable for a column; nothing is converted.
A column declared with any other type name can be created, but no value is
ever valid for it.
"""

from enum import Enum
from typing import Optional, Union
import math
import re
import struct


# Numeric shapes: leading ASCII whitespace and a sign are tolerated, nothing may trail
_INT_PATTERN = re.compile(r'[ \t\n\r\f\v]*([+-]?)([0-9]+)')
_FLOAT_PATTERN = re.compile(r'[ \t\n\r\f\v]*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
INT_MAX_DIGITS = len(str(INT_MAX))


class ColumnType(Enum):
    """Supported column types in memtab"""
    INT = 'int'
    FLOAT = 'float'
    STRING = 'string'

    def __str__(self) -> str:
        return self.value


class TypeValidator:
    """Decides whether a textual cell value fits a column type"""

    @staticmethod
    def parse_type(type_name: Union[str, ColumnType]) -> Optional[ColumnType]:
        """Map an exact, lowercase type name to its ColumnType, or None if unknown"""
        if isinstance(type_name, ColumnType):
            return type_name

        try:
            return ColumnType(type_name)
        except ValueError:
            return None

    @staticmethod
    def is_valid(value: str, col_type: Optional[ColumnType]) -> bool:
        """
        Check a cell value against a column type.

        int and float values must be consumed entirely by the numeric parse
        and must fit the range of a 32-bit int / single-precision float.
        string accepts anything, including the empty string. An unknown
        type (None) accepts nothing.
        """
        if col_type == ColumnType.STRING:
            return True

        if col_type == ColumnType.INT:
            return TypeValidator._is_int(value)

        if col_type == ColumnType.FLOAT:
            return TypeValidator._is_float(value)

        return False

    @staticmethod
    def _is_int(value: str) -> bool:
        match = _INT_PATTERN.fullmatch(value)
        if not match:
            return False

        sign, digits = match.groups()
        digits = digits.lstrip('0') or '0'
        if len(digits) > INT_MAX_DIGITS:
            return False

        number = int(sign + digits)
        return INT_MIN <= number <= INT_MAX

    @staticmethod
    def _is_float(value: str) -> bool:
        if not _FLOAT_PATTERN.fullmatch(value):
            return False

        number = float(value)
        if math.isinf(number):
            return False

        # Rounds to single precision; only overflows past FLT_MAX after rounding
        try:
            struct.pack('f', number)
        except OverflowError:
            return False
        return True
