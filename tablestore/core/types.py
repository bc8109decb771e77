"""
Data Types Module - Defines supported column data types for TableStore

Supports: STRING, INT
"""

from enum import Enum, auto
from typing import Any, Optional

from .errors import ColumnTypeMismatch, ColumnLengthExceeded, ColumnValueExceeded


class ColumnType(Enum):
    """Supported column value kinds"""
    STRING = auto()
    INT = auto()

    def __str__(self) -> str:
        return self.name


class TypeValidator:
    """Checks record values against a column's declared type and bound"""

    # Textual aliases accepted by parse_type
    TYPE_MAP = {
        'STRING': ColumnType.STRING,
        'STR': ColumnType.STRING,
        'TEXT': ColumnType.STRING,
        'VARCHAR': ColumnType.STRING,
        'INT': ColumnType.INT,
        'INTEGER': ColumnType.INT,
    }

    @staticmethod
    def parse_type(type_str: str) -> ColumnType:
        """Parse a type name into a ColumnType"""
        key = type_str.upper().strip()
        if key in TypeValidator.TYPE_MAP:
            return TypeValidator.TYPE_MAP[key]

        raise ValueError(f"Unknown data type: {type_str}")

    @staticmethod
    def is_string(value: Any) -> bool:
        return isinstance(value, str)

    @staticmethod
    def is_int(value: Any) -> bool:
        # bool is an int subclass but is not an integer value here
        return isinstance(value, int) and not isinstance(value, bool)

    @staticmethod
    def check_string(column_name: str, value: Any, max_length: int = 0) -> None:
        """Validate a value for a STRING column"""
        if not TypeValidator.is_string(value):
            raise ColumnTypeMismatch(column_name, ColumnType.STRING.name)
        if max_length > 0 and len(value.encode("utf-8")) > max_length:
            raise ColumnLengthExceeded(column_name, max_length)

    @staticmethod
    def check_int(column_name: str, value: Any, max_value: Optional[int] = None) -> None:
        """Validate a value for an INT column"""
        if not TypeValidator.is_int(value):
            raise ColumnTypeMismatch(column_name, ColumnType.INT.name)
        if max_value is not None and value > max_value:
            raise ColumnValueExceeded(column_name, max_value)

    @staticmethod
    def validate(column, value: Any) -> None:
        """
        Validate a value against a Column definition.

        Raises a RecordValidationError subclass naming the column on failure.
        """
        dtype = column.data_type

        if dtype == ColumnType.STRING:
            TypeValidator.check_string(column.name, value, column.max_string_length)
        elif dtype == ColumnType.INT:
            TypeValidator.check_int(column.name, value, column.max_int_value)
        else:
            raise ValueError(f"Unsupported data type: {dtype}")
