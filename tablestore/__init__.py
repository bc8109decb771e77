"""
TableStore - An in-memory record store with typed, validated tables
"""

__version__ = "1.0.0"

from .core.store import TableStore
from .core.schema import Column
from .core.types import ColumnType
from .core.errors import (
    TableStoreError, TableAlreadyExists, TableNotFound, DuplicateColumn,
    RecordValidationError, ColumnTypeMismatch, ColumnLengthExceeded,
    ColumnValueExceeded,
)

__all__ = [
    "TableStore", "Column", "ColumnType",
    "TableStoreError", "TableAlreadyExists", "TableNotFound", "DuplicateColumn",
    "RecordValidationError", "ColumnTypeMismatch", "ColumnLengthExceeded",
    "ColumnValueExceeded",
]
