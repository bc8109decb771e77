"""Core module - Store, Schema, Types, Errors, Display"""

from .store import TableStore
from .schema import Column, Table, Record
from .types import ColumnType, TypeValidator
from .errors import (
    TableStoreError, TableAlreadyExists, TableNotFound, DuplicateColumn,
    RecordValidationError, ColumnTypeMismatch, ColumnLengthExceeded,
    ColumnValueExceeded,
)
from .display import format_records

__all__ = [
    'TableStore',
    'Column', 'Table', 'Record',
    'ColumnType', 'TypeValidator',
    'TableStoreError', 'TableAlreadyExists', 'TableNotFound', 'DuplicateColumn',
    'RecordValidationError', 'ColumnTypeMismatch', 'ColumnLengthExceeded',
    'ColumnValueExceeded',
    'format_records',
]
