"""
Errors raised by TableStore operations.

All of them derive from ValueError, so a caller can catch every store
failure with a single ``except ValueError``.
"""


class TableStoreError(ValueError):
    """Base class for all store errors"""


class TableAlreadyExists(TableStoreError):
    """A table with the given name is already registered"""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Table '{table}' already exists")


class TableNotFound(TableStoreError):
    """No table with the given name is registered"""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Table '{table}' does not exist")


class DuplicateColumn(TableStoreError):
    """A column list defines the same column name twice"""

    def __init__(self, table: str, column: str):
        self.table = table
        self.column = column
        super().__init__(f"Column '{column}' already exists in table '{table}'")


class RecordValidationError(TableStoreError):
    """A record value failed its column's check"""

    def __init__(self, column: str, message: str):
        self.column = column
        super().__init__(message)


class ColumnTypeMismatch(RecordValidationError):
    """A value does not have the column's declared type"""

    def __init__(self, column: str, expected: str):
        self.expected = expected
        super().__init__(column, f"Column '{column}' expects a {expected} value")


class ColumnLengthExceeded(RecordValidationError):
    """A string value is longer than the column allows"""

    def __init__(self, column: str, limit: int):
        self.limit = limit
        super().__init__(column, f"Column '{column}' exceeds maximum length of {limit}")


class ColumnValueExceeded(RecordValidationError):
    """An integer value is above the column's upper bound"""

    def __init__(self, column: str, limit: int):
        self.limit = limit
        super().__init__(column, f"Column '{column}' exceeds maximum value of {limit}")
