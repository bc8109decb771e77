"""
TableStore - Main entry point for TableStore

Owns every table and coordinates schema changes, record insertion and
record lookups. Everything lives in memory for the life of the process.
"""

from threading import Lock
from typing import Any, Dict, List

from .errors import TableAlreadyExists, TableNotFound
from .schema import Column, Record, Table


class TableStore:
    """
    In-memory table store.

    Usage:
        store = TableStore()
        store.create_table("users", [
            Column("id", ColumnType.INT, max_int_value=20),
            Column("name", ColumnType.STRING, max_string_length=100),
        ])
        store.add_record("users", {"id": 1, "name": "Alice"})
        for record in store.filter_record("users", "id", 1):
            print(record)

    A single lock serializes all operations. Read operations return copies
    of the stored records, so results are snapshots.
    """

    def __init__(self):
        self._tables: Dict[str, Table] = {}
        self._lock = Lock()

    def _get_table(self, name: str) -> Table:
        """Look up a table, raising TableNotFound if absent"""
        table = self._tables.get(name)
        if table is None:
            raise TableNotFound(name)
        return table

    # ------------------------------------------------------------------
    # Table lifecycle
    # ------------------------------------------------------------------

    def create_table(self, name: str, columns: List[Column]) -> None:
        """
        Create a new, empty table.

        Args:
            name: Table name, unique within the store
            columns: Ordered column definitions

        Raises:
            TableAlreadyExists: If a table with this name exists
            DuplicateColumn: If two columns share a name
        """
        with self._lock:
            if name in self._tables:
                raise TableAlreadyExists(name)
            self._tables[name] = Table(name, columns)

    def delete_table(self, name: str) -> None:
        """Drop a table together with all of its records."""
        with self._lock:
            self._get_table(name)
            del self._tables[name]

    def update_table(self, name: str, columns: List[Column]) -> None:
        """
        Replace a table's column list.

        Existing records are kept and are not re-validated. The table must
        already exist; this never creates one.

        Raises:
            TableNotFound: If the table does not exist
            DuplicateColumn: If two columns share a name
        """
        with self._lock:
            self._get_table(name).replace_columns(columns)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def add_record(self, table_name: str, record: Record) -> None:
        """
        Validate a record against the table's columns and append it.

        Raises:
            TableNotFound: If the table does not exist
            RecordValidationError: If any present column value is invalid;
                nothing is stored in that case
        """
        with self._lock:
            self._get_table(table_name).append(record)

    def print_records(self, table_name: str) -> List[Record]:
        """Return all records of a table in insertion order."""
        with self._lock:
            return [dict(r) for r in self._get_table(table_name).scan()]

    def filter_record(self, table_name: str, column_name: str, value: Any) -> List[Record]:
        """
        Return, in insertion order, the records whose value at column_name
        equals value. Both type and value must match; records without the
        column never match.
        """
        with self._lock:
            table = self._get_table(table_name)
            return [dict(r) for r in table.matching(column_name, value)]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def tables(self) -> List[str]:
        """List all table names in creation order."""
        with self._lock:
            return list(self._tables.keys())

    def table_exists(self, name: str) -> bool:
        with self._lock:
            return name in self._tables

    def describe(self, table_name: str) -> Dict[str, Any]:
        """Get a table's schema and record count as a dictionary."""
        with self._lock:
            return self._get_table(table_name).to_dict()

    def count(self, table_name: str) -> int:
        """Get record count for a table."""
        with self._lock:
            return self._get_table(table_name).count()

    def __contains__(self, name: str) -> bool:
        return self.table_exists(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)
