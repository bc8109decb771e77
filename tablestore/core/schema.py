"""
Schema Module - Defines columns, tables and record validation

Supports:
- Typed column definitions (STRING, INT)
- Maximum string length for STRING columns
- Inclusive upper bound for INT columns
- Ordered, append-only record storage per table
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .errors import DuplicateColumn
from .types import ColumnType, TypeValidator


Record = Dict[str, Any]

# Marks a key missing from a record; None is a legitimate stored value
_MISSING = object()


@dataclass(frozen=True)
class Column:
    """Represents a column in a table"""
    name: str
    data_type: ColumnType
    max_string_length: int = 0  # 0 means no limit
    max_int_value: Optional[int] = None  # None means unbounded

    def to_dict(self) -> dict:
        """Serialize column to dictionary"""
        return {
            'name': self.name,
            'type': str(self.data_type),
            'max_string_length': self.max_string_length,
            'max_int_value': self.max_int_value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Column':
        """Deserialize column from dictionary"""
        dtype = data['type']
        if not isinstance(dtype, ColumnType):
            dtype = TypeValidator.parse_type(dtype)
        return cls(
            name=data['name'],
            data_type=dtype,
            max_string_length=data.get('max_string_length', 0),
            max_int_value=data.get('max_int_value'),
        )


@dataclass
class Table:
    """
    A named list of column definitions plus the records stored against them.
    Records are kept in arrival order and never re-validated.
    """
    name: str
    columns: List[Column] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)

    def __post_init__(self):
        self.columns = self._checked_columns(self.columns)

    def _checked_columns(self, columns: List[Column]) -> List[Column]:
        """Copy a column list, rejecting duplicate names"""
        seen = set()
        for col in columns:
            if col.name in seen:
                raise DuplicateColumn(self.name, col.name)
            seen.add(col.name)
        return list(columns)

    def replace_columns(self, columns: List[Column]) -> None:
        """Swap in a new column list; stored records are left as they are"""
        self.columns = self._checked_columns(columns)

    def validate_record(self, record: Record) -> None:
        """
        Check a record against every column, in column order.

        Columns the record does not mention are skipped and keys with no
        matching column are ignored. The first failing column raises.
        """
        for col in self.columns:
            value = record.get(col.name, _MISSING)
            if value is _MISSING:
                continue
            TypeValidator.validate(col, value)

    def append(self, record: Record) -> Record:
        """Validate and store a copy of a record"""
        self.validate_record(record)
        stored = dict(record)
        self.records.append(stored)
        return stored

    def scan(self) -> Iterator[Record]:
        """Iterate over all records in insertion order"""
        for record in self.records:
            yield record

    def matching(self, column_name: str, value: Any) -> Iterator[Record]:
        """Iterate over records whose column equals value, type included"""
        for record in self.scan():
            current = record.get(column_name, _MISSING)
            if current is _MISSING:
                continue
            if type(current) is type(value) and current == value:
                yield record

    def count(self) -> int:
        """Return number of records"""
        return len(self.records)

    def to_dict(self) -> dict:
        """Serialize schema to dictionary"""
        return {
            'name': self.name,
            'columns': [col.to_dict() for col in self.columns],
            'record_count': self.count(),
        }
