"""
Display helpers - plain-text rendering of records for drivers
"""

from typing import Any, List, Optional

from .schema import Record

# Limit column width for readability
MAX_WIDTH = 40


def record_columns(records: List[Record]) -> List[str]:
    """Collect column names in order of first appearance"""
    columns: List[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)
    return columns


def _cell(value: Any) -> str:
    if value is None:
        return 'NULL'
    return str(value)


def format_records(records: List[Record], columns: Optional[List[str]] = None) -> str:
    """Format records as an aligned text table with a row-count footer."""
    if not records:
        return "(0 rows)"

    columns = columns or record_columns(records)

    # Missing keys render as blanks so they stay distinct from NULL
    widths = {col: len(col) for col in columns}
    for record in records:
        for col in columns:
            val = _cell(record[col]) if col in record else ''
            widths[col] = max(widths[col], len(val))
    widths = {col: min(w, MAX_WIDTH) for col, w in widths.items()}

    header = " | ".join(col.ljust(widths[col])[:widths[col]] for col in columns)
    separator = "-+-".join("-" * widths[col] for col in columns)

    lines = [header, separator]
    for record in records:
        values = []
        for col in columns:
            val = _cell(record[col]) if col in record else ''
            values.append(val.ljust(widths[col])[:widths[col]])
        lines.append(" | ".join(values))

    lines.append("")
    lines.append(f"({len(records)} row(s))")
    return "\n".join(lines)
