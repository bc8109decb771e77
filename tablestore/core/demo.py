"""
Demo - Walkthrough of the TableStore operations

Creates a table, inserts and lists records, filters them, then exercises
schema updates and table deletion, reporting each step on stdout.
"""

from typing import Callable, Optional

from .display import format_records
from .schema import Column
from .store import TableStore


BANNER = """
TableStore - in-memory typed record store
=========================================
"""

# Column definitions in the form accepted by Column.from_dict
TABLE1_COLUMNS = [
    {'name': 'id', 'type': 'INT', 'max_string_length': 1024, 'max_int_value': 20},
    {'name': 'value', 'type': 'STRING', 'max_string_length': 1024, 'max_int_value': 20},
]

UPDATED_COLUMNS = [
    {'name': 'id', 'type': 'INT', 'max_string_length': 1024, 'max_int_value': 20},
    {'name': 'name', 'type': 'STRING', 'max_string_length': 1024, 'max_int_value': 20},
    {'name': 'email', 'type': 'STRING', 'max_string_length': 1024, 'max_int_value': 20},
]


def _step(title: str, action: Callable[[], Optional[str]]) -> bool:
    """Run one step, printing its output or the error it raised."""
    print(f"\n{title}")
    try:
        output = action()
    except ValueError as e:
        print(f"Error: {e}")
        return False
    if output:
        print(output)
    return True


def run_demo(store: Optional[TableStore] = None) -> TableStore:
    """Run the walkthrough against a store and return it."""
    store = store or TableStore()

    columns = [Column.from_dict(c) for c in TABLE1_COLUMNS]
    new_columns = [Column.from_dict(c) for c in UPDATED_COLUMNS]

    print(BANNER)

    _step("Create table1", lambda: store.create_table("table1", columns))
    _step("Add {id: 1, value: 'hello'}",
          lambda: store.add_record("table1", {"id": 1, "value": "hello"}))
    _step("Add {id: 2, value: 'world'}",
          lambda: store.add_record("table1", {"id": 2, "value": "world"}))
    _step("Add {id: 21, value: 'too big'}",
          lambda: store.add_record("table1", {"id": 21, "value": "too big"}))

    _step("All records:", lambda: format_records(store.print_records("table1")))
    _step("Records where id = 2:",
          lambda: format_records(store.filter_record("table1", "id", 2)))

    # users was never created, so both of these report an error
    _step("Update users", lambda: store.update_table("users", new_columns))
    _step("Delete users", lambda: store.delete_table("users"))

    _step("Update table1", lambda: store.update_table("table1", new_columns))
    _step("Add {id: 3, name: 'alice', email: 'alice@example.com'}",
          lambda: store.add_record("table1", {"id": 3, "name": "alice",
                                              "email": "alice@example.com"}))
    _step("All records after schema update:",
          lambda: format_records(store.print_records("table1")))

    _step("Delete table1", lambda: store.delete_table("table1"))
    print(f"\nTables left: {store.tables()}")

    return store


def main():
    """Entry point for the walkthrough."""
    run_demo()


if __name__ == '__main__':
    main()
