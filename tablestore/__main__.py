#!/usr/bin/env python3
"""
TableStore - In-memory typed record store
Entry point script

Run the walkthrough:
    python -m tablestore

Or use as a library:
    from tablestore import TableStore
    store = TableStore()
"""

from tablestore.core.demo import main

if __name__ == '__main__':
    main()
