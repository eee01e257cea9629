# fake_storage.py
"""
In-memory stand-in for MySQLStorage, used by the tests.

Keeps namespaces -> tables -> {id: val} and records every primitive call.
`fail_on_update=n` makes the n-th batch_update (1-based) raise StorageError
before touching anything.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from loadpaint.storage import StorageError


class FakeStorage:
    def __init__(self, fail_on_update: Optional[int] = None, fail_on_table: Optional[str] = None):
        self.namespaces: Dict[str, Dict[str, Dict[int, int]]] = {}
        self.current: Optional[str] = None
        self.calls: List[Tuple[str, str]] = []
        self.updates = 0
        self.closed = False
        self._fail_on_update = fail_on_update
        self._fail_on_table = fail_on_table

    # ----- namespace -----
    def drop_namespace(self, name: str) -> None:
        self.calls.append(("drop_namespace", name))
        self.namespaces.pop(name, None)
        if self.current == name:
            self.current = None

    def create_namespace(self, name: str) -> None:
        self.calls.append(("create_namespace", name))
        if name in self.namespaces:
            raise StorageError(f"while creating database {name}: database exists")
        self.namespaces[name] = {}

    def select_namespace(self, name: str) -> None:
        self.calls.append(("select_namespace", name))
        if name not in self.namespaces:
            raise StorageError(f"while selecting database {name}: unknown database")
        self.current = name

    # ----- tables -----
    def _tables(self) -> Dict[str, Dict[int, int]]:
        if self.current is None:
            raise StorageError("no database selected")
        return self.namespaces[self.current]

    def create_table(self, table: str) -> None:
        self.calls.append(("create_table", table))
        if table == self._fail_on_table:
            raise StorageError(f"while creating table {table}: boom")
        tables = self._tables()
        if table in tables:
            raise StorageError(f"while creating table {table}: table exists")
        tables[table] = {}

    def batch_insert(self, table: str, rows) -> None:
        self.calls.append(("batch_insert", table))
        data = self._tables()[table]
        for row_id, val in rows:
            data[row_id] = val

    def batch_update(self, table: str, row_count: int) -> None:
        self.calls.append(("batch_update", table))
        self.updates += 1
        if self._fail_on_update is not None and self.updates == self._fail_on_update:
            raise StorageError(f"while writing to {table}: boom")
        tables = self._tables()
        if table not in tables:
            raise StorageError(f"while writing to {table}: table doesn't exist")
        data = tables[table]
        for row_id in data:
            if 0 <= row_id < row_count:
                data[row_id] += 1

    def close(self) -> None:
        self.closed = True

    # ----- inspection helpers -----
    def values(self, table: str) -> Dict[int, int]:
        return dict(self._tables()[table])

    def update_count(self, table: str) -> int:
        return sum(1 for op, t in self.calls if op == "batch_update" and t == table)


class FakeClock:
    """Manual clock: only sleep() and advance() move time forward."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, secs: float) -> None:
        self.sleeps.append(secs)
        self.now += secs

    def advance(self, secs: float) -> None:
        self.now += secs
