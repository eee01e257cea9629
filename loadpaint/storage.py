# storage.py
"""
Thin MySQL connection used by the painter.

Only the primitive statements the run needs are exposed:
  drop/create/select namespace, create table, batch insert, batch update.
Every failure is re-raised as StorageError with the operation attached.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import pymysql

from loadpaint.config import ConnectInfo, parse_connect_url

TABLE_PREFIX = "draw"


class StorageError(RuntimeError):
    """A statement against the storage engine failed."""


def table_name(index: int) -> str:
    return f"{TABLE_PREFIX}{index}"


class MySQLStorage:
    """One long-lived autocommit connection; each statement is atomic on its own."""

    def __init__(self, conn: pymysql.connections.Connection):
        self._conn = conn

    @classmethod
    def connect(cls, connect_url: str, *, connect_timeout: int = 10) -> "MySQLStorage":
        info: ConnectInfo = parse_connect_url(connect_url)
        try:
            conn = pymysql.connect(
                host=info.host,
                port=info.port,
                user=info.user,
                password=info.password,
                charset="utf8mb4",
                autocommit=True,
                connect_timeout=connect_timeout,
            )
        except pymysql.MySQLError as e:
            raise StorageError(f"while connecting to {info.host}:{info.port}: {e}") from e
        return cls(conn)

    def _execute(self, context: str, sql: str, args=None) -> None:
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, args)
        except pymysql.MySQLError as e:
            raise StorageError(f"{context}: {e}") from e

    def _executemany(self, context: str, sql: str, rows: Sequence) -> None:
        try:
            with self._conn.cursor() as cur:
                cur.executemany(sql, rows)
        except pymysql.MySQLError as e:
            raise StorageError(f"{context}: {e}") from e

    # ----- namespace -----
    def drop_namespace(self, name: str) -> None:
        self._execute(f"while dropping database {name}", f"DROP DATABASE IF EXISTS `{name}`")

    def create_namespace(self, name: str) -> None:
        self._execute(f"while creating database {name}", f"CREATE DATABASE `{name}`")

    def select_namespace(self, name: str) -> None:
        try:
            self._conn.select_db(name)
        except pymysql.MySQLError as e:
            raise StorageError(f"while selecting database {name}: {e}") from e

    # ----- tables -----
    def create_table(self, table: str) -> None:
        self._execute(
            f"while creating table {table}",
            f"CREATE TABLE `{table}` (id INT NOT NULL, val INT NOT NULL)",
        )

    def batch_insert(self, table: str, rows: Iterable[Tuple[int, int]]) -> None:
        self._executemany(
            f"while filling table {table}",
            f"INSERT INTO `{table}` (id, val) VALUES (%s, %s)",
            list(rows),
        )

    def batch_update(self, table: str, row_count: int) -> None:
        """val = val + 1 for ids 0..row_count-1 in one statement."""
        self._execute(
            f"while writing to {table}",
            f"UPDATE `{table}` SET val = val + 1 WHERE id >= 0 AND id < %s",
            (row_count,),
        )

    def close(self) -> None:
        if self._conn.open:
            self._conn.close()
