from __future__ import annotations

from loadpaint.storage import table_name


def prepare_tables(storage, table_count: int, rows_per_table: int, namespace: str) -> None:
    """
    Reset the namespace and create `table_count` draw tables.

    Every table gets rows id=0..rows_per_table-1 with val=id.
    Anything already stored under `namespace` is destroyed.
    """
    if table_count < 1:
        raise ValueError("table_count must be positive")
    if rows_per_table < 1:
        raise ValueError("rows_per_table must be positive")

    storage.drop_namespace(namespace)
    storage.create_namespace(namespace)
    storage.select_namespace(namespace)

    for table in range(table_count):
        print(f"Preparing table {table}")
        name = table_name(table)
        storage.create_table(name)
        storage.batch_insert(name, ((r, r) for r in range(rows_per_table)))
