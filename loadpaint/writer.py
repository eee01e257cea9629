from __future__ import annotations

from loadpaint.storage import table_name


def write_batch(storage, table_index: int, repetitions: int, rows_per_table: int) -> int:
    """
    Send `repetitions` full-table increments (val += 1 for ids 0..rows_per_table-1)
    to draw table `table_index`. Returns the number of batches sent.
    """
    if repetitions < 0:
        raise ValueError("repetitions must not be negative")
    name = table_name(table_index)
    for _ in range(repetitions):
        storage.batch_update(name, rows_per_table)
    return repetitions
