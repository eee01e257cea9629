# painter.py
"""
Scan an image column by column and turn it into database load.

Flow:
  LumaImage -> for each column x: one scheduler interval
    -> each sub-iteration: for each row y: mapping(pixel) -> write_batch
    -> scheduler pads the sub-iteration out to its nominal length

Everything runs on one thread against one connection.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Optional

from loadpaint.config import RunConfig
from loadpaint.luma_image import LumaImage
from loadpaint.mapping import Mapping
from loadpaint.scheduler import IntervalScheduler
from loadpaint.writer import write_batch


@dataclass
class PaintSummary:
    columns: int = 0
    batches: int = 0
    per_table: Dict[int, int] = field(default_factory=dict)

    def __str__(self):
        busiest = max(self.per_table, key=self.per_table.get) if self.per_table else None
        return f"columns={self.columns} batches={self.batches} busiest_table={busiest}"


def paint_pass(
    image: LumaImage,
    x: int,
    storage,
    mapping: Mapping,
    rows_per_table: int,
    totals: Optional[Counter] = None,
    verbose: bool = False,
) -> int:
    """One pass over every row of column x. Returns the number of batches sent."""
    sent = 0
    for y in range(image.height):
        if verbose:
            print(f"Drawing y = {y}")
        target = mapping(image.pixel(x, y), y, image.height)
        sent += write_batch(storage, target.table, target.repetitions, rows_per_table)
        if totals is not None and target.repetitions:
            totals[target.table] += target.repetitions
    return sent


def paint(
    image: LumaImage,
    storage,
    config: RunConfig,
    mapping: Mapping,
    scheduler: Optional[IntervalScheduler] = None,
) -> PaintSummary:
    """
    Drive the whole image: one interval per column, `inters_per_interval`
    passes over the column within that interval.
    """
    if scheduler is None:
        scheduler = IntervalScheduler(config.interval_secs, config.inters_per_interval)

    totals: Counter = Counter()
    summary = PaintSummary()

    def one_pass(_i: int) -> None:
        summary.batches += paint_pass(
            image, x, storage, mapping, config.rows_per_table, totals, config.verbose
        )

    for x in range(image.width):
        print(f"Drawing x = {x}")
        scheduler.run_interval(one_pass)
        summary.columns += 1

    summary.per_table = dict(totals)
    return summary
