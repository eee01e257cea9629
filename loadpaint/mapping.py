# mapping.py
"""
Brightness -> load policies.

A policy turns one pixel (intensity, row y, image height) into a LoadTarget:
which draw table to hit and how many batched increments to send it.

- direct:   table = intensity, 1 write per row visit (intensity 0 still
            writes once to table 0).
- inverted: table = height - y - 1, intensity // 2 writes per row visit.
"""

from __future__ import annotations

from typing import Callable, Dict, NamedTuple

MAX_INTENSITY = 255


class LoadTarget(NamedTuple):
    table: int
    repetitions: int


def _check_domain(intensity: int, y: int, height: int) -> None:
    if not 0 <= intensity <= MAX_INTENSITY:
        raise ValueError(f"intensity must be in 0..{MAX_INTENSITY}, got {intensity}")
    if not 0 <= y < height:
        raise ValueError(f"row {y} outside image height {height}")


class DirectMapping:
    name = "direct"

    def __init__(self, table_count: int):
        if table_count < 1:
            raise ValueError("table_count must be positive")
        self.table_count = table_count

    def __call__(self, intensity: int, y: int, height: int) -> LoadTarget:
        _check_domain(intensity, y, height)
        # only `height` tables exist, so bright pixels land on the last one
        return LoadTarget(min(intensity, self.table_count - 1), 1)

    def __repr__(self):
        return f"DirectMapping(table_count={self.table_count})"


class InvertedIntensityMapping:
    name = "inverted"

    def __init__(self, table_count: int):
        if table_count < 1:
            raise ValueError("table_count must be positive")
        self.table_count = table_count

    def __call__(self, intensity: int, y: int, height: int) -> LoadTarget:
        _check_domain(intensity, y, height)
        if height > self.table_count:
            raise ValueError(f"image height {height} needs more than {self.table_count} tables")
        return LoadTarget(height - y - 1, intensity // 2)

    def __repr__(self):
        return f"InvertedIntensityMapping(table_count={self.table_count})"


Mapping = Callable[[int, int, int], LoadTarget]

MAPPINGS: Dict[str, type] = {
    DirectMapping.name: DirectMapping,
    InvertedIntensityMapping.name: InvertedIntensityMapping,
}


def get_mapping(name: str, table_count: int) -> Mapping:
    cls = MAPPINGS.get(name)
    if cls is None:
        raise ValueError(f"Unknown mapping: {name} (choose from {', '.join(sorted(MAPPINGS))})")
    return cls(table_count)
