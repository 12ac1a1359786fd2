from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
import math

import numpy as np

from tickplot.errors import EmptyInputError, PlotDataError


LabelSet = tuple[float, ...]


@dataclass(frozen=True)
class Extent:
    min: float
    max: float


def compute_extent(values: Iterable[float]) -> Extent:
    arr = np.asarray(list(values), dtype=np.float64)
    if arr.size == 0:
        raise EmptyInputError("cannot derive labels from an empty sequence")
    if not np.all(np.isfinite(arr)):
        raise PlotDataError("cannot derive labels from non-finite values")
    return Extent(min=float(np.min(arr)), max=float(np.max(arr)))


def generate_labels(values: Iterable[float]) -> LabelSet:
    """Unit-spaced labels from ``floor(min)`` up to and including ``ceil(max)``."""
    extent = compute_extent(values)
    low = math.floor(extent.min)
    high = math.ceil(extent.max)
    return tuple(float(v) for v in range(low, high + 1))


def generate_axis_labels(points: Sequence[tuple[float, float]]) -> tuple[LabelSet, LabelSet]:
    if not points:
        raise EmptyInputError("cannot derive labels from empty data")
    return generate_labels(x for x, _ in points), generate_labels(y for _, y in points)


def format_label(value: float) -> str:
    if not np.isfinite(value):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    out = format(Decimal(repr(float(value))), "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return out
