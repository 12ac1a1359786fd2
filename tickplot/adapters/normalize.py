from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from tickplot.errors import EmptyInputError, PlotDataError
from tickplot.labels import LabelSet


try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


Point = tuple[float, float]


def normalize_points(data: Any = None, *, x: Any = None, y: Any = None) -> tuple[Point, ...]:
    """Coerce plot input to a tuple of ``(x, y)`` float pairs.

    Accepts a sequence of pairs, an ``(N, 2)`` array, a mapping or DataFrame
    with ``x``/``y`` columns, or separate ``x=``/``y=`` columns.
    """
    if data is not None and (x is not None or y is not None):
        raise PlotDataError("pass either data or x=/y=, not both")

    if data is None:
        if x is None or y is None:
            raise PlotDataError("both x and y are required when data is omitted")
        x_arr = _coerce_1d_numeric(x, label="x")
        y_arr = _coerce_1d_numeric(y, label="y")
    elif pd is not None and isinstance(data, pd.DataFrame):
        for col in ("x", "y"):
            if col not in data.columns:
                raise PlotDataError(f"column not found: {col}")
        x_arr = _coerce_1d_numeric(data["x"], label="x")
        y_arr = _coerce_1d_numeric(data["y"], label="y")
    elif isinstance(data, Mapping):
        if "x" not in data or "y" not in data:
            raise PlotDataError("mapping input must provide 'x' and 'y'")
        x_arr = _coerce_1d_numeric(data["x"], label="x")
        y_arr = _coerce_1d_numeric(data["y"], label="y")
    else:
        x_arr, y_arr = _split_pairs(data)

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    if x_arr.size == 0:
        raise EmptyInputError("data must contain at least one point")
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        raise PlotDataError("data contains non-finite values")

    return tuple(zip(x_arr.tolist(), y_arr.tolist()))


def normalize_labels(labels: Any, *, axis: str = "x") -> LabelSet:
    arr = _coerce_1d_numeric(labels, label=f"{axis} labels")
    if arr.size == 0:
        raise EmptyInputError(f"{axis}-axis labels must not be empty")
    if not np.all(np.isfinite(arr)):
        raise PlotDataError(f"{axis}-axis labels contain non-finite values")
    if arr.size > 1 and not np.all(np.diff(arr) > 0):
        raise PlotDataError(f"{axis}-axis labels must be strictly ascending")
    return tuple(float(v) for v in arr.tolist())


def _split_pairs(data: Any) -> tuple[np.ndarray, np.ndarray]:
    if isinstance(data, np.ndarray):
        if data.size == 0:
            raise EmptyInputError("data must contain at least one point")
        if data.ndim != 2 or data.shape[1] != 2:
            raise PlotDataError(f"array input must have shape (N, 2), got {data.shape}")
        arr = _coerce_ndarray(data.reshape(-1), label="data").reshape(-1, 2)
        return arr[:, 0], arr[:, 1]

    if not isinstance(data, Sequence) or isinstance(data, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported data input type: {type(data)!r}")
    if len(data) == 0:
        raise EmptyInputError("data must contain at least one point")

    xs: list[Any] = []
    ys: list[Any] = []
    for i, pair in enumerate(data):
        if isinstance(pair, (str, bytes)) or not isinstance(pair, (Sequence, np.ndarray)) or len(pair) != 2:
            raise PlotDataError(f"data point at index {i} is not an (x, y) pair: {pair!r}")
        xs.append(pair[0])
        ys.append(pair[1])
    return (
        _coerce_ndarray(np.asarray(xs, dtype=object), label="x"),
        _coerce_ndarray(np.asarray(ys, dtype=object), label="y"),
    )


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(value), dtype=object).reshape(-1), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            raise PlotDataError(f"{label} contains a missing value at index {i}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
