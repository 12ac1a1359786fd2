from __future__ import annotations

from collections.abc import Iterable
import math

from tickplot.axis import TickRegistry
from tickplot.errors import LabelCoverageError, PlotDataError


def project_value(registry: TickRegistry, value: float) -> float:
    """Pixel coordinate of ``value`` on the axis described by ``registry``.

    Labels map straight to their tick. Anything else is interpolated from the
    tick of its floor, moving ``fraction * step`` pixels away from the axis
    foot. Ticks sit at slice midpoints, so a value just below the next label
    lands slightly past that label's tick.
    """
    v = float(value)
    if not math.isfinite(v):
        raise PlotDataError(f"cannot project non-finite value {value!r}")
    exact = registry.get(v)
    if exact is not None:
        return exact
    floor = float(math.floor(v))
    base = registry.get(floor)
    if base is None:
        raise LabelCoverageError(registry.axis, v)
    return base + registry.direction * (v - floor) * registry.step


def project_point(x_registry: TickRegistry, y_registry: TickRegistry, point: tuple[float, float]) -> tuple[int, int]:
    x, y = point
    # int() truncates toward zero, matching how pixel positions are snapped elsewhere.
    return (int(project_value(x_registry, x)), int(project_value(y_registry, y)))


def project_points(
    x_registry: TickRegistry,
    y_registry: TickRegistry,
    points: Iterable[tuple[float, float]],
) -> list[tuple[int, int]]:
    return [project_point(x_registry, y_registry, p) for p in points]
