from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from tickplot.colors import RGB, ColorSource
from tickplot.style import DEFAULT_BASE_WEIGHT


@dataclass(frozen=True)
class Marker:
    x: int
    y: int
    weight: int
    color: RGB

    @property
    def center(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def radius(self) -> int:
        return self.weight


def aggregate_points(
    points: Iterable[tuple[int, int]],
    base_weight: int = DEFAULT_BASE_WEIGHT,
) -> dict[tuple[int, int], int]:
    """Count points per pixel; the first hit weighs ``base_weight``, each repeat adds one."""
    weights: dict[tuple[int, int], int] = {}
    for point in points:
        key = (int(point[0]), int(point[1]))
        if key in weights:
            weights[key] += 1
        else:
            weights[key] = base_weight
    return weights


def build_markers(weights: Mapping[tuple[int, int], int], color_source: ColorSource) -> list[Marker]:
    return [Marker(x=x, y=y, weight=weight, color=color_source()) for (x, y), weight in weights.items()]
