from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import logging
from types import MappingProxyType
from typing import Literal

import numpy as np

from tickplot.errors import EmptyInputError
from tickplot.labels import format_label
from tickplot.raster import draw_line, draw_text, text_size
from tickplot.style import DEFAULT_TICK_SIZE, PlotStyle


LOGGER = logging.getLogger(__name__)

Orientation = Literal["x", "y"]


@dataclass(frozen=True)
class AxisGeometry:
    """Pixel placement of one axis.

    ``origin`` is the foot shared by both axes. The x axis walks rightward from
    it and the y axis walks upward, so pixel y decreases as data increases.
    """

    orientation: Orientation
    origin: tuple[int, int]
    span: int
    tick_size: int = DEFAULT_TICK_SIZE

    def __post_init__(self) -> None:
        if self.orientation not in ("x", "y"):
            raise ValueError(f"unknown axis orientation: {self.orientation!r}")
        if self.span <= 0:
            raise ValueError("axis span must be > 0")

    @property
    def direction(self) -> int:
        return 1 if self.orientation == "x" else -1

    @property
    def start(self) -> int:
        return self.origin[0] if self.orientation == "x" else self.origin[1]

    def step_for(self, label_count: int) -> float:
        if label_count <= 0:
            raise EmptyInputError(f"{self.orientation}-axis has no labels")
        return float(self.span // label_count)


@dataclass(frozen=True)
class TickRegistry:
    axis: Orientation
    positions: Mapping[float, float]
    step: float
    direction: int

    def __contains__(self, label: object) -> bool:
        return label in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def get(self, label: float) -> float | None:
        return self.positions.get(label)


@dataclass(frozen=True)
class Tick:
    label: float
    text: str
    position: float


@dataclass(frozen=True)
class AxisLayout:
    geometry: AxisGeometry
    ticks: tuple[Tick, ...]
    registry: TickRegistry


def map_axis(labels: Sequence[float], geometry: AxisGeometry) -> AxisLayout:
    """Place each label at the midpoint of its ``span // len(labels)`` slice."""
    step = geometry.step_for(len(labels))
    if step == 0:
        LOGGER.warning(
            "%s-axis has %d labels for %d px; ticks will overlap at the axis foot",
            geometry.orientation,
            len(labels),
            geometry.span,
        )
    mid = step / 2.0
    ticks: list[Tick] = []
    positions: dict[float, float] = {}
    for i, raw in enumerate(labels):
        label = float(raw)
        position = geometry.start + geometry.direction * (step * i + mid)
        ticks.append(Tick(label=label, text=format_label(label), position=position))
        positions[label] = position
    registry = TickRegistry(
        axis=geometry.orientation,
        positions=MappingProxyType(positions),
        step=step,
        direction=geometry.direction,
    )
    LOGGER.debug("mapped %s-axis: %d labels, step=%s px", geometry.orientation, len(ticks), step)
    return AxisLayout(geometry=geometry, ticks=tuple(ticks), registry=registry)


def draw_axis(canvas: np.ndarray, layout: AxisLayout, style: PlotStyle) -> None:
    geometry = layout.geometry
    x0, y0 = geometry.origin
    size = geometry.tick_size
    for tick in layout.ticks:
        w, h = text_size(tick.text, font_family=style.font_family, font_size_px=style.label_font_px)
        if geometry.orientation == "y":
            tick_end = (x0 - size, tick.position)
            draw_line(canvas, (x0, tick.position), tick_end, style.line_color)
            # Right-aligned against the tick, vertically centered on it.
            tx = int(tick_end[0] - w)
            ty = int(tick_end[1] - h // 2)
        else:
            tick_end = (tick.position, y0 + size)
            draw_line(canvas, (tick.position, y0), tick_end, style.line_color)
            tx = int(tick_end[0] - w // 2)
            ty = int(tick_end[1])
        draw_text(
            canvas,
            tx,
            ty,
            tick.text,
            style.text_color,
            font_family=style.font_family,
            font_size_px=style.label_font_px,
        )
