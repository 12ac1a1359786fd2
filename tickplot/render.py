from __future__ import annotations

from dataclasses import dataclass
import logging
import os

import numpy as np

from tickplot.aggregate import Marker, aggregate_points, build_markers
from tickplot.axis import AxisGeometry, AxisLayout, draw_axis, map_axis
from tickplot.colors import ColorSource, random_color_source, to_rgba
from tickplot.errors import EmptyInputError
from tickplot.plot import PlotSpec
from tickplot.projection import project_points
from tickplot.raster import (
    blit,
    draw_filled_circle,
    draw_line,
    draw_text,
    new_canvas,
    rotate_270,
    save_image,
    text_size,
)
from tickplot.style import PlotStyle


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotLayout:
    x_axis: AxisLayout
    y_axis: AxisLayout
    markers: tuple[Marker, ...]


def layout_plot(spec: PlotSpec, *, style: PlotStyle | None = None, colors: ColorSource | None = None) -> PlotLayout:
    """Map both axes and turn the data into weighted markers, without drawing anything."""
    style = style or PlotStyle()
    if not spec.data:
        raise EmptyInputError("cannot draw a scatter plot without data")
    color_source = colors if colors is not None else random_color_source()

    y_axis = map_axis(
        spec.y_labels,
        AxisGeometry("y", origin=style.foot, span=style.axis_span, tick_size=style.tick_size),
    )
    x_axis = map_axis(
        spec.x_labels,
        AxisGeometry("x", origin=style.foot, span=style.axis_span, tick_size=style.tick_size),
    )
    projected = project_points(x_axis.registry, y_axis.registry, spec.data)
    weights = aggregate_points(projected, base_weight=style.base_weight)
    markers = build_markers(weights, color_source)
    LOGGER.debug("%d points collapsed into %d markers", len(projected), len(markers))
    return PlotLayout(x_axis=x_axis, y_axis=y_axis, markers=tuple(markers))


def render(spec: PlotSpec, *, style: PlotStyle | None = None, colors: ColorSource | None = None) -> np.ndarray:
    style = style or PlotStyle()
    layout = layout_plot(spec, style=style, colors=colors)

    size = style.canvas_size
    pad = style.padding
    foot = style.foot
    canvas = new_canvas(size, size, style.background)

    draw_line(canvas, (pad, pad), foot, style.line_color)
    draw_line(canvas, foot, (size - pad, foot[1]), style.line_color)

    _draw_x_caption(canvas, spec.x_caption, style)
    _draw_y_caption(canvas, spec.y_caption, style)

    draw_axis(canvas, layout.y_axis, style)
    draw_axis(canvas, layout.x_axis, style)

    _draw_title(canvas, spec.title, style)

    for marker in layout.markers:
        draw_filled_circle(canvas, marker.center, marker.radius, to_rgba(marker.color))
    return canvas


def draw(
    spec: PlotSpec,
    path: str | os.PathLike[str],
    *,
    style: PlotStyle | None = None,
    colors: ColorSource | None = None,
) -> np.ndarray:
    canvas = render(spec, style=style, colors=colors)
    out_path = save_image(canvas, path)
    LOGGER.info("saved scatter plot to %s", out_path)
    return canvas


def _draw_x_caption(canvas: np.ndarray, text: str, style: PlotStyle) -> None:
    if not text:
        return
    w, h = text_size(text, font_family=style.font_family, font_size_px=style.caption_font_px)
    x = (style.canvas_size - w) // 2
    y = style.canvas_size - h
    draw_text(canvas, x, y, text, style.text_color, font_family=style.font_family, font_size_px=style.caption_font_px)


def _draw_y_caption(canvas: np.ndarray, text: str, style: PlotStyle) -> None:
    if not text:
        return
    w, h = text_size(text, font_family=style.font_family, font_size_px=style.caption_font_px)
    buffer = new_canvas(w, h, style.background)
    draw_text(buffer, 0, 0, text, style.text_color, font_family=style.font_family, font_size_px=style.caption_font_px)
    blit(canvas, rotate_270(buffer), 0, (style.canvas_size - w) // 2)


def _draw_title(canvas: np.ndarray, text: str, style: PlotStyle) -> None:
    if not text:
        return
    w, h = text_size(text, font_family=style.font_family, font_size_px=style.caption_font_px)
    x = (style.canvas_size - w) // 2
    y = style.padding - h
    draw_text(canvas, x, y, text, style.text_color, font_family=style.font_family, font_size_px=style.caption_font_px)
