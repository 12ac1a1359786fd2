from __future__ import annotations

import numpy as np

from tickplot.raster.canvas import draw_hline, draw_pixel, draw_vline
from tickplot.style import RGBA


def draw_line(dst: np.ndarray, p0: tuple[float, float], p1: tuple[float, float], color: RGBA) -> None:
    x0, y0 = int(p0[0]), int(p0[1])
    x1, y1 = int(p1[0]), int(p1[1])
    if y0 == y1:
        draw_hline(dst, x0, x1, y0, color)
        return
    if x0 == x1:
        draw_vline(dst, x0, y0, y1, color)
        return
    _draw_line_segment(dst, x0, y0, x1, y1, color=color)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        draw_pixel(dst, x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
