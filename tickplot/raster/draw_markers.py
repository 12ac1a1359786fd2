from __future__ import annotations

import numpy as np

from tickplot.style import RGBA


def draw_filled_circle(dst: np.ndarray, center: tuple[int, int], radius: int, color: RGBA) -> None:
    cx, cy = int(center[0]), int(center[1])
    r = max(0, int(radius))
    x0 = max(0, cx - r)
    y0 = max(0, cy - r)
    x1 = min(dst.shape[1], cx + r + 1)
    y1 = min(dst.shape[0], cy + r + 1)
    if x0 >= x1 or y0 >= y1:
        return

    yy, xx = np.mgrid[y0:y1, x0:x1]
    inside = (xx - cx) ** 2 + (yy - cy) ** 2 <= r * r
    if not np.any(inside):
        return

    patch = dst[y0:y1, x0:x1]
    a = color[3] / 255.0
    rgb = np.asarray(color[:3], dtype=np.float32)
    blended = rgb * a + patch[:, :, :3].astype(np.float32) * (1.0 - a)
    patch[inside, :3] = blended[inside].astype(np.uint8)
    patch[inside, 3] = 255
