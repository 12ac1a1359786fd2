from __future__ import annotations

import math


def euclidean_distance(point_a: tuple[float, float], point_b: tuple[float, float]) -> float:
    """Straight-line distance, ``sqrt((x2 - x1)**2 + (y2 - y1)**2)``."""
    (x1, y1), (x2, y2) = point_a, point_b
    return math.hypot(x2 - x1, y2 - y1)
