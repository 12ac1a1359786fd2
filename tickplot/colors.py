from __future__ import annotations

from collections.abc import Callable, Sequence
import itertools

import numpy as np

from tickplot.style import RGBA


RGB = tuple[int, int, int]
ColorSource = Callable[[], RGB]


def random_rgb(rng: np.random.Generator | None = None) -> RGB:
    gen = rng if rng is not None else np.random.default_rng()
    r, g, b = gen.integers(0, 256, size=3).tolist()
    return (int(r), int(g), int(b))


def random_rgba(alpha: int, rng: np.random.Generator | None = None) -> RGBA:
    if not 0 <= alpha <= 255:
        raise ValueError("alpha must be within [0, 255]")
    r, g, b = random_rgb(rng)
    return (r, g, b, int(alpha))


def random_color_source(seed: int | None = None) -> ColorSource:
    rng = np.random.default_rng(seed)
    return lambda: random_rgb(rng)


def cycle_color_source(colors: Sequence[RGB]) -> ColorSource:
    if not colors:
        raise ValueError("colors must not be empty")
    palette = itertools.cycle([tuple(int(c) for c in color[:3]) for color in colors])
    return lambda: next(palette)  # type: ignore[return-value]


def to_rgba(color: RGB, alpha: int = 255) -> RGBA:
    return (color[0], color[1], color[2], alpha)
