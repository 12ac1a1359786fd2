from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tickplot.adapters import normalize_labels, normalize_points
from tickplot.labels import LabelSet, generate_axis_labels


DEFAULT_TEXT = "unset"


@dataclass(frozen=True)
class PlotSpec:
    """Everything a single draw needs: text, labels for both axes and the points."""

    data: tuple[tuple[float, float], ...]
    x_labels: LabelSet
    y_labels: LabelSet
    title: str = DEFAULT_TEXT
    x_caption: str = DEFAULT_TEXT
    y_caption: str = DEFAULT_TEXT

    @classmethod
    def from_data(
        cls,
        data: Any,
        *,
        title: str = DEFAULT_TEXT,
        x_caption: str = DEFAULT_TEXT,
        y_caption: str = DEFAULT_TEXT,
        x_labels: Any = None,
        y_labels: Any = None,
    ) -> "PlotSpec":
        points = normalize_points(data)
        gen_x, gen_y = generate_axis_labels(points)
        return cls(
            data=points,
            x_labels=gen_x if x_labels is None else normalize_labels(x_labels, axis="x"),
            y_labels=gen_y if y_labels is None else normalize_labels(y_labels, axis="y"),
            title=title,
            x_caption=x_caption,
            y_caption=y_caption,
        )
