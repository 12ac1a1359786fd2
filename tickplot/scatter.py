from __future__ import annotations

from dataclasses import dataclass, replace
import os
from typing import Any

import numpy as np

from tickplot.adapters import normalize_labels, normalize_points
from tickplot.colors import ColorSource
from tickplot.errors import EmptyInputError
from tickplot.labels import LabelSet, generate_axis_labels
from tickplot.plot import DEFAULT_TEXT, PlotSpec
from tickplot.render import draw, render
from tickplot.style import PlotStyle


@dataclass(frozen=True)
class ScatterGraph:
    """Chainable scatter graph configuration.

    Every setter returns an updated copy::

        ScatterGraph.build()
            .set_title("GCSE vs IB Grades")
            .set_axis_text("GCSE Grades", "IB Grades")
            .load_data(points)
            .draw("grades.png")

    ``load_data`` regenerates both label sets from the data, so call
    ``set_labels`` after it to override them.
    """

    title: str = DEFAULT_TEXT
    x_axis_text: str = DEFAULT_TEXT
    y_axis_text: str = DEFAULT_TEXT
    x_labels: LabelSet = ()
    y_labels: LabelSet = ()
    data: tuple[tuple[float, float], ...] = ()

    @classmethod
    def build(cls) -> "ScatterGraph":
        return cls()

    def load_data(self, data: Any) -> "ScatterGraph":
        points = normalize_points(data)
        x_labels, y_labels = generate_axis_labels(points)
        return replace(self, data=points, x_labels=x_labels, y_labels=y_labels)

    def set_title(self, title: str) -> "ScatterGraph":
        return replace(self, title=title)

    def set_axis_text(self, x_axis_text: str, y_axis_text: str) -> "ScatterGraph":
        return replace(self, x_axis_text=x_axis_text, y_axis_text=y_axis_text)

    def set_labels(self, x_labels: Any, y_labels: Any) -> "ScatterGraph":
        return replace(
            self,
            x_labels=normalize_labels(x_labels, axis="x"),
            y_labels=normalize_labels(y_labels, axis="y"),
        )

    def to_spec(self) -> PlotSpec:
        if not self.data:
            raise EmptyInputError("no data loaded; call load_data() first")
        return PlotSpec(
            data=self.data,
            x_labels=self.x_labels,
            y_labels=self.y_labels,
            title=self.title,
            x_caption=self.x_axis_text,
            y_caption=self.y_axis_text,
        )

    def render(self, *, style: PlotStyle | None = None, colors: ColorSource | None = None) -> np.ndarray:
        return render(self.to_spec(), style=style, colors=colors)

    def draw(
        self,
        path: str | os.PathLike[str],
        *,
        style: PlotStyle | None = None,
        colors: ColorSource | None = None,
    ) -> np.ndarray:
        return draw(self.to_spec(), path, style=style, colors=colors)
