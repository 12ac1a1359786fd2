from __future__ import annotations

from decimal import Decimal
from pathlib import Path
import tempfile
import unittest

import numpy as np

from tickplot import EmptyInputError, PlotDataError, PlotSpec, PlotStyle, ScatterGraph, cycle_color_source
from tickplot.adapters import normalize_labels, normalize_points


try:
    import pandas as pd
except ImportError:  # pragma: no cover - optional dependency
    pd = None


class ScatterGraphBuilderTests(unittest.TestCase):
    def test_defaults_match_unset_text(self) -> None:
        graph = ScatterGraph.build()
        self.assertEqual((graph.title, graph.x_axis_text, graph.y_axis_text), ("unset", "unset", "unset"))
        self.assertEqual(graph.data, ())

    def test_setters_return_updated_copies(self) -> None:
        base = ScatterGraph.build()
        titled = base.set_title("GCSE vs IB Grades").set_axis_text("GCSE Grades", "IB Grades")
        self.assertEqual(base.title, "unset")
        self.assertEqual(titled.title, "GCSE vs IB Grades")
        self.assertEqual((titled.x_axis_text, titled.y_axis_text), ("GCSE Grades", "IB Grades"))

    def test_load_data_generates_labels(self) -> None:
        graph = ScatterGraph.build().load_data([(1.2, 2.5), (3.4, 6.9)])
        self.assertEqual(graph.x_labels, (1.0, 2.0, 3.0, 4.0))
        self.assertEqual(graph.y_labels, (2.0, 3.0, 4.0, 5.0, 6.0, 7.0))
        self.assertEqual(graph.data, ((1.2, 2.5), (3.4, 6.9)))

    def test_load_data_replaces_earlier_labels(self) -> None:
        graph = ScatterGraph.build().set_labels([0, 1, 2, 3, 4], [0, 1]).load_data([(1.0, 1.0)])
        self.assertEqual(graph.x_labels, (1.0,))
        self.assertEqual(graph.y_labels, (1.0,))

    def test_set_labels_after_load_data_overrides(self) -> None:
        graph = ScatterGraph.build().load_data([(1.0, 1.0)]).set_labels([0, 1, 2], [1, 2])
        self.assertEqual(graph.to_spec().x_labels, (0.0, 1.0, 2.0))
        self.assertEqual(graph.to_spec().y_labels, (1.0, 2.0))

    def test_empty_data_is_rejected(self) -> None:
        with self.assertRaises(EmptyInputError):
            ScatterGraph.build().load_data([])
        with self.assertRaises(EmptyInputError):
            ScatterGraph.build().to_spec()

    def test_draw_writes_image(self) -> None:
        rng = np.random.default_rng(3)
        data = list(zip(rng.uniform(1.0, 9.0, size=101).tolist(), rng.uniform(1.0, 7.0, size=101).tolist()))
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "scatter.png"
            canvas = (
                ScatterGraph.build()
                .set_title("GCSE vs IB Grades")
                .set_axis_text("GCSE Grades", "IB Grades")
                .load_data(data)
                .draw(out, colors=cycle_color_source([(30, 60, 90)]))
            )
            self.assertTrue(out.exists())
        self.assertEqual(canvas.shape, (500, 500, 4))

    def test_render_honours_style(self) -> None:
        canvas = ScatterGraph.build().load_data([(1, 1), (2, 3)]).render(style=PlotStyle(canvas_size=200, padding=20))
        self.assertEqual(canvas.shape, (200, 200, 4))

    def test_plot_spec_from_data_accepts_explicit_labels(self) -> None:
        spec = PlotSpec.from_data([(1, 2)], title="t", x_labels=[0, 1, 2], y_labels=None)
        self.assertEqual(spec.x_labels, (0.0, 1.0, 2.0))
        self.assertEqual(spec.y_labels, (2.0,))
        self.assertEqual(spec.title, "t")


class NormalizeTests(unittest.TestCase):
    def test_pairs_with_decimals_and_strings(self) -> None:
        points = normalize_points([(Decimal("1.5"), 2), ("3", 4.25)])
        self.assertEqual(points, ((1.5, 2.0), (3.0, 4.25)))

    def test_array_input(self) -> None:
        points = normalize_points(np.asarray([[1, 2], [3, 4]]))
        self.assertEqual(points, ((1.0, 2.0), (3.0, 4.0)))

    def test_mapping_and_keyword_columns(self) -> None:
        self.assertEqual(normalize_points({"x": [1, 2], "y": [3, 4]}), ((1.0, 3.0), (2.0, 4.0)))
        self.assertEqual(normalize_points(x=np.asarray([1.0]), y=[2]), ((1.0, 2.0),))

    @unittest.skipIf(pd is None, "pandas not installed")
    def test_dataframe_input(self) -> None:
        frame = pd.DataFrame({"x": [1.0, 2.0], "y": [5, 6], "note": ["a", "b"]})
        self.assertEqual(normalize_points(frame), ((1.0, 5.0), (2.0, 6.0)))

    def test_rejects_malformed_input(self) -> None:
        with self.assertRaises(EmptyInputError):
            normalize_points([])
        with self.assertRaises(EmptyInputError):
            normalize_points(np.empty((0, 2)))
        with self.assertRaises(PlotDataError):
            normalize_points([(1.0, 2.0, 3.0)])
        with self.assertRaises(PlotDataError):
            normalize_points([(1.0, "two")])
        with self.assertRaises(PlotDataError):
            normalize_points([(1.0, float("nan"))])
        with self.assertRaises(PlotDataError):
            normalize_points({"x": [1, 2], "y": [3]})
        with self.assertRaises(PlotDataError):
            normalize_points(np.zeros((3, 3)))
        with self.assertRaises(PlotDataError):
            normalize_points("1,2")
        with self.assertRaises(PlotDataError):
            normalize_points([(1, 2)], x=[1], y=[2])

    def test_labels_must_be_non_empty_and_ascending(self) -> None:
        self.assertEqual(normalize_labels([1, 2.5, 4]), (1.0, 2.5, 4.0))
        with self.assertRaises(EmptyInputError):
            normalize_labels([])
        with self.assertRaises(PlotDataError):
            normalize_labels([2, 1])
        with self.assertRaises(PlotDataError):
            normalize_labels([1, 1])


if __name__ == "__main__":
    unittest.main()
