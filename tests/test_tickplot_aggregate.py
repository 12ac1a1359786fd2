from __future__ import annotations

import unittest

import numpy as np

from tickplot import PlotSpec, aggregate_points, build_markers, cycle_color_source, euclidean_distance, layout_plot
from tickplot.colors import random_color_source, random_rgb, random_rgba


ONE_TO_NINE = tuple(float(v) for v in range(1, 10))
ONE_TO_SEVEN = tuple(float(v) for v in range(1, 8))


class PointAggregatorTests(unittest.TestCase):
    def test_repeated_pixels_gain_weight(self) -> None:
        weights = aggregate_points([(72, 364), (72, 364), (248, 250)])
        self.assertEqual(weights, {(72, 364): 4, (248, 250): 3})

    def test_base_weight_is_configurable(self) -> None:
        self.assertEqual(aggregate_points([(1, 1)], base_weight=5), {(1, 1): 5})

    def test_markers_take_radius_from_weight_and_one_color_each(self) -> None:
        colors = cycle_color_source([(1, 2, 3), (4, 5, 6)])
        markers = build_markers({(10, 10): 3, (20, 20): 4}, colors)
        self.assertEqual([(m.center, m.radius, m.color) for m in markers], [((10, 10), 3, (1, 2, 3)), ((20, 20), 4, (4, 5, 6))])

    def test_duplicate_points_collapse_into_one_heavier_marker(self) -> None:
        spec = PlotSpec(data=((1.0, 2.0), (1.0, 2.0), (5.0, 4.0)), x_labels=ONE_TO_NINE, y_labels=ONE_TO_SEVEN)
        layout = layout_plot(spec, colors=cycle_color_source([(0, 0, 0)]))
        self.assertEqual({(m.x, m.y, m.weight) for m in layout.markers}, {(72, 364, 4), (248, 250, 3)})

    def test_distinct_points_keep_base_weight(self) -> None:
        spec = PlotSpec(data=((1.0, 2.0), (5.0, 4.0)), x_labels=ONE_TO_NINE, y_labels=ONE_TO_SEVEN)
        layout = layout_plot(spec, colors=cycle_color_source([(0, 0, 0)]))
        self.assertEqual(
            sorted((m.x, m.y, m.weight) for m in layout.markers),
            [(72, 364, 3), (248, 250, 3)],
        )
        first, second = layout.markers
        self.assertGreater(euclidean_distance(first.center, second.center), first.radius + second.radius)


class ColorSourceTests(unittest.TestCase):
    def test_random_rgb_stays_in_byte_range(self) -> None:
        rng = np.random.default_rng(0)
        for _ in range(100):
            color = random_rgb(rng)
            self.assertEqual(len(color), 3)
            self.assertTrue(all(0 <= c <= 255 for c in color))

    def test_seeded_sources_repeat(self) -> None:
        a = random_color_source(42)
        b = random_color_source(42)
        self.assertEqual([a() for _ in range(5)], [b() for _ in range(5)])

    def test_cycle_source_wraps_around(self) -> None:
        source = cycle_color_source([(1, 1, 1), (2, 2, 2)])
        self.assertEqual([source() for _ in range(3)], [(1, 1, 1), (2, 2, 2), (1, 1, 1)])
        with self.assertRaises(ValueError):
            cycle_color_source([])

    def test_random_rgba_keeps_alpha(self) -> None:
        self.assertEqual(random_rgba(128, np.random.default_rng(1))[3], 128)
        with self.assertRaises(ValueError):
            random_rgba(300)


class GeometryTests(unittest.TestCase):
    def test_euclidean_distance(self) -> None:
        self.assertEqual(euclidean_distance((0.0, 0.0), (3.0, 4.0)), 5.0)
        self.assertEqual(euclidean_distance((2.0, 2.0), (2.0, 2.0)), 0.0)


if __name__ == "__main__":
    unittest.main()
