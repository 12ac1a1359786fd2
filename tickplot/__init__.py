from tickplot.aggregate import Marker, aggregate_points, build_markers
from tickplot.axis import AxisGeometry, AxisLayout, Tick, TickRegistry, map_axis
from tickplot.colors import cycle_color_source, random_color_source, random_rgb, random_rgba
from tickplot.errors import EmptyInputError, LabelCoverageError, PlotDataError, PlotError, RenderIoError
from tickplot.geometry import euclidean_distance
from tickplot.labels import Extent, generate_axis_labels, generate_labels
from tickplot.plot import PlotSpec
from tickplot.projection import project_point, project_points, project_value
from tickplot.render import PlotLayout, draw, layout_plot, render
from tickplot.scatter import ScatterGraph
from tickplot.style import PlotStyle

__all__ = [
    "AxisGeometry",
    "AxisLayout",
    "EmptyInputError",
    "Extent",
    "LabelCoverageError",
    "Marker",
    "PlotDataError",
    "PlotError",
    "PlotLayout",
    "PlotSpec",
    "PlotStyle",
    "RenderIoError",
    "ScatterGraph",
    "Tick",
    "TickRegistry",
    "aggregate_points",
    "build_markers",
    "cycle_color_source",
    "draw",
    "euclidean_distance",
    "generate_axis_labels",
    "generate_labels",
    "layout_plot",
    "map_axis",
    "project_point",
    "project_points",
    "project_value",
    "random_color_source",
    "random_rgb",
    "random_rgba",
    "render",
]
