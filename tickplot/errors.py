from __future__ import annotations


class PlotError(Exception):
    """Base class for every failure raised while building a plot."""


class PlotDataError(PlotError, ValueError):
    pass


class EmptyInputError(PlotDataError):
    pass


class LabelCoverageError(PlotError, LookupError):
    def __init__(self, axis: str, value: float) -> None:
        super().__init__(f"{axis}-axis labels do not cover value {value!r} (floor {float(value // 1)!r} is missing)")
        self.axis = axis
        self.value = value


class RenderIoError(PlotError, OSError):
    pass
