from __future__ import annotations

from dataclasses import dataclass


RGBA = tuple[int, int, int, int]

DEFAULT_CANVAS_SIZE = 500
DEFAULT_PADDING = 50
DEFAULT_TICK_SIZE = 5
DEFAULT_BASE_WEIGHT = 3
DEFAULT_CAPTION_FONT_PX = 25.0
DEFAULT_LABEL_FONT_PX = 12.5
DEFAULT_FONT_FAMILY = "DejaVu Sans"


@dataclass(frozen=True)
class PlotStyle:
    canvas_size: int = DEFAULT_CANVAS_SIZE
    padding: int = DEFAULT_PADDING
    tick_size: int = DEFAULT_TICK_SIZE
    base_weight: int = DEFAULT_BASE_WEIGHT
    caption_font_px: float = DEFAULT_CAPTION_FONT_PX
    label_font_px: float = DEFAULT_LABEL_FONT_PX
    font_family: str = DEFAULT_FONT_FAMILY
    background: RGBA = (255, 255, 255, 255)
    line_color: RGBA = (0, 0, 0, 255)
    text_color: RGBA = (0, 0, 0, 255)

    def __post_init__(self) -> None:
        if self.canvas_size <= 0:
            raise ValueError("canvas_size must be > 0")
        if self.padding < 0:
            raise ValueError("padding must be >= 0")
        if self.canvas_size - 2 * self.padding <= 0:
            raise ValueError("padding leaves no room for the axes")
        if self.tick_size < 0:
            raise ValueError("tick_size must be >= 0")
        if self.base_weight <= 0:
            raise ValueError("base_weight must be > 0")
        if self.caption_font_px <= 0 or self.label_font_px <= 0:
            raise ValueError("font sizes must be > 0")

    @property
    def axis_span(self) -> int:
        return self.canvas_size - 2 * self.padding

    @property
    def foot(self) -> tuple[int, int]:
        """Pixel where the vertical axis meets the horizontal one."""
        return (self.padding, self.canvas_size - self.padding)
