from .canvas import blit, draw_hline, draw_pixel, draw_vline, fill, new_canvas, rotate_270, save_image
from .draw_lines import draw_line
from .draw_markers import draw_filled_circle
from .draw_text import draw_text, text_size

__all__ = [
    "blit",
    "draw_filled_circle",
    "draw_hline",
    "draw_line",
    "draw_pixel",
    "draw_text",
    "draw_vline",
    "fill",
    "new_canvas",
    "rotate_270",
    "save_image",
    "text_size",
]
