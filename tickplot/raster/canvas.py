from __future__ import annotations

import logging
import os
from pathlib import Path
import tempfile

import numpy as np
from PIL import Image

from tickplot.errors import RenderIoError
from tickplot.style import RGBA


LOGGER = logging.getLogger(__name__)


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    fill(canvas, color)
    return canvas


def fill(dst: np.ndarray, color: RGBA) -> None:
    dst[:, :, 0] = color[0]
    dst[:, :, 1] = color[1]
    dst[:, :, 2] = color[2]
    dst[:, :, 3] = color[3]


def blit(dst: np.ndarray, src: np.ndarray, x0: int = 0, y0: int = 0) -> None:
    """Overlay ``src`` onto ``dst`` with its top-left corner at ``(x0, y0)``, clipping to ``dst``."""
    h, w, _ = src.shape
    dx0 = max(0, x0)
    dy0 = max(0, y0)
    dx1 = min(dst.shape[1], x0 + w)
    dy1 = min(dst.shape[0], y0 + h)
    if dy0 >= dy1 or dx0 >= dx1:
        return

    view = dst[dy0:dy1, dx0:dx1]
    patch = src[dy0 - y0 : dy1 - y0, dx0 - x0 : dx1 - x0]
    alpha = patch[:, :, 3:4].astype(np.float32) / 255.0
    inv = 1.0 - alpha
    view[:, :, :3] = (patch[:, :, :3] * alpha + view[:, :, :3] * inv).astype(np.uint8)
    view[:, :, 3] = 255


def rotate_270(image: np.ndarray) -> np.ndarray:
    """Rotate 270 degrees clockwise, so left-to-right text reads bottom-to-top."""
    return np.ascontiguousarray(np.rot90(image, k=1))


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    segment = dst[y, xa : xb + 1]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    segment = dst[ya : yb + 1, x]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def save_image(canvas: np.ndarray, path: str | os.PathLike[str]) -> Path:
    """Encode ``canvas`` to ``path``; the format follows the file extension.

    The image is written to a temporary sibling first and moved into place, so
    the target is either fully written or untouched.
    """
    out_path = Path(path)
    fmt = Image.registered_extensions().get(out_path.suffix.lower())
    if fmt is None:
        raise RenderIoError(f"unsupported image extension: {out_path.suffix or '<none>'}")

    image = Image.fromarray(np.ascontiguousarray(canvas))
    if fmt in {"JPEG", "BMP", "PPM"}:
        image = image.convert("RGB")

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=out_path.parent,
            prefix=f".{out_path.name}.",
            suffix=out_path.suffix,
            delete=False,
        ) as handle:
            tmp_name = handle.name
            image.save(handle, format=fmt)
        os.replace(tmp_name, out_path)
        tmp_name = None
    except (OSError, ValueError) as exc:
        raise RenderIoError(f"failed to write image to {out_path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                LOGGER.warning("could not remove temporary image %s", tmp_name)
    return out_path
