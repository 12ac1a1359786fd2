from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from tickplot.adapters import normalize_points
from tickplot.colors import random_color_source
from tickplot.errors import PlotDataError, PlotError
from tickplot.labels import generate_axis_labels
from tickplot.plot import DEFAULT_TEXT, PlotSpec
from tickplot.render import draw
from tickplot.style import DEFAULT_CANVAS_SIZE, DEFAULT_PADDING, PlotStyle


LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper()), format="%(levelname)s %(name)s: %(message)s")

    style = None
    if args.command == "draw":
        try:
            style = PlotStyle(canvas_size=args.canvas_size, padding=args.padding)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        points = normalize_points(load_points(args.input))
        if args.command == "labels":
            x_labels, y_labels = generate_axis_labels(points)
            print(json.dumps({"x": list(x_labels), "y": list(y_labels)}))
            return 0

        spec = PlotSpec.from_data(
            points,
            title=args.title,
            x_caption=args.x_caption,
            y_caption=args.y_caption,
            x_labels=args.x_labels,
            y_labels=args.y_labels,
        )
        _check_label_density(spec, style)
        draw(spec, args.out, style=style, colors=random_color_source(args.seed))
    except PlotError as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


def load_points(path: Path) -> list[tuple[Any, Any]] | dict[str, Any]:
    """Read points from a JSON (pairs or ``{"x": [...], "y": [...]}``) or CSV file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PlotDataError(f"cannot read {path}: {exc}") from exc

    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PlotDataError(f"invalid JSON in {path}: {exc}") from exc
        if isinstance(payload, dict):
            return payload
        if isinstance(payload, list):
            return [tuple(row) if isinstance(row, list) else row for row in payload]
        raise PlotDataError(f"unsupported JSON payload in {path}")

    rows = [row for row in csv.reader(text.splitlines()) if row and any(cell.strip() for cell in row)]
    if rows and not _is_numeric_row(rows[0]):
        rows = rows[1:]
    points: list[tuple[Any, Any]] = []
    for lineno, row in enumerate(rows, start=1):
        if len(row) < 2:
            raise PlotDataError(f"{path}: row {lineno} needs two columns")
        points.append((row[0].strip(), row[1].strip()))
    return points


def _check_label_density(spec: PlotSpec, style: PlotStyle) -> None:
    # More labels than axis pixels collapses every tick onto the origin.
    for axis, labels in (("x", spec.x_labels), ("y", spec.y_labels)):
        if len(labels) > style.axis_span:
            raise PlotDataError(
                f"{axis} axis needs {len(labels)} labels but has only {style.axis_span} pixels; pass coarser labels"
            )


def _is_numeric_row(row: Sequence[str]) -> bool:
    for cell in row[:2]:
        try:
            float(cell)
        except ValueError:
            return False
    return True


def _parse_labels(raw: str) -> list[float]:
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"labels must be comma-separated numbers: {raw!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tickplot")
    parser.add_argument("--log-level", choices=["debug", "info", "warning", "error"], default="warning")
    sub = parser.add_subparsers(dest="command", required=True)

    draw_cmd = sub.add_parser("draw", help="Render a scatter plot from a CSV or JSON file of points.")
    draw_cmd.add_argument("input", type=Path)
    draw_cmd.add_argument("--out", type=Path, required=True, help="Output image path; format follows the extension.")
    draw_cmd.add_argument("--title", default=DEFAULT_TEXT)
    draw_cmd.add_argument("--x-caption", default=DEFAULT_TEXT)
    draw_cmd.add_argument("--y-caption", default=DEFAULT_TEXT)
    draw_cmd.add_argument("--x-labels", type=_parse_labels, default=None, help="Comma-separated x-axis labels.")
    draw_cmd.add_argument("--y-labels", type=_parse_labels, default=None, help="Comma-separated y-axis labels.")
    draw_cmd.add_argument("--seed", type=int, default=None, help="Seed for marker colors.")
    draw_cmd.add_argument("--canvas-size", type=int, default=DEFAULT_CANVAS_SIZE)
    draw_cmd.add_argument("--padding", type=int, default=DEFAULT_PADDING)

    labels = sub.add_parser("labels", help="Print the generated axis labels as JSON.")
    labels.add_argument("input", type=Path)
    return parser
