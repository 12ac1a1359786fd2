from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from tickplot import ScatterGraph, random_color_source


def _random_grades(count: int, seed: int) -> list[tuple[float, float]]:
    rng = np.random.default_rng(seed)
    gcse = rng.uniform(1.0, 9.0, size=count)
    ib = rng.uniform(1.0, 7.0, size=count)
    return list(zip(gcse.tolist(), ib.tolist()))


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a GCSE vs IB grades scatter plot.")
    parser.add_argument("--out", type=Path, default=Path("grades-scatter.png"))
    parser.add_argument("--count", type=int, default=100)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    (
        ScatterGraph.build()
        .set_title("GCSE vs IB Grades")
        .set_axis_text("GCSE Grades", "IB Grades")
        .load_data(_random_grades(args.count, args.seed))
        .draw(args.out, colors=random_color_source(args.seed))
    )


if __name__ == "__main__":
    main()
