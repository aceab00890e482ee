from __future__ import annotations

import os
import sys
import time
from typing import Dict, List

import numpy as np

from chromasharp.image import load_image
from chromasharp.sharpen import SHARPEN_VARIANTS

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_IMAGE = "boomer.jpg"
REPEATS = 3


def time_variant(name: str, image: np.ndarray, repeats: int = REPEATS) -> float:
    """Return the best wall-clock time in seconds over ``repeats`` runs of one variant."""
    func = SHARPEN_VARIANTS[name]
    best = float("inf")
    for _ in range(max(1, repeats)):
        start = time.perf_counter()
        func(image)
        best = min(best, time.perf_counter() - start)
    return best


def main(argv: List[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_IMAGE
    if not os.path.isabs(path) and not os.path.exists(path):
        path = os.path.join(ROOT_DIR, path)

    image = load_image(path)
    h, w = image.shape[:2]
    print(f"Benchmarking sharpen variants on {path} ({w}x{h})")

    timings: Dict[str, float] = {}
    reference = SHARPEN_VARIANTS["vectorized"](image)
    for name in SHARPEN_VARIANTS:
        timings[name] = time_variant(name, image)
        if not np.array_equal(SHARPEN_VARIANTS[name](image), reference):
            print(f"Warning: variant '{name}' differs from the vectorized result")

    fastest = min(timings.values())
    for name, seconds in sorted(timings.items(), key=lambda kv: kv[1]):
        print(f"{name:>10}: {seconds * 1000:9.2f} ms  (x{seconds / fastest:.1f})")


if __name__ == "__main__":
    main()
