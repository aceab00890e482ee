"""Color histogram and dominant-color search.

The histogram is a cube of vote counts indexed by (red, green, blue) bucket.
Each channel's byte range is split into ``buckets`` equal-width buckets, so
with the default of 4 buckets every bucket spans 64 intensities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from chromasharp.image.buffer import ensure_color_image

DEFAULT_BUCKETS = 4


@dataclass(frozen=True)
class DominantColor:
    """Most-voted histogram bucket and the color at its midpoint."""

    red_bucket: int
    green_bucket: int
    blue_bucket: int
    votes: int
    bucket_width: int

    def _midpoint(self, index: int) -> int:
        return index * self.bucket_width + self.bucket_width // 2

    @property
    def red(self) -> int:
        return self._midpoint(self.red_bucket)

    @property
    def green(self) -> int:
        return self._midpoint(self.green_bucket)

    @property
    def blue(self) -> int:
        return self._midpoint(self.blue_bucket)

    @property
    def bgr(self) -> Tuple[int, int, int]:
        """Color in OpenCV channel order, comparable with image pixels."""
        return (self.blue, self.green, self.red)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)


def bucket_width(buckets: int = DEFAULT_BUCKETS) -> int:
    """Return the number of intensities covered by one bucket.

    Doxygen:
    - @param buckets: Buckets per channel; must divide 256.
    - @return: Bucket width (256 // buckets).
    - @throws ValueError: If ``buckets`` is outside [1, 256] or does not divide 256.
    """
    if not isinstance(buckets, (int, np.integer)) or buckets < 1 or buckets > 256:
        raise ValueError(f"buckets must be an integer in [1, 256], got {buckets!r}.")
    if 256 % buckets:
        raise ValueError(f"buckets must divide 256 evenly, got {buckets}.")
    return 256 // int(buckets)


def build_color_histogram(image: np.ndarray, buckets: int = DEFAULT_BUCKETS) -> np.ndarray:
    """Count the pixels of a BGR image per (red, green, blue) bucket.

    Doxygen:
    - @param image: BGR byte image of shape (H, W, 3).
    - @param buckets: Buckets per channel (default 4).
    - @return: int64 array of shape (buckets, buckets, buckets) whose sum equals H * W.
    """
    ensure_color_image(image, "image")
    width = bucket_width(buckets)
    idx = image.reshape(-1, 3).astype(np.intp) // width
    # OpenCV stores blue first; the histogram is indexed red first
    flat = (idx[:, 2] * buckets + idx[:, 1]) * buckets + idx[:, 0]
    counts = np.bincount(flat, minlength=buckets ** 3)
    return counts.reshape(buckets, buckets, buckets)


def dominant_from_histogram(hist: np.ndarray) -> DominantColor:
    """Pick the bucket with the most votes.

    Cells are scanned in (red, green, blue) nested order and only a strictly
    greater count replaces the current winner, so ties keep the first cell.
    An all-zero histogram gives bucket (0, 0, 0) with no votes.
    """
    buckets = hist.shape[0]
    if hist.ndim != 3 or hist.shape != (buckets, buckets, buckets):
        raise ValueError(f"Expected a cubic 3D histogram, got shape {hist.shape}.")
    width = bucket_width(buckets)
    # argmax returns the first maximum in C order, which is the scan order above
    best = int(np.argmax(hist))
    red, green, blue = np.unravel_index(best, hist.shape)
    return DominantColor(
        red_bucket=int(red),
        green_bucket=int(green),
        blue_bucket=int(blue),
        votes=int(hist.flat[best]),
        bucket_width=width,
    )


def find_dominant_color(image: np.ndarray, buckets: int = DEFAULT_BUCKETS) -> DominantColor:
    """Build the color histogram of ``image`` and return its dominant color."""
    return dominant_from_histogram(build_color_histogram(image, buckets))
