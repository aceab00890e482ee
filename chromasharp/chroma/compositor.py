"""Chroma-key compositing against the foreground's dominant color."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from chromasharp.chroma.histogram import DEFAULT_BUCKETS, DominantColor, find_dominant_color
from chromasharp.errors import InvalidBackgroundDimensions
from chromasharp.image.buffer import ensure_color_image

MAX_THRESHOLD = 255


def validate_threshold(threshold: int) -> int:
    """Return ``threshold`` as an int, rejecting values outside [0, 255]."""
    message = f"threshold must be an integer in [0, {MAX_THRESHOLD}], got {threshold!r}."
    try:
        value = int(threshold)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(message) from None
    if value != threshold or value < 0 or value > MAX_THRESHOLD:
        raise ValueError(message)
    return value


def chroma_key_mask(image: np.ndarray, color: Sequence[int], threshold: int) -> np.ndarray:
    """Mark the pixels whose Euclidean distance to ``color`` is at most ``threshold``.

    Doxygen:
    - @param image: BGR byte image of shape (H, W, 3).
    - @param color: Key color in BGR order.
    - @param threshold: Maximum distance, in [0, 255].
    - @return: Boolean array of shape (H, W).
    """
    ensure_color_image(image, "image")
    limit = validate_threshold(threshold)
    diff = image.astype(np.float64) - np.asarray(color, dtype=np.float64).reshape(1, 1, 3)
    distance = np.sqrt(np.sum(diff * diff, axis=2))
    return distance <= limit


def tile_background(background: np.ndarray, height: int, width: int) -> np.ndarray:
    """Repeat ``background`` so that pixel (r, c) is background[r % bgH, c % bgW].

    The background is never resized; a smaller one wraps around and a larger
    one is cropped.
    """
    bg_h, bg_w = background.shape[:2]
    if bg_h == 0 or bg_w == 0:
        raise InvalidBackgroundDimensions(
            f"Background must have at least one row and column, got {bg_h}x{bg_w}."
        )
    rows = np.arange(height) % bg_h
    cols = np.arange(width) % bg_w
    return background[rows[:, None], cols[None, :]]


def apply_chroma_key(
    foreground: np.ndarray,
    background: np.ndarray,
    threshold: int,
    buckets: int = DEFAULT_BUCKETS,
    dominant: Optional[DominantColor] = None,
) -> np.ndarray:
    """Replace foreground pixels close to its dominant color with background pixels.

    The histogram, dominant color and mask are rebuilt on every call unless
    a dominant color already computed for this foreground is passed in.

    Doxygen:
    - @param foreground: BGR byte image whose dominant color is keyed out.
    - @param background: BGR byte image tiled under the keyed pixels.
    - @param threshold: Maximum Euclidean distance to the dominant color, in [0, 255].
    - @param buckets: Histogram buckets per channel (default 4).
    - @param dominant: Precomputed dominant color of ``foreground``; skips the histogram.
    - @return: New image with the foreground's shape.
    - @throws InvalidBackgroundDimensions: If the background has no rows or columns.
    - @throws ValueError: On a bad threshold, bucket count or channel layout.
    """
    ensure_color_image(foreground, "foreground")
    ensure_color_image(background, "background")
    limit = validate_threshold(threshold)
    height, width = foreground.shape[:2]
    tiled = tile_background(background, height, width)

    if dominant is None:
        dominant = find_dominant_color(foreground, buckets)
    mask = chroma_key_mask(foreground, dominant.bgr, limit)

    output = foreground.copy()
    output[mask] = tiled[mask]
    return output
