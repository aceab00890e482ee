"""Sharpening by a weighted sum of each pixel and its four direct neighbors.

Every interior pixel becomes ``5*center - up - down - left - right`` per
channel, saturated to [0, 255]. The outermost rows and columns are copied
unchanged. The functions differ only in how they walk the pixels:

- ``sharpen``: numpy slices over the whole interior at once
- ``sharpen_indexed``: element access by (row, col, channel)
- ``sharpen_rows``: one flattened row at a time with a channel stride
- ``sharpen_cursor``: a single cursor advanced over the flattened pixels

All of them produce identical output.
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from chromasharp.image.buffer import channel_count, ensure_byte_image

SHARPEN_KERNEL = np.array([[0, -1, 0], [-1, 5, -1], [0, -1, 0]], dtype=np.int16)


def _saturate(value: int) -> int:
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def _has_interior(image: np.ndarray) -> bool:
    return image.shape[0] >= 3 and image.shape[1] >= 3


def sharpen(image: np.ndarray) -> np.ndarray:
    """Sharpen a greyscale or BGR byte image.

    Doxygen:
    - @param image: uint8 array of shape (H, W) or (H, W, 3).
    - @return: New array of the same shape and dtype.
    - @throws ValueError: If the image is not a 1- or 3-channel byte image.
    """
    ensure_byte_image(image)
    result = image.copy()
    if not _has_interior(image):
        return result
    src = image.astype(np.int16)
    total = (
        5 * src[1:-1, 1:-1]
        - src[:-2, 1:-1]
        - src[2:, 1:-1]
        - src[1:-1, :-2]
        - src[1:-1, 2:]
    )
    result[1:-1, 1:-1] = np.clip(total, 0, 255).astype(np.uint8)
    return result


def sharpen_indexed(image: np.ndarray) -> np.ndarray:
    """Sharpen by reading and writing single elements at (row, col, channel)."""
    ensure_byte_image(image)
    result = image.copy()
    rows, cols = image.shape[:2]
    channels = channel_count(image)
    src = image.reshape(rows, cols, channels)
    dst = result.reshape(rows, cols, channels)
    for r in range(1, rows - 1):
        for c in range(1, cols - 1):
            for b in range(channels):
                dst[r, c, b] = _saturate(
                    5 * int(src[r, c, b])
                    - int(src[r + 1, c, b]) - int(src[r, c + 1, b])
                    - int(src[r - 1, c, b]) - int(src[r, c - 1, b])
                )
    return result


def sharpen_rows(image: np.ndarray) -> np.ndarray:
    """Sharpen one row at a time.

    Each row is read as a flat sequence of samples, so horizontal neighbors
    sit one channel count away and vertical neighbors share the same offset
    in the previous and next rows.
    """
    ensure_byte_image(image)
    result = image.copy()
    rows, cols = image.shape[:2]
    step = channel_count(image)
    src = image.reshape(rows, cols * step)
    dst = result.reshape(rows, cols * step)
    for r in range(1, rows - 1):
        previous = src[r - 1].tolist()
        current = src[r].tolist()
        following = src[r + 1].tolist()
        output = list(current)
        for c in range(step, (cols - 1) * step):
            output[c] = _saturate(
                5 * current[c] - current[c - step] - current[c + step]
                - previous[c] - following[c]
            )
        dst[r] = output
    return result


def sharpen_cursor(image: np.ndarray) -> np.ndarray:
    """Sharpen by advancing one position over the flattened pixel sequence."""
    ensure_byte_image(image)
    result = image.copy()
    if not _has_interior(image):
        return result
    rows, cols = image.shape[:2]
    channels = channel_count(image)
    pixels = image.reshape(-1, channels).tolist()
    out = result.reshape(-1, channels)

    pos = cols  # first row
    for _ in range(1, rows - 1):
        pos += 1  # first column
        for _ in range(1, cols - 1):
            here = pixels[pos]
            left, right = pixels[pos - 1], pixels[pos + 1]
            up, down = pixels[pos - cols], pixels[pos + cols]
            out[pos] = [
                _saturate(5 * here[b] - left[b] - right[b] - up[b] - down[b])
                for b in range(channels)
            ]
            pos += 1
        pos += 1  # last column
    return result


SHARPEN_VARIANTS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "vectorized": sharpen,
    "indexed": sharpen_indexed,
    "rows": sharpen_rows,
    "cursor": sharpen_cursor,
}


def get_sharpen_variant(name: str) -> Callable[[np.ndarray], np.ndarray]:
    """Look up a sharpening function by name."""
    key = str(name).strip().lower()
    if key not in SHARPEN_VARIANTS:
        raise ValueError(f"Unknown sharpen variant '{name}'. Choose from: {', '.join(SHARPEN_VARIANTS)}.")
    return SHARPEN_VARIANTS[key]
