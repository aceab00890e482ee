"""Byte image helpers: load, save and shape validation.

Images are numpy arrays as returned by OpenCV: ``uint8``, shape ``(H, W)``
for greyscale or ``(H, W, 3)`` for BGR color.
"""

from __future__ import annotations

import os

import cv2
import numpy as np

from chromasharp.errors import ImageLoadError


def load_image(path: str) -> np.ndarray:
    """Load an image file as a BGR byte array.

    Doxygen:
    - @param path: Path to the image file (JPEG, PNG, ...).
    - @return: Array of shape (H, W, 3), dtype uint8.
    - @throws ImageLoadError: If the file is missing or cannot be decoded.
    """
    if not os.path.exists(path):
        raise ImageLoadError(path, "image file not found")
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ImageLoadError(path, "failed to decode image")
    return img


def save_image(path: str, image: np.ndarray) -> str:
    """Write an image to disk, creating the parent directory if needed.

    Doxygen:
    - @param path: Output file path; the extension selects the codec.
    - @param image: Byte image to write.
    - @return: The path written.
    - @throws RuntimeError: If OpenCV has no writer for the extension or the write fails.
    """
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    try:
        written = cv2.imwrite(path, image)
    except cv2.error as exc:
        raise RuntimeError(f"Failed to write image: {path}") from exc
    if not written:
        raise RuntimeError(f"Failed to write image: {path}")
    return path


def channel_count(image: np.ndarray) -> int:
    """Return 1 for a 2D greyscale array, else the size of the last axis."""
    if image.ndim == 2:
        return 1
    if image.ndim == 3:
        return int(image.shape[2])
    raise ValueError(f"Expected a 2D or 3D image array, got {image.ndim} dimensions.")


def ensure_byte_image(image: np.ndarray, name: str = "image") -> np.ndarray:
    """Check that ``image`` is a uint8 greyscale or 3-channel array."""
    if not isinstance(image, np.ndarray):
        raise ValueError(f"{name} must be a numpy array.")
    if image.dtype != np.uint8:
        raise ValueError(f"{name} must have dtype uint8, got {image.dtype}.")
    if channel_count(image) not in (1, 3):
        raise ValueError(f"{name} must have 1 or 3 channels.")
    return image


def ensure_color_image(image: np.ndarray, name: str = "image") -> np.ndarray:
    """Check that ``image`` is a uint8 array of shape (H, W, 3)."""
    ensure_byte_image(image, name)
    if image.ndim != 3:
        raise ValueError(f"{name} must be a 3-channel color image.")
    return image
