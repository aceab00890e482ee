"""Interactive chroma-key session driven by an OpenCV trackbar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import cv2
import numpy as np

from chromasharp.chroma import (
    DEFAULT_BUCKETS,
    MAX_THRESHOLD,
    DominantColor,
    apply_chroma_key,
    find_dominant_color,
    validate_threshold,
)
from chromasharp.image import ensure_color_image

TRACKBAR_NAME = "Threshold"


@dataclass
class ChromaKeySession:
    """State shared with the threshold trackbar callback.

    Every threshold change recomputes the composite from scratch and redraws
    the window before the callback returns.
    """

    foreground: np.ndarray
    background: np.ndarray
    threshold: int = 32
    window_name: str = "Overlay Image"
    buckets: int = DEFAULT_BUCKETS
    show: Callable[[str, np.ndarray], None] = cv2.imshow
    output: Optional[np.ndarray] = field(default=None, init=False)
    dominant: Optional[DominantColor] = field(default=None, init=False)
    recomputes: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        ensure_color_image(self.foreground, "foreground")
        ensure_color_image(self.background, "background")
        self.threshold = validate_threshold(self.threshold)

    def recompute(self, threshold: Optional[int] = None) -> np.ndarray:
        """Rebuild the composite for ``threshold`` (or the current one)."""
        if threshold is not None:
            self.threshold = validate_threshold(threshold)
        self.dominant = find_dominant_color(self.foreground, self.buckets)
        self.output = apply_chroma_key(
            self.foreground, self.background, self.threshold, self.buckets, dominant=self.dominant
        )
        self.recomputes += 1
        return self.output

    def on_threshold(self, value: int) -> None:
        """Trackbar callback: recompute with the new value and refresh the window."""
        self.show(self.window_name, self.recompute(value))

    def open(self, initial_threshold: Optional[int] = None) -> None:
        """Create the window and its threshold trackbar, then draw the first composite."""
        if initial_threshold is not None:
            self.threshold = validate_threshold(initial_threshold)
        cv2.namedWindow(self.window_name)
        cv2.createTrackbar(TRACKBAR_NAME, self.window_name, self.threshold, MAX_THRESHOLD, self.on_threshold)
        self.on_threshold(self.threshold)
