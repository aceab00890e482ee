"""Dominant-color chroma key: histogram search and compositing."""

from .histogram import (
    DEFAULT_BUCKETS,
    DominantColor,
    bucket_width,
    build_color_histogram,
    dominant_from_histogram,
    find_dominant_color,
)
from .compositor import (
    MAX_THRESHOLD,
    apply_chroma_key,
    chroma_key_mask,
    tile_background,
    validate_threshold,
)

__all__ = [
    "DEFAULT_BUCKETS",
    "DominantColor",
    "bucket_width",
    "build_color_histogram",
    "dominant_from_histogram",
    "find_dominant_color",
    "MAX_THRESHOLD",
    "apply_chroma_key",
    "chroma_key_mask",
    "tile_background",
    "validate_threshold",
]
