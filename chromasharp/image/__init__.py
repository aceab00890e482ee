"""Image-level utilities (file I/O and buffer validation)."""

from .buffer import (
    channel_count,
    ensure_byte_image,
    ensure_color_image,
    load_image,
    save_image,
)

__all__ = [
    "channel_count",
    "ensure_byte_image",
    "ensure_color_image",
    "load_image",
    "save_image",
]
