"""3x3 cross-kernel sharpening in several pixel-access styles."""

from .kernels import (
    SHARPEN_KERNEL,
    SHARPEN_VARIANTS,
    get_sharpen_variant,
    sharpen,
    sharpen_cursor,
    sharpen_indexed,
    sharpen_rows,
)

__all__ = [
    "SHARPEN_KERNEL",
    "SHARPEN_VARIANTS",
    "get_sharpen_variant",
    "sharpen",
    "sharpen_cursor",
    "sharpen_indexed",
    "sharpen_rows",
]
