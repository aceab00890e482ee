"""Exceptions raised by chromasharp."""


class ImageLoadError(RuntimeError):
    """An input image is missing, unreadable or decodes to an empty buffer."""

    def __init__(self, path: str, reason: str = "unable to read image") -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path


class InvalidBackgroundDimensions(ValueError):
    """The background image has zero rows or columns and cannot be tiled."""
