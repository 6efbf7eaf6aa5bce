"""Error types raised while planning image data."""

from typing import override


class ImageDataError(Exception):
    """Base class for image data errors."""

    def __init__(self, message: str = "Image data generation failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class DecodeError(ImageDataError):
    """Source image is missing, not an image, or cannot be decoded."""


class ResizeError(ImageDataError):
    """Raised by resize collaborators when a batch cannot be encoded."""


class VectorizeError(ImageDataError):
    """Raised when a traced SVG placeholder cannot be produced."""
