"""Common module - schemas, protocols, settings and errors."""

from .collaborators import (
    ResizeCollaborator,
    SizesCollaborator,
    SizingCollaborator,
    VectorizeCollaborator,
)
from .config import ImageDataSettings
from .errors import DecodeError, ImageDataError, ResizeError, VectorizeError
from .metadata_cache import MetadataCache
from .schemas import (
    EncodedImage,
    ImageDescriptor,
    ImageFile,
    ImageMetadata,
    LayoutArgs,
    Placeholder,
    TargetSizes,
    VariantSpec,
)

__all__ = [
    "DecodeError",
    "EncodedImage",
    "ImageDataError",
    "ImageDataSettings",
    "ImageDescriptor",
    "ImageFile",
    "ImageMetadata",
    "LayoutArgs",
    "MetadataCache",
    "Placeholder",
    "ResizeCollaborator",
    "ResizeError",
    "SizesCollaborator",
    "SizingCollaborator",
    "TargetSizes",
    "VariantSpec",
    "VectorizeCollaborator",
    "VectorizeError",
]
