"""cl_image_data - Responsive image planning: variants, placeholders and descriptors."""

from .algo.aspect_ratio import resolve_aspect_ratio
from .algo.descriptor import assemble_descriptor
from .algo.metadata import MetadataResolver
from .algo.placeholder import PlaceholderSynthesizer
from .algo.variant_plan import build_variant_plan
from .common.collaborators import (
    ResizeCollaborator,
    SizesCollaborator,
    SizingCollaborator,
    VectorizeCollaborator,
)
from .common.config import ImageDataSettings
from .common.errors import DecodeError, ImageDataError, ResizeError, VectorizeError
from .common.metadata_cache import MetadataCache
from .common.schemas import (
    EncodedImage,
    ImageDescriptor,
    ImageFile,
    ImageMetadata,
    LayoutArgs,
    TargetSizes,
    VariantSpec,
)
from .image_data import ImageDataGenerator
from .utils.srcset import SrcSetBuilder

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "EncodedImage",
    "ImageDataError",
    "ImageDataGenerator",
    "ImageDataSettings",
    "ImageDescriptor",
    "ImageFile",
    "ImageMetadata",
    "LayoutArgs",
    "MetadataCache",
    "MetadataResolver",
    "PlaceholderSynthesizer",
    "ResizeCollaborator",
    "ResizeError",
    "SizesCollaborator",
    "SizingCollaborator",
    "SrcSetBuilder",
    "TargetSizes",
    "VariantSpec",
    "VectorizeCollaborator",
    "VectorizeError",
    "__version__",
    "assemble_descriptor",
    "build_variant_plan",
    "resolve_aspect_ratio",
]
