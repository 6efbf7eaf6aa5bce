"""Pure planning logic: metadata, aspect ratio, variant plans, placeholders, descriptors."""

from .aspect_ratio import resolve_aspect_ratio
from .descriptor import assemble_descriptor, find_primary_index, layout_dimensions
from .metadata import MetadataResolver, read_image_size
from .placeholder import PlaceholderSynthesizer
from .variant_plan import build_variant_plan, primary_format, round_half_up

__all__ = [
    "MetadataResolver",
    "PlaceholderSynthesizer",
    "assemble_descriptor",
    "build_variant_plan",
    "find_primary_index",
    "layout_dimensions",
    "primary_format",
    "read_image_size",
    "resolve_aspect_ratio",
    "round_half_up",
]
