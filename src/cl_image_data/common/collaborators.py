"""Collaborator Protocols - interfaces for the work delegated outside the planner.

Applications implement these protocols to plug in breakpoint selection,
pixel resizing/encoding, vectorization and attribute formatting.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from .schemas import EncodedImage, ImageFile, ImageMetadata, LayoutArgs, TargetSizes, VariantSpec


@runtime_checkable
class SizingCollaborator(Protocol):
    """Chooses the breakpoint widths for a presentation size."""

    def calculate_target_widths(
        self,
        file: ImageFile,
        args: LayoutArgs,
        metadata: ImageMetadata,
    ) -> TargetSizes:
        ...


@runtime_checkable
class ResizeCollaborator(Protocol):
    """Decodes, resizes and encodes pixels."""

    async def batch_resize(
        self,
        file: ImageFile,
        variants: Sequence[VariantSpec],
    ) -> list[EncodedImage]:
        """Encode every variant.

        Implementations MUST return exactly one result per variant, in the
        order the variants were given, and raise ResizeError on failure.
        """
        ...

    async def encode_base64(
        self,
        file: ImageFile,
        *,
        width: int | None,
        height: int | None,
        args: LayoutArgs,
    ) -> EncodedImage:
        """Encode a tiny variant whose ``src`` is a base64 data URI.

        ``None`` dimensions select the implementation's default small size.
        """
        ...


@runtime_checkable
class VectorizeCollaborator(Protocol):
    """Traces the source image into SVG markup."""

    async def trace(
        self,
        file: ImageFile,
        options: Mapping[str, object],
        args: LayoutArgs,
    ) -> str:
        ...


@runtime_checkable
class SizesCollaborator(Protocol):
    """Formats the srcset and sizes attributes."""

    def build_src_set(self, images: Sequence[EncodedImage]) -> str: ...

    def build_sizes_attr(self, presentation_width: float) -> str: ...
