"""Image data generator - orchestrates planning, encoding and assembly."""

import asyncio

from loguru import logger

from .algo.aspect_ratio import resolve_aspect_ratio
from .algo.descriptor import assemble_descriptor
from .algo.metadata import MetadataResolver
from .algo.placeholder import PlaceholderSynthesizer
from .algo.variant_plan import build_variant_plan, primary_format
from .common.collaborators import (
    ResizeCollaborator,
    SizesCollaborator,
    SizingCollaborator,
    VectorizeCollaborator,
)
from .common.config import ImageDataSettings
from .common.metadata_cache import MetadataCache
from .common.schemas import (
    EncodedImage,
    ImageDescriptor,
    ImageFile,
    ImageSource,
    LayoutArgs,
    Placeholder,
)
from .utils.media_types import content_type_for
from .utils.srcset import SrcSetBuilder


class ImageDataGenerator:
    """Build responsive image descriptors for source images.

    Responsibilities:
    - Resolves metadata (cached by content digest when a dominant colour is needed)
    - Resolves the output aspect ratio and plans variants per format
    - Runs primary encoding, secondary formats and the placeholder concurrently
    - Assembles the layout-aware descriptor

    Example:
        generator = ImageDataGenerator(sizing=breakpoints, resize=resizer)
        descriptor = await generator.generate(
            ImageFile(path="/photos/cat.jpg"),
            LayoutArgs(layout="constrained", max_width=800, webP=True),
        )
    """

    def __init__(
        self,
        sizing: SizingCollaborator,
        resize: ResizeCollaborator,
        vectorize: VectorizeCollaborator | None = None,
        sizes: SizesCollaborator | None = None,
        settings: ImageDataSettings | None = None,
        cache: MetadataCache | None = None,
    ):
        """Initialize generator.

        Args:
            sizing: Breakpoint width selection
            resize: Pixel resizing and encoding
            vectorize: SVG tracing, required only for tracedSVG placeholders
            sizes: srcset/sizes formatting. Defaults to SrcSetBuilder.
            settings: Defaults to ImageDataSettings.from_env()
            cache: Metadata cache scoped to this generator
        """
        self.settings: ImageDataSettings = (
            settings if settings is not None else ImageDataSettings.from_env()
        )
        self.sizing: SizingCollaborator = sizing
        self.resize: ResizeCollaborator = resize
        self.sizes: SizesCollaborator = sizes if sizes is not None else SrcSetBuilder()
        self.metadata_resolver: MetadataResolver = MetadataResolver(cache, self.settings)
        self.placeholders: PlaceholderSynthesizer = PlaceholderSynthesizer(resize, vectorize)

    async def generate(self, file: ImageFile, args: LayoutArgs) -> ImageDescriptor | None:
        """Generate the descriptor for ``file``.

        Returns:
            The descriptor, or None when no variant could be produced

        Raises:
            DecodeError: Source image cannot be read
            ResizeError: Encoding failed
            VectorizeError: Tracing failed for a tracedSVG placeholder
        """
        metadata = await self.metadata_resolver.resolve(
            file,
            need_dominant_color=args.placeholder == "dominantColor",
        )
        aspect_ratio = resolve_aspect_ratio(args, metadata)

        target = self.sizing.calculate_target_widths(file, args, metadata)
        if target.aspect_ratio is not None and target.aspect_ratio != aspect_ratio:
            logger.debug(
                f"Sizing aspect ratio {target.aspect_ratio} differs from resolved {aspect_ratio}"
            )

        plan = build_variant_plan(
            target.widths, aspect_ratio, args, primary_format(args, metadata)
        )

        tasks = [
            asyncio.ensure_future(self.resize.batch_resize(file, plan)),
            asyncio.ensure_future(self.placeholders.synthesize(file, args, metadata)),
            *(
                asyncio.ensure_future(
                    self._encode_format(file, args, target.widths, aspect_ratio, fmt)
                )
                for fmt in args.secondary_formats
            ),
        ]
        try:
            results = await asyncio.gather(*tasks)
        finally:
            # A failed collaborator aborts the call; nothing keeps running after it
            for task in tasks:
                if not task.done():
                    _ = task.cancel()
        images: list[EncodedImage] = results[0]
        placeholder: Placeholder = results[1]
        secondary: list[tuple[str, list[EncodedImage]]] = list(results[2:])

        sizes = args.sizes or self.sizes.build_sizes_attr(target.presentation_width)

        return assemble_descriptor(
            layout=args.layout,
            images=images,
            target_widths=target.widths,
            presentation_width=target.presentation_width,
            src_set=self.sizes.build_src_set(images),
            sizes=sizes,
            max_width=args.max_width,
            sources=[
                ImageSource(
                    src_set=self.sizes.build_src_set(encoded),
                    type=content_type_for(fmt),
                    sizes=sizes,
                )
                for fmt, encoded in secondary
            ],
            placeholder=placeholder,
        )

    async def _encode_format(
        self,
        file: ImageFile,
        args: LayoutArgs,
        widths: list[float],
        aspect_ratio: float,
        fmt: str,
    ) -> tuple[str, list[EncodedImage]]:
        plan = build_variant_plan(widths, aspect_ratio, args, fmt)
        return fmt, await self.resize.batch_resize(file, plan)
