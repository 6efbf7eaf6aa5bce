"""Placeholder strategy selection."""

from loguru import logger

from ..common.collaborators import ResizeCollaborator, VectorizeCollaborator
from ..common.errors import VectorizeError
from ..common.schemas import (
    BlurredPlaceholder,
    DominantColorPlaceholder,
    ImageFile,
    ImageMetadata,
    LayoutArgs,
    NoPlaceholder,
    Placeholder,
    TracedSvgPlaceholder,
)


class PlaceholderSynthesizer:
    """Produce exactly one placeholder per request, chosen by ``args.placeholder``.

    - dominantColor: the metadata colour, no extra work
    - blurred: a tiny base64 variant from the resize collaborator
    - tracedSVG: SVG markup from the vectorize collaborator
    - none: nothing
    """

    def __init__(
        self,
        resize: ResizeCollaborator,
        vectorize: VectorizeCollaborator | None = None,
    ):
        self.resize: ResizeCollaborator = resize
        self.vectorize: VectorizeCollaborator | None = vectorize

    async def synthesize(
        self,
        file: ImageFile,
        args: LayoutArgs,
        metadata: ImageMetadata,
    ) -> Placeholder:
        if args.placeholder == "blurred":
            encoded = await self.resize.encode_base64(
                file,
                width=args.base64_width,
                height=args.base64_height,
                args=args,
            )
            return BlurredPlaceholder(data_uri=encoded.src)

        elif args.placeholder == "tracedSVG":
            if self.vectorize is None:
                raise VectorizeError("tracedSVG placeholder requested but no vectorizer is configured")
            svg = await self.vectorize.trace(file, args.traced_svg_options, args)
            return TracedSvgPlaceholder(svg=svg)

        elif args.placeholder == "dominantColor":
            if metadata.dominant_color:
                return DominantColorPlaceholder(color=metadata.dominant_color)
            logger.debug(f"No dominant colour available for {file.path}")
            return NoPlaceholder()

        return NoPlaceholder()
