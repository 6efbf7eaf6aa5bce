"""Final descriptor assembly."""

from collections.abc import Sequence

from loguru import logger

from ..common.schemas import (
    BlurredPlaceholder,
    DominantColorPlaceholder,
    EncodedImage,
    FallbackImage,
    ImageDescriptor,
    ImageSet,
    ImageSource,
    Layout,
    NoPlaceholder,
    Placeholder,
    PlaceholderData,
    TracedSvgPlaceholder,
)


def find_primary_index(target_widths: Sequence[float], presentation_width: float) -> int | None:
    """Index of the target width equal to the presentation width, if any."""
    for index, width in enumerate(target_widths):
        if width == presentation_width:
            return index
    return None


def layout_dimensions(
    layout: Layout,
    primary: EncodedImage | None,
    max_width: int | float | None = None,
) -> tuple[int | float | None, int | float | None]:
    """Width and height reported for a layout mode."""
    aspect_ratio = (primary.aspect_ratio if primary is not None else None) or 1

    if layout == "fixed":
        if primary is None:
            return None, None
        return primary.width, primary.height

    if layout == "fluid":
        return 1, 1 / aspect_ratio

    width = max_width or (primary.width if primary is not None else None) or 1
    return width, width / aspect_ratio


def assemble_descriptor(
    *,
    layout: Layout,
    images: Sequence[EncodedImage],
    target_widths: Sequence[float],
    presentation_width: float,
    src_set: str,
    sizes: str,
    max_width: int | float | None = None,
    sources: Sequence[ImageSource] = (),
    placeholder: Placeholder | None = None,
) -> ImageDescriptor | None:
    """
    Combine encoded variants into an ImageDescriptor.

    Returns:
        None when no variant was produced

    Note:
        The primary image is the one planned for exactly the presentation
        width. Without an exact match it stays absent (``fallback.src`` and
        fixed dimensions are None); no nearest width is substituted.
    """
    if not images:
        return None

    index = find_primary_index(target_widths, presentation_width)
    primary = images[index] if index is not None and index < len(images) else None
    if primary is None:
        logger.warning(
            f"No target width matches presentation width {presentation_width}: "
            f"{list(target_widths)}"
        )

    width, height = layout_dimensions(layout, primary, max_width)

    descriptor = ImageDescriptor(
        layout=layout,
        width=width,
        height=height,
        images=ImageSet(
            fallback=FallbackImage(
                src=primary.src if primary is not None else None,
                src_set=src_set,
                sizes=sizes,
            ),
            sources=list(sources),
        ),
    )

    placeholder = placeholder if placeholder is not None else NoPlaceholder()
    if isinstance(placeholder, DominantColorPlaceholder):
        descriptor.background_color = placeholder.color
    elif isinstance(placeholder, BlurredPlaceholder):
        descriptor.placeholder = PlaceholderData(fallback=placeholder.data_uri)
    elif isinstance(placeholder, TracedSvgPlaceholder):
        descriptor.placeholder = PlaceholderData(fallback=placeholder.svg)

    return descriptor
