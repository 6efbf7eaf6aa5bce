"""Default srcset and sizes attribute builders."""

from collections.abc import Sequence

from ..common.schemas import EncodedImage


class SrcSetBuilder:
    """Plain ``SizesCollaborator`` used when the caller supplies none."""

    def build_src_set(self, images: Sequence[EncodedImage]) -> str:
        return ",\n".join(f"{image.src} {image.width}w" for image in images)

    def build_sizes_attr(self, presentation_width: float) -> str:
        width = _format_px(presentation_width)
        return f"(min-width: {width}px) {width}px, 100vw"


def _format_px(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
