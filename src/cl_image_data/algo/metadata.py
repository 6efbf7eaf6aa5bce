"""Metadata resolution for source images."""

import asyncio
from collections.abc import Callable
from pathlib import Path

from loguru import logger
from PIL import Image

from ..common.config import ImageDataSettings
from ..common.errors import DecodeError
from ..common.metadata_cache import MetadataCache
from ..common.schemas import ImageFile, ImageMetadata
from ..utils.color import ImageStats, compute_image_stats, rgb_to_hex
from ..utils.media_types import HEADER_BYTES, MediaType, sniff_mime


def _open_image(path: Path) -> Image.Image:
    """Open an image lazily after checking its header is an image."""
    try:
        with open(path, "rb") as f:
            header = f.read(HEADER_BYTES)
    except OSError as exc:
        raise DecodeError(f"Cannot read image file: {path}") from exc

    mime = sniff_mime(header)
    if MediaType.from_mime(mime) != MediaType.IMAGE:
        raise DecodeError(f"Not an image ({mime}): {path}")

    try:
        return Image.open(path)
    except (OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Cannot decode image {path}: {exc}") from exc


# Pillow names some containers after the extension rather than the codec
_CODEC_FORMATS = {
    "mpo": "jpeg",
}


def _format_name(img: Image.Image, path: Path) -> str:
    if not img.format:
        raise DecodeError(f"Unknown image format: {path}")
    fmt = img.format.lower()
    return _CODEC_FORMATS.get(fmt, fmt)


def _density(img: Image.Image) -> str | None:
    dpi = img.info.get("dpi")
    if not dpi:
        return None
    return str(round(float(dpi[0])))


def read_image_size(path: str | Path) -> ImageMetadata:
    """Read width, height and format from the image header only."""
    path = Path(path)
    with _open_image(path) as img:
        width, height = img.size
        return ImageMetadata(width=width, height=height, format=_format_name(img, path))


class MetadataResolver:
    """Resolve intrinsic image metadata, caching the expensive variant.

    Example:
        resolver = MetadataResolver(MetadataCache())
        metadata = await resolver.resolve(ImageFile(path=path), need_dominant_color=True)
    """

    def __init__(
        self,
        cache: MetadataCache | None = None,
        settings: ImageDataSettings | None = None,
        stats: Callable[[Image.Image], ImageStats] = compute_image_stats,
    ):
        self.cache: MetadataCache = cache if cache is not None else MetadataCache()
        self.settings: ImageDataSettings = settings if settings is not None else ImageDataSettings()
        self.stats: Callable[[Image.Image], ImageStats] = stats

    async def resolve(self, file: ImageFile, need_dominant_color: bool = False) -> ImageMetadata:
        """
        Resolve metadata for ``file``.

        Without a dominant colour only the header is read. With one, the
        result is cached by content digest; test mode always recomputes.

        Raises:
            DecodeError: If the file is missing, not an image, or corrupt
        """
        if not need_dominant_color:
            return await asyncio.to_thread(read_image_size, file.path)

        try:
            key = await asyncio.to_thread(file.digest)
        except OSError as exc:
            raise DecodeError(f"Cannot read image file: {file.path}") from exc

        cached = self.cache.get(key)
        if cached is not None and not self.settings.test_mode:
            logger.debug(f"Metadata cache hit: {file.path} ({key})")
            return cached

        logger.debug(f"Computing metadata with pixel statistics: {file.path}")
        metadata = await asyncio.to_thread(self._read_metadata, file.path)
        stored = self.cache.set_if_absent(key, metadata)
        return metadata if self.settings.test_mode else stored

    def _read_metadata(self, path: Path) -> ImageMetadata:
        with _open_image(path) as img:
            width, height = img.size
            fmt = _format_name(img, path)
            density = _density(img)
            try:
                img.load()
                stats = self.stats(img)
            except OSError as exc:
                raise DecodeError(f"Cannot decode image {path}: {exc}") from exc

        dominant = stats.dominant
        if dominant is not None:
            dominant_color = rgb_to_hex(dominant.r, dominant.g, dominant.b)
        else:
            dominant_color = self.settings.dominant_color_fallback

        return ImageMetadata(
            width=width,
            height=height,
            format=fmt,
            density=density,
            dominant_color=dominant_color,
        )
