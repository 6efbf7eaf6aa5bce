from enum import StrEnum

import magic

# libmagic identifies every supported image format from its leading bytes
HEADER_BYTES = 2048


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str) -> "MediaType":
        if file_type.startswith("image"):
            return MediaType.IMAGE
        elif file_type.startswith("video"):
            return MediaType.VIDEO
        elif file_type.startswith("audio"):
            return MediaType.AUDIO
        elif file_type.startswith("text"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


def sniff_mime(header: bytes) -> str:
    """Return the MIME type libmagic reports for a file header."""
    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(header)
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


_FORMAT_TO_CONTENT_TYPE = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
    "gif": "image/gif",
    "avif": "image/avif",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "svg": "image/svg+xml",
}


def content_type_for(format: str) -> str:
    """Map an image format name to its content type."""
    fmt = format.lower()
    return _FORMAT_TO_CONTENT_TYPE.get(fmt, f"image/{fmt}")
