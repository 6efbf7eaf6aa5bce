"""Write-once metadata cache keyed by content digest."""

from .schemas import ImageMetadata


class MetadataCache:
    """In-memory cache of resolved metadata.

    Entries are never replaced: concurrent misses for the same digest may
    both compute a record, but only the first one stored is kept and
    returned to every caller.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ImageMetadata] = {}

    def get(self, key: str) -> ImageMetadata | None:
        return self._entries.get(key)

    def set_if_absent(self, key: str, value: ImageMetadata) -> ImageMetadata:
        """Store ``value`` unless ``key`` is present; return the stored record."""
        return self._entries.setdefault(key, value)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
