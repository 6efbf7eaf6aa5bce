import hashlib
from io import BytesIO
from pathlib import Path
from typing import BinaryIO


def get_md5_hexdigest(stream: BinaryIO | BytesIO) -> str:
    hash_md5 = hashlib.md5()
    _ = stream.seek(0)

    for chunk in iter(lambda: stream.read(4096), b""):
        hash_md5.update(chunk)

    return hash_md5.hexdigest()


def file_md5_hexdigest(path: str | Path) -> str:
    with open(path, "rb") as f:
        return get_md5_hexdigest(f)
