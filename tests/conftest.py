"""Test configuration and fixtures for cl_image_data.

This module provides:
- Synthetic source images generated with PIL
- Collaborator fakes (see tests/fakes.py)
"""

from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from cl_image_data.common.schemas import ImageFile
from tests.fakes import FakeResize, FakeSizing, FakeVectorize

BACKGROUND = (200, 40, 40)


# ============================================================================
# Source images
# ============================================================================


@pytest.fixture
def synthetic_png(tmp_path: Path) -> Path:
    """800x600 PNG, mostly a flat red with a white square."""
    output_path = tmp_path / "synthetic.png"

    img = Image.new("RGB", (800, 600), color=BACKGROUND)
    draw = ImageDraw.Draw(img)
    draw.rectangle([100, 100, 200, 200], fill=(255, 255, 255))
    img.save(output_path, "PNG", dpi=(72, 72))

    return output_path


@pytest.fixture
def synthetic_jpeg(tmp_path: Path) -> Path:
    """640x480 JPEG with a gradient and grid."""
    output_path = tmp_path / "synthetic.jpg"

    img = Image.new("RGB", (640, 480), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)
    for i in range(0, 640, 40):
        draw.line([(i, 0), (i, 480)], fill=(255, 255, 255), width=2)
    draw.ellipse([220, 140, 420, 340], fill=(200, 100, 100))
    img.save(output_path, "JPEG", quality=85)

    return output_path


@pytest.fixture
def image_file(synthetic_png: Path) -> ImageFile:
    return ImageFile(path=synthetic_png)


@pytest.fixture
def sizing() -> FakeSizing:
    return FakeSizing()


@pytest.fixture
def resize() -> FakeResize:
    return FakeResize()


@pytest.fixture
def vectorize() -> FakeVectorize:
    return FakeVectorize()


@pytest.fixture
def multi_picture_jpeg(tmp_path: Path) -> Path:
    """Two-frame MPO file, the container many phone cameras write as .jpg."""
    output_path = tmp_path / "phone.jpg"

    front = Image.new("RGB", (320, 240), color=BACKGROUND)
    depth = Image.new("RGB", (320, 240), color=(0, 0, 0))
    front.save(output_path, "MPO", save_all=True, append_images=[depth])

    return output_path
