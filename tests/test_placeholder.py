"""Unit tests for placeholder synthesis."""

from pathlib import Path

import pytest

from cl_image_data.algo.placeholder import PlaceholderSynthesizer
from cl_image_data.common.errors import VectorizeError
from cl_image_data.common.schemas import (
    BlurredPlaceholder,
    DominantColorPlaceholder,
    ImageFile,
    ImageMetadata,
    LayoutArgs,
    NoPlaceholder,
    TracedSvgPlaceholder,
)
from tests.fakes import FakeResize, FakeVectorize

COLORED = ImageMetadata(width=800, height=600, format="png", dominant_color="#c82828")
PLAIN = ImageMetadata(width=800, height=600, format="png")


@pytest.fixture
def file() -> ImageFile:
    return ImageFile(path=Path("/photos/cat.png"), content_digest="abc")


@pytest.mark.asyncio
async def test_dominant_color_placeholder(file: ImageFile, resize: FakeResize):
    """Test dominantColor surfaces the metadata colour without extra work."""
    synthesizer = PlaceholderSynthesizer(resize)

    placeholder = await synthesizer.synthesize(file, LayoutArgs(), COLORED)

    assert placeholder == DominantColorPlaceholder(color="#c82828")
    assert resize.base64_requests == []


@pytest.mark.asyncio
async def test_dominant_color_without_color_gives_nothing(file: ImageFile, resize: FakeResize):
    """Test dominantColor degrades to no placeholder without a colour."""
    placeholder = await PlaceholderSynthesizer(resize).synthesize(file, LayoutArgs(), PLAIN)

    assert placeholder == NoPlaceholder()


@pytest.mark.asyncio
async def test_blurred_placeholder_uses_base64_overrides(file: ImageFile, resize: FakeResize):
    """Test blurred requests a small variant with the base64 dimensions."""
    args = LayoutArgs(placeholder="blurred", width=400, base64_width=32, base64_height=24)

    placeholder = await PlaceholderSynthesizer(resize).synthesize(file, args, COLORED)

    assert placeholder == BlurredPlaceholder(data_uri="data:image/png;base64,iVBORw0KGgo=")
    assert resize.base64_requests == [(32, 24)]


@pytest.mark.asyncio
async def test_blurred_placeholder_defaults_to_collaborator_size(
    file: ImageFile, resize: FakeResize
):
    """Test missing overrides leave the size to the resize collaborator."""
    args = LayoutArgs(placeholder="blurred", width=400, height=300)

    _ = await PlaceholderSynthesizer(resize).synthesize(file, args, PLAIN)

    assert resize.base64_requests == [(None, None)]


@pytest.mark.asyncio
async def test_traced_svg_placeholder(
    file: ImageFile, resize: FakeResize, vectorize: FakeVectorize
):
    """Test tracedSVG forwards its options and the layout args."""
    args = LayoutArgs.model_validate(
        {"placeholder": "tracedSVG", "tracedSVGOptions": {"color": "#eee"}, "width": 100}
    )

    placeholder = await PlaceholderSynthesizer(resize, vectorize).synthesize(file, args, PLAIN)

    assert placeholder == TracedSvgPlaceholder(svg="<svg><path d='M0 0'/></svg>")
    assert vectorize.calls == [({"color": "#eee"}, args)]


@pytest.mark.asyncio
async def test_traced_svg_failure_propagates(file: ImageFile, resize: FakeResize):
    """Test vectorizer errors are not swallowed."""
    vectorize = FakeVectorize(error=VectorizeError("potrace failed"))
    args = LayoutArgs(placeholder="tracedSVG")

    with pytest.raises(VectorizeError, match="potrace failed"):
        _ = await PlaceholderSynthesizer(resize, vectorize).synthesize(file, args, PLAIN)


@pytest.mark.asyncio
async def test_traced_svg_without_vectorizer(file: ImageFile, resize: FakeResize):
    """Test requesting tracedSVG without a vectorizer fails."""
    with pytest.raises(VectorizeError):
        _ = await PlaceholderSynthesizer(resize).synthesize(
            file, LayoutArgs(placeholder="tracedSVG"), PLAIN
        )


@pytest.mark.asyncio
async def test_none_placeholder(file: ImageFile, resize: FakeResize, vectorize: FakeVectorize):
    """Test none produces nothing, even when a colour is known."""
    placeholder = await PlaceholderSynthesizer(resize, vectorize).synthesize(
        file, LayoutArgs(placeholder="none"), COLORED
    )

    assert placeholder == NoPlaceholder()
    assert resize.base64_requests == []
    assert vectorize.calls == []
