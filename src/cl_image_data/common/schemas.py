"""Pydantic schemas for image data planning."""

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..utils.digest import file_md5_hexdigest

Layout = Literal["fixed", "fluid", "constrained"]
PlaceholderKind = Literal["tracedSVG", "dominantColor", "blurred", "none"]
Fit = Literal["contain", "cover", "fill", "inside", "outside"]

HEX_COLOR_PATTERN = r"^#[0-9a-f]{6}$"


# ─────────────────────────────────────────────────────────────
# Source image
# ─────────────────────────────────────────────────────────────


class ImageFile(BaseModel):
    """Reference to a source image on disk."""

    path: Path = Field(..., description="Absolute path to the source image")
    content_digest: str | None = Field(
        default=None,
        description="Digest of the file content; computed on demand when omitted",
    )

    def digest(self) -> str:
        """Return the content digest, hashing the file on first use."""
        if self.content_digest is None:
            self.content_digest = file_md5_hexdigest(self.path)
        return self.content_digest


class ImageMetadata(BaseModel):
    """Intrinsic properties of a source image."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    format: str = Field(..., min_length=1, description="Lower-case format name, e.g. 'jpeg'")
    density: str | None = None
    dominant_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


# ─────────────────────────────────────────────────────────────
# Request
# ─────────────────────────────────────────────────────────────


class LayoutArgs(BaseModel):
    """Caller supplied layout request.

    Known options are accepted by their snake_case or camelCase names. Any
    other key is treated as a format specific option and collected into
    ``format_options``, which is forwarded untouched to the resize
    collaborator.
    """

    layout: Layout = "fixed"
    placeholder: PlaceholderKind = "dominantColor"
    width: int | float | None = Field(default=None, gt=0)
    height: int | float | None = Field(default=None, gt=0)
    max_width: int | float | None = Field(default=None, gt=0)
    max_height: int | float | None = Field(default=None, gt=0)
    fit: Fit = "cover"
    to_format: str | None = Field(default=None, min_length=1)
    secondary_formats: tuple[str, ...] = ()
    sizes: str | None = Field(
        default=None,
        description="Explicit sizes attribute; overrides the sizes collaborator",
    )
    base64_width: int | None = Field(default=None, gt=0)
    base64_height: int | None = Field(default=None, gt=0)
    traced_svg_options: dict[str, object] = Field(
        default_factory=dict,
        alias="tracedSVGOptions",
    )
    format_options: dict[str, object] = Field(default_factory=dict)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def known_keys(cls) -> set[str]:
        keys: set[str] = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            # explicit aliases replace the generated camelCase name
            keys.add(field.alias or to_camel(name))
        return keys

    @model_validator(mode="before")
    @classmethod
    def collect_format_options(cls, data: object) -> object:
        """Move unknown keys into ``format_options`` and expand the ``webP`` flag."""
        if not isinstance(data, Mapping):
            return data

        values: dict[str, object] = dict(data)
        webp_flags = [values.pop("webP", False), values.pop("webp", False)]

        known = cls.known_keys()
        extra = {key: values.pop(key) for key in list(values) if key not in known}

        if extra:
            existing = values.get("format_options", values.get("formatOptions")) or {}
            if not isinstance(existing, Mapping):
                raise ValueError("format_options must be a mapping")
            values.pop("formatOptions", None)
            values["format_options"] = {**existing, **extra}

        if any(webp_flags):
            secondary = values.pop("secondaryFormats", values.get("secondary_formats")) or ()
            if isinstance(secondary, str):
                secondary = (secondary,)
            formats = tuple(secondary)
            values["secondary_formats"] = formats if "webp" in formats else (*formats, "webp")

        return values


# ─────────────────────────────────────────────────────────────
# Plan and collaborator results
# ─────────────────────────────────────────────────────────────


class VariantSpec(BaseModel):
    """One (width, height, format) encode request."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    format: str = Field(..., min_length=1)
    fit: Fit = "cover"
    options: dict[str, object] = Field(default_factory=dict)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class EncodedImage(BaseModel):
    """Result of encoding one VariantSpec."""

    src: str
    width: int
    height: int
    aspect_ratio: float | None = None
    format: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class TargetSizes(BaseModel):
    """Breakpoint widths chosen by the sizing collaborator."""

    widths: list[float] = Field(default_factory=list)
    presentation_width: float
    presentation_height: float
    aspect_ratio: float | None = None


# ─────────────────────────────────────────────────────────────
# Placeholders
# ─────────────────────────────────────────────────────────────


class NoPlaceholder(BaseModel):
    kind: Literal["none"] = "none"

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class DominantColorPlaceholder(BaseModel):
    kind: Literal["dominantColor"] = "dominantColor"
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class BlurredPlaceholder(BaseModel):
    kind: Literal["blurred"] = "blurred"
    data_uri: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class TracedSvgPlaceholder(BaseModel):
    kind: Literal["tracedSVG"] = "tracedSVG"
    svg: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


Placeholder = Annotated[
    NoPlaceholder | DominantColorPlaceholder | BlurredPlaceholder | TracedSvgPlaceholder,
    Field(discriminator="kind"),
]


# ─────────────────────────────────────────────────────────────
# Descriptor
# ─────────────────────────────────────────────────────────────


class _CamelModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FallbackImage(_CamelModel):
    src: str | None = None
    src_set: str
    sizes: str


class ImageSource(_CamelModel):
    src_set: str
    type: str
    sizes: str


class ImageSet(_CamelModel):
    fallback: FallbackImage
    sources: list[ImageSource] = Field(default_factory=list)


class PlaceholderData(_CamelModel):
    fallback: str


class ImageDescriptor(_CamelModel):
    """Layout-aware description of the rendered image set."""

    layout: Layout
    width: int | float | None = None
    height: int | float | None = None
    background_color: str | None = None
    placeholder: PlaceholderData | None = None
    images: ImageSet

    def to_dict(self) -> dict[str, object]:
        """Render the camelCase structure consumed by image components."""
        return self.model_dump(by_alias=True, exclude_none=True)
