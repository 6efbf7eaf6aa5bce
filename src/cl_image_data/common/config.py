"""Runtime settings for image data generation."""

import os

from pydantic import BaseModel, Field

ENV_VAR = "CL_IMAGE_DATA_ENV"


class ImageDataSettings(BaseModel):
    """Settings shared by the metadata resolver and the generator."""

    test_mode: bool = Field(
        default=False,
        description="Bypass metadata cache hits so every resolution recomputes",
    )
    dominant_color_fallback: str = Field(
        default="#000000",
        pattern=r"^#[0-9a-f]{6}$",
        description="Colour used when pixel statistics report no dominant colour",
    )

    @classmethod
    def from_env(cls) -> "ImageDataSettings":
        """Build settings from the environment (``CL_IMAGE_DATA_ENV=test``)."""
        return cls(test_mode=os.environ.get(ENV_VAR, "").lower() == "test")
