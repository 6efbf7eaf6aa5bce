"""Turn target widths into per-format encode requests."""

import math
from collections.abc import Sequence

from loguru import logger

from ..common.schemas import ImageMetadata, LayoutArgs, VariantSpec


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def primary_format(args: LayoutArgs, metadata: ImageMetadata) -> str:
    return args.to_format or metadata.format


def build_variant_plan(
    target_widths: Sequence[float],
    aspect_ratio: float,
    args: LayoutArgs,
    format: str,
) -> list[VariantSpec]:
    """
    Build one VariantSpec per target width, preserving order.

    Heights derive from the rounded width so every variant keeps the
    planned ratio of the width list, and never drop below one pixel.

    Args:
        target_widths: Breakpoint widths, primary candidate included
        aspect_ratio: Output width / height
        args: Layout request; fit and format options are passed through
        format: Output format of every variant

    Returns:
        Ordered list of encode requests
    """
    if aspect_ratio <= 0:
        raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")

    plan: list[VariantSpec] = []
    for target in target_widths:
        width = round_half_up(target)
        plan.append(
            VariantSpec(
                width=width,
                height=max(1, round_half_up(width / aspect_ratio)),
                format=format,
                fit=args.fit,
                options=dict(args.format_options),
            )
        )

    logger.debug(f"Planned {len(plan)} {format} variants")
    return plan
