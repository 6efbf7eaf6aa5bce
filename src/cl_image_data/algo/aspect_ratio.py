"""Output aspect ratio resolution."""

from ..common.schemas import ImageMetadata, LayoutArgs


def resolve_aspect_ratio(args: LayoutArgs, metadata: ImageMetadata) -> float:
    """Resolve the aspect ratio of the rendered variants. First match wins."""
    # These maintain the source aspect ratio
    if args.fit in ("inside", "outside"):
        return metadata.aspect_ratio

    if args.width and args.height and args.layout == "fixed":
        return args.width / args.height

    # max dimensions form a bounding box for fluid and constrained layouts
    if args.max_width and args.max_height and args.layout != "fixed":
        return args.max_width / args.max_height

    return metadata.aspect_ratio
