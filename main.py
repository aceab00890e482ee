"""
Entry point and compatibility facade for the chroma-key and sharpen demos.

Packages:
- chromasharp.image: Image loading/saving and buffer validation
- chromasharp.chroma: Color histogram, dominant color and chroma-key compositing
- chromasharp.sharpen: 3x3 sharpening in several pixel-access variants
- chromasharp.pipeline: Interactive threshold session and demo runners
"""

from __future__ import annotations

import sys

from chromasharp.errors import ImageLoadError, InvalidBackgroundDimensions
from chromasharp.image import load_image, save_image
from chromasharp.chroma import (
    DominantColor,
    build_color_histogram,
    find_dominant_color,
    apply_chroma_key,
)
from chromasharp.sharpen import (
    SHARPEN_VARIANTS,
    sharpen,
    sharpen_indexed,
    sharpen_rows,
    sharpen_cursor,
)
from chromasharp.pipeline import (
    ChromaKeySession,
    run_chroma_key_demo,
    run_sharpen_demo,
)

__all__ = [
    # errors
    "ImageLoadError",
    "InvalidBackgroundDimensions",
    # image io
    "load_image",
    "save_image",
    # chroma key
    "DominantColor",
    "build_color_histogram",
    "find_dominant_color",
    "apply_chroma_key",
    # sharpen
    "SHARPEN_VARIANTS",
    "sharpen",
    "sharpen_indexed",
    "sharpen_rows",
    "sharpen_cursor",
    # pipeline
    "ChromaKeySession",
    "run_chroma_key_demo",
    "run_sharpen_demo",
]

LOAD_FAILURE_EXIT_CODE = -1
WRITE_FAILURE_EXIT_CODE = 1


def _cli(argv=None) -> int:
    """CLI for the two demos.

    chroma: composite foreground.jpg over background.jpg, keyed on the
    foreground's dominant color, and write overlay.jpg.
    --foreground / --background: Input images
    --out / -o: Output image
    --threshold / -t: Initial threshold in [0, 255]

    sharpen: sharpen boomer.jpg with each variant and write output.jpg.
    --image / -i: Input image
    --out / -o: Output image
    --variant / -v: Variant to run, repeatable (vectorized|indexed|rows|cursor)

    --no-window: Skip the HighGUI windows (headless run)
    Defaults come from config/settings.json.
    """
    import argparse

    parser = argparse.ArgumentParser(description="Chroma-key compositing and sharpening demos built on OpenCV.")
    sub = parser.add_subparsers(dest="demo", required=True)

    chroma = sub.add_parser("chroma", help="Replace the dominant color of a foreground with a background")
    chroma.add_argument("--foreground", type=str, help="Foreground image (default: foreground.jpg)")
    chroma.add_argument("--background", type=str, help="Background image (default: background.jpg)")
    chroma.add_argument("--out", "-o", type=str, help="Output image (default: overlay.jpg)")
    chroma.add_argument("--threshold", "-t", type=int, help="Initial match threshold in [0, 255] (default: 32)")
    chroma.add_argument("--no-window", action="store_true", help="Do not open a window; composite once and save")

    sharp = sub.add_parser("sharpen", help="Sharpen an image with each pixel-access variant")
    sharp.add_argument("--image", "-i", type=str, help="Input image (default: boomer.jpg)")
    sharp.add_argument("--out", "-o", type=str, help="Output image (default: output.jpg)")
    sharp.add_argument("--variant", "-v", action="append", choices=sorted(SHARPEN_VARIANTS), help="Variant to run; repeat for several (default: indexed, rows, cursor)")
    sharp.add_argument("--no-window", action="store_true", help="Do not open windows; sharpen and save")

    args = parser.parse_args(argv)

    from chromasharp.config import load_settings
    settings = load_settings()

    try:
        if args.demo == "chroma":
            run_chroma_key_demo(
                foreground_path=args.foreground,
                background_path=args.background,
                output_path=args.out,
                threshold=args.threshold,
                interactive=not args.no_window,
                settings=settings,
            )
        else:
            run_sharpen_demo(
                image_path=args.image,
                output_path=args.out,
                variants=args.variant,
                interactive=not args.no_window,
                settings=settings,
            )
    except ImageLoadError as e:
        print(f"Error: Unable to read input images. {e}", file=sys.stderr)
        return LOAD_FAILURE_EXIT_CODE
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return WRITE_FAILURE_EXIT_CODE
    return 0


if __name__ == "__main__":
    raise SystemExit(_cli())
