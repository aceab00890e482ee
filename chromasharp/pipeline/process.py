"""Demo runners: load inputs, run the filters, display and save the results.

Both runners block on a key press between windows when ``interactive`` is
set; with ``interactive=False`` no HighGUI call is made, which is what the
CLI's ``--no-window`` flag and the tests use.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import cv2
import numpy as np

from chromasharp.chroma import DEFAULT_BUCKETS
from chromasharp.config import Settings, load_settings
from chromasharp.image import load_image, save_image
from chromasharp.pipeline.session import ChromaKeySession
from chromasharp.sharpen import get_sharpen_variant


def run_chroma_key_demo(
    foreground_path: Optional[str] = None,
    background_path: Optional[str] = None,
    output_path: Optional[str] = None,
    threshold: Optional[int] = None,
    interactive: bool = True,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """Composite a foreground over a background keyed on its dominant color.

    Doxygen:
    - @param foreground_path: Foreground image (default from settings: foreground.jpg).
    - @param background_path: Background image (default: background.jpg).
    - @param output_path: Where the final composite is written (default: overlay.jpg).
    - @param threshold: Initial match threshold in [0, 255] (default: 32).
    - @param interactive: Show the window with a threshold trackbar and wait for a key.
    - @param settings: Preloaded settings; read from config/settings.json when None.
    - @return: Dict with keys {'output_path', 'threshold', 'dominant_color'}.
    - @throws ImageLoadError: If either input image cannot be loaded.
    """
    cfg = (settings or load_settings()).chroma
    foreground = load_image(foreground_path or cfg.foreground)
    background = load_image(background_path or cfg.background)
    print("Input images loaded")

    session = ChromaKeySession(
        foreground=foreground,
        background=background,
        threshold=cfg.threshold if threshold is None else threshold,
        window_name=cfg.window,
        buckets=cfg.buckets or DEFAULT_BUCKETS,
    )
    if interactive:
        session.open()
        cv2.waitKey(0)
        cv2.destroyAllWindows()
    else:
        session.recompute()

    dominant = session.dominant
    print(f"Dominant color (BGR): {dominant.bgr}, votes={dominant.votes}, threshold={session.threshold}")

    written = save_image(output_path or cfg.output, session.output)
    print(f"Saved composite to: {written}")
    return {
        'output_path': written,
        'threshold': session.threshold,
        'dominant_color': dominant,
    }


def compare_variants(image: np.ndarray, variants: Sequence[str]) -> Dict[str, np.ndarray]:
    """Run each named sharpen variant on ``image`` and return the results by name."""
    results: Dict[str, np.ndarray] = {}
    for name in variants:
        results[name] = get_sharpen_variant(name)(image)
    return results


def run_sharpen_demo(
    image_path: Optional[str] = None,
    output_path: Optional[str] = None,
    variants: Optional[Sequence[str]] = None,
    interactive: bool = True,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """Sharpen an image with each requested variant and save the last result.

    Doxygen:
    - @param image_path: Input image (default from settings: boomer.jpg).
    - @param output_path: Where the sharpened image is written (default: output.jpg).
    - @param variants: Variant names to run in order (default: indexed, rows, cursor).
    - @param interactive: Show the original and every result, waiting for a key each time.
    - @param settings: Preloaded settings; read from config/settings.json when None.
    - @return: Dict with keys {'output_path', 'variants', 'identical'}.
    - @throws ImageLoadError: If the input image cannot be loaded.
    - @throws ValueError: If a variant name is unknown or the list is empty.
    """
    cfg = (settings or load_settings()).sharpen
    names: List[str] = list(variants or cfg.variants)
    if not names:
        raise ValueError("At least one sharpen variant is required.")
    # resolve names before doing any work
    for name in names:
        get_sharpen_variant(name)

    image = load_image(image_path or cfg.image)
    print("Input image loaded")

    if interactive:
        cv2.namedWindow("Original Image")
        cv2.imshow("Original Image", image)
        cv2.waitKey(0)

    results = compare_variants(image, names)
    for index, name in enumerate(names, start=1):
        if interactive:
            title = f"{cfg.window} {index}"
            cv2.namedWindow(title)
            cv2.imshow(title, results[name])
            cv2.waitKey(0)
        print(f"Sharpened with '{name}' variant")

    if interactive:
        cv2.destroyAllWindows()

    first = results[names[0]]
    identical = all(np.array_equal(first, out) for out in results.values())
    if not identical:
        print("Warning: sharpen variants produced different results")

    written = save_image(output_path or cfg.output, results[names[-1]])
    print(f"Saved sharpened image to: {written}")
    return {
        'output_path': written,
        'variants': names,
        'identical': identical,
    }
