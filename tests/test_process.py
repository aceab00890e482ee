import os

import numpy as np
import pytest

from chromasharp.config import Settings
from chromasharp.errors import ImageLoadError
from chromasharp.image import load_image, save_image
from chromasharp.pipeline import run_chroma_key_demo, run_sharpen_demo
from chromasharp.chroma import apply_chroma_key
from chromasharp.sharpen import sharpen


def _write_inputs(tmp_path):
    fg = np.zeros((6, 6, 3), dtype=np.uint8)
    fg[:] = (32, 32, 224)
    fg[4:, 4:] = (200, 200, 200)
    bg = np.zeros((2, 3, 3), dtype=np.uint8)
    bg[0] = (10, 20, 30)
    bg[1] = (40, 50, 60)
    fg_path = save_image(str(tmp_path / "fg.png"), fg)
    bg_path = save_image(str(tmp_path / "bg.png"), bg)
    return fg, bg, fg_path, bg_path


def test_chroma_key_demo_headless_writes_output(tmp_path):
    fg, bg, fg_path, bg_path = _write_inputs(tmp_path)
    out_path = str(tmp_path / "overlay.png")
    result = run_chroma_key_demo(fg_path, bg_path, out_path, threshold=30, interactive=False, settings=Settings())
    assert result['output_path'] == out_path
    assert result['threshold'] == 30
    assert result['dominant_color'].bgr == (32, 32, 224)
    written = load_image(out_path)
    assert np.array_equal(written, apply_chroma_key(fg, bg, 30))
    assert (written[4:, 4:] == 200).all()


def test_chroma_key_demo_uses_settings_threshold(tmp_path):
    _, _, fg_path, bg_path = _write_inputs(tmp_path)
    settings = Settings()
    settings.chroma.threshold = 0
    result = run_chroma_key_demo(fg_path, bg_path, str(tmp_path / "o.png"), interactive=False, settings=settings)
    assert result['threshold'] == 0


def test_chroma_key_demo_missing_background(tmp_path):
    _, _, fg_path, _ = _write_inputs(tmp_path)
    with pytest.raises(ImageLoadError):
        run_chroma_key_demo(fg_path, str(tmp_path / "missing.jpg"), str(tmp_path / "o.png"), interactive=False, settings=Settings())
    assert not os.path.exists(tmp_path / "o.png")


def test_sharpen_demo_headless(tmp_path):
    img = np.random.default_rng(9).integers(0, 256, size=(7, 7, 3), dtype=np.uint8)
    path = save_image(str(tmp_path / "boomer.png"), img)
    out_path = str(tmp_path / "output.png")
    result = run_sharpen_demo(path, out_path, interactive=False, settings=Settings())
    assert result['variants'] == ["indexed", "rows", "cursor"]
    assert result['identical'] is True
    assert np.array_equal(load_image(out_path), sharpen(img))


def test_sharpen_demo_rejects_unknown_variant(tmp_path):
    with pytest.raises(ValueError):
        run_sharpen_demo(str(tmp_path / "x.png"), variants=["bogus"], interactive=False, settings=Settings())
