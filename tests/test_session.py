import numpy as np
import pytest

from chromasharp.chroma import apply_chroma_key
from chromasharp.pipeline import session as session_module
from chromasharp.pipeline.session import ChromaKeySession, TRACKBAR_NAME


def _images():
    rng = np.random.default_rng(4)
    fg = rng.integers(0, 256, size=(8, 8, 3), dtype=np.uint8)
    fg[:4] = (32, 32, 224)
    bg = rng.integers(0, 256, size=(3, 5, 3), dtype=np.uint8)
    return fg, bg


def test_threshold_change_recomputes_and_redraws():
    fg, bg = _images()
    shown = []
    session = ChromaKeySession(fg, bg, threshold=24, window_name="W", show=lambda name, img: shown.append((name, img)))

    session.on_threshold(10)
    session.on_threshold(200)

    assert session.threshold == 200
    assert session.recomputes == 2
    assert [name for name, _ in shown] == ["W", "W"]
    assert np.array_equal(shown[0][1], apply_chroma_key(fg, bg, 10))
    assert np.array_equal(shown[1][1], apply_chroma_key(fg, bg, 200))
    assert session.output is shown[1][1]
    assert session.dominant.bgr == (32, 32, 224)


def test_recompute_uses_current_threshold():
    fg, bg = _images()
    session = ChromaKeySession(fg, bg, threshold=40)
    out = session.recompute()
    assert np.array_equal(out, apply_chroma_key(fg, bg, 40))


def test_invalid_threshold_rejected():
    fg, bg = _images()
    with pytest.raises(ValueError):
        ChromaKeySession(fg, bg, threshold=300)
    session = ChromaKeySession(fg, bg)
    with pytest.raises(ValueError):
        session.on_threshold(-5)


def test_open_registers_trackbar(monkeypatch):
    fg, bg = _images()
    calls = {}
    monkeypatch.setattr(session_module.cv2, "namedWindow", lambda name: calls.setdefault("window", name))
    monkeypatch.setattr(
        session_module.cv2,
        "createTrackbar",
        lambda *args: calls.setdefault("trackbar", args),
    )
    shown = []
    session = ChromaKeySession(fg, bg, window_name="Overlay", show=lambda name, img: shown.append(name))
    session.open(initial_threshold=28)

    assert calls["window"] == "Overlay"
    name, window, value, maximum, callback = calls["trackbar"]
    assert (name, window, value, maximum) == (TRACKBAR_NAME, "Overlay", 28, 255)
    assert callback == session.on_threshold
    assert shown == ["Overlay"]
    assert session.recomputes == 1


def test_recompute_builds_histogram_once(monkeypatch):
    from chromasharp.chroma import histogram

    fg, bg = _images()
    calls = []
    original = histogram.build_color_histogram

    def counting(image, buckets=4):
        calls.append(buckets)
        return original(image, buckets)

    monkeypatch.setattr(histogram, "build_color_histogram", counting)
    session = ChromaKeySession(fg, bg, threshold=30, show=lambda name, img: None)
    session.on_threshold(12)
    assert len(calls) == 1
    assert np.array_equal(session.output, apply_chroma_key(fg, bg, 12))
