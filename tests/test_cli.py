import numpy as np

from chromasharp.image import load_image, save_image
from chromasharp.sharpen import SHARPEN_VARIANTS
from main import LOAD_FAILURE_EXIT_CODE, _cli


def test_missing_inputs_exit_with_load_failure(tmp_path, capsys):
    code = _cli([
        "chroma",
        "--foreground", str(tmp_path / "foreground.jpg"),
        "--background", str(tmp_path / "background.jpg"),
        "--no-window",
    ])
    assert code == LOAD_FAILURE_EXIT_CODE == -1
    assert "Unable to read input images" in capsys.readouterr().err


def test_sharpen_subcommand_writes_output(tmp_path):
    img = np.random.default_rng(2).integers(0, 256, size=(5, 6, 3), dtype=np.uint8)
    src = save_image(str(tmp_path / "boomer.png"), img)
    out = str(tmp_path / "output.png")
    code = _cli(["sharpen", "--image", src, "--out", out, "-v", "vectorized", "-v", "cursor", "--no-window"])
    assert code == 0
    assert np.array_equal(load_image(out), SHARPEN_VARIANTS["cursor"](img))


def test_threshold_out_of_range_is_usage_error(tmp_path, capsys):
    fg = np.zeros((2, 2, 3), dtype=np.uint8)
    path = save_image(str(tmp_path / "fg.png"), fg)
    code = _cli(["chroma", "--foreground", path, "--background", path, "-t", "300", "--no-window"])
    assert code == 2
    assert "threshold" in capsys.readouterr().err


def test_unwritable_output_is_reported_not_raised(tmp_path, capsys):
    from main import WRITE_FAILURE_EXIT_CODE

    fg = np.zeros((2, 2, 3), dtype=np.uint8)
    path = save_image(str(tmp_path / "fg.png"), fg)
    code = _cli(["chroma", "--foreground", path, "--background", path, "--out", str(tmp_path / "o.xyz"), "--no-window"])
    assert code == WRITE_FAILURE_EXIT_CODE != 0
    assert "Failed to write image" in capsys.readouterr().err
