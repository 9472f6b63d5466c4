import numpy as np
import pytest
from PIL import Image

from genart.gif import folder_gif, get_frames, images_to_gif, main


def _solid(color, size=(8, 6)):
    w, h = size
    return np.tile(np.array(color, dtype=np.uint8), (h, w, 1))


def test_images_to_gif_round_trip(tmp_path):
    out = tmp_path / "out.gif"
    frames = [_solid((255, 0, 0, 255)), _solid((0, 0, 255, 255)), _solid((0, 255, 0, 255))]
    images_to_gif(frames, 25.0, out)
    with Image.open(out) as gif:
        assert gif.n_frames == 3
        assert gif.size == (8, 6)
        assert gif.info["duration"] == 40
        assert gif.convert("RGB").getpixel((0, 0)) == (255, 0, 0)
        gif.seek(1)
        assert gif.convert("RGB").getpixel((3, 3)) == (0, 0, 255)


def test_images_to_gif_accepts_pil_images(tmp_path):
    out = tmp_path / "pil.gif"
    frames = [Image.new("RGBA", (5, 5), (0, 255, 0, 255)) for _ in range(2)]
    images_to_gif(frames, 10.0, out)
    with Image.open(out) as gif:
        assert gif.n_frames == 2
        assert gif.size == (5, 5)


def test_images_to_gif_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        images_to_gif([], 25.0, tmp_path / "empty.gif")


def test_images_to_gif_rejects_bad_fps(tmp_path):
    with pytest.raises(ValueError):
        images_to_gif([_solid((1, 2, 3, 255))], 0.0, tmp_path / "x.gif")


def test_images_to_gif_rejects_wrong_shape(tmp_path):
    with pytest.raises(ValueError):
        images_to_gif([np.zeros((4, 4, 3), dtype=np.uint8)], 25.0, tmp_path / "x.gif")


def test_get_frames_skips_directories(tmp_path):
    (tmp_path / "b.png").write_bytes(b"")
    (tmp_path / "a.png").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    assert get_frames(tmp_path) == [tmp_path / "a.png", tmp_path / "b.png"]


def test_get_frames_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_frames(tmp_path / "missing")


def _write_pngs(folder, colors):
    folder.mkdir()
    for i, color in enumerate(colors):
        Image.new("RGBA", (4, 4), color).save(folder / f"{i:03}.png")


def test_folder_gif_orders_frames_by_name(tmp_path):
    folder = tmp_path / "frames"
    _write_pngs(folder, [(255, 0, 0, 255), (0, 0, 255, 255)])
    out = tmp_path / "folder.gif"
    folder_gif(folder, 25.0, out)
    with Image.open(out) as gif:
        assert gif.n_frames == 2
        assert gif.convert("RGB").getpixel((1, 1)) == (255, 0, 0)
        gif.seek(1)
        assert gif.convert("RGB").getpixel((1, 1)) == (0, 0, 255)


def test_main_writes_output(tmp_path):
    folder = tmp_path / "frames"
    _write_pngs(folder, [(0, 255, 0, 255)] * 3)
    out = tmp_path / "main.gif"
    assert main([str(folder), "--fps", "25", "--output", str(out)]) == 0
    with Image.open(out) as gif:
        assert gif.n_frames == 3