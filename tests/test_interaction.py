from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from genart.interaction import Key, frame_path, key_pressed, save_path


def test_save_path_layout():
    result = save_path(Path("assets"), "sketch", date(2022, 1, 4))
    assert result == Path("assets") / "images" / "2022-01-04" / "sketch"


def test_save_path_accepts_str():
    day = date(2021, 12, 31)
    assert save_path("assets", "sketch", day) == save_path(Path("assets"), "sketch", day)


def test_frame_path_pads_frame_number():
    day = date(2022, 1, 4)
    result = frame_path(Path("assets"), "sketch", 7, day)
    assert result == save_path(Path("assets"), "sketch", day) / "007.png"


def test_frame_path_keeps_wide_numbers():
    day = date(2022, 1, 4)
    result = frame_path(Path("assets"), "sketch", 1234, day)
    assert result.name == "1234.png"
    assert result.parent == save_path(Path("assets"), "sketch", day)


def test_frame_path_defaults_to_today():
    result = frame_path(Path("assets"), "sketch", 1)
    today = datetime.now(timezone.utc).date()
    assert result.parent.parent.name == today.isoformat()


def test_up_increments():
    outcome = key_pressed(1.0, 2.0, Key.UP)
    assert outcome.up_down == pytest.approx(1.0 + 0.001)
    assert outcome.left_right == 2.0
    assert outcome.capture is False


def test_down_decrements_when_positive():
    outcome = key_pressed(1.0, 2.0, Key.DOWN)
    assert outcome.up_down == pytest.approx(1.0 - 0.001)


def test_down_stops_at_zero():
    outcome = key_pressed(0.0, 2.0, Key.DOWN)
    assert outcome.up_down == 0.0


def test_right_and_left():
    assert key_pressed(1.0, 2.0, Key.RIGHT).left_right == pytest.approx(2.0 + 0.001)
    assert key_pressed(1.0, 2.0, Key.LEFT).left_right == pytest.approx(2.0 - 0.001)
    assert key_pressed(1.0, 0.0, Key.LEFT).left_right == 0.0


def test_s_requests_capture():
    outcome = key_pressed(1.0, 2.0, Key.S)
    assert outcome == (1.0, 2.0, True)


def test_other_key_changes_nothing():
    assert key_pressed(1.0, 2.0, Key.W) == (1.0, 2.0, False)