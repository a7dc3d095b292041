import pytest

from savewatch.screenshot import ScreenShot


def test_bbox():
    shot = ScreenShot(1706, 16, 116, 19)
    left, top, right, bottom = shot.bbox()
    assert (left, top) == (1706, 16)
    assert right - left == 116
    assert bottom - top == 19


def test_resizable_region():
    shot = ScreenShot(0, 0, 10, 10)
    shot.x = 5
    assert shot.bbox()[0] == 5
    assert shot.bbox()[2] - shot.bbox()[0] == 10


def test_negative_size():
    with pytest.raises(ValueError):
        ScreenShot(0, 0, -1, 5)