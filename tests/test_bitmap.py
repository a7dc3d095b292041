import random
import struct

import pytest

from savewatch.bitmap import (
    Bitmap,
    Voronoi,
    bmp_bytes,
    distance_sqrd,
    get_b,
    get_g,
    get_r,
    rgb,
    write_bmp,
)


@pytest.mark.parametrize("r,g,b", [(0, 0, 0), (255, 255, 255), (7, 255, 7), (50, 120, 249)])
def test_rgb_round_trip(r, g, b):
    color = rgb(r, g, b)
    assert (get_r(color), get_g(color), get_b(color)) == (r, g, b)


def test_rgb_layout():
    assert rgb(0x01, 0x02, 0x03) == 0x030201


def test_bmp_header_fields():
    width, height = 4, 3
    data = bytes(range(width * height * 3))
    content = bmp_bytes(width, height, data)
    assert content[:2] == b"BM"
    size = width * height * 3
    bf_type, bf_size, res1, res2, off = struct.unpack_from("<HIHHI", content, 0)
    assert bf_size == len(content)
    assert off == 54
    assert (res1, res2) == (0, 0)
    info = struct.unpack_from("<IiiHHIIiiII", content, 14)
    assert info[:7] == (40, width, height, 1, 24, 0, size)
    assert content[off:] == data


def test_bmp_bytes_truncates_extra_data():
    content = bmp_bytes(1, 1, b"abcdef")
    assert content[54:] == b"abc"


def test_bmp_bytes_short_data_raises():
    with pytest.raises(ValueError):
        bmp_bytes(2, 2, b"\x00" * 5)


def test_write_bmp(tmp_path):
    target = tmp_path / "out.bmp"
    data = bytes(range(2 * 2 * 3))
    write_bmp(target, 2, 2, data)
    assert target.read_bytes() == bmp_bytes(2, 2, data)


def test_distance_sqrd():
    assert distance_sqrd(0, 0, 3, 4) == 25
    assert distance_sqrd(5, -2, 5, -2) == 0
    assert distance_sqrd(1, 2, 7, 9) == distance_sqrd(7, 9, 1, 2)


def test_set_and_get_pixel():
    bmp = Bitmap(8, 8)
    bmp.set_pixel(3, 5, 10, 20, 30)
    assert bmp.get_pixel(3, 5) == (10, 20, 30)
    assert bmp.get_pixel(5, 3) == (0, 0, 0)


def test_set_pixel_defaults():
    bmp = Bitmap(8, 8)
    bmp.set_pixel(1, 1)
    assert bmp.get_pixel(1, 1) == (0x07, 0xFF, 0x07)


def test_pixel_bytes_are_bgr_in_output():
    bmp = Bitmap(4, 4)
    bmp.set_pixel(0, 0, 1, 2, 3)
    bmp.set_pixel(0, 1, 4, 5, 6)
    content = bmp.to_bytes()
    assert content[54:60] == bytes((3, 2, 1, 6, 5, 4))
    assert len(content) == 54 + 4 * 4 * 3


def test_pixel_outside_buffer_raises():
    bmp = Bitmap(8, 8)
    with pytest.raises(IndexError):
        bmp.set_pixel(512, 0)
    with pytest.raises(IndexError):
        bmp.get_pixel(0, -1)


def test_bitmap_size_limits():
    with pytest.raises(ValueError):
        Bitmap(0, 10)
    with pytest.raises(ValueError):
        Bitmap(513, 10)


def test_save_matches_bytes(tmp_path):
    bmp = Bitmap(6, 5)
    bmp.set_pixel(2, 2, 9, 8, 7)
    target = tmp_path / "img.bmp"
    bmp.save(target)
    assert target.read_bytes() == bmp.to_bytes()


def test_voronoi_invariants():
    bmp = Bitmap(40, 30)
    voronoi = Voronoi(random.Random(1))
    voronoi.make(bmp, 4)
    assert len(voronoi.points) == 4
    assert len(voronoi.colors) == 4
    for x, y in voronoi.points:
        assert 10 <= x < 30
        assert 10 <= y < 20
        assert bmp.get_pixel(x, y) == (0x07, 0xFF, 0x07)
    reds = {get_r(c) for c in voronoi.colors}
    for hh in range(bmp.height):
        for ww in range(bmp.width):
            r, g, b = bmp.get_pixel(ww, hh)
            assert (g, b) == (0xFF, 0x07)
            assert r in reds or r == 0x07


def test_voronoi_nearest_site_colour():
    bmp = Bitmap(40, 40)
    voronoi = Voronoi(random.Random(3))
    voronoi.make(bmp, 3)
    ww, hh = 0, 0
    distances = [distance_sqrd(px, py, ww, hh) for px, py in voronoi.points]
    nearest = distances.index(min(distances))
    assert bmp.get_pixel(ww, hh)[0] == get_r(voronoi.colors[nearest])


def test_voronoi_deterministic_with_seed():
    first, second = Bitmap(30, 30), Bitmap(30, 30)
    Voronoi(random.Random(7)).make(first, 3)
    Voronoi(random.Random(7)).make(second, 3)
    assert first.to_bytes() == second.to_bytes()


def test_voronoi_too_small_bitmap():
    with pytest.raises(ValueError):
        Voronoi(random.Random(0)).make(Bitmap(20, 40), 2)