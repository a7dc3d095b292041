"""24-bit BMP writing and a simple Voronoi painter."""

from __future__ import annotations

import random
import struct
import sys
from os import PathLike

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_HEADER_SIZE = _FILE_HEADER.size + _INFO_HEADER.size
_BUFFER_SIDE = 512


def rgb(r: int, g: int, b: int) -> int:
    """Pack three bytes into one colour value, red in the low byte."""
    return (r & 0xFF) | ((g & 0xFF) << 8) | ((b & 0xFF) << 16)


def get_r(color: int) -> int:
    """Red component of a packed colour."""
    return color & 0xFF


def get_g(color: int) -> int:
    """Green component of a packed colour."""
    return (color >> 8) & 0xFF


def get_b(color: int) -> int:
    """Blue component of a packed colour."""
    return (color >> 16) & 0xFF


def bmp_bytes(width: int, height: int, data: bytes) -> bytes:
    """Return a complete BMP file holding ``width * height * 3`` bytes of ``data``."""
    size = width * height * 3
    if size < 0:
        raise ValueError("width and height must not be negative")
    if len(data) < size:
        raise ValueError(f"need {size} bytes of pixel data, got {len(data)}")
    file_size = size + _HEADER_SIZE
    head = _FILE_HEADER.pack(0x4D42, file_size, 0, 0, file_size - size)
    info = _INFO_HEADER.pack(40, width, height, 1, 24, 0, size, 0, 0, 0, 0)
    return head + info + bytes(data[:size])


def write_bmp(filename: str | PathLike[str], width: int, height: int, data: bytes) -> None:
    """Write ``data`` as a BMP file to ``filename``."""
    content = bmp_bytes(width, height, data)
    with open(filename, "wb") as handle:
        handle.write(content)


def distance_sqrd(x1: int, y1: int, x2: int, y2: int) -> int:
    """Squared Euclidean distance between two points."""
    xd = x2 - x1
    yd = y2 - y1
    return xd * xd + yd * yd


class Bitmap:
    """An image of up to 512 by 512 pixels backed by a fixed pixel buffer.

    Pixels are stored column-major in a 512 by 512 buffer of blue, green, red
    bytes; the saved image data is the start of that buffer.
    """

    def __init__(self, width: int, height: int) -> None:
        if not (0 < width <= _BUFFER_SIDE and 0 < height <= _BUFFER_SIDE):
            raise ValueError(f"size must be within 1..{_BUFFER_SIDE}")
        self.width = width
        self.height = height
        self._buffer = bytearray(_BUFFER_SIDE * _BUFFER_SIDE * 3)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < _BUFFER_SIDE and 0 <= y < _BUFFER_SIDE):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return (x * _BUFFER_SIDE + y) * 3

    def set_pixel(self, x: int, y: int, r: int = 0x07, g: int = 0xFF, b: int = 0x07) -> None:
        """Set the pixel at ``(x, y)``."""
        offset = self._offset(x, y)
        self._buffer[offset:offset + 3] = bytes((b & 0xFF, g & 0xFF, r & 0xFF))

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return ``(r, g, b)`` of the pixel at ``(x, y)``."""
        offset = self._offset(x, y)
        b, g, r = self._buffer[offset:offset + 3]
        return r, g, b

    def to_bytes(self) -> bytes:
        """Return the image as the bytes of a BMP file."""
        return bmp_bytes(self.width, self.height, self._buffer)

    def save(self, filename: str | PathLike[str]) -> None:
        """Write the image to ``filename`` as a BMP file."""
        write_bmp(filename, self.width, self.height, self._buffer)


class Voronoi:
    """Paint a Voronoi diagram of random sites onto a bitmap."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.points: list[tuple[int, int]] = []
        self.colors: list[int] = []
        self._bitmap: Bitmap | None = None

    def make(self, bitmap: Bitmap, count: int) -> None:
        """Add ``count`` random sites and paint every pixel by its nearest site."""
        self._bitmap = bitmap
        self._create_points(count)
        self._create_colors()
        self._create_sites()
        self._set_sites_points()

    def _create_points(self, count: int) -> None:
        assert self._bitmap is not None
        w = self._bitmap.width - 20
        h = self._bitmap.height - 20
        if count > 0 and (w <= 0 or h <= 0):
            raise ValueError("bitmap must be larger than 20 by 20 pixels")
        for _ in range(count):
            self.points.append((self._rng.randrange(w) + 10, self._rng.randrange(h) + 10))

    def _create_colors(self) -> None:
        for _ in self.points:
            r = self._rng.randrange(200) + 50
            g = self._rng.randrange(200) + 55
            b = self._rng.randrange(200) + 50
            self.colors.append(rgb(r, g, b))

    def _create_sites(self) -> None:
        bitmap = self._bitmap
        assert bitmap is not None
        if not self.points:
            return
        for hh in range(bitmap.height):
            for ww in range(bitmap.width):
                best = sys.maxsize
                index = -1
                for i, (px, py) in enumerate(self.points):
                    d = distance_sqrd(px, py, ww, hh)
                    if d < best:
                        best = d
                        index = i
                # Only the low byte of the colour goes to the red channel.
                bitmap.set_pixel(ww, hh, get_r(self.colors[index]))

    def _set_sites_points(self) -> None:
        bitmap = self._bitmap
        assert bitmap is not None
        for x, y in self.points:
            for i in (-1, 0, 1):
                for j in (-1, 0, 1):
                    bitmap.set_pixel(x + i, y + j)