"""Capturing a rectangle of the screen."""

from __future__ import annotations

from PIL import Image, ImageGrab


class ScreenShot:
    """A fixed region of the screen that can be grabbed repeatedly."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def bbox(self) -> tuple[int, int, int, int]:
        """Return ``(left, top, right, bottom)`` of the region."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def __call__(self) -> Image.Image:
        """Grab the region as an RGB image."""
        return ImageGrab.grab(bbox=self.bbox()).convert("RGB")