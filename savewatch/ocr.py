"""Reading a single line of text from an image with tesseract."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from pathlib import Path

import numpy as np
from PIL import Image


def _otsu_threshold(pixels: np.ndarray) -> int:
    hist = np.bincount(pixels.ravel(), minlength=256).astype(np.float64)
    total = hist.sum()
    if total == 0:
        return 0
    levels = np.arange(256, dtype=np.float64)
    weight_bg = np.cumsum(hist)
    sum_bg = np.cumsum(hist * levels)
    weight_fg = total - weight_bg
    mean_total = sum_bg[-1]
    with np.errstate(divide="ignore", invalid="ignore"):
        mean_bg = sum_bg / weight_bg
        mean_fg = (mean_total - sum_bg) / weight_fg
        between = weight_bg * weight_fg * (mean_bg - mean_fg) ** 2
    between = np.nan_to_num(between, nan=0.0, posinf=0.0, neginf=0.0)
    return int(np.argmax(between))


class OCR:
    """Recognise one line of text, preparing the image as for a game HUD."""

    def __init__(self, language: str = "eng", executable: str = "tesseract") -> None:
        self.language = language
        self.executable = executable

    def preprocess(self, image: Image.Image) -> Image.Image:
        """Grey, double in size and binarise (inverted, Otsu) the image."""
        gray = image.convert("L")
        gray = gray.resize((gray.width * 2, gray.height * 2), Image.NEAREST)
        pixels = np.asarray(gray, dtype=np.uint8)
        threshold = _otsu_threshold(pixels)
        binary = np.where(pixels > threshold, 0, 255).astype(np.uint8)
        return Image.fromarray(binary, mode="L")

    def recognize(self, image: Image.Image) -> str:
        """Return the text tesseract reads from ``image``; empty for an empty image."""
        if image.width == 0 or image.height == 0:
            return ""
        exe = shutil.which(self.executable)
        if exe is None:
            raise RuntimeError("Could not initialize tesseract.")
        prepared = self.preprocess(image)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "line.png"
            prepared.save(path)
            done = subprocess.run(
                [exe, str(path), "stdout", "-l", self.language, "--psm", "7"],
                capture_output=True,
                text=True,
                check=False,
            )
        if done.returncode != 0:
            raise RuntimeError(f"tesseract failed: {done.stderr.strip()}")
        return done.stdout