"""Random points spread evenly over the unit sphere."""

from __future__ import annotations

import math
import random


def generate_points(count: int, rng: random.Random | None = None) -> list[tuple[float, float, float]]:
    """Return ``count`` points drawn uniformly from the surface of the unit sphere."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    points = []
    for _ in range(count):
        z = rng.uniform(-1.0, 1.0)
        phi = rng.uniform(0.0, 2 * math.pi)
        theta = math.asin(z)
        points.append((math.cos(theta) * math.cos(phi), math.cos(theta) * math.sin(phi), z))
    return points