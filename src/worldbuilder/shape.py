"""Irregular blob shapes built from a union of random circles."""

import numpy as np
from pydantic import BaseModel

from .region import Region
from .types import Point

MIN_CIRCLES = 3
MAX_CIRCLES = 6


class Circle(BaseModel, frozen=True):
    """Disk with a center and radius."""

    center: Point
    radius: float

    def contains(self, point: Point) -> bool:
        """Whether the point lies within the disk, rim included."""
        return point.distance(self.center) <= self.radius


class Shape(BaseModel, frozen=True):
    """Union of circles approximating an irregular terrain patch."""

    circles: tuple[Circle, ...]

    @classmethod
    def generate(cls, region: Region, rng: np.random.Generator) -> "Shape":
        """Synthesize a random blob inside ``region``.

        Draws the circle count first, then for each circle its center
        (x, y) followed by its radius. Radii are bounded by the smaller
        extent of the region.

        Args:
            region: Region the circle centers are sampled from.
            rng: Shared random generator, advanced in place.

        Returns:
            A new Shape.
        """
        max_radius = min(region.width(), region.height())
        num_circles = int(rng.integers(MIN_CIRCLES, MAX_CIRCLES, endpoint=True))

        circles = []
        for _ in range(num_circles):
            center = region.choose_point(rng)
            radius = float(rng.uniform(0.0, max_radius))
            circles.append(Circle(center=center, radius=radius))

        return cls(circles=tuple(circles))

    def contains(self, point: Point) -> bool:
        """Whether any circle contains the point."""
        return any(circle.contains(point) for circle in self.circles)
