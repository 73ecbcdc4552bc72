"""Axis-aligned rectangular regions over logical map space."""

import numpy as np
from pydantic import BaseModel

from .exceptions import InvalidGeometryError, UnknownLocationError
from .types import LOCATION_INDEX, Location, Point


class Region(BaseModel, frozen=True):
    """Rectangle spanned by two opposite corners.

    Corner order does not matter: extents are absolute differences and the
    top-left/bottom-right corners are derived per axis.
    """

    p1: Point
    p2: Point

    @classmethod
    def from_size(cls, width: float, height: float) -> "Region":
        """Region anchored at the origin with the given extents."""
        return cls(p1=Point(x=0.0, y=0.0), p2=Point(x=width, y=height))

    @classmethod
    def from_corner(cls, corner: Point, width: float, height: float) -> "Region":
        """Region starting at ``corner`` and extending by width/height."""
        return cls(
            p1=corner,
            p2=Point(x=corner.x + width, y=corner.y + height),
        )

    def width(self) -> float:
        return abs(self.p1.x - self.p2.x)

    def height(self) -> float:
        return abs(self.p1.y - self.p2.y)

    def top_left(self) -> Point:
        return Point(x=min(self.p1.x, self.p2.x), y=min(self.p1.y, self.p2.y))

    def bottom_right(self) -> Point:
        return Point(x=max(self.p1.x, self.p2.x), y=max(self.p1.y, self.p2.y))

    def subdivide(self, horizontal: int, vertical: int) -> list["Region"]:
        """Split into a horizontal x vertical grid of equal sub-regions.

        Sub-regions are returned row by row from the top, and left to right
        within a row, so index ``row * horizontal + column``.

        Raises:
            InvalidGeometryError: If either count is not positive.
        """
        if horizontal <= 0 or vertical <= 0:
            raise InvalidGeometryError(
                f"Cannot subdivide into {horizontal}x{vertical} cells"
            )

        region_width = self.width()
        region_height = self.height()
        origin = self.top_left()

        regions: list[Region] = []
        for row in range(vertical):
            for col in range(horizontal):
                regions.append(
                    Region(
                        p1=Point(
                            x=region_width * col / horizontal + origin.x,
                            y=region_height * row / vertical + origin.y,
                        ),
                        p2=Point(
                            x=region_width * (col + 1) / horizontal + origin.x,
                            y=region_height * (row + 1) / vertical + origin.y,
                        ),
                    )
                )
        return regions

    def get_location(self, location: Location) -> "Region":
        """Resolve a compass location to its cell of the 3x3 subdivision.

        Raises:
            UnknownLocationError: If ``location`` is not a known Location.
        """
        try:
            index = LOCATION_INDEX[Location(location)]
        except (ValueError, KeyError) as e:
            raise UnknownLocationError(f"Unknown location: {location!r}") from e

        regions = self.subdivide(3, 3)
        assert len(regions) == 9, "Unexpected number of regions"
        return regions[index]

    def contains(self, point: Point) -> bool:
        """Closed containment test; boundary points are inside."""
        return point >= self.top_left() and point <= self.bottom_right()

    def choose_point(self, rng: np.random.Generator) -> Point:
        """Draw a uniformly distributed point inside the region.

        The x coordinate is drawn before y. A zero-extent axis always yields
        its single coordinate.
        """
        top_left = self.top_left()
        bottom_right = self.bottom_right()
        x = float(rng.uniform(top_left.x, bottom_right.x))
        y = float(rng.uniform(top_left.y, bottom_right.y))
        return Point(x=x, y=y)
