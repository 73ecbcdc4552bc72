"""Core types for map generation."""

import math
from enum import Enum

from pydantic import BaseModel


class Location(str, Enum):
    """Compass cell of a region split into a 3x3 grid."""

    NORTHWEST = "NorthWest"
    NORTH = "North"
    NORTHEAST = "NorthEast"
    WEST = "West"
    CENTRAL = "Central"
    EAST = "East"
    SOUTHWEST = "SouthWest"
    SOUTH = "South"
    SOUTHEAST = "SouthEast"


# Index into Region.subdivide(3, 3), which enumerates rows top to bottom
# and, within a row, columns left to right. +X is East, +Y is South.
LOCATION_INDEX: dict[Location, int] = {
    Location.NORTHWEST: 0,
    Location.NORTH: 1,
    Location.NORTHEAST: 2,
    Location.WEST: 3,
    Location.CENTRAL: 4,
    Location.EAST: 5,
    Location.SOUTHWEST: 6,
    Location.SOUTH: 7,
    Location.SOUTHEAST: 8,
}


class Point(BaseModel, frozen=True):
    """Immutable 2D real-valued coordinate.

    ``>=`` and ``<=`` compare both components and are only meaningful for
    rectangle containment; they do not form a total order.
    """

    x: float
    y: float

    def distance(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __ge__(self, other: "Point") -> bool:
        return self.x >= other.x and self.y >= other.y

    def __le__(self, other: "Point") -> bool:
        return self.x <= other.x and self.y <= other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x:.4f}, {self.y:.4f})"

    def __repr__(self) -> str:
        return f"Point(x={self.x}, y={self.y})"
