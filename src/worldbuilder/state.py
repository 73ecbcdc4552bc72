"""Rendered tile grid state."""

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

from .exceptions import InvalidGeometryError, TileOutOfRangeError
from .terrain_types import FeatureType, TerrainType, feature_from_code, terrain_from_code


class Tile(BaseModel, frozen=True):
    """Immutable tile contents."""

    terrain_type: TerrainType
    feature_type: FeatureType = FeatureType.NONE


class MapInstance:
    """
    Immutable dense tile grid produced by a render.

    Terrain and feature codes are stored in two uint8 arrays of shape
    (num_vertical, num_horizontal), indexed [y, x]. Both arrays are
    marked read-only; Tile objects are created on demand by ``at``.
    """

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        terrain: NDArray[np.uint8],
        features: NDArray[np.uint8],
    ):
        if terrain.ndim != 2 or terrain.shape != features.shape:
            raise InvalidGeometryError(
                f"Terrain array shape {terrain.shape} doesn't match "
                f"feature array shape {features.shape}"
            )

        self._tile_width = tile_width
        self._tile_height = tile_height
        self._terrain = np.array(terrain, dtype=np.uint8, copy=True)
        self._features = np.array(features, dtype=np.uint8, copy=True)
        self._terrain.setflags(write=False)
        self._features.setflags(write=False)

    @property
    def num_horizontal(self) -> int:
        """Grid width in tiles."""
        return int(self._terrain.shape[1])

    @property
    def num_vertical(self) -> int:
        """Grid height in tiles."""
        return int(self._terrain.shape[0])

    @property
    def tile_width(self) -> int:
        return self._tile_width

    @property
    def tile_height(self) -> int:
        return self._tile_height

    @property
    def terrain_array(self) -> NDArray[np.uint8]:
        """Read-only terrain codes, shape (num_vertical, num_horizontal)."""
        return self._terrain

    @property
    def feature_array(self) -> NDArray[np.uint8]:
        """Read-only feature codes, shape (num_vertical, num_horizontal)."""
        return self._features

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a tile coordinate lies inside the grid."""
        return 0 <= x < self.num_horizontal and 0 <= y < self.num_vertical

    def at(self, x: int, y: int) -> Tile:
        """Get the tile at (x, y).

        Raises:
            TileOutOfRangeError: If (x, y) is outside the grid. Coordinates
                are never clamped or wrapped.
        """
        if not self.in_bounds(x, y):
            raise TileOutOfRangeError(
                f"Tile ({x}, {y}) outside of map range "
                f"{self.num_horizontal}x{self.num_vertical}"
            )
        return Tile(
            terrain_type=terrain_from_code(self._terrain[y, x]),
            feature_type=feature_from_code(self._features[y, x]),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapInstance):
            return NotImplemented
        return (
            self._tile_width == other._tile_width
            and self._tile_height == other._tile_height
            and np.array_equal(self._terrain, other._terrain)
            and np.array_equal(self._features, other._features)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"MapInstance({self.num_horizontal}x{self.num_vertical}, "
            f"tile={self._tile_width}x{self._tile_height})"
        )
