"""Seed-specific rendered form of a map declaration.

A RenderedMap holds the placed terrain shapes and feature points in a
logical coordinate space spanning ``(aspect_ratio, 1.0)``. It is built by
the terrain and feature passes and then sampled once per tile to fill a
MapInstance.
"""

from dataclasses import dataclass, field

import numpy as np

from ..region import Region
from ..shape import Shape
from ..state import Tile
from ..terrain_types import FeatureType, TerrainType
from ..types import Location, Point


@dataclass
class RenderedTerrain:
    """A terrain declaration resolved to a concrete shape."""

    shape: Shape
    terrain_type: TerrainType


@dataclass
class RenderedFeature:
    """A feature declaration resolved to a concrete point."""

    point: Point
    feature_type: FeatureType


@dataclass
class RenderedMap:
    """Placed shapes and feature points for one seed and grid geometry."""

    background: TerrainType
    aspect_ratio: float
    terrains: list[RenderedTerrain] = field(default_factory=list)
    features: list[RenderedFeature] = field(default_factory=list)

    def region(self) -> Region:
        """Full logical region, ``aspect_ratio`` wide and 1.0 tall."""
        return Region.from_size(self.aspect_ratio, 1.0)

    def add_terrain(
        self,
        terrain_type: TerrainType,
        location: Location,
        rng: np.random.Generator,
    ) -> RenderedTerrain:
        """Synthesize a shape inside ``location`` and append it as the top layer."""
        shape = Shape.generate(self.region().get_location(location), rng)
        rendered = RenderedTerrain(shape=shape, terrain_type=terrain_type)
        self.terrains.append(rendered)
        return rendered

    def add_feature(self, feature_type: FeatureType, point: Point) -> RenderedFeature:
        rendered = RenderedFeature(point=point, feature_type=feature_type)
        self.features.append(rendered)
        return rendered

    def terrain_at(self, point: Point) -> TerrainType:
        """Terrain at a logical point.

        Later terrains occlude earlier ones, so the layers are scanned from
        the most recently added down. Uncovered points get the background.
        """
        for terrain in reversed(self.terrains):
            if terrain.shape.contains(point):
                return terrain.terrain_type
        return self.background

    def feature_at(self, footprint: Region) -> FeatureType:
        """First feature (in declaration order) whose point lies in ``footprint``.

        The footprint is half-open on its right and bottom edges so a point
        on an edge shared by two tiles belongs to exactly one of them.
        """
        top_left = footprint.top_left()
        bottom_right = footprint.bottom_right()
        for feature in self.features:
            point = feature.point
            inside = point.x < bottom_right.x and point.y < bottom_right.y
            if point >= top_left and inside:
                return feature.feature_type
        return FeatureType.NONE

    def tile_point(
        self, x: int, y: int, num_horizontal: int, num_vertical: int
    ) -> Point:
        """Logical position of the center of tile (x, y)."""
        return Point(
            x=(x + 0.5) / num_horizontal * self.aspect_ratio,
            y=(y + 0.5) / num_vertical,
        )

    def tile_footprint(
        self, x: int, y: int, num_horizontal: int, num_vertical: int
    ) -> Region:
        """Logical rectangle covered by tile (x, y), centered on its tile point.

        Edges come from the tile indices so neighbouring tiles share the
        exact same boundary value.
        """
        return Region(
            p1=Point(
                x=x / num_horizontal * self.aspect_ratio, y=y / num_vertical
            ),
            p2=Point(
                x=(x + 1) / num_horizontal * self.aspect_ratio,
                y=(y + 1) / num_vertical,
            ),
        )

    def at(self, x: int, y: int, num_horizontal: int, num_vertical: int) -> Tile:
        """Sample the tile at grid coordinate (x, y)."""
        point = self.tile_point(x, y, num_horizontal, num_vertical)
        footprint = self.tile_footprint(x, y, num_horizontal, num_vertical)
        return Tile(
            terrain_type=self.terrain_at(point),
            feature_type=self.feature_at(footprint),
        )

    def feature_positions(
        self, width: float, height: float
    ) -> list[tuple[Point, FeatureType]]:
        """Feature points rescaled from logical space into a width x height space.

        Useful for drawing features at pixel positions instead of whole tiles.
        """
        region = self.region()
        return [
            (
                Point(
                    x=width * (feature.point.x / region.width()),
                    y=height * (feature.point.y / region.height()),
                ),
                feature.feature_type,
            )
            for feature in self.features
        ]
