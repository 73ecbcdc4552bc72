"""Authored map declarations."""

from typing import TYPE_CHECKING

from pydantic import BaseModel

from ..terrain_types import FeatureType, TerrainType
from ..types import Location

if TYPE_CHECKING:
    from ..state import MapInstance


class MapTerrain(BaseModel, frozen=True):
    """Request for a patch of terrain somewhere inside a location."""

    location: Location
    terrain_type: TerrainType


class MapFeature(BaseModel, frozen=True):
    """Request for a single feature somewhere inside a location."""

    location: Location
    feature_type: FeatureType


class MapDeclaration(BaseModel):
    """
    Sparse description of a map: a background terrain plus ordered
    terrain and feature declarations.

    Declarations are append-only. Order matters: later terrains are drawn
    over earlier ones, and all declarations share one random stream.

    Usage:
        declaration = MapDeclaration(background=TerrainType.SWAMP)
        declaration.add_terrain(Location.EAST, TerrainType.FOREST)
        declaration.add_map_feature(Location.SOUTHWEST, FeatureType.TOWN)
        instance = declaration.render(16, 16, 40, 30, seed=0)
    """

    background: TerrainType
    terrains: list[MapTerrain] = []
    features: list[MapFeature] = []

    def add_terrain(
        self, location: Location | str, terrain_type: TerrainType | str
    ) -> MapTerrain:
        """Append a terrain declaration. Names are coerced to enum members."""
        terrain = MapTerrain(location=location, terrain_type=terrain_type)
        self.terrains.append(terrain)
        return terrain

    def add_map_feature(
        self, location: Location | str, feature_type: FeatureType | str
    ) -> MapFeature:
        """Append a feature declaration. Names are coerced to enum members."""
        feature = MapFeature(location=location, feature_type=feature_type)
        self.features.append(feature)
        return feature

    def render(
        self,
        tile_width: int,
        tile_height: int,
        num_horizontal: int,
        num_vertical: int,
        seed: int,
    ) -> "MapInstance":
        """Render this declaration into a tile grid.

        Deterministic in all five arguments. See ``generator.render_map``.
        """
        from .generator import render_map

        return render_map(
            self,
            tile_width=tile_width,
            tile_height=tile_height,
            num_horizontal=num_horizontal,
            num_vertical=num_vertical,
            seed=seed,
        )
