"""Shared test fixtures for map generation tests."""

import numpy as np
import pytest

from worldbuilder.generation.declaration import MapDeclaration
from worldbuilder.terrain_types import FeatureType, TerrainType
from worldbuilder.types import Location


@pytest.fixture
def rng() -> np.random.Generator:
    """Generator with a fixed seed."""
    return np.random.default_rng(1234)


@pytest.fixture
def empty_declaration() -> MapDeclaration:
    """Declaration with only a Plain background."""
    return MapDeclaration(background=TerrainType.PLAIN)


@pytest.fixture
def scenario_declaration() -> MapDeclaration:
    """Swamp map with six terrain patches and four features.

    Features: two towns and a cave in the south-west, one town in the
    north-east.
    """
    declaration = MapDeclaration(background=TerrainType.SWAMP)
    declaration.add_terrain(Location.EAST, TerrainType.FOREST)
    declaration.add_terrain(Location.WEST, TerrainType.PLAIN)
    declaration.add_terrain(Location.CENTRAL, TerrainType.MOUNTAIN)
    declaration.add_terrain(Location.NORTHEAST, TerrainType.MOUNTAIN)
    declaration.add_terrain(Location.NORTHWEST, TerrainType.WATER)
    declaration.add_terrain(Location.SOUTH, TerrainType.MOUNTAIN)
    declaration.add_map_feature(Location.SOUTHWEST, FeatureType.TOWN)
    declaration.add_map_feature(Location.SOUTHWEST, FeatureType.TOWN)
    declaration.add_map_feature(Location.SOUTHWEST, FeatureType.CAVE)
    declaration.add_map_feature(Location.NORTHEAST, FeatureType.TOWN)
    return declaration
