"""Tests for the terrain render pass."""

import numpy as np

from worldbuilder.generation.declaration import MapTerrain
from worldbuilder.generation.rendered import RenderedMap
from worldbuilder.generation.terrain import render_terrain
from worldbuilder.shape import Shape
from worldbuilder.terrain_types import TerrainType
from worldbuilder.types import Location


def _terrains(*pairs: tuple[Location, TerrainType]) -> list[MapTerrain]:
    return [MapTerrain(location=loc, terrain_type=t) for loc, t in pairs]


class TestRenderTerrain:
    """Tests for render_terrain."""

    def test_one_shape_per_declaration(self, rng):
        rendered = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=4 / 3)
        terrains = _terrains(
            (Location.EAST, TerrainType.FOREST),
            (Location.WEST, TerrainType.PLAIN),
            (Location.EAST, TerrainType.WATER),
        )
        render_terrain(rendered, terrains, rng)
        assert [t.terrain_type for t in rendered.terrains] == [
            TerrainType.FOREST,
            TerrainType.PLAIN,
            TerrainType.WATER,
        ]

    def test_shapes_inside_location(self, rng):
        """Circle centers lie in the declared location's cell."""
        rendered = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=4 / 3)
        terrains = _terrains(*[(loc, TerrainType.MOUNTAIN) for loc in Location])
        render_terrain(rendered, terrains, rng)
        for terrain, placed in zip(terrains, rendered.terrains):
            cell = rendered.region().get_location(terrain.location)
            for circle in placed.shape.circles:
                assert cell.contains(circle.center)

    def test_matches_direct_shape_generation(self):
        """Shapes are drawn sequentially from the shared generator."""
        rendered = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=1.5)
        terrains = _terrains(
            (Location.NORTH, TerrainType.FOREST),
            (Location.SOUTH, TerrainType.WATER),
        )
        render_terrain(rendered, terrains, np.random.default_rng(5))

        rng = np.random.default_rng(5)
        region = rendered.region()
        first = Shape.generate(region.get_location(Location.NORTH), rng)
        second = Shape.generate(region.get_location(Location.SOUTH), rng)
        assert rendered.terrains[0].shape == first
        assert rendered.terrains[1].shape == second

    def test_order_changes_shapes(self):
        """Reordering declarations changes the drawn shapes."""
        a = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=1.0)
        b = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=1.0)
        forest = (Location.EAST, TerrainType.FOREST)
        water = (Location.WEST, TerrainType.WATER)
        render_terrain(a, _terrains(forest, water), np.random.default_rng(3))
        render_terrain(b, _terrains(water, forest), np.random.default_rng(3))
        assert a.terrains[0].shape != b.terrains[1].shape

    def test_empty_declarations(self, rng):
        rendered = RenderedMap(background=TerrainType.SWAMP, aspect_ratio=1.0)
        render_terrain(rendered, [], rng)
        assert rendered.terrains == []
