"""Map generation package.

This package turns a sparse map declaration into a tile grid: random blob
shapes per terrain declaration, collision-free feature points, and per-tile
sampling of the result.
"""

from .config import RenderConfig
from .declaration import MapDeclaration, MapFeature, MapTerrain
from .features import group_features_by_location, render_features
from .generator import grid_stats, make_instance, render_config, render_map, render_shapes
from .rendered import RenderedFeature, RenderedMap, RenderedTerrain
from .terrain import render_terrain

__all__ = [
    "MapDeclaration",
    "MapFeature",
    "MapTerrain",
    "RenderConfig",
    "RenderedFeature",
    "RenderedMap",
    "RenderedTerrain",
    "grid_stats",
    "group_features_by_location",
    "make_instance",
    "render_config",
    "render_features",
    "render_map",
    "render_shapes",
    "render_terrain",
]
