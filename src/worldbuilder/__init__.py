"""Procedural tile map generation from sparse declarations."""

from .config import DeclarationConfig, find_declaration, list_declarations, load_declaration
from .exceptions import (
    DeclarationError,
    InvalidGeometryError,
    TileOutOfRangeError,
    UnknownLocationError,
    WorldBuilderError,
)
from .generation import MapDeclaration, MapFeature, MapTerrain, RenderConfig, render_map
from .region import Region
from .shape import Circle, Shape
from .state import MapInstance, Tile
from .terrain_types import FeatureType, TerrainType
from .types import LOCATION_INDEX, Location, Point
from .worker import RenderWorker, WorkerConfig

__all__ = [
    # Types
    "Point",
    "Location",
    "LOCATION_INDEX",
    "TerrainType",
    "FeatureType",
    # Geometry
    "Region",
    "Circle",
    "Shape",
    # Declaration
    "MapDeclaration",
    "MapTerrain",
    "MapFeature",
    "RenderConfig",
    "render_map",
    # State
    "MapInstance",
    "Tile",
    # Worker
    "RenderWorker",
    "WorkerConfig",
    # Config
    "DeclarationConfig",
    "load_declaration",
    "find_declaration",
    "list_declarations",
    # Exceptions
    "WorldBuilderError",
    "TileOutOfRangeError",
    "UnknownLocationError",
    "InvalidGeometryError",
    "DeclarationError",
]
