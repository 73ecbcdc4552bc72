"""Terrain and feature types and their properties."""

from enum import Enum


class TerrainType(str, Enum):
    """Terrain covering a tile. Every tile has exactly one."""

    MOUNTAIN = "Mountain"
    PLAIN = "Plain"
    WATER = "Water"
    SWAMP = "Swamp"
    FOREST = "Forest"

    @property
    def glyph(self) -> str:
        """Single character used by text previews."""
        return _TERRAIN_GLYPHS[self]


class FeatureType(str, Enum):
    """Feature sitting on a tile. NONE marks a tile without one."""

    NONE = "None"
    CAVE = "Cave"
    TOWN = "Town"

    @property
    def glyph(self) -> str:
        """Single character used by text previews."""
        return _FEATURE_GLYPHS[self]


# Stable uint8 codes for array-backed grids
TERRAIN_CODES: dict[TerrainType, int] = {
    TerrainType.MOUNTAIN: 0,
    TerrainType.PLAIN: 1,
    TerrainType.WATER: 2,
    TerrainType.SWAMP: 3,
    TerrainType.FOREST: 4,
}

FEATURE_CODES: dict[FeatureType, int] = {
    FeatureType.NONE: 0,
    FeatureType.CAVE: 1,
    FeatureType.TOWN: 2,
}

_TERRAIN_BY_CODE = {code: t for t, code in TERRAIN_CODES.items()}
_FEATURE_BY_CODE = {code: f for f, code in FEATURE_CODES.items()}

_TERRAIN_GLYPHS = {
    TerrainType.MOUNTAIN: "^",
    TerrainType.PLAIN: ".",
    TerrainType.WATER: "~",
    TerrainType.SWAMP: ",",
    TerrainType.FOREST: "T",
}

_FEATURE_GLYPHS = {
    FeatureType.NONE: "",
    FeatureType.CAVE: "C",
    FeatureType.TOWN: "H",
}


def terrain_from_code(code: int) -> TerrainType:
    """Convert a uint8 grid value back to a TerrainType."""
    return _TERRAIN_BY_CODE[int(code)]


def feature_from_code(code: int) -> FeatureType:
    """Convert a uint8 grid value back to a FeatureType."""
    return _FEATURE_BY_CODE[int(code)]
