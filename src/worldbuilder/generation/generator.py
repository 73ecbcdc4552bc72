"""Map render orchestration: declaration + seed + geometry -> tile grid."""

import logging

import numpy as np

from ..exceptions import InvalidGeometryError
from ..state import MapInstance
from ..terrain_types import FEATURE_CODES, TERRAIN_CODES, FeatureType, TerrainType
from .config import RenderConfig
from .declaration import MapDeclaration
from .features import render_features
from .rendered import RenderedMap
from .terrain import render_terrain

logger = logging.getLogger(__name__)

SEED_MODULUS = 2**64


def render_map(
    declaration: MapDeclaration,
    tile_width: int,
    tile_height: int,
    num_horizontal: int,
    num_vertical: int,
    seed: int,
) -> MapInstance:
    """Render a declaration into a tile grid.

    Pure function of its arguments: the same declaration, geometry and seed
    always produce an identical grid.

    Args:
        declaration: Map declaration to render.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
        num_horizontal: Grid width in tiles.
        num_vertical: Grid height in tiles.
        seed: Random seed. Negative seeds wrap into the unsigned 64-bit range.

    Returns:
        The rendered MapInstance.

    Raises:
        InvalidGeometryError: If any size argument is not positive.
    """
    rendered = render_shapes(
        declaration, tile_width, tile_height, num_horizontal, num_vertical, seed
    )
    instance = make_instance(
        rendered, tile_width, tile_height, num_horizontal, num_vertical
    )
    _log_grid_stats(instance)
    return instance


def render_config(declaration: MapDeclaration, config: RenderConfig) -> MapInstance:
    """Render a declaration using a RenderConfig."""
    return render_map(
        declaration,
        tile_width=config.tile_width,
        tile_height=config.tile_height,
        num_horizontal=config.num_horizontal,
        num_vertical=config.num_vertical,
        seed=config.seed,
    )


def render_shapes(
    declaration: MapDeclaration,
    tile_width: int,
    tile_height: int,
    num_horizontal: int,
    num_vertical: int,
    seed: int,
) -> RenderedMap:
    """Run the terrain and feature passes without rasterizing.

    Terrains are drawn before features from one generator seeded with
    ``seed``.
    """
    _check_geometry(tile_width, tile_height, num_horizontal, num_vertical)

    rng = np.random.default_rng(seed % SEED_MODULUS)
    aspect_ratio = (tile_width * num_horizontal) / (tile_height * num_vertical)
    rendered = RenderedMap(background=declaration.background, aspect_ratio=aspect_ratio)

    logger.info(
        f"Rendering {num_horizontal}x{num_vertical} map with seed {seed} "
        f"(aspect ratio {aspect_ratio:.3f})"
    )

    render_terrain(rendered, declaration.terrains, rng)
    logger.info(f"Placed {len(rendered.terrains)} terrain shapes")

    render_features(rendered, declaration.features, rng)
    logger.info(f"Placed {len(rendered.features)} features")

    return rendered


def make_instance(
    rendered: RenderedMap,
    tile_width: int,
    tile_height: int,
    num_horizontal: int,
    num_vertical: int,
) -> MapInstance:
    """Rasterize a rendered map by sampling it once per tile.

    Args:
        rendered: Placed shapes and features.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
        num_horizontal: Grid width in tiles.
        num_vertical: Grid height in tiles.

    Returns:
        MapInstance holding the sampled grid.
    """
    _check_geometry(tile_width, tile_height, num_horizontal, num_vertical)

    terrain = np.empty((num_vertical, num_horizontal), dtype=np.uint8)
    features = np.empty((num_vertical, num_horizontal), dtype=np.uint8)

    for x in range(num_horizontal):
        for y in range(num_vertical):
            tile = rendered.at(x, y, num_horizontal, num_vertical)
            terrain[y, x] = TERRAIN_CODES[tile.terrain_type]
            features[y, x] = FEATURE_CODES[tile.feature_type]

    return MapInstance(tile_width, tile_height, terrain, features)


def grid_stats(instance: MapInstance) -> dict[str, int]:
    """Count tiles per terrain type and per feature type.

    Keys are the enum values, e.g. ``"Swamp"`` or ``"Town"``. Every type
    is present, with a zero count if unused.
    """
    counts: dict[str, int] = {}
    for terrain_type, code in TERRAIN_CODES.items():
        counts[terrain_type.value] = int(np.sum(instance.terrain_array == code))
    for feature_type, code in FEATURE_CODES.items():
        counts[feature_type.value] = int(np.sum(instance.feature_array == code))
    return counts


def _check_geometry(
    tile_width: int, tile_height: int, num_horizontal: int, num_vertical: int
) -> None:
    """Reject non-positive tile or grid sizes."""
    sizes = {
        "tile_width": tile_width,
        "tile_height": tile_height,
        "num_horizontal": num_horizontal,
        "num_vertical": num_vertical,
    }
    for name, value in sizes.items():
        if value <= 0:
            raise InvalidGeometryError(f"{name} must be positive, got {value}")


def _log_grid_stats(instance: MapInstance) -> None:
    """Log tile counts for a rendered grid."""
    total = instance.num_horizontal * instance.num_vertical
    counts = grid_stats(instance)

    logger.info(f"Map stats ({total:,} tiles):")
    for terrain_type in TerrainType:
        count = counts[terrain_type.value]
        if count:
            logger.info(f"  {terrain_type.value}: {count:,} ({count / total:.1%})")

    feature_tiles = total - counts[FeatureType.NONE.value]
    logger.info(f"  Feature tiles: {feature_tiles}")
