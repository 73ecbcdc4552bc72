"""Terrain pass: one random blob per terrain declaration."""

import logging
from typing import Sequence

import numpy as np

from .declaration import MapTerrain
from .rendered import RenderedMap

logger = logging.getLogger(__name__)


def render_terrain(
    rendered: RenderedMap,
    terrains: Sequence[MapTerrain],
    rng: np.random.Generator,
) -> None:
    """Place a shape for every terrain declaration, in declaration order.

    All shapes come from the same generator, so reordering declarations
    changes every shape drawn after the first moved entry.

    Args:
        rendered: Rendered form to append shapes to.
        terrains: Terrain declarations in authoring order.
        rng: Shared random generator, advanced in place.
    """
    for terrain in terrains:
        placed = rendered.add_terrain(terrain.terrain_type, terrain.location, rng)
        logger.debug(
            f"{terrain.terrain_type.value} at {terrain.location.value}: "
            f"{len(placed.shape.circles)} circles"
        )
