"""Feature pass: spread features sharing a location across its area."""

import logging
import math
from typing import Sequence, TypeVar

import numpy as np

from ..types import Location
from .declaration import MapFeature
from .rendered import RenderedMap

logger = logging.getLogger(__name__)

T = TypeVar("T")


def group_features_by_location(
    features: Sequence[MapFeature],
) -> dict[Location, list[MapFeature]]:
    """Group feature declarations by location.

    Groups are ordered by the first appearance of their location and keep
    the declaration order of their members.
    """
    groups: dict[Location, list[MapFeature]] = {}
    for feature in features:
        groups.setdefault(feature.location, []).append(feature)
    return groups


def shuffle_in_place(items: list[T], rng: np.random.Generator) -> None:
    """Fisher-Yates shuffle driven by the shared generator."""
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.integers(0, i, endpoint=True))
        items[i], items[j] = items[j], items[i]


def render_features(
    rendered: RenderedMap,
    features: Sequence[MapFeature],
    rng: np.random.Generator,
) -> None:
    """Place one point per feature declaration.

    A location holding n features is split into a d x d grid of cells with
    d = ceil(sqrt(n)). The cells are shuffled and feature i gets a random
    point inside cell i, so no two features of a location share a cell.

    Args:
        rendered: Rendered form to append feature points to.
        features: Feature declarations in authoring order.
        rng: Shared random generator, advanced in place.
    """
    for location, group in group_features_by_location(features).items():
        location_region = rendered.region().get_location(location)

        division = math.ceil(math.sqrt(len(group)))
        cells = location_region.subdivide(division, division)
        shuffle_in_place(cells, rng)

        for feature, cell in zip(group, cells):
            point = cell.choose_point(rng)
            rendered.add_feature(feature.feature_type, point)

        logger.debug(
            f"{location.value}: {len(group)} features over "
            f"{division}x{division} cells"
        )
