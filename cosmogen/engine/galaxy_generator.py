"""Galaxy generation for one cell of the universe grid."""

import logging
import math
from collections import Counter
from typing import Iterable, List, Optional

from ..models import Coordinate, Galaxy, GalaxyContext, GalaxyType, SpectralClass, Star
from ..utils import MASK_32, Mulberry32, derive_seed, js_round, lerp, mix, normalize_seed
from ..utils.constants import (
    DEFAULT_SIZE_RANGE,
    FEATURES_SALT,
    GALAXY_AGE_RANGE,
    GALAXY_DENSITY_RANGE,
    MAX_PHENOMENA_PER_GALAXY,
    MAX_STRUCTURES_PER_GALAXY,
    MIN_GALAXY_SIZE,
    MIN_STARS_PER_GALAXY,
    PHENOMENON_INDEX_MULTIPLIER,
    STAR_SEED_SPAN,
    STRUCTURE_INDEX_MULTIPLIER,
)
from .phenomenon_generator import generate_phenomenon
from .star_generator import generate_star
from .structure_generator import generate_structure

logger = logging.getLogger(__name__)

GALAXY_TYPES = [
    GalaxyType.SPIRAL,
    GalaxyType.BARRED,
    GalaxyType.ELLIPTICAL,
    GalaxyType.IRREGULAR,
    GalaxyType.DWARF,
]


def generate_galaxy(
    universe_seed: int,
    cell,
    size_min: Optional[float] = None,
    size_max: Optional[float] = None,
) -> Galaxy:
    """Generate the galaxy occupying a cell.

    Algorithm:
    1. Mix the universe seed with the cell hash into the galaxy seed
    2. Draw type, size, age and star count from the galaxy stream
    3. For each star draw a seed from the stream, xor it with the galaxy
       seed and the star index, and generate the star from a fresh stream
    4. Count spectral classes to find the dominant one
    5. Scatter phenomena and structures from a separate features stream,
       leaving the main stream untouched

    Args:
        universe_seed: Root seed of the universe
        cell: Coordinate, (x, y, z) triple or {"x", "y", "z"} mapping
        size_min: Smallest galaxy diameter in light-years (default 40000)
        size_max: Largest galaxy diameter in light-years (default 300000)

    Returns:
        Galaxy descriptor with all of its stars
    """
    cell = Coordinate.of(cell)
    universe_seed = normalize_seed(universe_seed)
    combined_seed = mix(universe_seed, cell.x, cell.y, cell.z)
    local = Mulberry32(combined_seed)

    galaxy_type = local.choice(GALAXY_TYPES)
    size = _draw_size(local, size_min, size_max)
    age = js_round(local.uniform(*GALAXY_AGE_RANGE))
    num_systems = _num_systems(size, local.random())

    context = GalaxyContext(size=size, age=age)
    stars: List[Star] = []
    for i in range(num_systems):
        star_seed = _star_seed(local.random(), combined_seed, i)
        stars.append(generate_star(star_seed, i, context, stream=Mulberry32(star_seed)))

    features = Mulberry32(combined_seed ^ FEATURES_SALT)
    phenomena = tuple(
        generate_phenomenon(
            derive_seed(combined_seed, k + 1, PHENOMENON_INDEX_MULTIPLIER),
            index=k,
            parent_galaxy_size=size,
        )
        for k in range(math.floor(features.random() * MAX_PHENOMENA_PER_GALAXY))
    )
    structures = tuple(
        generate_structure(derive_seed(combined_seed, k + 1, STRUCTURE_INDEX_MULTIPLIER), index=k)
        for k in range(math.floor(features.random() * MAX_STRUCTURES_PER_GALAXY))
    )

    dominant = dominant_spectral_class(star.spectral_class for star in stars)
    logger.debug(
        f"Galaxy {combined_seed} at {cell.key}: {galaxy_type.value}, {size} ly, "
        f"{num_systems} systems, dominant {dominant.value}"
    )

    return Galaxy(
        id=f"GAL-{combined_seed}-{cell.x}-{cell.y}-{cell.z}",
        seed=combined_seed,
        type=galaxy_type,
        size=size,
        age=age,
        stars=tuple(stars),
        dominant_spectral=dominant,
        position_cell=cell,
        phenomena=phenomena,
        structures=structures,
    )


def star_seed_at(
    universe_seed: int,
    cell,
    star_index: int,
    size_min: Optional[float] = None,
    size_max: Optional[float] = None,
) -> int:
    """Seed of one star in a cell's galaxy, without generating any star.

    Replays the galaxy stream: four header draws, then one draw per star.

    Raises:
        IndexError: If the galaxy has fewer than star_index + 1 stars
    """
    cell = Coordinate.of(cell)
    combined_seed = mix(normalize_seed(universe_seed), cell.x, cell.y, cell.z)
    local = Mulberry32(combined_seed)

    local.random()  # type
    size = _draw_size(local, size_min, size_max)
    local.random()  # age
    num_systems = _num_systems(size, local.random())
    if not (0 <= star_index < num_systems):
        raise IndexError(f"Galaxy at {cell.key} has {num_systems} stars, no star {star_index}")

    draw = 0.0
    for _ in range(star_index + 1):
        draw = local.random()
    return _star_seed(draw, combined_seed, star_index)


def dominant_spectral_class(classes: Iterable[SpectralClass]) -> SpectralClass:
    """Most frequent spectral class. Ties go to the earliest class in O-B-A-F-G-K-M.

    An empty input yields G.
    """
    counts = Counter(SpectralClass(c) for c in classes)
    if not counts:
        return SpectralClass.G
    # max() keeps the first maximal element, and SpectralClass iterates O..M
    return max(SpectralClass, key=lambda spectral: counts[spectral])


def _draw_size(local: Mulberry32, size_min: Optional[float], size_max: Optional[float]) -> int:
    size = local.uniform(
        size_min if size_min is not None else DEFAULT_SIZE_RANGE[0],
        size_max if size_max is not None else DEFAULT_SIZE_RANGE[1],
    )
    return max(MIN_GALAXY_SIZE, js_round(size))


def _num_systems(size: int, draw: float) -> int:
    return max(MIN_STARS_PER_GALAXY, math.floor((size / 1000) * lerp(*GALAXY_DENSITY_RANGE, draw)))


def _star_seed(draw: float, combined_seed: int, index: int) -> int:
    return (math.floor(draw * STAR_SEED_SPAN) ^ combined_seed ^ index) & MASK_32
