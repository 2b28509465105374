"""Universe entry point: root seed plus a per-cell galaxy cache."""

import logging
import random
from typing import Dict, List, Optional, Tuple

from ..models import Coordinate, Galaxy, GalaxyContext, SolarSystem, SpectralClass
from ..models.enums import check_exhaustive
from ..utils import js_round, normalize_seed
from ..utils.constants import (
    AMBIENT_FLOOR,
    AMBIENT_SCALE,
    DEFAULT_SIZE_RANGE,
    MIN_GALAXY_SIZE,
    RANDOM_ROOT_SEED_BITS,
)
from .galaxy_generator import generate_galaxy
from .star_generator import generate_star, solar_system_of

logger = logging.getLogger(__name__)

SPECTRAL_RGB = check_exhaustive(
    SpectralClass,
    {
        SpectralClass.O: (155, 180, 255),
        SpectralClass.B: (170, 190, 255),
        SpectralClass.A: (200, 210, 255),
        SpectralClass.F: (230, 230, 255),
        SpectralClass.G: (255, 245, 230),
        SpectralClass.K: (255, 210, 170),
        SpectralClass.M: (255, 180, 150),
    },
    "SPECTRAL_RGB",
)


class Universe:
    """An infinite grid of galaxies derived from one root seed.

    Galaxies are generated on first access and memoized per cell. The cache
    is write-once and never evicted. Two Universe instances with the same
    seed always agree, and instances never share a cache.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        size_range: Tuple[float, float] = DEFAULT_SIZE_RANGE,
    ):
        """Initialize universe.

        Args:
            seed: Root seed. When omitted a random seed is chosen and logged,
                which is the only non-deterministic path in the engine.
            size_range: (min, max) galaxy diameter in light-years

        Raises:
            ValueError: If size_range is not an increasing pair with min >= 1
        """
        if seed is None:
            seed = random.getrandbits(RANDOM_ROOT_SEED_BITS)
            logger.info(f"No universe seed given, using random seed {seed}")
        self.seed = normalize_seed(seed)

        size_min, size_max = size_range
        if size_min < MIN_GALAXY_SIZE or size_max < size_min:
            raise ValueError(
                f"Invalid size_range: {size_range} (need {MIN_GALAXY_SIZE} <= min <= max)"
            )
        self.size_range = (size_min, size_max)
        self._cache: Dict[str, Galaxy] = {}

    def galaxy_at(self, cell) -> Galaxy:
        """Return the galaxy at a cell, generating it on first access.

        Args:
            cell: Coordinate, (x, y, z) triple or {"x", "y", "z"} mapping

        Returns:
            Galaxy descriptor
        """
        cell = Coordinate.of(cell)
        galaxy = self._cache.get(cell.key)
        if galaxy is None:
            logger.debug(f"Cache miss for cell {cell.key}, generating galaxy")
            galaxy = generate_galaxy(
                self.seed, cell, size_min=self.size_range[0], size_max=self.size_range[1]
            )
            # Concurrent misses may both generate; the results are identical
            self._cache[cell.key] = galaxy
        return galaxy

    def ambient_color_for(self, galaxy: Galaxy) -> Tuple[int, int, int]:
        """Dim background tint derived from a galaxy's dominant spectral class.

        Returns:
            (r, g, b) bytes, each scaled to 6% of the class colour with a floor
        """
        base = SPECTRAL_RGB[SpectralClass(galaxy.dominant_spectral)]
        return tuple(
            max(floor, js_round(channel * AMBIENT_SCALE))
            for channel, floor in zip(base, AMBIENT_FLOOR)
        )

    def solar_system(self, cell, star_index: int) -> SolarSystem:
        """Regenerate one star's full tree from the seed and index it recorded.

        Raises:
            IndexError: If the galaxy has no star at star_index
        """
        galaxy = self.galaxy_at(cell)
        if not (0 <= star_index < galaxy.num_systems):
            raise IndexError(
                f"Galaxy {galaxy.id} has {galaxy.num_systems} stars, no star {star_index}"
            )
        recorded = galaxy.stars[star_index]
        star = generate_star(
            recorded.seed, recorded.index, GalaxyContext(size=galaxy.size, age=galaxy.age)
        )
        return solar_system_of(star)

    def cached_cells(self) -> List[Coordinate]:
        """Cells generated so far, in generation order."""
        return [galaxy.position_cell for galaxy in self._cache.values()]
