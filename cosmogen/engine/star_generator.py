"""Star generation, including each star's planets."""

import logging
import math
from typing import List, Optional

from ..models import (
    GalaxyContext,
    HostStar,
    OrbitalSlot,
    Planet,
    Position,
    SolarSystem,
    SpectralClass,
    Star,
)
from ..utils import MASK_32, Mulberry32, normalize_seed
from ..utils.constants import (
    MAX_ECCENTRICITY,
    MAX_EXTRA_PLANETS,
    PLANET_INDEX_MULTIPLIER,
    SLOT_ECCENTRICITY_SCALE,
    SLOT_INCLINATION_SPAN,
    SLOT_ROTATION_BASE,
    SLOT_ROTATION_SPAN,
    SLOT_SPACING_BASE,
    SLOT_SPACING_SPAN,
    SLOT_TILT_SPAN,
    STAR_INDEX_MULTIPLIER,
    STAR_RADIUS_SCALE,
    STAR_SIZE_RANGE,
)
from .planet_generator import generate_planet

logger = logging.getLogger(__name__)

SPECTRAL_CLASSES = list(SpectralClass)


def planet_seed(star_seed: int, star_index: int, planet_index: int) -> int:
    """Seed of planet planet_index around star (star_seed, star_index)."""
    return (
        star_seed ^ (star_index * STAR_INDEX_MULTIPLIER) ^ (planet_index * PLANET_INDEX_MULTIPLIER)
    ) & MASK_32


def generate_star(
    seed: int,
    index: int,
    parent_galaxy: GalaxyContext,
    stream: Optional[Mulberry32] = None,
) -> Star:
    """Generate one star and its planets.

    Args:
        seed: Star seed
        index: Star index within its galaxy
        parent_galaxy: Galaxy size (and age) the star lives in
        stream: Stream to draw from. Defaults to a fresh Mulberry32(seed),
            which is what the galaxy generator hands in, so
            generate_star(star.seed, star.index, context) rebuilds a star.

    Returns:
        Star descriptor with its planets
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    rng = stream if stream is not None else Mulberry32(seed)

    spectral_class, size, position, planet_count = _draw_header(rng, parent_galaxy)
    mass = size * 2
    luminosity = size**3
    host = HostStar(spectral_class=spectral_class, mass=mass, luminosity=luminosity)

    planets: List[Planet] = []
    for i in range(planet_count):
        slot = _draw_slot(rng, i)
        planets.append(
            generate_planet(
                seed=planet_seed(seed, index, i),
                index=i,
                host_star=host,
                slot=slot,
            )
        )

    logger.debug(f"Star {seed}/{index}: class {spectral_class.value}, {planet_count} planets")

    return Star(
        id=f"STAR-{seed}-{index}",
        seed=seed,
        index=index,
        name=f"STAR-{seed}-{index}",
        spectral_class=spectral_class,
        mass=mass,
        luminosity=luminosity,
        radius=size * STAR_RADIUS_SCALE,
        size=size,
        position=position,
        planets=tuple(planets),
    )


def planet_of_star(
    seed: int, index: int, planet_index: int, parent_galaxy: GalaxyContext
) -> Planet:
    """Regenerate a single planet of a star without building its siblings.

    Only the star's own stream is replayed up to the planet's slot; the
    other planets are never generated.

    Raises:
        IndexError: If the star has no planet at planet_index
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    rng = Mulberry32(seed)

    spectral_class, size, _position, planet_count = _draw_header(rng, parent_galaxy)
    if not (0 <= planet_index < planet_count):
        raise IndexError(
            f"Star {seed}/{index} has {planet_count} planets, no planet {planet_index}"
        )

    slot = None
    for i in range(planet_index + 1):
        slot = _draw_slot(rng, i)

    mass = size * 2
    return generate_planet(
        seed=planet_seed(seed, index, planet_index),
        index=planet_index,
        host_star=HostStar(spectral_class=spectral_class, mass=mass, luminosity=size**3),
        slot=slot,
    )


def solar_system_of(star: Star) -> SolarSystem:
    """Wrap a star and its planets as a solar system."""
    return SolarSystem.of(star)


def _draw_header(rng: Mulberry32, parent_galaxy: GalaxyContext):
    """Draw spectral class, size, position and planet count, in that order."""
    spectral_class = SPECTRAL_CLASSES[math.floor(rng.random() * len(SPECTRAL_CLASSES))]

    low, high = STAR_SIZE_RANGE
    size = max(low, rng.random() * (high - low) + low)

    galaxy_size = parent_galaxy.size
    position = Position(
        x=(rng.random() - 0.5) * galaxy_size,
        y=(rng.random() - 0.5) * galaxy_size,
        z=(rng.random() - 0.5) * galaxy_size,
    )

    # G stars tend to carry more planets
    base_count = 3 if spectral_class == SpectralClass.G else 1
    planet_count = math.floor(rng.random() * MAX_EXTRA_PLANETS) + base_count

    return spectral_class, size, position, planet_count


def _draw_slot(rng: Mulberry32, planet_index: int) -> OrbitalSlot:
    """Draw the orbit reserved for planet planet_index. Spacing grows with the index."""
    distance = (planet_index + 1) * (SLOT_SPACING_BASE + rng.random() * SLOT_SPACING_SPAN)
    eccentricity = min(MAX_ECCENTRICITY, rng.random() * SLOT_ECCENTRICITY_SCALE)
    inclination = (rng.random() - 0.5) * SLOT_INCLINATION_SPAN
    self_rotation_speed = SLOT_ROTATION_BASE + rng.random() * SLOT_ROTATION_SPAN
    self_tilt = (rng.random() - 0.5) * SLOT_TILT_SPAN
    return OrbitalSlot(
        distance=distance,
        orbit_eccentricity=eccentricity,
        orbit_inclination=inclination,
        self_rotation_speed=self_rotation_speed,
        self_tilt=self_tilt,
    )
