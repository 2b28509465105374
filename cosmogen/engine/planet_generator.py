"""Planet generation.

Every draw below comes from one local stream in a fixed order. Reordering,
adding or skipping a draw changes every planet generated after that point,
so any change here is a breaking change to the universe.
"""

import logging
import math
from typing import Optional

from ..models import (
    Atmosphere,
    HostStar,
    OrbitalSlot,
    Planet,
    PlanetResources,
    PlanetType,
    SpectralClass,
)
from ..models.enums import check_exhaustive
from ..utils import Mulberry32, derive_seed, js_round, lerp, normalize_seed
from ..utils.constants import (
    ANCIENT_THRESHOLD,
    ATMOSPHERE_THRESHOLD,
    BASE_TEMPERATURE_K,
    EARTH_RADIUS_KM,
    GASEOUS_RADIUS_RANGE,
    GRAVITY_MULTIPLIER_RANGE,
    HABITABLE_FORCE_THRESHOLD,
    MIN_GRAVITY_G,
    MIN_PLANET_SIZE,
    MIN_SLOT_ORBIT_SPEED,
    MOON_INDEX_MULTIPLIER,
    PLANET_MAX_INCLINATION,
    PLANET_MAX_TILT,
    PLANET_ORBIT_SPEED_RANGE,
    PLANET_ROTATION_RANGE,
    PLANET_SIZE_DIVISOR,
    PLANET_STREAM_OFFSET,
    ROCKY_RADIUS_RANGE,
    SLOT_ORBIT_SPEED_SCALE,
    STATION_HABITABILITY,
    STATION_THRESHOLD,
    TEMPERATURE_JITTER_RANGE,
    TERRAFORMABLE_HABITABILITY,
)
from .moon_generator import generate_moon
from .structure_generator import generate_structure

logger = logging.getLogger(__name__)

PLANET_TYPES = [
    PlanetType.ROCKY,
    PlanetType.GASEOUS,
    PlanetType.ICY,
    PlanetType.VOLCANIC,
    PlanetType.HABITABLE,
    PlanetType.BARREN,
]

HABITABLE_ATMOSPHERES = [Atmosphere.THIN, Atmosphere.BREATHABLE, Atmosphere.DENSE]
# Thin is listed twice: it is twice as likely as toxic
HOSTILE_ATMOSPHERES = [Atmosphere.THIN, Atmosphere.TOXIC, Atmosphere.THIN]

PLANET_COLORS = check_exhaustive(
    PlanetType,
    {
        PlanetType.ROCKY: "#a0704b",
        PlanetType.GASEOUS: "#d6c682",
        PlanetType.ICY: "#c9e8ff",
        PlanetType.VOLCANIC: "#ff6b3d",
        PlanetType.HABITABLE: "#4fa05f",
        PlanetType.BARREN: "#888888",
    },
    "PLANET_COLORS",
)

BIOME_CANDIDATES = check_exhaustive(
    PlanetType,
    {
        PlanetType.ROCKY: ["mountain", "desert", "canyon"],
        PlanetType.GASEOUS: ["storm", "bands", "clouds"],
        PlanetType.ICY: ["ice", "snow", "glacier"],
        PlanetType.VOLCANIC: ["lava", "ash", "basalt"],
        PlanetType.HABITABLE: ["forest", "oceanic", "continental"],
        PlanetType.BARREN: ["dust", "cratered", "wasteland"],
    },
    "BIOME_CANDIDATES",
)

STAR_TEMPERATURE_FACTORS = check_exhaustive(
    SpectralClass,
    {
        SpectralClass.O: 1.0,
        SpectralClass.B: 1.0,
        SpectralClass.A: 1.0,
        SpectralClass.F: 1.2,
        SpectralClass.G: 1.0,
        SpectralClass.K: 0.8,
        SpectralClass.M: 0.5,
    },
    "STAR_TEMPERATURE_FACTORS",
)

HABITABILITY_STAR_BONUS = {SpectralClass.G: 0.1, SpectralClass.M: 0.02}


def generate_planet(
    seed: int,
    index: int = 0,
    host_star: Optional[HostStar] = None,
    slot: Optional[OrbitalSlot] = None,
) -> Planet:
    """Generate one planet and its moons.

    Algorithm:
    1. Draw a base type; cool hosts (G/K/M) may force it to habitable
    2. Radius from a type-dependent band, gravity from radius
    3. Atmosphere, resources and habitability score
    4. Moons, each from an index-derived seed
    5. Orbit and rotation, then temperature from the drawn distance
    6. Colour, biome, optional station and tags

    Args:
        seed: Planet seed
        index: Planet index around its star
        host_star: What is known about the host star; missing fields are
            treated as a star without influence
        slot: Orbit assigned by the host star. When given, the final orbit
            fields come from the slot; the planet stream is still drawn in
            full so all other fields are unaffected.

    Returns:
        Planet descriptor
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    host = host_star or HostStar()
    local = Mulberry32(seed + index * PLANET_STREAM_OFFSET)

    # Type
    planet_type = local.choice(PLANET_TYPES)
    if host.is_cool and local.random() > HABITABLE_FORCE_THRESHOLD:
        planet_type = PlanetType.HABITABLE
    gaseous = planet_type == PlanetType.GASEOUS

    # Physical characteristics
    radius_range = GASEOUS_RADIUS_RANGE if gaseous else ROCKY_RADIUS_RANGE
    radius_km = js_round(local.uniform(*radius_range))
    gravity_g = max(
        MIN_GRAVITY_G, (radius_km / EARTH_RADIUS_KM) * local.uniform(*GRAVITY_MULTIPLIER_RANGE)
    )

    # Atmosphere
    atmosphere_chance = local.random()
    if planet_type == PlanetType.HABITABLE:
        atmosphere = local.choice(HABITABLE_ATMOSPHERES)
    elif atmosphere_chance > ATMOSPHERE_THRESHOLD:
        atmosphere = local.choice(HOSTILE_ATMOSPHERES)
    else:
        atmosphere = Atmosphere.NONE

    resources = PlanetResources(
        metals=js_round(local.random() * 100),
        gas=js_round(local.random() * (500 if gaseous else 60)),
        exotic=js_round(local.random() * (40 if planet_type == PlanetType.VOLCANIC else 8)),
    )

    habitability = _habitability(planet_type, atmosphere, host.spectral_class)

    # Moons never draw from the planet stream
    num_moons = math.floor(local.random() * (10 if gaseous else 4))
    moons = tuple(
        generate_moon(
            seed=derive_seed(seed, m + 1, MOON_INDEX_MULTIPLIER),
            index=m,
            host_radius_km=radius_km,
        )
        for m in range(num_moons)
    )

    # Orbit
    distance = lerp(
        100 if planet_type == PlanetType.HABITABLE else 30,
        800 if gaseous else 400,
        local.random(),
    )
    orbit_speed = local.uniform(*PLANET_ORBIT_SPEED_RANGE)
    orbit_phase = local.random() * math.pi * 2
    orbit_eccentricity = local.uniform(0.0, 0.4)
    orbit_inclination = local.uniform(0, PLANET_MAX_INCLINATION)
    self_rotation_speed = local.uniform(*PLANET_ROTATION_RANGE)
    self_tilt = local.uniform(0, PLANET_MAX_TILT)

    temperature = _temperature(host.spectral_class, distance, local.uniform(*TEMPERATURE_JITTER_RANGE))

    # Appearance
    color = PLANET_COLORS[planet_type]
    biome = local.choice(BIOME_CANDIDATES[planet_type])

    # Structures and tags
    structures = ()
    if habitability > STATION_HABITABILITY and local.random() > STATION_THRESHOLD:
        structures = (generate_structure(seed, index, type_hint="station"),)

    tags = []
    if habitability > TERRAFORMABLE_HABITABILITY:
        tags.append("terraformable")
    if planet_type == PlanetType.VOLCANIC:
        tags.append("unstable")
    if local.random() > ANCIENT_THRESHOLD:
        tags.append("ancient")

    if slot is not None:
        distance = slot.distance
        orbit_speed = max(MIN_SLOT_ORBIT_SPEED, SLOT_ORBIT_SPEED_SCALE / math.sqrt(slot.distance))
        orbit_eccentricity = slot.orbit_eccentricity
        orbit_inclination = slot.orbit_inclination
        self_rotation_speed = slot.self_rotation_speed
        self_tilt = slot.self_tilt

    logger.debug(
        f"Planet {seed}/{index}: {planet_type.value}, {num_moons} moons, "
        f"habitability {habitability}"
    )

    return Planet(
        id=f"PL-{seed}-{index}",
        seed=seed,
        index=index,
        name=f"Planet-{index + 1}",
        type=planet_type,
        size=max(MIN_PLANET_SIZE, radius_km / PLANET_SIZE_DIVISOR),
        color=color,
        radius_km=radius_km,
        gravity_g=round(gravity_g, 2),
        atmosphere=atmosphere,
        biome=biome,
        resources=resources,
        habitability=habitability,
        temperature=temperature,
        distance=distance,
        orbit_speed=orbit_speed,
        orbit_phase=orbit_phase,
        orbit_eccentricity=orbit_eccentricity,
        orbit_inclination=orbit_inclination,
        self_rotation_speed=self_rotation_speed,
        self_tilt=self_tilt,
        moons=moons,
        structures=structures,
        tags=tuple(tags),
    )


def _habitability(
    planet_type: PlanetType, atmosphere: Atmosphere, spectral_class: Optional[SpectralClass]
) -> float:
    """Additive habitability score, clamped to [0, 1] and rounded to 2 decimals."""
    score = 0.0
    if planet_type == PlanetType.HABITABLE:
        score += 0.6
    if atmosphere == Atmosphere.BREATHABLE:
        score += 0.25
    score += HABITABILITY_STAR_BONUS.get(spectral_class, 0.0)
    return min(1.0, max(0.0, round(score, 2)))


def _temperature(spectral_class: Optional[SpectralClass], distance: float, jitter: float) -> int:
    """Surface temperature in Kelvin, falling off with the square root of distance."""
    factor = STAR_TEMPERATURE_FACTORS[spectral_class] if spectral_class is not None else 1.0
    distance_factor = 1 / math.sqrt(distance / 100)
    return js_round(BASE_TEMPERATURE_K * factor * distance_factor * jitter)
