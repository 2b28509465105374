"""Planet descriptor and the orbital slot a star assigns to it."""

from dataclasses import dataclass
from typing import Tuple

from .enums import Atmosphere, PlanetType
from .moon import Moon
from .structure import Structure


@dataclass(frozen=True)
class OrbitalSlot:
    """Orbit a star reserves for one of its planets.

    Passed into the planet generator so the planet is built with its final
    orbit instead of being patched afterwards.
    """

    distance: float  # Millions of km
    orbit_eccentricity: float  # 0 = circle
    orbit_inclination: float  # Degrees
    self_rotation_speed: float
    self_tilt: float  # Degrees

    def __post_init__(self):
        """Validate slot data after initialization."""
        if self.distance <= 0:
            raise ValueError(f"Invalid distance: {self.distance} (must be > 0)")
        if not (0 <= self.orbit_eccentricity <= 0.4):
            raise ValueError(
                f"Invalid orbit_eccentricity: {self.orbit_eccentricity} (must be 0-0.4)"
            )


@dataclass(frozen=True)
class PlanetResources:
    metals: int
    gas: int
    exotic: int


@dataclass(frozen=True)
class Planet:
    """A planet with its moons, surface summary and orbit."""

    id: str  # "PL-<seed>-<index>"
    seed: int
    index: int
    name: str  # "Planet-<index + 1>"
    type: PlanetType
    size: float  # Visual scale
    color: str  # Hex colour, fixed per type
    radius_km: int
    gravity_g: float
    atmosphere: Atmosphere
    biome: str
    resources: PlanetResources
    habitability: float  # 0..1
    temperature: int  # Kelvin
    distance: float  # Mean distance to the star
    orbit_speed: float
    orbit_phase: float  # Radians
    orbit_eccentricity: float
    orbit_inclination: float
    self_rotation_speed: float
    self_tilt: float
    moons: Tuple[Moon, ...] = ()
    structures: Tuple[Structure, ...] = ()
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate planet data after initialization."""
        if not (0 <= self.habitability <= 1):
            raise ValueError(f"Invalid habitability: {self.habitability} (must be 0-1)")
        if self.gravity_g < 0.05:
            raise ValueError(f"Invalid gravity_g: {self.gravity_g} (must be >= 0.05)")
        if self.radius_km <= 0:
            raise ValueError(f"Invalid radius_km: {self.radius_km} (must be > 0)")

    @property
    def num_moons(self) -> int:
        return len(self.moons)
