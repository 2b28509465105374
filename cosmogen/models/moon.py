"""Moon descriptor."""

from dataclasses import dataclass

from .enums import MoonKind


@dataclass(frozen=True)
class MoonResources:
    metals: int
    volatile: int


@dataclass(frozen=True)
class Moon:
    """A moon orbiting a planet.

    Distances and sizes are in the same scene units as the host planet's
    size, so a renderer can place moons without knowing kilometres.
    """

    id: str  # "MOON-<seed>-<index>"
    seed: int
    index: int
    kind: MoonKind
    radius_km: int
    size: float  # Visual scale
    color: str  # Hex colour, fixed per kind
    resources: MoonResources
    distance: float  # Mean distance to the host planet
    orbit_speed: float  # Angular speed
    orbit_phase: float  # Initial angle in radians

    def __post_init__(self):
        """Validate moon data after initialization."""
        if self.radius_km <= 0:
            raise ValueError(f"Invalid radius_km: {self.radius_km} (must be > 0)")
        if self.distance <= 0:
            raise ValueError(f"Invalid distance: {self.distance} (must be > 0)")
