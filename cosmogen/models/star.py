"""Star system data model."""

from dataclasses import dataclass
from typing import Tuple

from .coordinate import Position
from .enums import SpectralClass
from .planet import Planet


@dataclass(frozen=True)
class Star:
    """Represents a star and its planets.

    A star records the (seed, index) pair it was generated from. Feeding the
    pair back to the star generator rebuilds the exact same planet and moon
    tree, which is how a consumer opens a solar system on demand.
    """

    id: str  # "STAR-<seed>-<index>"
    seed: int
    index: int  # Position within the parent galaxy
    name: str
    spectral_class: SpectralClass
    mass: float  # Roughly solar masses
    luminosity: float  # size ** 3
    radius: float  # Visual radius (size * 20)
    size: float  # 0.5-4.5
    position: Position  # Inside the parent galaxy cube, centred at origin
    planets: Tuple[Planet, ...] = ()

    def __post_init__(self):
        """Validate star data after initialization."""
        if not (0.5 <= self.size <= 4.5):
            raise ValueError(f"Invalid size: {self.size} (must be 0.5-4.5)")
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")

    @property
    def num_planets(self) -> int:
        return len(self.planets)
