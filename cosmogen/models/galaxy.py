"""Galaxy data model."""

from dataclasses import dataclass
from typing import Tuple

from .coordinate import Coordinate
from .enums import GalaxyType, SpectralClass
from .phenomenon import Phenomenon
from .star import Star
from .structure import Structure


@dataclass(frozen=True)
class Galaxy:
    """One galaxy, occupying one cell of the universe grid."""

    id: str  # "GAL-<seed>-<x>-<y>-<z>"
    seed: int  # Universe seed mixed with the cell hash
    type: GalaxyType
    size: int  # Diameter in light-years
    age: int  # Years
    stars: Tuple[Star, ...]
    dominant_spectral: SpectralClass
    position_cell: Coordinate
    phenomena: Tuple[Phenomenon, ...] = ()
    structures: Tuple[Structure, ...] = ()

    def __post_init__(self):
        """Validate galaxy data after initialization."""
        if self.size <= 0:
            raise ValueError(f"Invalid size: {self.size} (must be > 0)")
        if not self.stars:
            raise ValueError("A galaxy must contain at least one star")

    @property
    def num_systems(self) -> int:
        return len(self.stars)
