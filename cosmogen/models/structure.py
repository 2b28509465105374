"""Point-of-interest descriptor (stations, ruins, beacons...)."""

from dataclasses import dataclass
from typing import Tuple

from .enums import StructureType


@dataclass(frozen=True)
class Structure:
    """An artificial point of interest.

    Structures live outside the celestial hierarchy: they can be attached to
    a planet or scattered through a galaxy.
    """

    id: str  # "STR-<seed>-<index>"
    seed: int
    index: int
    type: StructureType
    tech_level: int  # 0..10
    intactness: float  # 0..1
    potential: float  # tech_level * intactness
    loot: Tuple[str, ...]  # Determined by type

    def __post_init__(self):
        """Validate structure data after initialization."""
        if not (0 <= self.tech_level <= 10):
            raise ValueError(f"Invalid tech_level: {self.tech_level} (must be 0-10)")
        if not (0 <= self.intactness <= 1):
            raise ValueError(f"Invalid intactness: {self.intactness} (must be 0-1)")
