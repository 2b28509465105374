"""Cosmic phenomenon descriptor."""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .enums import PhenomenonType


@dataclass(frozen=True)
class Phenomenon:
    """A nebula, black hole, pulsar or other large-scale feature."""

    id: str  # "PH-<seed>-<index>"
    seed: int
    index: int
    type: PhenomenonType
    intensity: float  # 0..1
    radius_ly: int
    effects: Tuple[Tuple[str, float], ...]  # (name, strength) pairs, fixed per type

    def __post_init__(self):
        """Validate phenomenon data after initialization."""
        if isinstance(self.effects, Mapping):
            object.__setattr__(self, "effects", tuple(self.effects.items()))
        if not (0 <= self.intensity <= 1):
            raise ValueError(f"Invalid intensity: {self.intensity} (must be 0-1)")
        if self.radius_ly < 1:
            raise ValueError(f"Invalid radius_ly: {self.radius_ly} (must be >= 1)")

    def effect(self, name: str) -> Optional[float]:
        """Strength of one named effect, or None if this type lacks it."""
        return dict(self.effects).get(name)
