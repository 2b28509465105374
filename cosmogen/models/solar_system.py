"""Solar system view of a single star."""

from dataclasses import dataclass
from typing import Tuple

from .planet import Planet
from .star import Star


@dataclass(frozen=True)
class SolarSystem:
    id: str
    name: str
    star: Star
    planets: Tuple[Planet, ...]

    @classmethod
    def of(cls, star: Star) -> "SolarSystem":
        return cls(id=f"SYS-{star.seed}-{star.index}", name=star.name, star=star, planets=star.planets)
