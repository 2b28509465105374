"""Parent context records passed down the generation hierarchy.

Every optional field is resolved to its default here, once, so generators
never need to re-default a missing value.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import SpectralClass


@dataclass(frozen=True)
class HostStar:
    """What a planet knows about the star it orbits."""

    spectral_class: Optional[SpectralClass] = None
    mass: Optional[float] = None
    luminosity: Optional[float] = None

    def __post_init__(self):
        if self.spectral_class is not None and not isinstance(self.spectral_class, SpectralClass):
            # Accept plain letters such as "G"
            object.__setattr__(self, "spectral_class", SpectralClass(self.spectral_class))

    @property
    def is_cool(self) -> bool:
        """True for G, K and M stars."""
        return self.spectral_class in (SpectralClass.G, SpectralClass.K, SpectralClass.M)


@dataclass(frozen=True)
class GalaxyContext:
    """What a star knows about its galaxy."""

    size: float
    age: Optional[float] = None

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"Invalid galaxy size: {self.size} (must be > 0)")
