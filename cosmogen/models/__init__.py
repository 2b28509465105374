"""Descriptor data models for Cosmogen."""

from .context import GalaxyContext, HostStar
from .coordinate import Coordinate, Position
from .enums import (
    Atmosphere,
    GalaxyType,
    MoonKind,
    PhenomenonType,
    PlanetType,
    SpectralClass,
    StructureType,
)
from .galaxy import Galaxy
from .moon import Moon, MoonResources
from .phenomenon import Phenomenon
from .planet import OrbitalSlot, Planet, PlanetResources
from .solar_system import SolarSystem
from .star import Star
from .structure import Structure

__all__ = [
    "Atmosphere",
    "Coordinate",
    "Galaxy",
    "GalaxyContext",
    "GalaxyType",
    "HostStar",
    "Moon",
    "MoonKind",
    "MoonResources",
    "OrbitalSlot",
    "Phenomenon",
    "PhenomenonType",
    "Planet",
    "PlanetResources",
    "PlanetType",
    "Position",
    "SolarSystem",
    "SpectralClass",
    "Star",
    "Structure",
    "StructureType",
]
