"""Generation engine components."""

from .galaxy_generator import dominant_spectral_class, generate_galaxy, star_seed_at
from .moon_generator import generate_moon
from .phenomenon_generator import generate_phenomenon
from .planet_generator import generate_planet
from .star_generator import generate_star, planet_of_star, planet_seed, solar_system_of
from .structure_generator import generate_structure
from .universe import Universe

__all__ = [
    "Universe",
    "dominant_spectral_class",
    "generate_galaxy",
    "generate_moon",
    "generate_phenomenon",
    "generate_planet",
    "generate_star",
    "generate_structure",
    "planet_of_star",
    "planet_seed",
    "solar_system_of",
    "star_seed_at",
]
