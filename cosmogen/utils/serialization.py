"""Descriptor serialization to JSON-compatible dictionaries.

Keys are camelCase so the output matches what rendering clients expect
(spectralClass, numPlanets, radiusKm...). Enum members are written as their
string values.
"""

from typing import Any

from ..models import Galaxy, Moon, Phenomenon, Planet, SolarSystem, Star, Structure


def galaxy_to_dict(galaxy: Galaxy, include_stars: bool = True) -> dict[str, Any]:
    """Convert Galaxy to dictionary.

    Args:
        galaxy: Galaxy to serialize
        include_stars: If False, omit the (large) star list

    Returns:
        Dictionary representation of the galaxy
    """
    data = {
        "id": galaxy.id,
        "seed": galaxy.seed,
        "type": galaxy.type.value,
        "size": galaxy.size,
        "age": galaxy.age,
        "numSystems": galaxy.num_systems,
        "dominantSpectral": galaxy.dominant_spectral.value,
        "positionCell": {
            "x": galaxy.position_cell.x,
            "y": galaxy.position_cell.y,
            "z": galaxy.position_cell.z,
        },
        "phenomena": [phenomenon_to_dict(p) for p in galaxy.phenomena],
        "structures": [structure_to_dict(s) for s in galaxy.structures],
    }
    if include_stars:
        data["stars"] = [star_to_dict(s) for s in galaxy.stars]
    return data


def star_to_dict(star: Star) -> dict[str, Any]:
    """Convert Star (with its planets) to dictionary."""
    return {
        "id": star.id,
        "seed": star.seed,
        "index": star.index,
        "name": star.name,
        "spectralClass": star.spectral_class.value,
        "mass": star.mass,
        "luminosity": star.luminosity,
        "numPlanets": star.num_planets,
        "radius": star.radius,
        "size": star.size,
        "position": {"x": star.position.x, "y": star.position.y, "z": star.position.z},
        "planets": [planet_to_dict(p) for p in star.planets],
    }


def planet_to_dict(planet: Planet) -> dict[str, Any]:
    """Convert Planet (with its moons) to dictionary."""
    return {
        "id": planet.id,
        "seed": planet.seed,
        "index": planet.index,
        "name": planet.name,
        "type": planet.type.value,
        "size": planet.size,
        "color": planet.color,
        "radiusKm": planet.radius_km,
        "gravityG": planet.gravity_g,
        "atmosphere": planet.atmosphere.value,
        "biome": planet.biome,
        "resources": {
            "metals": planet.resources.metals,
            "gas": planet.resources.gas,
            "exotic": planet.resources.exotic,
        },
        "habitability": planet.habitability,
        "temperature": planet.temperature,
        "distance": planet.distance,
        "orbitSpeed": planet.orbit_speed,
        "orbitPhase": planet.orbit_phase,
        "orbitEccentricity": planet.orbit_eccentricity,
        "orbitInclination": planet.orbit_inclination,
        "selfRotationSpeed": planet.self_rotation_speed,
        "selfTilt": planet.self_tilt,
        "moons": [moon_to_dict(m) for m in planet.moons],
        "structures": [structure_to_dict(s) for s in planet.structures],
        "tags": list(planet.tags),
    }


def moon_to_dict(moon: Moon) -> dict[str, Any]:
    """Convert Moon to dictionary."""
    return {
        "id": moon.id,
        "seed": moon.seed,
        "index": moon.index,
        "kind": moon.kind.value,
        "radiusKm": moon.radius_km,
        "size": moon.size,
        "color": moon.color,
        "resources": {"metals": moon.resources.metals, "volatile": moon.resources.volatile},
        "distance": moon.distance,
        "orbitSpeed": moon.orbit_speed,
        "orbitPhase": moon.orbit_phase,
    }


def phenomenon_to_dict(phenomenon: Phenomenon) -> dict[str, Any]:
    """Convert Phenomenon to dictionary."""
    return {
        "id": phenomenon.id,
        "type": phenomenon.type.value,
        "intensity": phenomenon.intensity,
        "radiusLy": phenomenon.radius_ly,
        "effects": dict(phenomenon.effects),
    }


def structure_to_dict(structure: Structure) -> dict[str, Any]:
    """Convert Structure to dictionary."""
    return {
        "id": structure.id,
        "type": structure.type.value,
        "techLevel": structure.tech_level,
        "intactness": structure.intactness,
        "potential": structure.potential,
        "loot": list(structure.loot),
    }


def solar_system_to_dict(system: SolarSystem) -> dict[str, Any]:
    """Convert SolarSystem to dictionary. The star entry omits its planets."""
    star = star_to_dict(system.star)
    star.pop("planets")
    return {
        "id": system.id,
        "name": system.name,
        "star": star,
        "planets": [planet_to_dict(p) for p in system.planets],
    }
