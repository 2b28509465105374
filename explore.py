#!/usr/bin/env python3
"""Cosmogen explorer - print a galaxy or one of its solar systems.

Examples:
    python explore.py --seed 12345 --cell 0 0 0
    python explore.py --seed 12345 --cell 1 -2 0 --system 3
    python explore.py --seed 12345 --cell 0 0 0 --json
"""

import argparse
import json
import logging
import sys

from cosmogen.engine import Universe
from cosmogen.models import Galaxy, SolarSystem
from cosmogen.utils import RNG_SEED_DEFAULT
from cosmogen.utils.serialization import galaxy_to_dict, solar_system_to_dict


def print_galaxy(universe: Universe, galaxy: Galaxy) -> None:
    """Print a galaxy summary and a spectral histogram."""
    cell = galaxy.position_cell
    print("\n" + "=" * 60)
    print(f"Galaxy {galaxy.id}")
    print("=" * 60)
    print(f"Cell:      ({cell.x}, {cell.y}, {cell.z})")
    print(f"Type:      {galaxy.type.value}")
    print(f"Size:      {galaxy.size:,} ly")
    print(f"Age:       {galaxy.age / 1e9:.2f} billion years")
    print(f"Systems:   {galaxy.num_systems}")
    print(f"Dominant:  {galaxy.dominant_spectral.value}")
    print(f"Ambient:   rgb{universe.ambient_color_for(galaxy)}")

    counts: dict[str, int] = {}
    for star in galaxy.stars:
        counts[star.spectral_class.value] = counts.get(star.spectral_class.value, 0) + 1
    print("\nSpectral classes:")
    for spectral in "OBAFGKM":
        count = counts.get(spectral, 0)
        print(f"  {spectral}: {count:4d} {'#' * min(50, count)}")

    if galaxy.phenomena:
        print("\nPhenomena:")
        for phenomenon in galaxy.phenomena:
            print(
                f"  {phenomenon.id}: {phenomenon.type.value}, "
                f"intensity {phenomenon.intensity}, radius {phenomenon.radius_ly} ly"
            )
    if galaxy.structures:
        print("\nStructures:")
        for structure in galaxy.structures:
            print(
                f"  {structure.id}: {structure.type.value}, tech {structure.tech_level}, "
                f"potential {structure.potential}"
            )


def print_system(system: SolarSystem) -> None:
    """Print a star and its planets."""
    star = system.star
    print("\n" + "=" * 60)
    print(f"System {system.name} (class {star.spectral_class.value})")
    print("=" * 60)
    print(f"Mass {star.mass:.2f}, luminosity {star.luminosity:.2f}, radius {star.radius:.1f}")
    for planet in system.planets:
        print(
            f"\n  {planet.name} [{planet.type.value}] {planet.radius_km:,} km, "
            f"{planet.gravity_g} g, {planet.temperature} K"
        )
        print(
            f"    orbit {planet.distance:.1f}, ecc {planet.orbit_eccentricity:.2f}, "
            f"atmosphere {planet.atmosphere.value}, biome {planet.biome}"
        )
        print(f"    habitability {planet.habitability}, moons {planet.num_moons}")
        if planet.tags:
            print(f"    tags: {', '.join(planet.tags)}")
        for structure in planet.structures:
            print(f"    structure: {structure.type.value} (tech {structure.tech_level})")


def main():
    parser = argparse.ArgumentParser(
        description="Explore a procedurally generated universe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RNG_SEED_DEFAULT,
        help=f"Universe root seed (default: {RNG_SEED_DEFAULT})",
    )
    parser.add_argument(
        "--cell",
        type=int,
        nargs=3,
        default=[0, 0, 0],
        metavar=("X", "Y", "Z"),
        help="Galaxy cell coordinates (default: 0 0 0)",
    )
    parser.add_argument("--system", type=int, metavar="N", help="Show solar system of star N")
    parser.add_argument("--size-min", type=float, default=40000, help="Smallest galaxy size (ly)")
    parser.add_argument("--size-max", type=float, default=300000, help="Largest galaxy size (ly)")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        universe = Universe(seed=args.seed, size_range=(args.size_min, args.size_max))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    galaxy = universe.galaxy_at(tuple(args.cell))

    if args.system is None:
        if args.json:
            print(json.dumps(galaxy_to_dict(galaxy), indent=2))
        else:
            print_galaxy(universe, galaxy)
        return

    try:
        system = universe.solar_system(tuple(args.cell), args.system)
    except IndexError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(solar_system_to_dict(system), indent=2))
    else:
        print_system(system)


if __name__ == "__main__":
    main()
