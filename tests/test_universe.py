"""Tests for the Universe entry point."""

import dataclasses

import pytest

from cosmogen.engine import Universe, planet_of_star
from cosmogen.models import Coordinate, GalaxyContext, GalaxyType, SpectralClass

SMALL = (20000, 30000)


class TestUniverse:
    """Test galaxy lookup and caching."""

    def test_galaxy_at_cached(self):
        universe = Universe(seed=12345, size_range=SMALL)
        first = universe.galaxy_at((0, 0, 0))
        assert universe.galaxy_at({"x": 0, "y": 0, "z": 0}) is first
        assert universe.cached_cells() == [Coordinate(0, 0, 0)]

    def test_float_cell_shares_cache_entry(self):
        universe = Universe(seed=12345, size_range=SMALL)
        assert universe.galaxy_at((1.0, -2.0, 0)) is universe.galaxy_at((1, -2, 0))

    def test_fresh_instances_agree(self):
        """Test that two universes with the same seed produce equal galaxies."""
        a = Universe(seed=2024, size_range=SMALL)
        b = Universe(seed=2024, size_range=SMALL)
        for cell in [(0, 0, 0), (1, -1, 0), (-3, 2, 5)]:
            assert a.galaxy_at(cell) == b.galaxy_at(cell)

    def test_instances_do_not_share_cache(self):
        a = Universe(seed=2024, size_range=SMALL)
        b = Universe(seed=2024, size_range=SMALL)
        a.galaxy_at((0, 0, 0))
        assert b.cached_cells() == []
        assert a.galaxy_at((0, 0, 0)) is not b.galaxy_at((0, 0, 0))

    def test_different_seeds_differ(self):
        a = Universe(seed=1, size_range=SMALL).galaxy_at((0, 0, 0))
        b = Universe(seed=2, size_range=SMALL).galaxy_at((0, 0, 0))
        assert a.seed != b.seed

    def test_golden_scenario(self):
        """Test seed 12345 at the origin with the default size range."""
        a = Universe(seed=12345, size_range=(40000, 300000)).galaxy_at((0, 0, 0))
        b = Universe(seed=12345, size_range=(40000, 300000)).galaxy_at((0, 0, 0))
        assert a.seed == 12345
        assert (a.num_systems, a.type, a.dominant_spectral) == (
            b.num_systems,
            b.type,
            b.dominant_spectral,
        )
        assert a.id == "GAL-12345-0-0-0"
        assert a.num_systems == 121
        assert a.type == GalaxyType.DWARF
        assert a.dominant_spectral == SpectralClass.G

    def test_random_seed_when_omitted(self):
        universe = Universe(size_range=SMALL)
        assert 0 <= universe.seed < 2**30

    def test_seed_normalized(self):
        assert Universe(seed=-77, size_range=SMALL).seed == 77

    def test_invalid_size_range(self):
        with pytest.raises(ValueError, match="Invalid size_range"):
            Universe(seed=1, size_range=(50000, 10000))
        with pytest.raises(ValueError, match="Invalid size_range"):
            Universe(seed=1, size_range=(0, 10000))
        with pytest.raises(ValueError, match="Invalid size_range"):
            Universe(seed=1, size_range=(0.2, 0.4))

    def test_smallest_size_range_generates(self):
        galaxy = Universe(seed=1, size_range=(1, 1)).galaxy_at((0, 0, 0))
        assert galaxy.size == 1
        assert galaxy.num_systems == 20


class TestSolarSystem:
    """Test opening a star's solar system."""

    def test_solar_system_matches_galaxy_star(self):
        universe = Universe(seed=12345, size_range=SMALL)
        galaxy = universe.galaxy_at((0, 0, 0))
        system = universe.solar_system((0, 0, 0), 3)
        assert system.star == galaxy.stars[3]
        assert system.planets == galaxy.stars[3].planets

    def test_planet_two_matches_full_star(self):
        """Test regenerating planet 2 of a star from its seed and index alone."""
        universe = Universe(seed=12345, size_range=SMALL)
        galaxy = universe.galaxy_at((0, 0, 0))
        context = GalaxyContext(size=galaxy.size, age=galaxy.age)
        star = next(s for s in galaxy.stars if s.num_planets > 2)
        assert planet_of_star(star.seed, star.index, 2, context) == star.planets[2]

    def test_star_index_out_of_range(self):
        universe = Universe(seed=12345, size_range=SMALL)
        galaxy = universe.galaxy_at((0, 0, 0))
        with pytest.raises(IndexError):
            universe.solar_system((0, 0, 0), galaxy.num_systems)


class TestAmbientColor:
    """Test background tint."""

    def with_dominant(self, spectral):
        galaxy = Universe(seed=5, size_range=SMALL).galaxy_at((0, 0, 0))
        return dataclasses.replace(galaxy, dominant_spectral=spectral)

    def test_known_values(self):
        universe = Universe(seed=5, size_range=SMALL)
        assert universe.ambient_color_for(self.with_dominant(SpectralClass.G)) == (15, 15, 14)
        assert universe.ambient_color_for(self.with_dominant(SpectralClass.O)) == (9, 11, 15)

    def test_blue_channel_floor(self):
        """Test that M galaxies hit the blue floor of 10."""
        universe = Universe(seed=5, size_range=SMALL)
        assert universe.ambient_color_for(self.with_dominant(SpectralClass.M)) == (15, 11, 10)

    def test_all_classes_dim(self):
        universe = Universe(seed=5, size_range=SMALL)
        for spectral in SpectralClass:
            rgb = universe.ambient_color_for(self.with_dominant(spectral))
            assert len(rgb) == 3
            assert all(6 <= channel <= 16 for channel in rgb)
            assert rgb[2] >= 10

    def test_deterministic(self):
        universe = Universe(seed=5, size_range=SMALL)
        galaxy = universe.galaxy_at((0, 0, 0))
        assert universe.ambient_color_for(galaxy) == universe.ambient_color_for(galaxy)
