"""Tests for descriptor data models."""

import dataclasses

import pytest

from cosmogen.models import (
    Atmosphere,
    Coordinate,
    Galaxy,
    GalaxyContext,
    GalaxyType,
    HostStar,
    Moon,
    MoonKind,
    MoonResources,
    OrbitalSlot,
    Phenomenon,
    PhenomenonType,
    Planet,
    PlanetResources,
    PlanetType,
    Position,
    SolarSystem,
    SpectralClass,
    Star,
    Structure,
    StructureType,
)
from cosmogen.models.enums import check_exhaustive


def make_planet(**overrides):
    fields = dict(
        id="PL-1-0",
        seed=1,
        index=0,
        name="Planet-1",
        type=PlanetType.ROCKY,
        size=0.5,
        color="#a0704b",
        radius_km=3000,
        gravity_g=0.4,
        atmosphere=Atmosphere.NONE,
        biome="desert",
        resources=PlanetResources(metals=10, gas=5, exotic=1),
        habitability=0.0,
        temperature=300,
        distance=50.0,
        orbit_speed=0.007,
        orbit_phase=1.0,
        orbit_eccentricity=0.1,
        orbit_inclination=2.0,
        self_rotation_speed=0.2,
        self_tilt=5.0,
    )
    fields.update(overrides)
    return Planet(**fields)


def make_star(spectral_class=SpectralClass.G, seed=1, index=0, planets=()):
    return Star(
        id=f"STAR-{seed}-{index}",
        seed=seed,
        index=index,
        name=f"STAR-{seed}-{index}",
        spectral_class=spectral_class,
        mass=2.0,
        luminosity=1.0,
        radius=20.0,
        size=1.0,
        position=Position(0.0, 0.0, 0.0),
        planets=planets,
    )


class TestCoordinate:
    """Test Coordinate dataclass."""

    def test_key(self):
        assert Coordinate(0, -1, 2).key == "0|-1|2"

    def test_of_accepts_several_shapes(self):
        """Test coercion from tuples, lists and mappings."""
        expected = Coordinate(1, 2, 3)
        assert Coordinate.of((1, 2, 3)) == expected
        assert Coordinate.of([1, 2, 3]) == expected
        assert Coordinate.of({"x": 1, "y": 2, "z": 3}) == expected
        assert Coordinate.of(expected) is expected

    def test_floats_truncated(self):
        """Test that real-valued axes truncate toward zero."""
        assert Coordinate(1.0, 0, 0) == Coordinate(1, 0, 0)
        assert Coordinate(1.7, -0.5, -2.9) == Coordinate(1, 0, -2)
        assert Coordinate(1.7, -0.5, -2.9).key == "1|0|-2"
        assert isinstance(Coordinate(3.0, 0, 0).x, int)

    def test_rejects_non_numbers(self):
        with pytest.raises(ValueError, match="Invalid x coordinate"):
            Coordinate("1", 0, 0)
        with pytest.raises(ValueError, match="Invalid y coordinate"):
            Coordinate(0, float("nan"), 0)
        with pytest.raises(ValueError, match="Invalid z coordinate"):
            Coordinate(0, 0, True)


class TestContexts:
    """Test parent context records."""

    def test_host_star_accepts_letter(self):
        host = HostStar(spectral_class="K")
        assert host.spectral_class is SpectralClass.K
        assert host.is_cool

    def test_host_star_defaults(self):
        host = HostStar()
        assert host.spectral_class is None
        assert not host.is_cool

    def test_hot_star_is_not_cool(self):
        assert not HostStar(spectral_class=SpectralClass.O).is_cool

    def test_invalid_spectral_letter(self):
        with pytest.raises(ValueError):
            HostStar(spectral_class="Z")

    def test_galaxy_context_size(self):
        with pytest.raises(ValueError, match="Invalid galaxy size"):
            GalaxyContext(size=0)


class TestDescriptorValidation:
    """Test invariant checks on descriptors."""

    def test_planet_habitability_bounds(self):
        with pytest.raises(ValueError, match="Invalid habitability"):
            make_planet(habitability=1.2)

    def test_planet_gravity_floor(self):
        with pytest.raises(ValueError, match="Invalid gravity_g"):
            make_planet(gravity_g=0.01)

    def test_planet_radius_positive(self):
        with pytest.raises(ValueError, match="Invalid radius_km"):
            make_planet(radius_km=0)

    def test_planet_is_frozen(self):
        planet = make_planet()
        with pytest.raises(dataclasses.FrozenInstanceError):
            planet.distance = 10.0

    def test_moon_radius_positive(self):
        with pytest.raises(ValueError, match="Invalid radius_km"):
            Moon(
                id="MOON-1-0",
                seed=1,
                index=0,
                kind=MoonKind.ROCKY,
                radius_km=0,
                size=0.05,
                color="#9b8f84",
                resources=MoonResources(metals=1, volatile=1),
                distance=2.0,
                orbit_speed=0.001,
                orbit_phase=0.0,
            )

    def test_orbital_slot_eccentricity(self):
        with pytest.raises(ValueError, match="Invalid orbit_eccentricity"):
            OrbitalSlot(
                distance=30,
                orbit_eccentricity=0.5,
                orbit_inclination=0,
                self_rotation_speed=0.2,
                self_tilt=0,
            )

    def test_structure_ranges(self):
        with pytest.raises(ValueError, match="Invalid tech_level"):
            Structure("STR-1-0", 1, 0, StructureType.RUINS, 11, 0.5, 5.5, ())
        with pytest.raises(ValueError, match="Invalid intactness"):
            Structure("STR-1-0", 1, 0, StructureType.RUINS, 3, 1.5, 4.5, ())

    def test_phenomenon_ranges(self):
        with pytest.raises(ValueError, match="Invalid intensity"):
            Phenomenon("PH-1-0", 1, 0, PhenomenonType.PULSAR, 1.5, 10, {})
        with pytest.raises(ValueError, match="Invalid radius_ly"):
            Phenomenon("PH-1-0", 1, 0, PhenomenonType.PULSAR, 0.5, 0, {})

    def test_phenomenon_effects_mapping_frozen(self):
        """Test that an effects mapping is stored as immutable pairs."""
        phenomenon = Phenomenon("PH-1-0", 1, 0, PhenomenonType.PULSAR, 0.5, 10, {"radiation": 0.8})
        assert phenomenon.effects == (("radiation", 0.8),)
        assert phenomenon.effect("radiation") == 0.8

    def test_star_size_range(self):
        with pytest.raises(ValueError, match="Invalid size"):
            dataclasses.replace(make_star(), size=5.0)

    def test_galaxy_needs_stars(self):
        with pytest.raises(ValueError, match="at least one star"):
            Galaxy(
                id="GAL-1-0-0-0",
                seed=1,
                type=GalaxyType.SPIRAL,
                size=50000,
                age=int(5e9),
                stars=(),
                dominant_spectral=SpectralClass.G,
                position_cell=Coordinate(0, 0, 0),
            )


class TestDerivedProperties:
    """Test computed counts."""

    def test_counts(self):
        planet = make_planet()
        star = make_star(planets=(planet, planet))
        assert star.num_planets == 2
        assert planet.num_moons == 0

        galaxy = Galaxy(
            id="GAL-1-0-0-0",
            seed=1,
            type=GalaxyType.DWARF,
            size=50000,
            age=int(5e9),
            stars=(star,),
            dominant_spectral=SpectralClass.G,
            position_cell=Coordinate(0, 0, 0),
        )
        assert galaxy.num_systems == 1

    def test_solar_system_of_star(self):
        star = make_star(seed=9, index=4, planets=(make_planet(),))
        system = SolarSystem.of(star)
        assert system.id == "SYS-9-4"
        assert system.star is star
        assert system.planets == star.planets


class TestCheckExhaustive:
    """Test lookup table exhaustiveness check."""

    def test_complete_table_passes(self):
        table = {member: 1 for member in SpectralClass}
        assert check_exhaustive(SpectralClass, table, "table") is table

    def test_missing_entry_fails(self):
        table = {SpectralClass.O: 1}
        with pytest.raises(RuntimeError, match="missing entries"):
            check_exhaustive(SpectralClass, table, "table")
