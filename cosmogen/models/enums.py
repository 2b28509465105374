"""Closed categorical enumerations used by the descriptors."""

from enum import Enum


class SpectralClass(str, Enum):
    """Stellar spectral classes, hottest first. Order breaks ties."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"


class GalaxyType(str, Enum):
    SPIRAL = "spiral"
    BARRED = "barred"
    ELLIPTICAL = "elliptical"
    IRREGULAR = "irregular"
    DWARF = "dwarf"


class PlanetType(str, Enum):
    ROCKY = "rocky"
    GASEOUS = "gaseous"
    ICY = "icy"
    VOLCANIC = "volcanic"
    HABITABLE = "habitable"
    BARREN = "barren"


class Atmosphere(str, Enum):
    NONE = "none"
    THIN = "thin"
    BREATHABLE = "breathable"
    TOXIC = "toxic"
    DENSE = "dense"


class MoonKind(str, Enum):
    ASTEROID = "asteroid"
    ROCKY = "rocky"
    ICY = "icy"
    SMALL = "small"


class PhenomenonType(str, Enum):
    NEBULA = "nebula"
    BLACK_HOLE = "black_hole"
    PULSAR = "pulsar"
    ANOMALY = "anomaly"
    SUPERNOVA_REMNANT = "supernova_remnant"
    GRAVITATIONAL_LENS = "gravitational_lens"


class StructureType(str, Enum):
    STATION = "station"
    RUINS = "ruins"
    BEACON = "beacon"
    DERELICT = "derelict"
    MINING_OUTPOST = "mining_outpost"
    RESEARCH_FACILITY = "research_facility"


def check_exhaustive(enum_cls, table: dict, name: str) -> dict:
    """Ensure a lookup table has an entry for every member of enum_cls.

    Called on module-level tables so a missing category fails at import.

    Raises:
        RuntimeError: If any member is missing
    """
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {', '.join(missing)}")
    return table
