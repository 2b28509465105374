"""Cell coordinates and in-galaxy positions."""

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Coordinate:
    """Integer cell in the infinite universe grid. One galaxy per cell.

    Real-valued axes are truncated toward zero, so (1.7, -0.5, 2) is cell
    (1, 0, 2). Booleans, non-numbers and non-finite values are rejected.
    """

    x: int
    y: int
    z: int

    def __post_init__(self):
        """Truncate every axis to an integer."""
        for axis in ("x", "y", "z"):
            value = getattr(self, axis)
            if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
                raise ValueError(f"Invalid {axis} coordinate: {value!r} (must be a finite number)")
            object.__setattr__(self, axis, math.trunc(value))

    @property
    def key(self) -> str:
        """Cache key, e.g. "0|-1|2"."""
        return f"{self.x}|{self.y}|{self.z}"

    @classmethod
    def of(cls, cell) -> "Coordinate":
        """Accept a Coordinate, an (x, y, z) triple or a mapping with x/y/z keys."""
        if isinstance(cell, Coordinate):
            return cell
        if isinstance(cell, dict):
            return cls(cell["x"], cell["y"], cell["z"])
        x, y, z = cell
        return cls(x, y, z)


@dataclass(frozen=True)
class Position:
    """Star position inside its galaxy, in light-years from the centre."""

    x: float
    y: float
    z: float
