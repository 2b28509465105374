"""Seedable 32-bit PRNG and seed-mixing helpers for deterministic generation."""

import math
from numbers import Real
from typing import Sequence, TypeVar

from ..errors import InvalidSeedError

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
_TWO_32 = 4294967296


class Mulberry32:
    """Mulberry32 stream: a float generator driven by one 32-bit state word.

    All randomness in the engine goes through this class. The arithmetic is
    carried out modulo 2**32 so a given seed yields the same sequence as any
    other mulberry32 implementation.
    """

    def __init__(self, seed: int):
        """Initialize stream with given seed.

        Args:
            seed: Integer seed, reduced modulo 2**32
        """
        self.seed = seed & MASK_32
        self.state = self.seed

    def random(self) -> float:
        """Return random float in [0.0, 1.0) and advance the state.

        Returns:
            Random float between 0.0 and 1.0
        """
        self.state = (self.state + 0x6D2B79F5) & MASK_32
        a = self.state
        t = ((a ^ (a >> 15)) * (1 | a)) & MASK_32
        t = (t ^ (t + ((t ^ (t >> 7)) * (t | 61)))) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / _TWO_32

    __call__ = random

    def uniform(self, a: float, b: float) -> float:
        """Draw once and interpolate between a and b."""
        return lerp(a, b, self.random())

    def choice(self, seq: Sequence[T]) -> T:
        """Choose random element from non-empty sequence.

        Args:
            seq: Sequence to choose from

        Returns:
            Random element from sequence
        """
        return pick(self, seq)

    def get_state(self) -> int:
        """Get the current state word."""
        return self.state

    def set_state(self, state: int) -> None:
        """Restore a state word returned by get_state."""
        self.state = state & MASK_32


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= MASK_32
    return value - _TWO_32 if value & 0x80000000 else value


def hash_coord(x: int, y: int, z: int) -> int:
    """Hash an integer 3D cell coordinate to an unsigned 32-bit value.

    Each axis is truncated to signed 32 bits, multiplied by its own large
    prime and the products are combined with exclusive-or.
    """
    x, y, z = to_int32(int(x)), to_int32(int(y)), to_int32(int(z))
    return ((x * 73856093) ^ (y * 19349663) ^ (z * 83492791)) & MASK_32


def mix(seed: int, x: int, y: int, z: int) -> int:
    """Combine a seed with a cell coordinate into a new 32-bit seed."""
    return (seed ^ hash_coord(x, y, z)) & MASK_32


def derive_seed(seed: int, index: int, multiplier: int) -> int:
    """Derive a child seed from a parent seed and the child's position.

    The result depends only on (seed, index), never on how many values a
    parent stream has produced, so any child can be regenerated on its own.
    """
    return (seed ^ (index * multiplier)) & MASK_32


def pick(stream, seq: Sequence[T]) -> T:
    """Draw one value and use it to index uniformly into seq."""
    return seq[math.floor(stream.random() * len(seq))]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b. t is not clamped."""
    return a + (b - a) * t


def js_round(value: float) -> int:
    """Round half up, so 2.5 -> 3 and -2.5 -> -2."""
    return math.floor(value + 0.5)


def hash_string(text: str) -> int:
    """Rolling polynomial hash of a string, as a non-negative integer.

    Examples:
        >>> hash_string("")
        0
        >>> hash_string("a")
        97
    """
    h = 0
    for ch in text:
        h = to_int32(h * 31 + ord(ch))
    return abs(h)


def seed_from_id(identifier: str) -> int:
    """Numeric seed for a textual identifier such as a descriptor id."""
    return hash_string(identifier) & MASK_32


def normalize_seed(value) -> int:
    """Coerce a caller-supplied seed or index to a non-negative 32-bit integer.

    Floats are truncated toward zero, negatives made positive and the result
    masked to 32 bits.

    Raises:
        InvalidSeedError: If value is not a real number (booleans included)
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSeedError(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidSeedError(value)
    return abs(int(value)) & MASK_32
