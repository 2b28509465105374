"""Utility functions and constants for Cosmogen."""

from .constants import DEFAULT_SIZE_RANGE, RNG_SEED_DEFAULT
from .rng import (
    MASK_32,
    Mulberry32,
    derive_seed,
    hash_coord,
    hash_string,
    js_round,
    lerp,
    mix,
    normalize_seed,
    pick,
    seed_from_id,
)

__all__ = [
    "DEFAULT_SIZE_RANGE",
    "MASK_32",
    "RNG_SEED_DEFAULT",
    "Mulberry32",
    "derive_seed",
    "hash_coord",
    "hash_string",
    "js_round",
    "lerp",
    "mix",
    "normalize_seed",
    "pick",
    "seed_from_id",
]
