"""Exception types raised by the generation engine."""


class CosmogenError(Exception):
    """Base class for all cosmogen errors."""


class InvalidSeedError(CosmogenError, ValueError):
    """Raised when a seed or index cannot be coerced to a 32-bit integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid seed: {value!r} (must be a number)")
