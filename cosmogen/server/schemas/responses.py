"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel


class CreateUniverseResponse(BaseModel):
    """Response after registering a universe."""

    universeId: str  # noqa: N815
    seed: int
    sizeRange: list[float]  # noqa: N815


class AmbientColorResponse(BaseModel):
    """Background tint for a galaxy."""

    galaxyId: str  # noqa: N815
    dominantSpectral: str  # noqa: N815
    rgb: list[int]


class UniverseInfoResponse(BaseModel):
    """Current state of a registered universe."""

    universeId: str  # noqa: N815
    seed: int
    sizeRange: list[float]  # noqa: N815
    cachedGalaxies: int  # noqa: N815
    requestsServed: int  # noqa: N815
