"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field, model_validator


class CreateUniverseRequest(BaseModel):
    """Request to register a new universe."""

    seed: int | None = Field(
        default=None, ge=0, description="Root seed; omitted means a random (logged) seed"
    )
    sizeMin: float = Field(  # noqa: N815
        default=40000, ge=1, description="Smallest galaxy diameter in light-years"
    )
    sizeMax: float = Field(  # noqa: N815
        default=300000, ge=1, description="Largest galaxy diameter in light-years"
    )

    @model_validator(mode="after")
    def check_size_range(self):
        if self.sizeMax < self.sizeMin:
            raise ValueError("sizeMax must be >= sizeMin")
        return self
