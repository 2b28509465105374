"""FastAPI server for Cosmogen.

Exposes the generation engine's query calls over HTTP so rendering clients
can fetch galaxies, ambient tints and solar systems as JSON.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from ..engine import generate_phenomenon, generate_star, generate_structure
from ..models import GalaxyContext
from ..utils import seed_from_id
from ..utils.serialization import (
    galaxy_to_dict,
    phenomenon_to_dict,
    solar_system_to_dict,
    star_to_dict,
    structure_to_dict,
)
from .schemas.requests import CreateUniverseRequest
from .schemas.responses import (
    AmbientColorResponse,
    CreateUniverseResponse,
    UniverseInfoResponse,
)
from .session import UniverseRegistry, UniverseSession

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global universe registry
registry = UniverseRegistry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Cosmogen server starting...")
    yield
    logger.info(f"Cosmogen server shutting down ({len(registry.sessions)} universes)")


app = FastAPI(
    title="Cosmogen API",
    description="Deterministic procedural universe generation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _session_or_404(universe_id: str) -> UniverseSession:
    session = registry.get(universe_id)
    if not session:
        raise HTTPException(status_code=404, detail="Universe not found")
    return session


def _resolve_seed(seed: int | None, identifier: str | None) -> int:
    """Pick the numeric seed, hashing a textual id when no seed is given."""
    if seed is not None:
        return seed
    if identifier:
        return seed_from_id(identifier)
    raise HTTPException(status_code=400, detail="Either seed or id is required")


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Cosmogen",
        "status": "operational",
        "activeUniverses": len(registry.sessions),
    }


@app.post("/api/universes", response_model=CreateUniverseResponse)
async def create_universe(request: CreateUniverseRequest):
    """Register a universe.

    Example:
        POST /api/universes
        {"seed": 12345, "sizeMin": 40000, "sizeMax": 300000}
    """
    try:
        session = registry.create(seed=request.seed, size_range=(request.sizeMin, request.sizeMax))
    except ValueError as e:
        logger.warning(f"Rejected universe request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return CreateUniverseResponse(
        universeId=session.id,
        seed=session.universe.seed,
        sizeRange=list(session.universe.size_range),
    )


@app.get("/api/universes/{universe_id}", response_model=UniverseInfoResponse)
async def get_universe(universe_id: str):
    """Seed, size range and usage counters of a universe."""
    session = _session_or_404(universe_id)
    return UniverseInfoResponse(
        universeId=session.id,
        seed=session.universe.seed,
        sizeRange=list(session.universe.size_range),
        cachedGalaxies=len(session.universe.cached_cells()),
        requestsServed=session.requests_served,
    )


@app.delete("/api/universes/{universe_id}")
async def delete_universe(universe_id: str):
    """Forget a universe and its galaxy cache."""
    if registry.delete(universe_id):
        return {"message": f"Universe {universe_id} deleted"}
    raise HTTPException(status_code=404, detail="Universe not found")


# Generation handlers are sync so FastAPI runs them in its threadpool
@app.get("/api/universes/{universe_id}/galaxies/{x}/{y}/{z}")
def get_galaxy(universe_id: str, x: int, y: int, z: int, includeStars: bool = True):  # noqa: N803
    """Galaxy at a cell, generated on first request.

    Example:
        GET /api/universes/uni-abc123/galaxies/0/0/0?includeStars=false
    """
    universe = _session_or_404(universe_id).touch()
    galaxy = universe.galaxy_at((x, y, z))
    return galaxy_to_dict(galaxy, include_stars=includeStars)


@app.get(
    "/api/universes/{universe_id}/galaxies/{x}/{y}/{z}/ambient",
    response_model=AmbientColorResponse,
)
def get_ambient_color(universe_id: str, x: int, y: int, z: int):
    """Background tint for the galaxy at a cell."""
    universe = _session_or_404(universe_id).touch()
    galaxy = universe.galaxy_at((x, y, z))
    return AmbientColorResponse(
        galaxyId=galaxy.id,
        dominantSpectral=galaxy.dominant_spectral.value,
        rgb=list(universe.ambient_color_for(galaxy)),
    )


@app.get("/api/universes/{universe_id}/galaxies/{x}/{y}/{z}/systems/{star_index}")
def get_solar_system(universe_id: str, x: int, y: int, z: int, star_index: int):
    """Solar system of one star, regenerated from the star's seed and index."""
    universe = _session_or_404(universe_id).touch()
    try:
        system = universe.solar_system((x, y, z), star_index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return solar_system_to_dict(system)


@app.get("/api/stars/{seed}/{index}")
def get_star(
    seed: int,
    index: int,
    galaxySize: float = Query(default=100000, gt=0),  # noqa: N803
):
    """Star regenerated directly from a (seed, index) pair."""
    star = generate_star(seed, index, GalaxyContext(size=galaxySize))
    return star_to_dict(star)


@app.get("/api/phenomena")
def get_phenomenon(
    seed: int | None = Query(default=None, ge=0),
    id: str | None = None,  # noqa: A002
    index: int = Query(default=0, ge=0),
    galaxySize: float | None = Query(default=None, gt=0),  # noqa: N803
):
    """Standalone phenomenon from a seed or a textual id."""
    resolved = _resolve_seed(seed, id)
    return phenomenon_to_dict(generate_phenomenon(resolved, index, parent_galaxy_size=galaxySize))


@app.get("/api/structures")
def get_structure(
    seed: int | None = Query(default=None, ge=0),
    id: str | None = None,  # noqa: A002
    index: int = Query(default=0, ge=0),
    typeHint: str | None = None,  # noqa: N803
):
    """Standalone structure from a seed or a textual id."""
    resolved = _resolve_seed(seed, id)
    try:
        structure = generate_structure(resolved, index, type_hint=typeHint)
    except ValueError as e:
        logger.warning(f"Rejected structure request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return structure_to_dict(structure)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
