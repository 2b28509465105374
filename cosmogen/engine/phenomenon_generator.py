"""Cosmic phenomenon generation."""

from typing import Optional

from ..models import Phenomenon, PhenomenonType
from ..models.enums import check_exhaustive
from ..utils import Mulberry32, js_round, normalize_seed
from ..utils.constants import (
    PHENOMENON_FALLBACK_RADIUS_LY,
    PHENOMENON_GALAXY_FRACTION,
    PHENOMENON_INTENSITY_RANGE,
    PHENOMENON_STREAM_OFFSET,
)

PHENOMENON_TYPES = list(PhenomenonType)

# Effect shape is fixed per type; only intensity and radius are drawn
EFFECTS = check_exhaustive(
    PhenomenonType,
    {
        PhenomenonType.NEBULA: {"visibility": 0.7, "navigationPenalty": 0.2},
        PhenomenonType.BLACK_HOLE: {"danger": 0.95, "warpRisk": 0.9},
        PhenomenonType.PULSAR: {"radiation": 0.8},
        PhenomenonType.ANOMALY: {"mystery": 1.0, "commsDistortion": 0.6},
        PhenomenonType.SUPERNOVA_REMNANT: {"radiation": 0.7, "salvage": 0.5},
        PhenomenonType.GRAVITATIONAL_LENS: {"timeDilation": 0.3},
    },
    "EFFECTS",
)


def generate_phenomenon(
    seed: int, index: int = 0, parent_galaxy_size: Optional[float] = None
) -> Phenomenon:
    """Generate one cosmic phenomenon.

    Args:
        seed: Phenomenon seed
        index: Phenomenon index within its owner
        parent_galaxy_size: Diameter of the enclosing galaxy in light-years.
            Caps the radius at 2% of it; without it the cap is 1000 ly.

    Returns:
        Phenomenon descriptor
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    local = Mulberry32(seed + index * PHENOMENON_STREAM_OFFSET)

    phenomenon_type = local.choice(PHENOMENON_TYPES)
    intensity = round(local.uniform(*PHENOMENON_INTENSITY_RANGE), 2)

    if parent_galaxy_size:
        max_radius = max(1, parent_galaxy_size * PHENOMENON_GALAXY_FRACTION)
    else:
        max_radius = PHENOMENON_FALLBACK_RADIUS_LY
    radius_ly = js_round(local.uniform(1, max_radius))

    return Phenomenon(
        id=f"PH-{seed}-{index}",
        seed=seed,
        index=index,
        type=phenomenon_type,
        intensity=intensity,
        radius_ly=radius_ly,
        effects=tuple(EFFECTS[phenomenon_type].items()),
    )
