"""Moon generation."""

import math
from typing import Optional

from ..models import Moon, MoonKind, MoonResources
from ..models.enums import check_exhaustive
from ..utils import Mulberry32, js_round, normalize_seed
from ..utils.constants import (
    MAX_MOON_RADIUS_KM,
    MIN_MOON_RADIUS_KM,
    MIN_MOON_SIZE,
    MOON_DISTANCE_RANGE,
    MOON_HOST_RADIUS_FRACTION,
    MOON_ORBIT_SPEED_RANGE,
    MOON_STREAM_OFFSET,
    PLANET_SIZE_DIVISOR,
)

MOON_KINDS = [MoonKind.ASTEROID, MoonKind.ROCKY, MoonKind.ICY, MoonKind.SMALL]

MOON_COLORS = check_exhaustive(
    MoonKind,
    {
        MoonKind.ASTEROID: "#7a6f66",
        MoonKind.ROCKY: "#9b8f84",
        MoonKind.ICY: "#d8ecf5",
        MoonKind.SMALL: "#b4aca2",
    },
    "MOON_COLORS",
)

# Upper radius bound relative to the host-dependent maximum
RADIUS_FACTORS = check_exhaustive(
    MoonKind,
    {MoonKind.ASTEROID: 0.5, MoonKind.ROCKY: 1.0, MoonKind.ICY: 1.0, MoonKind.SMALL: 0.25},
    "RADIUS_FACTORS",
)

# (metals scale, volatile scale)
RESOURCE_SCALES = check_exhaustive(
    MoonKind,
    {
        MoonKind.ASTEROID: (150, 10),
        MoonKind.ROCKY: (100, 50),
        MoonKind.ICY: (40, 120),
        MoonKind.SMALL: (60, 30),
    },
    "RESOURCE_SCALES",
)


def generate_moon(seed: int, index: int = 0, host_radius_km: Optional[float] = None) -> Moon:
    """Generate one moon.

    Args:
        seed: Moon seed (derived by the planet from its own seed and moon index)
        index: Moon index around its planet
        host_radius_km: Radius of the host planet, if known. Bounds the moon's
            radius and scales its orbit distance.

    Returns:
        Moon descriptor
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    local = Mulberry32(seed + index * MOON_STREAM_OFFSET)

    kind = local.choice(MOON_KINDS)

    if host_radius_km:
        max_radius = max(MIN_MOON_RADIUS_KM, host_radius_km * MOON_HOST_RADIUS_FRACTION)
        host_scale = max(0.5, host_radius_km / PLANET_SIZE_DIVISOR)
    else:
        max_radius = MAX_MOON_RADIUS_KM
        host_scale = 1.0
    max_radius = max(MIN_MOON_RADIUS_KM, max_radius * RADIUS_FACTORS[kind])
    radius_km = js_round(local.uniform(MIN_MOON_RADIUS_KM, max_radius))

    metals_scale, volatile_scale = RESOURCE_SCALES[kind]
    resources = MoonResources(
        metals=js_round(local.random() * metals_scale),
        volatile=js_round(local.random() * volatile_scale),
    )

    distance = local.uniform(*MOON_DISTANCE_RANGE) * host_scale
    orbit_speed = local.uniform(*MOON_ORBIT_SPEED_RANGE)
    orbit_phase = local.random() * math.pi * 2

    return Moon(
        id=f"MOON-{seed}-{index}",
        seed=seed,
        index=index,
        kind=kind,
        radius_km=radius_km,
        size=max(MIN_MOON_SIZE, radius_km / PLANET_SIZE_DIVISOR),
        color=MOON_COLORS[kind],
        resources=resources,
        distance=distance,
        orbit_speed=orbit_speed,
        orbit_phase=orbit_phase,
    )
