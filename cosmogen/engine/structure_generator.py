"""Structure (point of interest) generation."""

import math
from typing import Optional, Union

from ..models import Structure, StructureType
from ..models.enums import check_exhaustive
from ..utils import Mulberry32, normalize_seed
from ..utils.constants import MAX_TECH_LEVEL, STRUCTURE_STREAM_OFFSET

STRUCTURE_TYPES = list(StructureType)

LOOT_TABLE = check_exhaustive(
    StructureType,
    {
        StructureType.STATION: ("supplies", "trade_goods", "blueprints"),
        StructureType.RUINS: ("artifacts", "data_shards", "unknown_tech"),
        StructureType.BEACON: ("navigation_data", "signal_logs"),
        StructureType.DERELICT: ("ship_parts", "salvage_metal"),
        StructureType.MINING_OUTPOST: ("ore", "machinery"),
        StructureType.RESEARCH_FACILITY: ("research_notes", "experimental_cores"),
    },
    "LOOT_TABLE",
)


def generate_structure(
    seed: int,
    index: int = 0,
    type_hint: Optional[Union[StructureType, str]] = None,
) -> Structure:
    """Generate one structure.

    Args:
        seed: Structure seed
        index: Structure index within its owner
        type_hint: Use this type instead of drawing one. The draw is skipped
            entirely, so the rest of the stream shifts accordingly.

    Returns:
        Structure descriptor

    Raises:
        ValueError: If type_hint is not a known structure type
    """
    seed = normalize_seed(seed)
    index = normalize_seed(index)
    local = Mulberry32(seed + index * STRUCTURE_STREAM_OFFSET)

    if type_hint is not None:
        structure_type = StructureType(type_hint)
    else:
        structure_type = local.choice(STRUCTURE_TYPES)

    tech_level = min(MAX_TECH_LEVEL, max(0, math.floor(local.random() * MAX_TECH_LEVEL)))
    intactness = round(local.random(), 2)
    potential = round(tech_level * intactness, 2)

    return Structure(
        id=f"STR-{seed}-{index}",
        seed=seed,
        index=index,
        type=structure_type,
        tech_level=tech_level,
        intactness=intactness,
        potential=potential,
        loot=LOOT_TABLE[structure_type],
    )
