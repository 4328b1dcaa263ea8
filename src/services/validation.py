"""Heuristic size checks on converted data.

A complete SDE yields well-known collection sizes; a conversion that falls
short usually means a truncated or mis-parsed source. Short collections
produce warnings. Missing map data produces errors, which block writing.
"""

from __future__ import annotations

import logging

from models.app import ConvertedData, ValidationResult

logger = logging.getLogger(__name__)

# Minimum expected sizes for a complete SDE
MIN_SOLAR_SYSTEMS = 8000
MIN_REGIONS = 100
MIN_CONSTELLATIONS = 1000
MIN_SHIP_TYPES = 500  # category 6 only, ~700+ in practice
MIN_SHIP_GROUPS = 30  # category 6 only, ~50+ in practice
MIN_SYSTEM_JUMPS = 13000  # both directions of every gate pair
MIN_WORMHOLE_CLASSES = 750  # regions + constellations + systems
MIN_NPC_STATIONS = 40  # blue loot buyers only

# (result field, warning label, minimum)
COUNT_CHECKS: tuple[tuple[str, str, int], ...] = (
    ("solar_systems", "Solar system", MIN_SOLAR_SYSTEMS),
    ("regions", "Region", MIN_REGIONS),
    ("constellations", "Constellation", MIN_CONSTELLATIONS),
    ("inv_types", "Ship type", MIN_SHIP_TYPES),
    ("inv_groups", "Ship group", MIN_SHIP_GROUPS),
    ("system_jumps", "System jump", MIN_SYSTEM_JUMPS),
    ("wormhole_classes", "Wormhole class", MIN_WORMHOLE_CLASSES),
    ("npc_stations", "NPC station", MIN_NPC_STATIONS),
)

# (result field, error message) for collections that must not be empty
REQUIRED_COLLECTIONS: tuple[tuple[str, str], ...] = (
    ("solar_systems", "No solar systems found"),
    ("regions", "No regions found"),
    ("constellations", "No constellations found"),
)


def validate_converted_data(data: ConvertedData) -> ValidationResult:
    """Count every collection and compare against the expected minimums.

    Args:
        data: Output of the transformation pipeline.

    Returns:
        Counts plus warnings for short collections and errors for empty
        map collections. Never raises.
    """
    result = ValidationResult(
        solar_systems=len(data.universe.solar_systems),
        regions=len(data.universe.regions),
        constellations=len(data.universe.constellations),
        inv_types=len(data.inv_types),
        inv_groups=len(data.inv_groups),
        system_jumps=len(data.system_jumps),
        wormhole_classes=len(data.wormhole_classes),
        npc_stations=len(data.npc_stations),
    )

    for field, label, minimum in COUNT_CHECKS:
        count = getattr(result, field)
        if count < minimum:
            result.warnings.append(
                f"{label} count ({count}) is below expected minimum ({minimum})"
            )

    for field, message in REQUIRED_COLLECTIONS:
        if getattr(result, field) == 0:
            result.errors.append(message)

    for warning in result.warnings:
        logger.warning(warning)
    for error in result.errors:
        logger.error(error)

    return result
