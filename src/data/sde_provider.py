"""SDE Provider: assembles the raw record store from the JSONL parser."""

import logging
from dataclasses import dataclass, field

from data.parsers import SDEJsonlParser
from models.app import SystemJump
from models.eve import (
    EveCategory,
    EveConstellation,
    EveGroup,
    EveNpcCorporation,
    EveNpcStation,
    EveRegion,
    EveSolarSystem,
    EveStar,
    EveStargate,
    EveType,
)
from utils.progress_callback import ProgressCallback, ProgressPhase, ProgressUpdate

logger = logging.getLogger(__name__)

# Corporations whose stations buy blue loot (DED)
BLUE_LOOT_BUYER_CORP_IDS: frozenset[int] = frozenset({1000137})


@dataclass
class SDERecords:
    """ID-keyed source records of one SDE build.

    Read-only input to the transformation pipeline. ``system_jumps`` holds
    the directed stargate connections with only the endpoint IDs set.
    """

    regions: dict[int, EveRegion] = field(default_factory=dict)
    constellations: dict[int, EveConstellation] = field(default_factory=dict)
    solar_systems: dict[int, EveSolarSystem] = field(default_factory=dict)
    types: dict[int, EveType] = field(default_factory=dict)
    groups: dict[int, EveGroup] = field(default_factory=dict)
    categories: dict[int, EveCategory] = field(default_factory=dict)
    npc_stations: dict[int, EveNpcStation] = field(default_factory=dict)
    npc_corporations: dict[int, EveNpcCorporation] = field(default_factory=dict)
    system_jumps: list[SystemJump] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Record counts per collection, for logging."""
        return {
            "regions": len(self.regions),
            "constellations": len(self.constellations),
            "solar_systems": len(self.solar_systems),
            "types": len(self.types),
            "groups": len(self.groups),
            "categories": len(self.categories),
            "npc_stations": len(self.npc_stations),
            "npc_corporations": len(self.npc_corporations),
            "system_jumps": len(self.system_jumps),
        }


def is_blue_loot_buyer(corporation_id: int) -> bool:
    """True if stations of this corporation buy blue loot."""
    return corporation_id in BLUE_LOOT_BUYER_CORP_IDS


def filter_blue_loot_stations(
    stations: dict[int, EveNpcStation],
) -> dict[int, EveNpcStation]:
    """Keep only stations owned by a blue loot buyer."""
    return {
        station_id: station
        for station_id, station in stations.items()
        if is_blue_loot_buyer(station.owner_id)
    }


def build_star_type_map(stars: dict[int, EveStar]) -> dict[int, int]:
    """Map star ID to the star's type ID."""
    return {star_id: star.type_id for star_id, star in stars.items() if star.type_id}


def resolve_sun_types(
    systems: dict[int, EveSolarSystem], star_types: dict[int, int]
) -> int:
    """Fill in ``sun_type_id`` from each system's ``star_id``.

    Returns:
        Number of systems whose sun type was resolved.
    """
    resolved = 0
    for system in systems.values():
        if system.star_id is None:
            continue
        type_id = star_types.get(system.star_id)
        if type_id:
            system.sun_type_id = type_id
            resolved += 1
    return resolved


def build_system_jumps(stargates: dict[int, EveStargate]) -> list[SystemJump]:
    """Directed system-to-system connections from stargate records.

    Every gate yields (its system, its destination's system). Gates with a
    missing endpoint are skipped and each direction is kept once, so a
    gate pair yields exactly one A→B and one B→A connection.
    """
    seen: set[tuple[int, int]] = set()
    jumps: list[SystemJump] = []
    for gate in stargates.values():
        from_id = gate.solar_system_id
        to_id = gate.destination.solar_system_id if gate.destination else 0
        if not from_id or not to_id:
            continue
        key = (from_id, to_id)
        if key in seen:
            continue
        seen.add(key)
        jumps.append(SystemJump(from_solar_system_id=from_id, to_solar_system_id=to_id))
    return jumps


class SDEProvider:
    """Loads every SDE file the converter needs into an ``SDERecords``."""

    def __init__(
        self,
        parser: SDEJsonlParser,
        *,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the SDE provider.

        Args:
            parser: SDEJsonlParser instance for loading SDE data.
            progress_callback: Optional callback for progress updates during loading.
        """
        self._parser = parser
        self._progress_callback = progress_callback

    def load_all(self) -> SDERecords:
        """Parse all files and derive the connection list.

        Raises:
            SDEParseError: If a required file is missing or malformed.
        """
        steps = 11
        self._emit_progress(ProgressPhase.STARTING, 0, steps, "Parsing SDE files...")

        records = SDERecords()

        records.regions = self._parser.load_regions()
        self._emit_progress(ProgressPhase.PROCESSING, 1, steps, "Parsed regions")
        records.constellations = self._parser.load_constellations()
        self._emit_progress(ProgressPhase.PROCESSING, 2, steps, "Parsed constellations")

        stars = self._parser.load_stars()
        self._emit_progress(ProgressPhase.PROCESSING, 3, steps, "Parsed stars")
        records.solar_systems = self._parser.load_solar_systems()
        resolved = resolve_sun_types(records.solar_systems, build_star_type_map(stars))
        logger.debug(f"Resolved sun type for {resolved} solar systems")
        self._emit_progress(ProgressPhase.PROCESSING, 4, steps, "Parsed solar systems")

        records.system_jumps = build_system_jumps(self._parser.load_stargates())
        self._emit_progress(ProgressPhase.PROCESSING, 5, steps, "Parsed stargates")

        records.types = self._parser.load_types()
        self._emit_progress(ProgressPhase.PROCESSING, 6, steps, "Parsed types")
        records.groups = self._parser.load_groups()
        self._emit_progress(ProgressPhase.PROCESSING, 7, steps, "Parsed groups")
        records.categories = self._parser.load_categories()
        self._emit_progress(ProgressPhase.PROCESSING, 8, steps, "Parsed categories")

        all_stations = self._parser.load_npc_stations()
        records.npc_stations = filter_blue_loot_stations(all_stations)
        logger.debug(
            f"Kept {len(records.npc_stations)} of {len(all_stations)} NPC stations "
            "owned by blue loot buyers"
        )
        self._emit_progress(ProgressPhase.PROCESSING, 9, steps, "Parsed NPC stations")
        records.npc_corporations = self._parser.load_npc_corporations()
        self._emit_progress(
            ProgressPhase.PROCESSING, 10, steps, "Parsed NPC corporations"
        )

        logger.info(
            "Parsed SDE: "
            + ", ".join(f"{name}={count}" for name, count in records.counts().items())
        )
        self._emit_progress(ProgressPhase.COMPLETE, steps, steps, "SDE parsed")
        return records

    def _emit_progress(
        self,
        phase: ProgressPhase,
        current: int,
        total: int,
        message: str,
        detail: str | None = None,
    ) -> None:
        """Emit progress update if callback is configured."""
        if self._progress_callback:
            self._progress_callback(
                ProgressUpdate(
                    operation="sde_parse",
                    phase=phase,
                    current=current,
                    total=total,
                    message=message,
                    detail=detail,
                )
            )
