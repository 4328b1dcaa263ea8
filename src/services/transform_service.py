"""Transformation of parsed SDE records into the downstream output model.

Pipeline (all in memory, single pass per collection):

    raw records ─┬─ location conversion ──┬─ jump enrichment
                 ├─ ship category filter  ├─ region/constellation bounds
                 ├─ wormhole classes      ├─ faction inheritance
                 └─ NPC station owners    └─ deterministic ordering

The raw store is never modified; every output record is a fresh object.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from models.app import (
    Constellation,
    ConvertedData,
    NPCStation,
    Region,
    SolarSystem,
    SystemJump,
    UniverseData,
    ValidationResult,
    WormholeClassLocation,
)
from models.eve import (
    EveConstellation,
    EveNpcCorporation,
    EveNpcStation,
    EveRegion,
    EveSolarSystem,
)
from services.bounds import (
    calculate_constellation_bounds,
    calculate_region_bounds,
    inherit_faction_ids,
)
from services.filters import count_by_group, filter_ship_groups, filter_ship_types
from services.localization import get_localized_name, get_location_name
from services.validation import validate_converted_data

if TYPE_CHECKING:
    from data.sde_provider import SDERecords

logger = logging.getLogger(__name__)


def convert_region(region: EveRegion) -> Region:
    position = region.position
    return Region(
        region_id=region.id,
        region_name=get_location_name(region.name, "Region", region.id),
        x=position.x if position else 0.0,
        y=position.y if position else 0.0,
        z=position.z if position else 0.0,
        faction_id=region.faction_id,
        nebula=region.nebula_id,
    )


def convert_constellation(constellation: EveConstellation) -> Constellation:
    position = constellation.position
    return Constellation(
        region_id=constellation.region_id,
        constellation_id=constellation.id,
        constellation_name=get_location_name(
            constellation.name, "Constellation", constellation.id
        ),
        x=position.x if position else 0.0,
        y=position.y if position else 0.0,
        z=position.z if position else 0.0,
        faction_id=constellation.faction_id,
        radius=constellation.radius,
    )


def convert_solar_system(system: EveSolarSystem) -> SolarSystem:
    position = system.position
    return SolarSystem(
        region_id=system.region_id,
        constellation_id=system.constellation_id,
        solar_system_id=system.id,
        solar_system_name=get_location_name(system.name, "System", system.id),
        x=position.x if position else 0.0,
        y=position.y if position else 0.0,
        z=position.z if position else 0.0,
        luminosity=system.luminosity,
        border=system.border,
        fringe=system.fringe,
        corridor=system.corridor,
        hub=system.hub,
        international=system.international,
        regional=system.regional,
        security=system.security_status,
        faction_id=system.faction_id,
        radius=system.radius,
        sun_type_id=system.sun_type_id,
        security_class=system.security_class or None,
    )


def extract_wormhole_classes(
    regions: Iterable[EveRegion],
    constellations: Iterable[EveConstellation],
    systems: Iterable[EveSolarSystem],
) -> list[WormholeClassLocation]:
    """One entry per region, constellation or system with a wormhole class."""
    result: list[WormholeClassLocation] = []
    for location in (*regions, *constellations, *systems):
        if location.wormhole_class_id is not None:
            result.append(
                WormholeClassLocation(
                    location_id=location.id,
                    wormhole_class_id=location.wormhole_class_id,
                )
            )
    return result


def enrich_system_jumps(
    jumps: Iterable[SystemJump], systems: Iterable[SolarSystem]
) -> list[SystemJump]:
    """Attach region and constellation IDs to both ends of each connection.

    Endpoints that are not in ``systems`` keep 0 for their region and
    constellation and are logged. Duplicates are passed through.
    """
    lookup = {system.solar_system_id: system for system in systems}

    result: list[SystemJump] = []
    unknown = 0
    for jump in jumps:
        enriched = SystemJump(
            from_solar_system_id=jump.from_solar_system_id,
            to_solar_system_id=jump.to_solar_system_id,
        )

        from_system = lookup.get(jump.from_solar_system_id)
        if from_system is not None:
            enriched.from_region_id = from_system.region_id
            enriched.from_constellation_id = from_system.constellation_id
        else:
            unknown += 1
            logger.warning(
                "Unknown from system %d in jump", jump.from_solar_system_id
            )

        to_system = lookup.get(jump.to_solar_system_id)
        if to_system is not None:
            enriched.to_region_id = to_system.region_id
            enriched.to_constellation_id = to_system.constellation_id
        else:
            unknown += 1
            logger.warning("Unknown to system %d in jump", jump.to_solar_system_id)

        result.append(enriched)

    if unknown:
        logger.warning("%d jump endpoints could not be resolved", unknown)
    return result


def convert_npc_stations(
    stations: Mapping[int, EveNpcStation],
    corporations: Mapping[int, EveNpcCorporation],
) -> list[NPCStation]:
    """Convert stations and resolve the owning corporation's name."""
    result: list[NPCStation] = []
    for station in stations.values():
        owner_name = ""
        corporation = corporations.get(station.owner_id)
        if corporation is not None:
            owner_name = get_localized_name(
                corporation.name, f"corporation {station.owner_id}"
            )
        result.append(
            NPCStation(
                station_id=station.id,
                solar_system_id=station.solar_system_id,
                owner_id=station.owner_id,
                owner_name=owner_name,
                type_id=station.type_id,
            )
        )
    return result


def sort_converted_data(data: ConvertedData) -> None:
    """Put every collection in its canonical order, in place.

    Every key is a unique ID (or ID pair), so the order is total and the
    same input always gives byte-identical output.
    """
    data.universe.regions.sort(key=lambda r: r.region_id)
    data.universe.constellations.sort(key=lambda c: c.constellation_id)
    data.universe.solar_systems.sort(key=lambda s: s.solar_system_id)
    data.inv_types.sort(key=lambda t: t.type_id)
    data.inv_groups.sort(key=lambda g: g.group_id)
    data.wormhole_classes.sort(key=lambda w: w.location_id)
    data.npc_stations.sort(key=lambda s: s.station_id)
    data.system_jumps.sort(
        key=lambda j: (j.from_solar_system_id, j.to_solar_system_id)
    )


class TransformService:
    """Turns an ``SDERecords`` snapshot into sorted ``ConvertedData``."""

    def transform(self, records: SDERecords) -> ConvertedData:
        """Run the whole pipeline.

        Args:
            records: Parsed SDE records. Not modified.

        Returns:
            Converted, enriched and sorted data.
        """
        logger.info("Transforming SDE data...")

        regions = [convert_region(r) for r in records.regions.values()]
        constellations = [
            convert_constellation(c) for c in records.constellations.values()
        ]
        systems = [convert_solar_system(s) for s in records.solar_systems.values()]

        logger.debug("Filtering item groups and types to ships")
        inv_groups = filter_ship_groups(records.groups)
        inv_types = filter_ship_types(records.types, records.groups)
        logger.debug(
            "Ship types span %d groups", len(count_by_group(inv_types))
        )

        wormhole_classes = extract_wormhole_classes(
            records.regions.values(),
            records.constellations.values(),
            records.solar_systems.values(),
        )

        logger.debug("Enriching %d system jumps", len(records.system_jumps))
        system_jumps = enrich_system_jumps(records.system_jumps, systems)

        logger.debug("Calculating region and constellation bounds")
        calculate_region_bounds(regions, systems)
        calculate_constellation_bounds(constellations, systems)

        inherit_faction_ids(systems, regions)

        npc_stations = convert_npc_stations(
            records.npc_stations, records.npc_corporations
        )

        data = ConvertedData(
            universe=UniverseData(
                regions=regions,
                constellations=constellations,
                solar_systems=systems,
            ),
            inv_types=inv_types,
            inv_groups=inv_groups,
            wormhole_classes=wormhole_classes,
            system_jumps=system_jumps,
            npc_stations=npc_stations,
        )
        sort_converted_data(data)

        logger.info(
            "Transformation complete: %d regions, %d constellations, "
            "%d solar systems, %d types, %d groups, %d wormhole classes, "
            "%d system jumps, %d NPC stations",
            len(regions),
            len(constellations),
            len(systems),
            len(inv_types),
            len(inv_groups),
            len(wormhole_classes),
            len(system_jumps),
            len(npc_stations),
        )
        return data

    def validate(self, data: ConvertedData) -> ValidationResult:
        """Check the converted data against expected collection sizes."""
        return validate_converted_data(data)
