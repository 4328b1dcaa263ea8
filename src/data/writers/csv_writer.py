"""CSV output in the slim Fuzzwork column layout."""

from __future__ import annotations

import csv
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from models.app import (
    Constellation,
    InvGroup,
    InvType,
    NPCStation,
    Region,
    SolarSystem,
    SystemJump,
    WormholeClassLocation,
)

from .base import BaseWriter

# Only the columns the downstream map application reads
CSV_HEADERS: dict[str, list[str]] = {
    "mapSolarSystems": [
        "solarSystemID",
        "solarSystemName",
        "regionID",
        "constellationID",
        "security",
        "sunTypeID",
    ],
    "mapRegions": ["regionID", "regionName"],
    "mapConstellations": ["constellationID", "constellationName"],
    "invTypes": ["typeID", "groupID", "typeName", "mass", "volume", "capacity"],
    "invGroups": ["groupID", "categoryID", "groupName"],
    "mapLocationWormholeClasses": ["locationID", "wormholeClassID"],
    "mapSolarSystemJumps": ["fromSolarSystemID", "toSolarSystemID"],
    "npcStations": ["stationID", "solarSystemID", "ownerID", "ownerName", "typeID"],
}


def format_nullable_int(value: int | None) -> str:
    """Optional integers render as ``None`` when absent."""
    if value is None:
        return "None"
    return str(value)


def format_float(value: float) -> str:
    """Shortest round-trip digits, never in scientific notation."""
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_security(value: float) -> str:
    """Like ``format_float`` but always with a decimal point (``1`` -> ``1.0``)."""
    text = format_float(value)
    if "." not in text:
        text += ".0"
    return text


def solar_system_row(s: SolarSystem) -> list[str]:
    return [
        str(s.solar_system_id),
        s.solar_system_name,
        str(s.region_id),
        str(s.constellation_id),
        format_security(s.security),
        format_nullable_int(s.sun_type_id),
    ]


def region_row(r: Region) -> list[str]:
    return [str(r.region_id), r.region_name]


def constellation_row(c: Constellation) -> list[str]:
    return [str(c.constellation_id), c.constellation_name]


def inv_type_row(t: InvType) -> list[str]:
    return [
        str(t.type_id),
        str(t.group_id),
        t.type_name,
        format_float(t.mass),
        format_float(t.volume),
        format_float(t.capacity),
    ]


def inv_group_row(g: InvGroup) -> list[str]:
    return [str(g.group_id), str(g.category_id), g.group_name]


def wormhole_class_row(w: WormholeClassLocation) -> list[str]:
    return [str(w.location_id), str(w.wormhole_class_id)]


def system_jump_row(j: SystemJump) -> list[str]:
    return [str(j.from_solar_system_id), str(j.to_solar_system_id)]


def npc_station_row(s: NPCStation) -> list[str]:
    return [
        str(s.station_id),
        str(s.solar_system_id),
        str(s.owner_id),
        s.owner_name,
        str(s.type_id),
    ]


ROW_BUILDERS: dict[str, Callable[[Any], list[str]]] = {
    "mapSolarSystems": solar_system_row,
    "mapRegions": region_row,
    "mapConstellations": constellation_row,
    "invTypes": inv_type_row,
    "invGroups": inv_group_row,
    "mapLocationWormholeClasses": wormhole_class_row,
    "mapSolarSystemJumps": system_jump_row,
    "npcStations": npc_station_row,
}


class CSVWriter(BaseWriter):
    """Writes one CSV file per dataset."""

    extension = ".csv"

    def write_dataset(self, stem: str, records: Sequence[BaseModel]) -> None:
        header = CSV_HEADERS[stem]
        build_row = ROW_BUILDERS[stem]

        def write(f: Any) -> None:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(header)
            for record in records:
                writer.writerow(build_row(record))

        self._atomic_write(f"{stem}{self.extension}", write)
