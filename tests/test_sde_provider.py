"""Tests for assembling SDE records: sun types, gates and station filtering."""

from data.parsers import SDEJsonlParser
from data.sde_provider import (
    SDEProvider,
    build_star_type_map,
    build_system_jumps,
    filter_blue_loot_stations,
    is_blue_loot_buyer,
    resolve_sun_types,
)
from models.eve import (
    EveNpcStation,
    EveSolarSystem,
    EveStar,
    EveStargate,
    EveStargateDestination,
)
from utils.progress_callback import ProgressPhase


def gate(gate_id, system_id, destination_system_id):
    return EveStargate(
        id=gate_id,
        solar_system_id=system_id,
        destination=EveStargateDestination(solar_system_id=destination_system_id),
    )


class TestBuildSystemJumps:
    """Directed connections from stargates."""

    def test_gate_pair(self):
        jumps = build_system_jumps({1: gate(1, 100, 200), 2: gate(2, 200, 100)})
        assert [(j.from_solar_system_id, j.to_solar_system_id) for j in jumps] == [
            (100, 200),
            (200, 100),
        ]

    def test_duplicate_direction_kept_once(self):
        jumps = build_system_jumps({1: gate(1, 100, 200), 2: gate(2, 100, 200)})
        assert len(jumps) == 1

    def test_missing_endpoint_skipped(self):
        gates = {
            1: gate(1, 100, 0),
            2: EveStargate(id=2, solar_system_id=100),
            3: gate(3, 0, 100),
        }
        assert build_system_jumps(gates) == []


class TestSunTypes:
    def test_resolve_from_star(self):
        systems = {
            1: EveSolarSystem(id=1, region_id=1, constellation_id=1, star_id=40),
            2: EveSolarSystem(id=2, region_id=1, constellation_id=1),
        }
        star_types = build_star_type_map(
            {40: EveStar(id=40, solar_system_id=1, type_id=45041)}
        )

        assert resolve_sun_types(systems, star_types) == 1
        assert systems[1].sun_type_id == 45041
        assert systems[2].sun_type_id is None


class TestBlueLootStations:
    def test_only_ded_stations(self):
        stations = {
            1: EveNpcStation(id=1, solar_system_id=1, owner_id=1000137, type_id=1),
            2: EveNpcStation(id=2, solar_system_id=1, owner_id=1000035, type_id=1),
        }
        assert is_blue_loot_buyer(1000137)
        assert list(filter_blue_loot_stations(stations)) == [1]


class TestSDEProvider:
    """Loading everything from the mini SDE."""

    def test_load_all(self, sde_dir):
        records = SDEProvider(SDEJsonlParser(sde_dir)).load_all()

        assert records.counts() == {
            "regions": 2,
            "constellations": 2,
            "solar_systems": 3,
            "types": 2,
            "groups": 2,
            "categories": 2,
            "npc_stations": 1,
            "npc_corporations": 2,
            "system_jumps": 2,
        }
        assert records.solar_systems[30000001].sun_type_id == 45041

    def test_progress_updates(self, sde_dir):
        updates = []
        SDEProvider(SDEJsonlParser(sde_dir), progress_callback=updates.append).load_all()

        assert updates[0].phase == ProgressPhase.STARTING
        assert updates[-1].phase == ProgressPhase.COMPLETE
        assert updates[-1].fraction == 1.0
        assert all(u.operation == "sde_parse" for u in updates)
        currents = [u.current for u in updates]
        assert currents == sorted(currents)
