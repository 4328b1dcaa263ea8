"""Tests for region/constellation bounds and faction inheritance."""

from models.app import Constellation, Region, SolarSystem
from services.bounds import (
    Bounds,
    calculate_bounds,
    calculate_constellation_bounds,
    calculate_region_bounds,
    inherit_faction_ids,
)


def make_system(system_id, region_id, constellation_id, x, y, z, faction_id=None):
    return SolarSystem(
        region_id=region_id,
        constellation_id=constellation_id,
        solar_system_id=system_id,
        solar_system_name=f"System {system_id}",
        x=x,
        y=y,
        z=z,
        faction_id=faction_id,
    )


class TestCalculateBounds:
    """Bounding boxes from child coordinates."""

    def test_empty_children(self):
        assert calculate_bounds([]) is None

    def test_single_point(self):
        bounds = calculate_bounds([make_system(1, 1, 1, 1.0, 2.0, 3.0)])
        assert bounds == Bounds(1.0, 1.0, 2.0, 2.0, 3.0, 3.0)

    def test_negative_coordinates(self):
        bounds = calculate_bounds(
            [
                make_system(1, 1, 1, -5.0, 10.0, -1.0),
                make_system(2, 1, 1, 3.0, -2.0, -7.0),
            ]
        )
        assert bounds == Bounds(-5.0, 3.0, -2.0, 10.0, -7.0, -1.0)


class TestRegionAndConstellationBounds:
    """Parents take the bounding box of the systems that reference them."""

    def test_region_bounds_from_systems(self):
        regions = [
            Region(region_id=10, region_name="A"),
            Region(region_id=20, region_name="B"),
        ]
        systems = [
            make_system(1, 10, 100, -1.0, 0.0, 5.0),
            make_system(2, 10, 100, 4.0, -3.0, 2.0),
            make_system(3, 20, 200, 9.0, 9.0, 9.0),
        ]

        calculate_region_bounds(regions, systems)

        assert (regions[0].x_min, regions[0].x_max) == (-1.0, 4.0)
        assert (regions[0].y_min, regions[0].y_max) == (-3.0, 0.0)
        assert (regions[0].z_min, regions[0].z_max) == (2.0, 5.0)
        assert (regions[1].x_min, regions[1].x_max) == (9.0, 9.0)

    def test_parent_without_children_keeps_zero_bounds(self):
        regions = [Region(region_id=10, region_name="Empty", x=7.0)]
        calculate_region_bounds(regions, [make_system(1, 99, 1, 1.0, 1.0, 1.0)])

        region = regions[0]
        assert region.x == 7.0
        assert (region.x_min, region.x_max, region.z_min, region.z_max) == (
            0.0,
            0.0,
            0.0,
            0.0,
        )

    def test_constellation_bounds(self):
        constellations = [
            Constellation(region_id=10, constellation_id=100, constellation_name="C")
        ]
        systems = [
            make_system(1, 10, 100, 1.0, 2.0, 3.0),
            make_system(2, 10, 100, -1.0, -2.0, -3.0),
            make_system(3, 10, 101, 50.0, 50.0, 50.0),
        ]

        calculate_constellation_bounds(constellations, systems)

        c = constellations[0]
        assert (c.x_min, c.x_max, c.y_min, c.y_max, c.z_min, c.z_max) == (
            -1.0,
            1.0,
            -2.0,
            2.0,
            -3.0,
            3.0,
        )


class TestInheritFactionIds:
    """Systems without a faction take their region's."""

    def test_inherits_missing_faction(self):
        regions = [Region(region_id=10, region_name="A", faction_id=500001)]
        systems = [make_system(1, 10, 100, 0, 0, 0)]

        assert inherit_faction_ids(systems, regions) == 1
        assert systems[0].faction_id == 500001

    def test_existing_faction_is_kept(self):
        regions = [Region(region_id=10, region_name="A", faction_id=500001)]
        systems = [make_system(1, 10, 100, 0, 0, 0, faction_id=500003)]

        assert inherit_faction_ids(systems, regions) == 0
        assert systems[0].faction_id == 500003

    def test_region_without_faction(self):
        regions = [Region(region_id=10, region_name="A")]
        systems = [make_system(1, 10, 100, 0, 0, 0)]

        inherit_faction_ids(systems, regions)
        assert systems[0].faction_id is None

    def test_inherited_value_is_independent_of_region(self):
        """Changing the region afterwards does not change the system."""
        regions = [Region(region_id=10, region_name="A", faction_id=500001)]
        systems = [make_system(1, 10, 100, 0, 0, 0), make_system(2, 10, 100, 0, 0, 0)]

        inherit_faction_ids(systems, regions)
        regions[0].faction_id = 500002
        systems[0].faction_id = 500004

        assert systems[1].faction_id == 500001
