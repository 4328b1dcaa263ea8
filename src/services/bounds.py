"""Bounding boxes of map locations and region-to-system faction inheritance."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from models.app import BoundedLocation, Constellation, Region, SolarSystem

logger = logging.getLogger(__name__)


@dataclass
class Bounds:
    """Running axis-aligned bounding box."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_min: float
    z_max: float

    @classmethod
    def from_point(cls, x: float, y: float, z: float) -> Bounds:
        return cls(x, x, y, y, z, z)

    def include(self, x: float, y: float, z: float) -> None:
        """Grow the box to contain the point."""
        self.x_min = min(self.x_min, x)
        self.x_max = max(self.x_max, x)
        self.y_min = min(self.y_min, y)
        self.y_max = max(self.y_max, y)
        self.z_min = min(self.z_min, z)
        self.z_max = max(self.z_max, z)

    def apply_to(self, location: BoundedLocation) -> None:
        location.set_bounds(
            self.x_min, self.x_max, self.y_min, self.y_max, self.z_min, self.z_max
        )


def calculate_bounds(children: Iterable[BoundedLocation]) -> Bounds | None:
    """Bounding box of the children's coordinates, or None when there are none."""
    bounds: Bounds | None = None
    for child in children:
        if bounds is None:
            bounds = Bounds.from_point(child.x, child.y, child.z)
        else:
            bounds.include(child.x, child.y, child.z)
    return bounds


def apply_child_bounds(
    parents: Sequence[BoundedLocation],
    children: Iterable[BoundedLocation],
    parent_attr: str,
    child_attr: str,
) -> None:
    """Set each parent's bounds from the children that reference it.

    Children are grouped by parent ID in one pass. Parents without
    children keep their current (zero) bounds.

    Args:
        parents: Locations whose bounds are set in place.
        children: Locations carrying the parent's ID.
        parent_attr: Attribute holding the parent's own ID.
        child_attr: Attribute on the child holding the parent's ID.
    """
    per_parent: dict[int, list[BoundedLocation]] = {}
    for child in children:
        per_parent.setdefault(getattr(child, child_attr), []).append(child)

    for parent in parents:
        bounds = calculate_bounds(per_parent.get(getattr(parent, parent_attr), ()))
        if bounds is not None:
            bounds.apply_to(parent)


def calculate_region_bounds(
    regions: Sequence[Region], systems: Iterable[SolarSystem]
) -> None:
    """Set region bounds from the coordinates of their solar systems."""
    apply_child_bounds(regions, systems, "region_id", "region_id")


def calculate_constellation_bounds(
    constellations: Sequence[Constellation], systems: Iterable[SolarSystem]
) -> None:
    """Set constellation bounds from the coordinates of their solar systems."""
    apply_child_bounds(constellations, systems, "constellation_id", "constellation_id")


def inherit_faction_ids(
    systems: Iterable[SolarSystem], regions: Iterable[Region]
) -> int:
    """Give systems without a faction their region's faction.

    Systems that already have a faction, and systems in regions without
    one, are left untouched.

    Returns:
        Number of systems that inherited a faction.
    """
    region_factions = {
        region.region_id: region.faction_id
        for region in regions
        if region.faction_id is not None
    }

    inherited = 0
    for system in systems:
        if system.faction_id is not None:
            continue
        faction_id = region_factions.get(system.region_id)
        if faction_id is not None:
            system.faction_id = faction_id
            inherited += 1

    logger.debug("Inherited region faction for %d solar systems", inherited)
    return inherited
