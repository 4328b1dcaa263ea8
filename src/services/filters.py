"""Category filtering of item groups and types.

A type belongs to a category through its group, so filtering types by
category is a two-level join: first collect the IDs of the groups in the
category, then keep the types whose group is in that set.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from models.app import InvGroup, InvType
from models.eve import EveGroup, EveType
from services.localization import get_localized_name

SHIP_CATEGORY_ID = 6


def group_ids_in_category(groups: Mapping[int, EveGroup], category_id: int) -> set[int]:
    """IDs of the groups belonging to ``category_id``."""
    return {
        group_id
        for group_id, group in groups.items()
        if group.category_id == category_id
    }


def to_inv_group(group: EveGroup) -> InvGroup:
    return InvGroup(
        group_id=group.id,
        category_id=group.category_id,
        group_name=get_localized_name(group.name, f"group {group.id}"),
        icon_id=group.icon_id,
        use_base_price=group.use_base_price,
        anchored=group.anchored,
        anchorable=group.anchorable,
        fittable_non_singleton=group.fittable_non_singleton,
        published=group.published,
    )


def to_inv_type(item_type: EveType) -> InvType:
    return InvType(
        type_id=item_type.id,
        group_id=item_type.group_id,
        type_name=get_localized_name(item_type.name, f"type {item_type.id}"),
        description=item_type.description.get("en", ""),
        mass=item_type.mass,
        volume=item_type.volume,
        capacity=item_type.capacity,
        portion_size=item_type.portion_size,
        race_id=item_type.race_id,
        base_price=item_type.base_price,
        published=item_type.published,
        market_group_id=item_type.market_group_id,
        icon_id=item_type.icon_id,
        sound_id=item_type.sound_id,
        graphic_id=item_type.graphic_id,
    )


def filter_groups_by_category(
    groups: Mapping[int, EveGroup], category_id: int
) -> list[InvGroup]:
    """Groups in ``category_id``, converted and sorted by group ID."""
    result = [
        to_inv_group(group)
        for group in groups.values()
        if group.category_id == category_id
    ]
    result.sort(key=lambda g: g.group_id)
    return result


def filter_types_by_groups(
    types: Mapping[int, EveType], group_ids: set[int]
) -> list[InvType]:
    """Types whose group is in ``group_ids``, converted and sorted by type ID."""
    result = [
        to_inv_type(item_type)
        for item_type in types.values()
        if item_type.group_id in group_ids
    ]
    result.sort(key=lambda t: t.type_id)
    return result


def filter_ship_groups(groups: Mapping[int, EveGroup]) -> list[InvGroup]:
    """Item groups in the ship category."""
    return filter_groups_by_category(groups, SHIP_CATEGORY_ID)


def filter_ship_types(
    types: Mapping[int, EveType], groups: Mapping[int, EveGroup]
) -> list[InvType]:
    """Item types whose group is in the ship category."""
    return filter_types_by_groups(types, group_ids_in_category(groups, SHIP_CATEGORY_ID))


def filter_published_types(types: Mapping[int, EveType]) -> dict[int, EveType]:
    """Only the types flagged as published."""
    return {type_id: t for type_id, t in types.items() if t.published}


def filter_published_groups(groups: Mapping[int, EveGroup]) -> dict[int, EveGroup]:
    """Only the groups flagged as published."""
    return {group_id: g for group_id, g in groups.items() if g.published}


def count_by_group(types: Iterable[InvType]) -> dict[int, int]:
    """Number of types per group ID, for summary logging."""
    counts: dict[int, int] = {}
    for item_type in types:
        counts[item_type.group_id] = counts.get(item_type.group_id, 0) + 1
    return counts
