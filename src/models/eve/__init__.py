"""EVE Online SDE source records (domain layer)."""

from .category import EveCategory
from .corporation import EveNpcCorporation
from .group import EveGroup
from .map import (
    EveConstellation,
    EveRegion,
    EveSolarSystem,
    EveStar,
    EveStargate,
    EveStargateDestination,
)
from .position import EvePosition, LocalizedText, OptionalId
from .station import EveNpcStation
from .type import EveType

__all__ = [
    "EveCategory",
    "EveConstellation",
    "EveGroup",
    "EveNpcCorporation",
    "EveNpcStation",
    "EvePosition",
    "EveRegion",
    "EveSolarSystem",
    "EveStar",
    "EveStargate",
    "EveStargateDestination",
    "EveType",
    "LocalizedText",
    "OptionalId",
]
