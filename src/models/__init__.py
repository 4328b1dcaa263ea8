"""Data models: SDE source records (eve) and converter output (app)."""

from .app import (
    Constellation,
    ConvertedData,
    InvGroup,
    InvType,
    NPCStation,
    Region,
    SolarSystem,
    SystemJump,
    UniverseData,
    ValidationResult,
    WormholeClassLocation,
)
from .eve import (
    EveCategory,
    EveConstellation,
    EveGroup,
    EveNpcCorporation,
    EveNpcStation,
    EvePosition,
    EveRegion,
    EveSolarSystem,
    EveStar,
    EveStargate,
    EveType,
)

__all__ = [
    "Constellation",
    "ConvertedData",
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
    "EveType",
    "InvGroup",
    "InvType",
    "NPCStation",
    "Region",
    "SolarSystem",
    "SystemJump",
    "UniverseData",
    "ValidationResult",
    "WormholeClassLocation",
]
