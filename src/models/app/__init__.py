"""Application/output models (domain layer)."""

from .connections import SystemJump, WormholeClassLocation
from .converted import ConvertedData, ValidationResult
from .inventory import InvGroup, InvType
from .metadata import SDE_SOURCE_URL, SDEMetadata, SDEVersionInfo
from .station import NPCStation
from .universe import BoundedLocation, Constellation, Region, SolarSystem, UniverseData

__all__ = [
    "SDE_SOURCE_URL",
    "BoundedLocation",
    "Constellation",
    "ConvertedData",
    "InvGroup",
    "InvType",
    "NPCStation",
    "Region",
    "SDEMetadata",
    "SDEVersionInfo",
    "SolarSystem",
    "SystemJump",
    "UniverseData",
    "ValidationResult",
    "WormholeClassLocation",
]
