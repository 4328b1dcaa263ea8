"""Aggregate output of the transformation pipeline and its validation report."""

from pydantic import BaseModel, Field

from .connections import SystemJump, WormholeClassLocation
from .inventory import InvGroup, InvType
from .station import NPCStation
from .universe import UniverseData


class ConvertedData(BaseModel):
    """Everything the writers need, sorted and enriched."""

    universe: UniverseData = Field(default_factory=UniverseData)
    inv_types: list[InvType] = Field(default_factory=list)
    inv_groups: list[InvGroup] = Field(default_factory=list)
    wormhole_classes: list[WormholeClassLocation] = Field(default_factory=list)
    system_jumps: list[SystemJump] = Field(default_factory=list)
    npc_stations: list[NPCStation] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Collection sizes plus blocking errors and advisory warnings."""

    solar_systems: int = 0
    regions: int = 0
    constellations: int = 0
    inv_types: int = 0
    inv_groups: int = 0
    system_jumps: int = 0
    wormhole_classes: int = 0
    npc_stations: int = 0
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no errors were found; warnings do not count."""
        return not self.errors
