"""EVE Online universe map records (regions, constellations, systems, stars, gates)."""

from pydantic import BaseModel, Field

from .position import EvePosition, LocalizedText, OptionalId


class EveRegion(BaseModel):
    """Region record from mapRegions.jsonl."""

    id: int = Field(..., ge=0, description="Region ID.")
    name: LocalizedText = Field(default_factory=dict, description="Translated names.")
    position: EvePosition | None = Field(None, description="Region centre.")
    faction_id: OptionalId = Field(None, description="Sovereign NPC faction.")
    nebula_id: int = Field(0, description="Background nebula ID.")
    wormhole_class_id: OptionalId = Field(None, description="Wormhole class.")
    constellation_ids: list[int] = Field(
        default_factory=list, description="Member constellations."
    )


class EveConstellation(BaseModel):
    """Constellation record from mapConstellations.jsonl."""

    id: int = Field(..., ge=0, description="Constellation ID.")
    region_id: int = Field(..., description="Parent region ID.")
    name: LocalizedText = Field(default_factory=dict, description="Translated names.")
    position: EvePosition | None = Field(None, description="Constellation centre.")
    faction_id: OptionalId = Field(None, description="Sovereign NPC faction.")
    radius: float = Field(0.0, description="Constellation radius in metres.")
    wormhole_class_id: OptionalId = Field(None, description="Wormhole class.")
    solar_system_ids: list[int] = Field(
        default_factory=list, description="Member solar systems."
    )


class EveSolarSystem(BaseModel):
    """Solar system record from mapSolarSystems.jsonl.

    ``sun_type_id`` is not part of the source file; the provider fills it in
    from the star table via ``star_id``.
    """

    id: int = Field(..., ge=0, description="Solar system ID.")
    region_id: int = Field(..., description="Parent region ID.")
    constellation_id: int = Field(..., description="Parent constellation ID.")
    name: LocalizedText = Field(default_factory=dict, description="Translated names.")
    position: EvePosition | None = Field(None, description="System coordinates.")
    security_status: float = Field(0.0, description="Raw security status.")
    security_class: str | None = Field(None, description="Security class letter.")
    star_id: OptionalId = Field(None, description="ID of the system's star.")
    sun_type_id: OptionalId = Field(None, description="Type ID of the system's star.")
    faction_id: OptionalId = Field(None, description="Sovereign NPC faction.")
    wormhole_class_id: OptionalId = Field(None, description="Wormhole class.")
    luminosity: float = Field(0.0, description="Star luminosity.")
    radius: float = Field(0.0, description="System radius in metres.")
    border: bool = Field(False, description="Borders another region.")
    corridor: bool = Field(False, description="Corridor system.")
    fringe: bool = Field(False, description="Fringe system.")
    hub: bool = Field(False, description="Hub system.")
    international: bool = Field(False, description="Borders another faction.")
    regional: bool = Field(False, description="Has gates to another region.")


class EveStar(BaseModel):
    """Star record from mapStars.jsonl."""

    id: int = Field(..., ge=0, description="Star ID.")
    solar_system_id: int = Field(..., description="Solar system the star belongs to.")
    type_id: int = Field(..., description="Sun type ID.")
    radius: float = Field(0.0, description="Star radius in metres.")


class EveStargateDestination(BaseModel):
    """Far side of a stargate."""

    solar_system_id: int = Field(0, description="Destination solar system ID.")
    stargate_id: int = Field(0, description="Destination stargate ID.")


class EveStargate(BaseModel):
    """Stargate record from mapStargates.jsonl."""

    id: int = Field(..., ge=0, description="Stargate ID.")
    solar_system_id: int = Field(0, description="Solar system the gate sits in.")
    type_id: int | None = Field(None, description="Stargate type ID.")
    destination: EveStargateDestination | None = Field(
        None, description="Destination gate and system."
    )
