"""EVE Online NPC station data model."""

from pydantic import BaseModel, Field

from .position import EvePosition, OptionalId


class EveNpcStation(BaseModel):
    """NPC station record from npcStations.jsonl."""

    id: int = Field(..., ge=0, description="Station ID.")
    solar_system_id: int = Field(..., description="Solar system this station is in.")
    owner_id: int = Field(..., description="Corporation ID that owns this station.")
    type_id: int = Field(..., description="Type ID of the station.")
    operation_id: OptionalId = Field(None, description="Station operation ID.")
    position: EvePosition | None = Field(None, description="Station coordinates.")
    reprocessing_efficiency: float | None = Field(
        None, description="Reprocessing efficiency."
    )
    reprocessing_stations_take: float | None = Field(
        None, description="Portion taken by reprocessing stations."
    )
    use_operation_name: bool = Field(
        False, description="Whether the station name uses the operation name."
    )
