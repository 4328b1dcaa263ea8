"""NPC station records in the downstream layout."""

from pydantic import BaseModel, Field


class NPCStation(BaseModel):
    """An NPC station where blue loot can be sold."""

    station_id: int = Field(..., serialization_alias="stationID")
    solar_system_id: int = Field(..., serialization_alias="solarSystemID")
    owner_id: int = Field(..., serialization_alias="ownerID")
    owner_name: str = Field("", serialization_alias="ownerName")
    type_id: int = Field(..., serialization_alias="typeID")
