"""EVE Online NPC corporation data model."""

from pydantic import BaseModel, Field

from .position import LocalizedText, OptionalId


class EveNpcCorporation(BaseModel):
    """NPC corporation record from npcCorporations.jsonl."""

    id: int = Field(..., ge=0, description="Corporation ID.")
    name: LocalizedText = Field(
        default_factory=dict, description="Translated corporation names."
    )
    faction_id: OptionalId = Field(None, description="Faction the corporation belongs to.")
    station_id: OptionalId = Field(None, description="Headquarters station ID.")
    ticker_name: str | None = Field(None, description="Corporation ticker.")
    deleted: bool = Field(False, description="Whether the corporation was removed.")
