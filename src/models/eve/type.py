"""EVE Online type data models."""

from pydantic import BaseModel, Field

from .position import LocalizedText, OptionalId


class EveType(BaseModel):
    """Represents an EVE Online item type as published in the SDE."""

    id: int = Field(..., ge=0, description="The unique identifier for the Eve type.")
    group_id: int = Field(
        ...,
        ge=0,
        description="The ID of the group to which the Eve type belongs.",
    )
    name: LocalizedText = Field(
        default_factory=dict, description="Translated type names."
    )
    description: LocalizedText = Field(
        default_factory=dict, description="Translated type descriptions."
    )
    mass: float = Field(0.0, ge=0, description="The mass of the Eve type in kilograms.")
    volume: float = Field(
        0.0, ge=0, description="The volume of the Eve type in cubic meters."
    )
    capacity: float = Field(
        0.0, ge=0, description="The cargo capacity of the Eve type in cubic meters."
    )
    portion_size: int = Field(
        1,
        ge=0,
        description="The portion size of the Eve type, used in manufacturing and reprocessing.",
    )
    base_price: float = Field(0.0, description="The base price of the Eve type in ISK.")
    published: bool = Field(
        False,
        description="Indicates whether the Eve type is published and available in the game.",
    )
    race_id: OptionalId = Field(
        None, description="The ID of the race associated with the Eve type."
    )
    market_group_id: OptionalId = Field(
        None, description="The ID of the market group where the Eve type is listed."
    )
    icon_id: OptionalId = Field(
        None, description="The ID of the icon associated with the Eve type."
    )
    sound_id: OptionalId = Field(
        None, description="The ID of the sound asset associated with the Eve type."
    )
    graphic_id: OptionalId = Field(
        None, description="The ID of the graphic asset associated with the Eve type."
    )
