"""Item type and group records in the downstream layout."""

from pydantic import BaseModel, Field


class InvType(BaseModel):
    """An item type (a ship, after category filtering)."""

    type_id: int = Field(..., serialization_alias="typeID")
    group_id: int = Field(..., serialization_alias="groupID")
    type_name: str = Field("", serialization_alias="typeName")
    description: str = ""
    mass: float = 0.0
    volume: float = 0.0
    capacity: float = 0.0
    portion_size: int = Field(1, serialization_alias="portionSize")
    race_id: int | None = Field(None, serialization_alias="raceID")
    base_price: float = Field(0.0, serialization_alias="basePrice")
    published: bool = False
    market_group_id: int | None = Field(None, serialization_alias="marketGroupID")
    icon_id: int | None = Field(None, serialization_alias="iconID")
    sound_id: int | None = Field(None, serialization_alias="soundID")
    graphic_id: int | None = Field(None, serialization_alias="graphicID")


class InvGroup(BaseModel):
    """An item group."""

    group_id: int = Field(..., serialization_alias="groupID")
    category_id: int = Field(..., serialization_alias="categoryID")
    group_name: str = Field("", serialization_alias="groupName")
    icon_id: int | None = Field(None, serialization_alias="iconID")
    use_base_price: bool = Field(False, serialization_alias="useBasePrice")
    anchored: bool = False
    anchorable: bool = False
    fittable_non_singleton: bool = Field(
        False, serialization_alias="fittableNonSingleton"
    )
    published: bool = False
