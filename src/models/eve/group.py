"""EVE Online group data models."""

from pydantic import BaseModel, Field

from .position import LocalizedText, OptionalId


class EveGroup(BaseModel):
    """Represents an EVE Online item group."""

    id: int = Field(..., ge=0, description="The unique identifier for the Eve group.")
    category_id: int = Field(
        ..., ge=0, description="The category ID this group belongs to."
    )
    name: LocalizedText = Field(
        default_factory=dict, description="Translated group names."
    )
    icon_id: OptionalId = Field(None, description="The icon ID for the group.")
    anchorable: bool = Field(False, description="Whether the group is anchorable.")
    anchored: bool = Field(False, description="Whether the group is anchored.")
    fittable_non_singleton: bool = Field(
        False, description="Whether the group is fittable non-singleton."
    )
    published: bool = Field(False, description="Whether the group is published.")
    use_base_price: bool = Field(False, description="Whether the group uses base price.")
