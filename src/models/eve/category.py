"""EVE Online category data models."""

from pydantic import BaseModel, Field

from .position import LocalizedText


class EveCategory(BaseModel):
    """Represents an EVE Online item category (e.g. 6 = Ship)."""

    id: int = Field(
        ..., ge=0, description="The unique identifier for the Eve category."
    )
    name: LocalizedText = Field(
        default_factory=dict, description="Translated category names."
    )
    published: bool = Field(False, description="Whether the category is published.")
