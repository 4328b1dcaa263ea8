"""Shared geometric and field types for SDE source records."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field


def _zero_to_none(value: Any) -> Any:
    """The SDE writes 0 for an absent optional reference."""
    if value == 0:
        return None
    return value


# Optional reference ID (faction, wormhole class, star, ...); 0 means absent
OptionalId = Annotated[int | None, BeforeValidator(_zero_to_none)]

# Translated text keyed by language code, e.g. {"en": "Jita", "de": "Jita"}
LocalizedText = dict[str, str]


class EvePosition(BaseModel):
    """3D coordinates (x, y, z) in metres."""

    x: float = Field(0.0, description="X coordinate")
    y: float = Field(0.0, description="Y coordinate")
    z: float = Field(0.0, description="Z coordinate")
