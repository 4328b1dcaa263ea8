"""Stargate connections and wormhole class assignments."""

from pydantic import BaseModel, Field


class SystemJump(BaseModel):
    """A directed stargate connection.

    Before enrichment only the endpoint system IDs are set; the region and
    constellation IDs stay 0 for endpoints that cannot be resolved.
    """

    from_region_id: int = Field(0, serialization_alias="fromRegionID")
    from_constellation_id: int = Field(0, serialization_alias="fromConstellationID")
    from_solar_system_id: int = Field(..., serialization_alias="fromSolarSystemID")
    to_solar_system_id: int = Field(..., serialization_alias="toSolarSystemID")
    to_constellation_id: int = Field(0, serialization_alias="toConstellationID")
    to_region_id: int = Field(0, serialization_alias="toRegionID")


class WormholeClassLocation(BaseModel):
    """Wormhole class assigned to a region, constellation or solar system."""

    location_id: int = Field(..., serialization_alias="locationID")
    wormhole_class_id: int = Field(..., serialization_alias="wormholeClassID")
