"""Universe map records in the downstream (Fuzzwork-compatible) layout."""

from pydantic import BaseModel, Field


class BoundedLocation(BaseModel):
    """Coordinates plus the axis-aligned bounding box of a map location.

    Bounds stay zero until the geometry aggregator fills them in from the
    location's children.
    """

    x: float = Field(0.0, description="X coordinate")
    y: float = Field(0.0, description="Y coordinate")
    z: float = Field(0.0, description="Z coordinate")
    x_min: float = Field(0.0, serialization_alias="xMin")
    x_max: float = Field(0.0, serialization_alias="xMax")
    y_min: float = Field(0.0, serialization_alias="yMin")
    y_max: float = Field(0.0, serialization_alias="yMax")
    z_min: float = Field(0.0, serialization_alias="zMin")
    z_max: float = Field(0.0, serialization_alias="zMax")

    def set_bounds(
        self,
        x_min: float,
        x_max: float,
        y_min: float,
        y_max: float,
        z_min: float,
        z_max: float,
    ) -> None:
        """Overwrite all six bounds."""
        self.x_min, self.x_max = x_min, x_max
        self.y_min, self.y_max = y_min, y_max
        self.z_min, self.z_max = z_min, z_max


class Region(BoundedLocation):
    """A region."""

    region_id: int = Field(..., serialization_alias="regionID")
    region_name: str = Field(..., serialization_alias="regionName")
    faction_id: int | None = Field(None, serialization_alias="factionID")
    nebula: int = Field(0, description="Background nebula ID")
    radius: float = Field(0.0, description="Not published for regions; always 0")


class Constellation(BoundedLocation):
    """A constellation."""

    region_id: int = Field(..., serialization_alias="regionID")
    constellation_id: int = Field(..., serialization_alias="constellationID")
    constellation_name: str = Field(..., serialization_alias="constellationName")
    faction_id: int | None = Field(None, serialization_alias="factionID")
    radius: float = Field(0.0, description="Constellation radius in metres")


class SolarSystem(BoundedLocation):
    """A solar system.

    ``security`` is the raw security status; display rounding is applied by
    consumers through ``services.security.get_true_security``.
    """

    region_id: int = Field(..., serialization_alias="regionID")
    constellation_id: int = Field(..., serialization_alias="constellationID")
    solar_system_id: int = Field(..., serialization_alias="solarSystemID")
    solar_system_name: str = Field(..., serialization_alias="solarSystemName")
    luminosity: float = 0.0
    border: bool = False
    fringe: bool = False
    corridor: bool = False
    hub: bool = False
    international: bool = False
    regional: bool = False
    constellation: str = Field("None", description="Legacy column, always 'None'")
    security: float = Field(0.0, description="Raw security status")
    faction_id: int | None = Field(None, serialization_alias="factionID")
    radius: float = 0.0
    sun_type_id: int | None = Field(None, serialization_alias="sunTypeID")
    security_class: str | None = Field(None, serialization_alias="securityClass")


class UniverseData(BaseModel):
    """Regions, constellations and solar systems of one conversion run."""

    regions: list[Region] = Field(default_factory=list)
    constellations: list[Constellation] = Field(default_factory=list)
    solar_systems: list[SolarSystem] = Field(default_factory=list)
