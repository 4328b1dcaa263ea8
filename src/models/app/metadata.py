"""SDE build information and the metadata file written next to the output."""

from datetime import datetime

from pydantic import BaseModel, Field

SDE_SOURCE_URL = "https://developers.eveonline.com/static-data"


class SDEVersionInfo(BaseModel):
    """Latest SDE build as announced by CCP's latest.jsonl."""

    build_number: int = Field(..., description="SDE build number")
    release_date: str = Field("", description="Release date as published")
    etag: str | None = Field(None, description="ETag of the latest.jsonl response")

    @property
    def version(self) -> str:
        """Build number as the string stored in the version marker file."""
        return str(self.build_number)


class SDEMetadata(BaseModel):
    """Contents of sde_metadata.json."""

    sde_version: str = Field(..., description="SDE build the output was made from")
    release_date: str | None = Field(None, description="SDE release date")
    generated_by: str = Field(..., description="Tool name and version")
    generated_at: datetime = Field(..., description="UTC generation timestamp")
    source: str = Field(SDE_SOURCE_URL, description="Where the SDE was published")
