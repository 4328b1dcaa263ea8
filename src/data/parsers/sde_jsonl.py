"""SDE JSONL data parser for EVE Online static data."""

import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from models.eve import (
    EveCategory,
    EveConstellation,
    EveGroup,
    EveNpcCorporation,
    EveNpcStation,
    EveRegion,
    EveSolarSystem,
    EveStar,
    EveStargate,
    EveType,
)
from utils.exceptions import SDEParseError
from utils.jsonl_parser import JSONLParser

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# SDE keys whose snake_case form is not produced by the generic conversion
FIELD_NAME_MAP = {
    # Special SDE key
    "_key": "id",
    "position2D": "position_2d",
}

# Values that are {language: text} maps and must be kept as-is
TRANSLATED_FIELDS = frozenset({"name", "description"})

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake_case(key: str) -> str:
    """Convert an SDE camelCase key (``solarSystemID``) to ``solar_system_id``."""
    mapped = FIELD_NAME_MAP.get(key)
    if mapped is not None:
        return mapped
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


class SDEJsonlParser:
    """Parser for the SDE JSONL files of one extracted build."""

    REGIONS_FILE = "mapRegions.jsonl"
    CONSTELLATIONS_FILE = "mapConstellations.jsonl"
    SOLAR_SYSTEMS_FILE = "mapSolarSystems.jsonl"
    STARS_FILE = "mapStars.jsonl"
    STARGATES_FILE = "mapStargates.jsonl"
    TYPES_FILE = "types.jsonl"
    GROUPS_FILE = "groups.jsonl"
    CATEGORIES_FILE = "categories.jsonl"
    NPC_STATIONS_FILE = "npcStations.jsonl"
    NPC_CORPORATIONS_FILE = "npcCorporations.jsonl"

    # Files without which no useful output can be produced
    REQUIRED_FILES = (
        REGIONS_FILE,
        CONSTELLATIONS_FILE,
        SOLAR_SYSTEMS_FILE,
        STARGATES_FILE,
        TYPES_FILE,
        GROUPS_FILE,
        CATEGORIES_FILE,
    )

    def __init__(self, data_path: Path | str):
        """Initialize the parser with the SDE data path.

        Args:
            data_path: Path to the extracted SDE directory
        """
        self.file_path: Path = Path(data_path)

    def load_regions(self) -> dict[int, EveRegion]:
        """Load all regions from mapRegions.jsonl."""
        return self._load_models(self.REGIONS_FILE, EveRegion, "region")

    def load_constellations(self) -> dict[int, EveConstellation]:
        """Load all constellations from mapConstellations.jsonl."""
        return self._load_models(
            self.CONSTELLATIONS_FILE, EveConstellation, "constellation"
        )

    def load_solar_systems(self) -> dict[int, EveSolarSystem]:
        """Load all solar systems from mapSolarSystems.jsonl."""
        return self._load_models(
            self.SOLAR_SYSTEMS_FILE, EveSolarSystem, "solar system"
        )

    def load_stars(self) -> dict[int, EveStar]:
        """Load all stars from mapStars.jsonl (optional file)."""
        return self._load_models(self.STARS_FILE, EveStar, "star", required=False)

    def load_stargates(self) -> dict[int, EveStargate]:
        """Load all stargates from mapStargates.jsonl."""
        return self._load_models(self.STARGATES_FILE, EveStargate, "stargate")

    def load_types(self) -> dict[int, EveType]:
        """Load all item types from types.jsonl."""
        return self._load_models(self.TYPES_FILE, EveType, "type")

    def load_groups(self) -> dict[int, EveGroup]:
        """Load all item groups from groups.jsonl."""
        return self._load_models(self.GROUPS_FILE, EveGroup, "group")

    def load_categories(self) -> dict[int, EveCategory]:
        """Load all item categories from categories.jsonl."""
        return self._load_models(self.CATEGORIES_FILE, EveCategory, "category")

    def load_npc_stations(self) -> dict[int, EveNpcStation]:
        """Load all NPC stations from npcStations.jsonl (optional file)."""
        return self._load_models(
            self.NPC_STATIONS_FILE, EveNpcStation, "NPC station", required=False
        )

    def load_npc_corporations(self) -> dict[int, EveNpcCorporation]:
        """Load all NPC corporations from npcCorporations.jsonl (optional file)."""
        return self._load_models(
            self.NPC_CORPORATIONS_FILE,
            EveNpcCorporation,
            "NPC corporation",
            required=False,
        )

    def missing_required_files(self) -> list[str]:
        """Names of required files that are not present in the SDE directory."""
        return [
            name for name in self.REQUIRED_FILES if not (self.file_path / name).exists()
        ]

    def _load_models(
        self,
        filename: str,
        model: Callable[..., ModelT],
        label: str,
        required: bool = True,
    ) -> dict[int, ModelT]:
        """Load one file into an ID-keyed mapping of models.

        Records that fail model validation are logged and skipped; malformed
        JSON aborts the load.

        Raises:
            SDEParseError: If a required file is missing or a line is not valid JSON.
        """
        file_path = self.file_path / filename
        if not file_path.exists():
            if required:
                raise SDEParseError(f"Required SDE file not found: {file_path}")
            logger.warning("Optional SDE file not found, skipping: %s", file_path)
            return {}

        records: dict[int, ModelT] = {}
        skipped = 0
        for data in self._load_jsonl(file_path):
            data = self._map_keys(data)
            try:
                record = model(**data)
            except ValidationError as e:
                skipped += 1
                logger.error(f"Failed to parse {label} {data.get('id', 'unknown')}: {e}")
                continue
            records[record.id] = record  # type: ignore[attr-defined]

        if skipped:
            logger.warning("Skipped %d invalid %s records in %s", skipped, label, filename)
        logger.debug("Loaded %d %s records from %s", len(records), label, filename)
        return records

    def _load_jsonl(self, file_path: Path) -> Iterator[dict[str, Any]]:
        """Yield the JSON objects of one file, failing on malformed lines."""
        parser = JSONLParser(file_path, strict=True)
        yield from parser.parse()

    def _map_keys(self, data: dict[str, Any]) -> dict[str, Any]:
        """Map SDE keys to model field names recursively.

        Translation maps (``name``, ``description``) keep their language
        keys untouched.

        Args:
            data: Raw dictionary from JSONL

        Returns:
            Dictionary with snake_case keys (recursively applied)
        """
        out: dict[str, Any] = {}
        for k, v in data.items():
            mapped_key = to_snake_case(k)
            if isinstance(v, dict) and mapped_key in TRANSLATED_FIELDS:
                out[mapped_key] = {
                    lang: text for lang, text in v.items() if isinstance(text, str)
                }
            elif isinstance(v, dict):
                out[mapped_key] = self._map_keys(v)
            elif isinstance(v, list):
                out[mapped_key] = [
                    self._map_keys(item) if isinstance(item, dict) else item
                    for item in v
                ]
            else:
                out[mapped_key] = v
        return out
