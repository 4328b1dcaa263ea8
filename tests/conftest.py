"""Pytest configuration and shared fixtures."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

# Add src to Python path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from utils.config import reset_config  # noqa: E402

# A tiny but complete SDE build: two regions (one k-space, one wormhole),
# three systems, one bidirectional gate pair, ships plus a non-ship type.
MINI_SDE: dict[str, list[dict]] = {
    "mapRegions.jsonl": [
        {
            "_key": 10000001,
            "name": {"en": "Derelik", "de": "Derelik"},
            "position": {"x": -7.7e16, "y": 5.0e16, "z": -7.0e16},
            "factionID": 500007,
            "nebulaID": 11799,
            "constellationIDs": [20000001],
        },
        {
            "_key": 11000001,
            "name": {"en": "A-R00001"},
            "position": {"x": 1.0e18, "y": 0.0, "z": 1.0e18},
            "nebulaID": 0,
            "wormholeClassID": 1,
            "constellationIDs": [21000001],
        },
    ],
    "mapConstellations.jsonl": [
        {
            "_key": 20000001,
            "regionID": 10000001,
            "name": {"en": "San Matar"},
            "position": {"x": -8.0e16, "y": 4.5e16, "z": -4.0e16},
            "radius": 1.0e16,
            "solarSystemIDs": [30000001, 30000002],
        },
        {
            "_key": 21000001,
            "regionID": 11000001,
            "name": {"en": "A-C00311"},
            "position": {"x": 1.0e18, "y": 0.0, "z": 1.0e18},
            "wormholeClassID": 1,
            "solarSystemIDs": [31000005],
        },
    ],
    "mapSolarSystems.jsonl": [
        {
            "_key": 30000002,
            "regionID": 10000001,
            "constellationID": 20000001,
            "name": {"en": "Lashesih"},
            "position": {"x": -1.0e17, "y": 4.0e16, "z": -5.0e16},
            "securityStatus": 0.7516,
            "securityClass": "C",
            "factionID": 500001,
            "luminosity": 0.3,
            "radius": 2.0e12,
        },
        {
            "_key": 30000001,
            "regionID": 10000001,
            "constellationID": 20000001,
            "name": {"en": "Tanoo", "de": "Tanoo"},
            "position": {"x": -8.0e16, "y": 5.0e16, "z": -3.0e16},
            "securityStatus": 0.8583240509033203,
            "securityClass": "B",
            "starID": 40000001,
            "luminosity": 0.01575,
            "radius": 3.0e12,
            "border": True,
            "hub": True,
        },
        {
            "_key": 31000005,
            "regionID": 11000001,
            "constellationID": 21000001,
            "name": {"en": "J055520"},
            "position": {"x": 1.0e18, "y": 1.0e15, "z": 1.0e18},
            "securityStatus": -0.99,
            "wormholeClassID": 1,
        },
    ],
    "mapStars.jsonl": [
        {"_key": 40000001, "solarSystemID": 30000001, "typeID": 45041, "radius": 1.0e9},
    ],
    "mapStargates.jsonl": [
        {
            "_key": 50000056,
            "solarSystemID": 30000001,
            "typeID": 16,
            "destination": {"solarSystemID": 30000002, "stargateID": 50000057},
        },
        {
            "_key": 50000057,
            "solarSystemID": 30000002,
            "typeID": 16,
            "destination": {"solarSystemID": 30000001, "stargateID": 50000056},
        },
    ],
    "types.jsonl": [
        {
            "_key": 587,
            "groupID": 25,
            "name": {"en": "Rifter", "de": "Rifter"},
            "description": {"en": "A Minmatar frigate."},
            "mass": 1067000.0,
            "volume": 27289.0,
            "capacity": 140.0,
            "portionSize": 1,
            "raceID": 2,
            "basePrice": 400000.0,
            "marketGroupID": 64,
            "published": True,
        },
        {
            "_key": 34,
            "groupID": 18,
            "name": {"en": "Tritanium"},
            "volume": 0.01,
            "portionSize": 1,
            "published": True,
        },
    ],
    "groups.jsonl": [
        {"_key": 25, "categoryID": 6, "name": {"en": "Frigate"}, "published": True},
        {"_key": 18, "categoryID": 4, "name": {"en": "Mineral"}, "published": True},
    ],
    "categories.jsonl": [
        {"_key": 6, "name": {"en": "Ship"}, "published": True},
        {"_key": 4, "name": {"en": "Material"}, "published": True},
    ],
    "npcStations.jsonl": [
        {
            "_key": 60000001,
            "solarSystemID": 30000001,
            "ownerID": 1000137,
            "typeID": 1529,
            "operationID": 26,
        },
        {
            "_key": 60000002,
            "solarSystemID": 30000002,
            "ownerID": 1000035,
            "typeID": 1529,
        },
    ],
    "npcCorporations.jsonl": [
        {"_key": 1000137, "name": {"en": "DED"}, "tickerName": "DED"},
        {"_key": 1000035, "name": {"en": "Caldari Navy"}, "factionID": 500001},
    ],
}


def write_sde(directory: Path, files: dict[str, list[dict] | None] | None = None) -> Path:
    """Write the mini SDE into ``directory``.

    ``files`` replaces individual files; a value of None leaves that file out.
    """
    contents: dict[str, list[dict] | None] = dict(MINI_SDE)
    if files:
        contents.update(files)

    directory.mkdir(parents=True, exist_ok=True)
    for name, records in contents.items():
        if records is None:
            continue
        lines = [json.dumps(record) for record in records]
        (directory / name).write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def sde_dir(tmp_path):
    """Directory holding the mini SDE."""
    return write_sde(tmp_path / "sde")


@pytest.fixture
def make_sde(tmp_path):
    """Factory writing a variant of the mini SDE under tmp_path."""

    def _make(files=None, name="sde"):
        return write_sde(tmp_path / name, files)

    return _make


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from the global config and the process environment."""
    for var in ("APP_LOG_LEVEL", "APP_LOG_DIR", "SDE_SDE_PATH", "SDE_DOWNLOAD",
                "OUTPUT_OUTPUT_DIR", "OUTPUT_FORMAT", "OUTPUT_PRETTY"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    root_logger = logging.getLogger()
    root_level = root_logger.level
    yield
    reset_config()

    # Drop handlers installed by setup_logging; pytest capture handlers stay
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(root_level)
