"""Tests for the size checks on converted data."""

import logging

from models.app import (
    Constellation,
    ConvertedData,
    Region,
    SolarSystem,
    UniverseData,
)
from services.validation import (
    MIN_REGIONS,
    MIN_SOLAR_SYSTEMS,
    validate_converted_data,
)


def small_universe():
    return ConvertedData(
        universe=UniverseData(
            regions=[Region(region_id=1, region_name="R")],
            constellations=[
                Constellation(region_id=1, constellation_id=2, constellation_name="C")
            ],
            solar_systems=[
                SolarSystem(
                    region_id=1,
                    constellation_id=2,
                    solar_system_id=3,
                    solar_system_name="S",
                )
            ],
        )
    )


class TestValidateConvertedData:
    """Warnings for short collections, errors for missing map data."""

    def test_empty_data(self):
        result = validate_converted_data(ConvertedData())

        assert not result.is_valid
        assert result.errors == [
            "No solar systems found",
            "No regions found",
            "No constellations found",
        ]

    def test_small_data_only_warns(self):
        result = validate_converted_data(small_universe())

        assert result.is_valid
        assert result.regions == 1
        assert (
            f"Solar system count (1) is below expected minimum ({MIN_SOLAR_SYSTEMS})"
            in result.warnings
        )
        assert (
            f"Region count (1) is below expected minimum ({MIN_REGIONS})"
            in result.warnings
        )
        assert "Ship type count (0) is below expected minimum (500)" in result.warnings

    def test_full_size_has_no_warnings(self):
        data = small_universe()
        data.universe.regions = [
            Region(region_id=i, region_name=f"R{i}") for i in range(MIN_REGIONS)
        ]
        result = validate_converted_data(data)
        assert not any(w.startswith("Region count") for w in result.warnings)

    def test_findings_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="services.validation"):
            validate_converted_data(ConvertedData())

        messages = [r.getMessage() for r in caplog.records]
        assert "No regions found" in messages
        assert any("below expected minimum" in m for m in messages)
