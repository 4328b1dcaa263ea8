"""Tests for the end-to-end conversion run."""

import io
import json
import zipfile

import httpx
import pytest

from data.clients import SDEClient
from data.clients.sde_client import VERSION_FILE
from data.writers import METADATA_FILE
from services.conversion_service import ConversionService
from utils.config import Config
from utils.exceptions import ConfigurationError, ConversionAbortedError, SDEError

LATEST_URL = "https://sde.example.test/tranquility/latest.jsonl"
DOWNLOAD_URL = "https://sde.example.test/sde-latest-jsonl.zip"


class TestLocalSDE:
    """Converting an already extracted SDE directory."""

    @pytest.mark.asyncio
    async def test_csv_run(self, sde_dir, tmp_path):
        out = tmp_path / "out"
        config = Config.from_overrides(sde_path=sde_dir, output_dir=out)

        report = await ConversionService(config).run()

        assert report.output_format == "csv"
        assert report.files["mapSolarSystems.csv"] == 3
        assert report.files["mapSolarSystemJumps.csv"] == 2
        assert report.files["npcStations.csv"] == 1
        assert report.validation.is_valid
        assert report.version is None
        assert not (out / METADATA_FILE).exists()

        lines = (out / "mapRegions.csv").read_text().splitlines()
        assert lines == ["regionID,regionName", "10000001,Derelik", "11000001,A-R00001"]

    @pytest.mark.asyncio
    async def test_json_run_with_passthrough(self, sde_dir, tmp_path):
        passthrough = tmp_path / "wanderer"
        passthrough.mkdir()
        (passthrough / "wormholeClasses.json").write_text("[]")
        out = tmp_path / "out"
        config = Config.from_overrides(
            sde_path=sde_dir,
            output_dir=out,
            format="json",
            passthrough_dir=passthrough,
        )

        report = await ConversionService(config).run()

        assert report.passthrough_files == ["wormholeClasses.json"]
        assert (out / "wormholeClasses.json").exists()
        systems = json.loads((out / "mapSolarSystems.json").read_text())
        assert [s["solarSystemID"] for s in systems] == [30000001, 30000002, 31000005]
        assert systems[0]["factionID"] == 500007

    @pytest.mark.asyncio
    async def test_output_is_reproducible(self, sde_dir, tmp_path):
        for name in ("a", "b"):
            config = Config.from_overrides(sde_path=sde_dir, output_dir=tmp_path / name)
            await ConversionService(config).run()

        for path in (tmp_path / "a").iterdir():
            assert path.read_bytes() == (tmp_path / "b" / path.name).read_bytes()

    @pytest.mark.asyncio
    async def test_validation_errors_block_writing(self, make_sde, tmp_path):
        sde = make_sde({"mapSolarSystems.jsonl": []})
        out = tmp_path / "out"
        config = Config.from_overrides(sde_path=sde, output_dir=out)

        with pytest.raises(ConversionAbortedError) as exc_info:
            await ConversionService(config).run()

        assert exc_info.value.result.errors == ["No solar systems found"]
        assert not (out / "mapRegions.csv").exists()

    @pytest.mark.asyncio
    async def test_missing_file(self, make_sde, tmp_path):
        sde = make_sde({"types.jsonl": None})
        config = Config.from_overrides(sde_path=sde, output_dir=tmp_path / "out")

        with pytest.raises(SDEError, match="missing expected file: types.jsonl"):
            await ConversionService(config).run()

    @pytest.mark.asyncio
    async def test_no_source(self, tmp_path):
        config = Config.from_overrides(output_dir=tmp_path)
        with pytest.raises(ConfigurationError):
            await ConversionService(config).run()

    @pytest.mark.asyncio
    async def test_no_source_without_validation(self, tmp_path, monkeypatch):
        config = Config.from_overrides(output_dir=tmp_path)
        monkeypatch.setattr(config, "validate", lambda: None)

        with pytest.raises(ConfigurationError, match="--sde-path or --download"):
            await ConversionService(config).run()


class TestDownloadedSDE:
    """Download, caching by build number and the metadata file."""

    @pytest.mark.asyncio
    async def test_download_then_reuse(self, sde_dir, tmp_path):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            for path in sorted(sde_dir.iterdir()):
                zf.writestr(path.name, path.read_bytes())
        payload = buffer.getvalue()
        downloads = []

        def handler(request):
            if str(request.url) == LATEST_URL:
                body = json.dumps(
                    {"_key": "sde", "buildNumber": 3142455, "releaseDate": "2025-11-20"}
                )
                return httpx.Response(200, text=body)
            downloads.append(request)
            return httpx.Response(200, content=payload)

        out = tmp_path / "out"
        config = Config.from_overrides(
            download=True,
            output_dir=out,
            latest_url=LATEST_URL,
            download_url=DOWNLOAD_URL,
        )
        client = SDEClient(config, transport=httpx.MockTransport(handler))

        report = await ConversionService(config, sde_client=client).run()

        assert report.sde_path == out / "sde"
        assert (out / "sde" / "mapRegions.jsonl").exists()
        assert (out / VERSION_FILE).read_text() == "3142455"
        metadata = json.loads((out / METADATA_FILE).read_text())
        assert metadata["sde_version"] == "3142455"
        assert metadata["release_date"] == "2025-11-20"
        assert len(downloads) == 1

        await ConversionService(config, sde_client=client).run()
        assert len(downloads) == 1
