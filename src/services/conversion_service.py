"""End-to-end conversion: obtain the SDE, transform it and write the output."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from data.clients import SDEClient
from data.parsers import SDEJsonlParser
from data.sde_provider import SDEProvider
from data.writers import create_writer, write_metadata
from models.app import SDEVersionInfo, ValidationResult
from services.transform_service import TransformService
from utils.config import Config
from utils.exceptions import (
    ConfigurationError,
    ConversionAbortedError,
    SDEConvertError,
    SDEError,
)
from utils.progress_callback import ProgressCallback

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    """Outcome of a successful conversion run."""

    sde_path: Path
    output_dir: Path
    output_format: str
    files: dict[str, int]
    validation: ValidationResult
    version: SDEVersionInfo | None = None
    passthrough_files: list[str] = field(default_factory=list)


class ConversionService:
    """Runs the conversion described by a ``Config``."""

    def __init__(
        self,
        config: Config,
        *,
        sde_client: SDEClient | None = None,
        transform_service: TransformService | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the conversion service.

        Args:
            config: Validated application configuration.
            sde_client: Client used for version checks and downloads.
            transform_service: Transformation pipeline.
            progress_callback: Optional callback for download and parse progress.
        """
        self.config = config
        self._progress_callback = progress_callback
        self._client = sde_client or SDEClient(
            config, progress_callback=progress_callback
        )
        self._transformer = transform_service or TransformService()

    async def run(self) -> ConversionReport:
        """Convert the SDE to the configured output.

        Raises:
            ConfigurationError: If no SDE source or output directory is configured.
            SDEError: If the SDE cannot be downloaded, found or parsed.
            ConversionAbortedError: If the converted data has validation errors.
            WriterError: If output files cannot be written.
        """
        self.config.validate()
        output_dir = Path(self.config.output.output_dir)

        version: SDEVersionInfo | None = None
        if self.config.sde.download:
            sde_path, version = await self._ensure_downloaded(output_dir)
        elif self.config.sde.sde_path is not None:
            sde_path = Path(self.config.sde.sde_path)
        else:
            raise ConfigurationError(
                "either --sde-path or --download must be specified"
            )

        self._client.validate_sde_dir(sde_path)
        logger.info(f"Using SDE at: {sde_path}")

        provider = SDEProvider(
            SDEJsonlParser(sde_path), progress_callback=self._progress_callback
        )
        records = provider.load_all()

        data = self._transformer.transform(records)
        validation = self._transformer.validate(data)
        if not validation.is_valid:
            raise ConversionAbortedError(validation)

        writer = create_writer(self.config.output)
        files = writer.write_all(data)

        if version is not None:
            try:
                write_metadata(
                    output_dir,
                    version,
                    generated_by=f"{self.config.app.name}/{self.config.app.version}",
                )
            except SDEConvertError as e:
                logger.warning(f"Could not write metadata file: {e}")

        passthrough: list[str] = []
        if self.config.output.passthrough_dir is not None:
            passthrough = writer.copy_passthrough_files(
                self.config.output.passthrough_dir
            )

        logger.info(f"Conversion complete, output written to {output_dir}")
        return ConversionReport(
            sde_path=sde_path,
            output_dir=output_dir,
            output_format=self.config.output.format,
            files=files,
            validation=validation,
            version=version,
            passthrough_files=passthrough,
        )

    async def _ensure_downloaded(
        self, output_dir: Path
    ) -> tuple[Path, SDEVersionInfo | None]:
        """Download the SDE unless the cached copy matches the latest build.

        Returns:
            Tuple of (sde_path, latest_version or None if the check failed).
        """
        sde_path = (
            Path(self.config.sde.sde_path)
            if self.config.sde.sde_path is not None
            else output_dir / "sde"
        )

        version: SDEVersionInfo | None = None
        try:
            needs_update, version = await self._client.needs_update(output_dir)
        except SDEError as e:
            logger.warning(f"Could not check SDE version: {e}")
            needs_update = True

        if not sde_path.exists():
            needs_update = True

        if not needs_update:
            logger.info("SDE is up to date, using cached version")
            return sde_path, version

        logger.info("Downloading latest SDE...")
        result = await self._client.download_and_extract()
        try:
            if sde_path.exists():
                shutil.rmtree(sde_path)
            sde_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(result.sde_path), str(sde_path))
        except OSError as e:
            raise SDEError(f"failed to move SDE to {sde_path}: {e}") from e
        finally:
            shutil.rmtree(result.work_dir, ignore_errors=True)
        logger.info(f"SDE downloaded and extracted to: {sde_path}")

        if version is not None:
            try:
                self._client.store_version(output_dir, version.version)
            except SDEError as e:
                logger.warning(f"Could not store SDE version: {e}")

        return sde_path, version
