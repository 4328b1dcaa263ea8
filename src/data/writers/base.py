"""Shared writer behaviour: output file set, atomic writes, passthrough copy."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

from pydantic import BaseModel

from models.app import ConvertedData
from utils.exceptions import WriterError

logger = logging.getLogger(__name__)

# Output datasets in write order: (file stem, accessor on ConvertedData)
DATASETS: tuple[tuple[str, Callable[[ConvertedData], Sequence[BaseModel]]], ...] = (
    ("mapSolarSystems", lambda d: d.universe.solar_systems),
    ("mapRegions", lambda d: d.universe.regions),
    ("mapConstellations", lambda d: d.universe.constellations),
    ("mapLocationWormholeClasses", lambda d: d.wormhole_classes),
    ("invTypes", lambda d: d.inv_types),
    ("invGroups", lambda d: d.inv_groups),
    ("mapSolarSystemJumps", lambda d: d.system_jumps),
    ("npcStations", lambda d: d.npc_stations),
)

# Community-maintained files copied verbatim when present
PASSTHROUGH_FILES = (
    "wormholes.json",
    "wormholeClasses.json",
    "wormholeClassesInfo.json",
    "wormholeSystems.json",
    "triglavianSystems.json",
    "effects.json",
    "shatteredConstellations.json",
    "sunTypes.json",
    "triglavianEffectsByFaction.json",
)


class BaseWriter(ABC):
    """Writes every dataset of a ``ConvertedData`` into one directory."""

    extension: str = ""

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir)

    def output_files(self) -> list[str]:
        """File names written by ``write_all``, in write order."""
        return [f"{stem}{self.extension}" for stem, _ in DATASETS]

    def write_all(self, data: ConvertedData) -> dict[str, int]:
        """Write every dataset.

        Returns:
            Mapping of file name to number of records written.

        Raises:
            WriterError: If the directory or a file cannot be written.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriterError(f"Failed to create output directory: {e}") from e

        written: dict[str, int] = {}
        for stem, accessor in DATASETS:
            records = accessor(data)
            filename = f"{stem}{self.extension}"
            self.write_dataset(stem, records)
            written[filename] = len(records)
            logger.debug(f"Wrote {len(records)} records to {filename}")

        logger.info(f"Wrote {len(written)} files to {self.output_dir}")
        return written

    @abstractmethod
    def write_dataset(self, stem: str, records: Sequence[BaseModel]) -> None:
        """Write one dataset to ``<stem><extension>``."""

    def copy_passthrough_files(self, source_dir: Path | str) -> list[str]:
        """Copy the known community JSON files that exist in ``source_dir``.

        Missing files are skipped.

        Returns:
            Names of the files copied.
        """
        source_dir = Path(source_dir)
        copied: list[str] = []
        for name in PASSTHROUGH_FILES:
            src = source_dir / name
            if not src.is_file():
                logger.debug(f"Passthrough file not found, skipping: {src}")
                continue
            try:
                shutil.copyfile(src, self.output_dir / name)
            except OSError as e:
                raise WriterError(f"Failed to copy {name}: {e}") from e
            copied.append(name)

        logger.info(f"Copied {len(copied)} passthrough files from {source_dir}")
        return copied

    def _atomic_write(self, filename: str, write: Callable[[object], None]) -> Path:
        """Write through a temp file in the output directory, then replace."""
        target = self.output_dir / filename
        fd, tmp_name = tempfile.mkstemp(dir=self.output_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                write(f)
            os.replace(tmp_name, target)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise WriterError(f"Failed to write {filename}: {e}") from e
        return target
