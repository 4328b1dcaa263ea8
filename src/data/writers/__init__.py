"""Output writers for converted SDE data."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.exceptions import ConfigurationError

from .base import DATASETS, PASSTHROUGH_FILES, BaseWriter
from .csv_writer import CSVWriter
from .json_writer import JSONWriter
from .metadata import METADATA_FILE, write_metadata

if TYPE_CHECKING:
    from utils.config import OutputConfig


def create_writer(output: OutputConfig) -> BaseWriter:
    """Writer for the configured output format.

    Raises:
        ConfigurationError: For an unsupported format.
    """
    if output.format == "csv":
        return CSVWriter(output.output_dir)
    if output.format == "json":
        return JSONWriter(output.output_dir, pretty=output.pretty)
    raise ConfigurationError(f"unsupported output format: {output.format}")


def get_output_files(output_format: str) -> list[str]:
    """File names written for ``output_format`` (empty for unknown formats)."""
    extensions = {"csv": ".csv", "json": ".json"}
    extension = extensions.get(output_format)
    if extension is None:
        return []
    return [f"{stem}{extension}" for stem, _ in DATASETS]


__all__ = [
    "DATASETS",
    "METADATA_FILE",
    "PASSTHROUGH_FILES",
    "BaseWriter",
    "CSVWriter",
    "JSONWriter",
    "create_writer",
    "get_output_files",
    "write_metadata",
]
