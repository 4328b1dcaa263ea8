"""sde_metadata.json: which SDE build produced the output, and when."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from models.app import SDEMetadata, SDEVersionInfo
from utils.exceptions import WriterError

logger = logging.getLogger(__name__)

METADATA_FILE = "sde_metadata.json"


def write_metadata(
    output_dir: Path | str,
    version: SDEVersionInfo,
    generated_by: str,
) -> Path:
    """Write the metadata file next to the converted data.

    Args:
        output_dir: Output directory.
        version: SDE build the data was converted from.
        generated_by: Tool name and version.

    Returns:
        Path of the written file.
    """
    metadata = SDEMetadata(
        sde_version=version.version,
        release_date=version.release_date or None,
        generated_by=generated_by,
        generated_at=datetime.now(UTC),
    )
    path = Path(output_dir) / METADATA_FILE
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            metadata.model_dump_json(indent=2, exclude_none=True) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise WriterError(f"Failed to write {METADATA_FILE}: {e}") from e

    logger.info(f"Wrote {path}")
    return path
