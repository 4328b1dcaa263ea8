"""JSON output: one array of camelCase objects per dataset."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .base import BaseWriter


class JSONWriter(BaseWriter):
    """Writes one JSON file per dataset."""

    extension = ".json"

    def __init__(self, output_dir: Path | str, pretty: bool = True):
        super().__init__(output_dir)
        self.pretty = pretty

    def write_dataset(self, stem: str, records: Sequence[BaseModel]) -> None:
        # Absent optional fields (faction, sun type, ...) are left out
        payload = [
            record.model_dump(mode="json", by_alias=True, exclude_none=True)
            for record in records
        ]

        def write(f: Any) -> None:
            json.dump(payload, f, indent=2 if self.pretty else None)
            f.write("\n")

        self._atomic_write(f"{stem}{self.extension}", write)
