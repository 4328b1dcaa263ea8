"""SDE Client for version checks and SDE downloads.

Handles:
- Reading the latest published build from CCP's latest.jsonl
- The ``.last-sde-version`` marker in the output directory
- Cheap change detection with ETag/If-None-Match
- Streaming the JSONL archive to disk and extracting it safely
"""

from __future__ import annotations

import asyncio
import json
import logging
import shutil
import tempfile
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any

import httpx

from data.parsers.sde_jsonl import SDEJsonlParser
from models.app import SDEVersionInfo
from utils.exceptions import SDEDownloadError, SDEError
from utils.progress_callback import ProgressCallback, ProgressPhase, ProgressUpdate

if TYPE_CHECKING:
    from utils.config import Config

logger = logging.getLogger(__name__)

VERSION_FILE = ".last-sde-version"
ARCHIVE_NAME = "sde.zip"
CHUNK_SIZE = 64 * 1024


@dataclass
class DownloadResult:
    """Where a downloaded SDE was extracted."""

    sde_path: Path
    work_dir: Path


def is_safe_member(name: str) -> bool:
    """True if an archive member name stays inside the extraction directory."""
    if not name or "\\" in name:
        return False
    path = PurePosixPath(name)
    if path.is_absolute() or ".." in path.parts:
        return False
    # Windows drive letters ("C:...")
    return not (len(name) > 1 and name[1] == ":")


def locate_sde_root(directory: Path) -> Path:
    """Directory holding the JSONL files: ``directory`` or its single subdirectory."""
    marker = SDEJsonlParser.TYPES_FILE
    if (directory / marker).exists():
        return directory
    candidates = [p for p in directory.iterdir() if p.is_dir() and (p / marker).exists()]
    if len(candidates) == 1:
        return candidates[0]
    return directory


class SDEClient:
    """Client for SDE version checks and downloads."""

    def __init__(
        self,
        config: Config,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the client.

        Args:
            config: Application configuration.
            transport: Optional httpx transport (tests pass a MockTransport).
            progress_callback: Optional callback for download/extract progress.
        """
        self.config = config
        self.progress_callback = progress_callback
        self._transport = transport
        self._retry_delay = 1.0

    def _http_client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=timeout,
            transport=self._transport,
            follow_redirects=True,
            headers={"User-Agent": self.config.app.computed_user_agent},
        )

    def _emit_progress(
        self,
        phase: ProgressPhase,
        current: int,
        total: int,
        message: str,
        detail: str | None = None,
    ) -> None:
        """Emit progress update if callback is configured."""
        if self.progress_callback:
            update = ProgressUpdate(
                operation="sde_download",
                phase=phase,
                current=current,
                total=total,
                message=message,
                detail=detail,
            )
            self.progress_callback(update)

    # ------------------------------------------------------------------
    # Version checking
    # ------------------------------------------------------------------

    async def get_latest_version(self) -> SDEVersionInfo:
        """Fetch the latest SDE build from CCP.

        Returns:
            Build number, release date and ETag of the latest build.

        Raises:
            SDEDownloadError: On HTTP failure or when no ``sde`` record exists.
        """
        url = self.config.sde.latest_url
        async with self._http_client(self.config.sde.request_timeout) as client:
            response = await self._retry_request(client, "GET", url)

        if response.status_code != 200:
            raise SDEDownloadError(
                f"Failed to fetch latest version: unexpected status code {response.status_code}"
            )

        for line in response.text.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                logger.debug("Skipping malformed line in latest.jsonl: %s", line[:80])
                continue
            if not isinstance(record, dict) or record.get("_key") != "sde":
                continue
            build_number = record.get("buildNumber")
            if not build_number:
                continue
            return SDEVersionInfo(
                build_number=int(build_number),
                release_date=str(record.get("releaseDate") or ""),
                etag=response.headers.get("ETag"),
            )

        raise SDEDownloadError("SDE version not found in latest.jsonl")

    def get_stored_version(self, directory: Path | str) -> str:
        """Read the stored build number, or "" when none was stored.

        Raises:
            SDEError: If the marker exists but cannot be read.
        """
        path = Path(directory) / VERSION_FILE
        if not path.exists():
            return ""
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise SDEError(f"Failed to read version file: {e}") from e

    def store_version(self, directory: Path | str, version: str) -> None:
        """Persist the build number the output was generated from.

        Raises:
            SDEError: If the marker cannot be written.
        """
        directory = Path(directory)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            (directory / VERSION_FILE).write_text(version, encoding="utf-8")
        except OSError as e:
            raise SDEError(f"Failed to write version file: {e}") from e
        logger.info(f"Stored SDE version {version}")

    async def needs_update(self, directory: Path | str) -> tuple[bool, SDEVersionInfo]:
        """Compare the stored build with the latest published one.

        Returns:
            Tuple of (update_needed, latest_version).
        """
        latest = await self.get_latest_version()
        logger.info(f"Latest SDE version: {latest.version}")

        stored = self.get_stored_version(directory)
        if not stored:
            logger.info("No stored SDE version found, update needed")
            return True, latest

        needs_update = stored != latest.version
        if needs_update:
            logger.info(f"SDE update available: {stored} -> {latest.version}")
        else:
            logger.info(f"SDE is up to date: {stored}")
        return needs_update, latest

    async def check_etag(
        self, stored_etag: str | None, url: str | None = None
    ) -> tuple[bool, str]:
        """Check for a change with a HEAD request and If-None-Match.

        Args:
            stored_etag: ETag seen last time, if any.
            url: URL to check (defaults to latest.jsonl).

        Returns:
            Tuple of (changed, current_etag).

        Raises:
            SDEDownloadError: On any status other than 200 or 304.
        """
        headers = {"If-None-Match": stored_etag} if stored_etag else {}
        async with self._http_client(self.config.sde.request_timeout) as client:
            response = await self._retry_request(
                client, "HEAD", url or self.config.sde.latest_url, headers=headers
            )

        current_etag = response.headers.get("ETag", "")
        if response.status_code == 304:
            return False, current_etag
        if response.status_code == 200:
            return (stored_etag or "") != current_etag, current_etag
        raise SDEDownloadError(
            f"Failed to check ETag: unexpected status code {response.status_code}"
        )

    # ------------------------------------------------------------------
    # Download and extraction
    # ------------------------------------------------------------------

    async def download(self, dest_dir: Path | str) -> Path:
        """Stream the SDE archive into ``dest_dir``.

        Returns:
            Path of the downloaded archive.

        Raises:
            SDEDownloadError: On HTTP or file errors.
        """
        dest_dir = Path(dest_dir)
        dest_dir.mkdir(parents=True, exist_ok=True)
        zip_path = dest_dir / ARCHIVE_NAME
        url = self.config.sde.download_url

        logger.info(f"Downloading SDE from {url}")
        self._emit_progress(ProgressPhase.STARTING, 0, 0, "Starting SDE download...")

        try:
            async with self._http_client(self.config.sde.download_timeout) as client:
                async with client.stream("GET", url) as response:
                    if response.status_code != 200:
                        raise SDEDownloadError(
                            f"Failed to download SDE: unexpected status code {response.status_code}"
                        )
                    total_bytes = int(response.headers.get("Content-Length", 0))
                    downloaded = 0
                    with open(zip_path, "wb") as f:
                        async for chunk in response.aiter_bytes(CHUNK_SIZE):
                            f.write(chunk)
                            downloaded += len(chunk)
                            self._emit_progress(
                                ProgressPhase.FETCHING,
                                downloaded,
                                total_bytes,
                                "Downloading SDE archive...",
                                detail=_format_bytes(downloaded),
                            )
        except httpx.HTTPError as e:
            raise SDEDownloadError(f"Failed to download SDE: {e}") from e
        except OSError as e:
            raise SDEDownloadError(f"Failed to write SDE file: {e}") from e

        logger.info(f"Downloaded {_format_bytes(downloaded)} to {zip_path}")
        return zip_path

    def extract(self, zip_path: Path | str, dest_dir: Path | str) -> Path:
        """Extract the archive, refusing members that escape ``dest_dir``.

        Returns:
            Directory containing the extracted JSONL files.

        Raises:
            SDEDownloadError: On an unsafe member name or a corrupt archive.
        """
        dest_dir = Path(dest_dir)
        dest_dir.mkdir(parents=True, exist_ok=True)
        try:
            with zipfile.ZipFile(zip_path) as zf:
                members = zf.infolist()
                for member in members:
                    if not is_safe_member(member.filename):
                        raise SDEDownloadError(
                            f"illegal file path in archive: {member.filename}"
                        )
                total = len(members)
                for idx, member in enumerate(members, start=1):
                    target = dest_dir / member.filename
                    if member.is_dir():
                        target.mkdir(parents=True, exist_ok=True)
                        continue
                    target.parent.mkdir(parents=True, exist_ok=True)
                    with zf.open(member) as src, open(target, "wb") as dst:
                        shutil.copyfileobj(src, dst)
                    self._emit_progress(
                        ProgressPhase.PROCESSING,
                        idx,
                        total,
                        "Extracting SDE files...",
                        detail=member.filename,
                    )
        except zipfile.BadZipFile as e:
            raise SDEDownloadError(f"failed to open ZIP file: {e}") from e
        except OSError as e:
            raise SDEDownloadError(f"failed to extract SDE: {e}") from e

        logger.info(f"Extracted {total} files to {dest_dir}")
        return locate_sde_root(dest_dir)

    def validate_sde_dir(self, sde_path: Path | str) -> None:
        """Check the directory has every required JSONL file.

        Raises:
            SDEError: Naming the first missing file.
        """
        parser = SDEJsonlParser(sde_path)
        if not parser.file_path.is_dir():
            raise SDEError(f"SDE directory not found: {sde_path}")
        missing = parser.missing_required_files()
        if missing:
            raise SDEError(f"missing expected file: {missing[0]}")
        logger.debug("SDE directory validated: %s", sde_path)

    async def download_and_extract(self) -> DownloadResult:
        """Download, extract and validate the SDE in a fresh temp directory.

        The temp directory is removed again if any step fails; on success
        the caller owns it and should remove ``work_dir`` when done.

        Returns:
            The extracted SDE directory and the temp directory holding it.
        """
        work_dir = Path(tempfile.mkdtemp(prefix="sde-"))
        try:
            zip_path = await self.download(work_dir)
            sde_path = self.extract(zip_path, work_dir / "sde")
            zip_path.unlink(missing_ok=True)
            self.validate_sde_dir(sde_path)
        except Exception:
            shutil.rmtree(work_dir, ignore_errors=True)
            self._emit_progress(ProgressPhase.ERROR, 0, 0, "SDE download failed")
            raise

        self._emit_progress(ProgressPhase.COMPLETE, 1, 1, "SDE downloaded")
        return DownloadResult(sde_path=sde_path, work_dir=work_dir)

    async def _retry_request(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        max_retries: int = 3,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make HTTP request with retry logic for rate limits and server errors.

        Args:
            client: HTTP client to use.
            method: HTTP method (GET, HEAD, ...).
            url: URL to request.
            max_retries: Maximum retry attempts.
            **kwargs: Additional arguments for request.

        Returns:
            HTTP response (the last one if every attempt hit 429/5xx).

        Raises:
            SDEDownloadError: If every attempt failed at the transport level.
        """
        delay = self._retry_delay
        last_error: Exception | None = None
        response: httpx.Response | None = None

        for attempt in range(max_retries):
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                last_error = e
                response = None
                logger.warning(f"Request failed (attempt {attempt + 1}): {e}")
                if attempt < max_retries - 1:
                    await asyncio.sleep(delay)
                    delay = min(delay * 2, 60)
                continue

            if response.status_code == 429 and attempt < max_retries - 1:
                try:
                    retry_after = float(response.headers.get("Retry-After", delay))
                except ValueError:
                    retry_after = delay
                logger.warning(f"Rate limited (429), retrying after {retry_after}s...")
                await asyncio.sleep(retry_after)
                delay = min(delay * 2, 60)
                continue

            if 500 <= response.status_code < 600 and attempt < max_retries - 1:
                logger.warning(
                    f"Server error ({response.status_code}), retrying in {delay}s..."
                )
                await asyncio.sleep(delay)
                delay = min(delay * 2, 60)
                continue

            return response

        if response is not None:
            return response
        raise SDEDownloadError(
            f"Request failed after {max_retries} retries: {last_error}"
        ) from last_error


def _format_bytes(size: int) -> str:
    for unit, factor in (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024)):
        if size >= factor:
            return f"{size / factor:.2f} {unit}"
    return f"{size} B"
