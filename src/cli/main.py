"""Main CLI entry point: ``sdeconvert``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import click

from data.writers import get_output_files
from services.conversion_service import ConversionReport, ConversionService
from services.security import get_true_security
from utils.config import Config, get_config
from utils.exceptions import ConversionAbortedError, SDEConvertError
from utils.logging_setup import setup_logging
from utils.progress_callback import ProgressPhase, ProgressUpdate

logger = logging.getLogger(__name__)

# Labels for the per-file summary, keyed by file stem
FILE_LABELS = {
    "mapSolarSystems": "systems",
    "mapRegions": "regions",
    "mapConstellations": "constellations",
    "mapLocationWormholeClasses": "classes",
    "invTypes": "types",
    "invGroups": "groups",
    "mapSolarSystemJumps": "jumps",
    "npcStations": "stations",
}


class ProgressPrinter:
    """Renders progress updates as short status lines."""

    def __init__(self) -> None:
        self._last_percent = -1
        self._last_message = ""

    def __call__(self, update: ProgressUpdate) -> None:
        if update.operation == "sde_download" and update.phase == ProgressPhase.FETCHING:
            fraction = update.fraction
            if fraction is None:
                return
            percent = int(fraction * 100) // 10 * 10
            if percent != self._last_percent:
                self._last_percent = percent
                click.echo(f"  {update.message} {percent}% ({update.detail})", err=True)
            return
        if update.phase in (ProgressPhase.STARTING, ProgressPhase.COMPLETE, ProgressPhase.ERROR):
            if update.message != self._last_message:
                self._last_message = update.message
                click.echo(update.message, err=True)


@click.group()
@click.version_option(package_name="eve-sde-converter", prog_name="sdeconvert")
def cli() -> None:
    """Convert the EVE Online Static Data Export to Wanderer/Fuzzwork format.

    Downloads the latest SDE from CCP (or uses an extracted SDE directory),
    parses the JSONL files and writes CSV or JSON files compatible with
    Wanderer's data format.
    """


@cli.command()
@click.option(
    "--sde-path",
    "-s",
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to an extracted SDE directory",
)
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: ./output)",
)
@click.option("--download", "-d", is_flag=True, help="Download latest SDE from CCP")
@click.option(
    "--passthrough",
    "-p",
    "passthrough_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory with Wanderer JSON files to copy",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["csv", "json"], case_sensitive=False),
    help="Output format (default: csv)",
)
@click.option(
    "--pretty/--no-pretty",
    default=None,
    help="Pretty-print JSON output (only applies to JSON format)",
)
@click.option("--sde-url", help="URL to download the SDE archive from")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def convert(
    sde_path: Path | None,
    output_dir: Path | None,
    download: bool,
    passthrough_dir: Path | None,
    output_format: str | None,
    pretty: bool | None,
    sde_url: str | None,
    verbose: bool,
) -> None:
    """Convert the SDE into Wanderer's data files.

    Examples:

    \b
      # Download latest SDE and convert to CSV (default)
      sdeconvert convert --download --output ./output

    \b
      # Convert an existing SDE directory to JSON
      sdeconvert convert --sde-path ./sde --output ./output --format json
    """
    try:
        config = Config.from_overrides(
            sde_path=sde_path,
            download=download or None,
            download_url=sde_url,
            output_dir=output_dir,
            format=output_format.lower() if output_format else None,
            pretty=pretty,
            passthrough_dir=passthrough_dir,
        )
        config.validate()
    except SDEConvertError as e:
        raise click.UsageError(str(e)) from e
    get_config(config)

    setup_logging(log_level="DEBUG" if verbose else None)
    logger.debug("Configuration: %r", config)

    service = ConversionService(config, progress_callback=ProgressPrinter())
    try:
        report = asyncio.run(service.run())
    except KeyboardInterrupt:
        click.echo("\nInterrupt received, shutting down...", err=True)
        raise SystemExit(130) from None
    except ConversionAbortedError as e:
        _echo_validation(e.result.warnings, e.result.errors)
        raise click.ClickException(
            f"validation failed with {len(e.result.errors)} errors"
        ) from e
    except SDEConvertError as e:
        raise click.ClickException(str(e)) from e

    _echo_report(report)


@cli.command()
def version() -> None:
    """Print the version number."""
    app = get_config().app
    click.echo(f"sdeconvert version {app.version}")


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("values", nargs=-1, required=True, type=float)
def security(values: tuple[float, ...]) -> None:
    """Show the in-game security status for raw SDE security values."""
    for value in values:
        click.echo(f"{value} -> {get_true_security(value):.1f}")


def _echo_validation(warnings: list[str], errors: list[str]) -> None:
    if warnings:
        click.echo("\nWarnings:")
        for warning in warnings:
            click.echo(f"  - {warning}")
    if errors:
        click.echo("\nErrors:")
        for error in errors:
            click.echo(f"  - {error}")


def _echo_report(report: ConversionReport) -> None:
    _echo_validation(report.validation.warnings, [])
    click.echo(f"\nConversion complete! Output written to: {report.output_dir}")
    click.echo(f"Generated files ({report.output_format} format):")
    for filename in get_output_files(report.output_format):
        label = FILE_LABELS.get(Path(filename).stem, "records")
        click.echo(f"  - {filename} ({report.files.get(filename, 0)} {label})")
    if report.passthrough_files:
        click.echo(f"Copied {len(report.passthrough_files)} passthrough files")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
