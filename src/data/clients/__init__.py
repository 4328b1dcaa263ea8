"""HTTP clients for external data sources."""

from .sde_client import DownloadResult, SDEClient

__all__ = ["DownloadResult", "SDEClient"]
