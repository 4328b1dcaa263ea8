"""Data layer: SDE parsing, download client and output writers."""

from .sde_provider import SDEProvider, SDERecords

__all__ = [
    "SDEProvider",
    "SDERecords",
]
