"""Command-line interface for the SDE converter."""

from .main import cli

__all__ = ["cli"]
