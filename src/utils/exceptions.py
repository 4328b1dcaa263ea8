"""Custom exception hierarchy for the SDE converter.

Provides structured exception classes for the outer layers (configuration,
download, parsing, writing). The transformation core reports problems as
data on a ``ValidationResult`` instead of raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.app import ValidationResult


class SDEConvertError(Exception):
    """Base exception for all SDE converter errors."""

    pass


class ConfigurationError(SDEConvertError):
    """Exception raised for configuration-related errors."""

    pass


class DataProviderError(SDEConvertError):
    """Base exception for data provider errors."""

    pass


class SDEError(DataProviderError):
    """Exception raised for SDE-related errors."""

    pass


class SDEDownloadError(SDEError):
    """Exception raised when SDE download or extraction fails."""

    pass


class SDEParseError(SDEError):
    """Exception raised when SDE parsing fails."""

    pass


class WriterError(SDEConvertError):
    """Exception raised when output files cannot be written."""

    pass


class ConversionAbortedError(SDEConvertError):
    """Raised when the converted data fails validation.

    Attributes:
        result: The validation result carrying the blocking errors.
    """

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__("validation failed: " + "; ".join(result.errors))
