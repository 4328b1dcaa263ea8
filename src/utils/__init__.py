"""Utility functions and classes for the SDE converter."""

from .config import Config, get_config, reload_config, reset_config
from .exceptions import (
    ConfigurationError,
    ConversionAbortedError,
    DataProviderError,
    SDEConvertError,
    SDEDownloadError,
    SDEError,
    SDEParseError,
    WriterError,
)
from .jsonl_parser import JSONLParser
from .logging_setup import setup_logging
from .progress_callback import (
    ProgressCallback,
    ProgressPhase,
    ProgressUpdate,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "ConversionAbortedError",
    "DataProviderError",
    "JSONLParser",
    "ProgressCallback",
    "ProgressPhase",
    "ProgressUpdate",
    "SDEConvertError",
    "SDEDownloadError",
    "SDEError",
    "SDEParseError",
    "WriterError",
    "get_config",
    "reload_config",
    "reset_config",
    "setup_logging",
]
