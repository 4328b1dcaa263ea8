"""Service layer for the SDE converter.

Domain-oriented submodules:
    security: in-game security status display rounding
    bounds: location bounding boxes & faction inheritance
    filters: ship category filtering of groups and types
    localization: English names from SDE translation maps
    transform_service: raw records -> sorted output model
    validation: heuristic output-size checks
    conversion_service: download, parse, transform & write

"""

from .conversion_service import ConversionReport, ConversionService
from .security import get_true_security, round_security, truncate_to_two_digits
from .transform_service import TransformService
from .validation import validate_converted_data

__all__ = [
    "ConversionReport",
    "ConversionService",
    "TransformService",
    "get_true_security",
    "round_security",
    "truncate_to_two_digits",
    "validate_converted_data",
]
