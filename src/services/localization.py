"""Language selection from SDE translation maps."""

from __future__ import annotations

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def get_localized_name(
    names: Mapping[str, str],
    context: str,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Pick one language from a translation map.

    Args:
        names: Translation map, e.g. ``{"en": "Rifter", "de": "Rifter"}``.
        context: What the name belongs to, for the log message ("type 587").
        language: Language key to select.

    Returns:
        The translated text, or an empty string when the key is missing.
    """
    name = names.get(language)
    if name is None:
        logger.debug("Missing '%s' name for %s", language, context)
        return ""
    return name


def get_location_name(names: Mapping[str, str], kind: str, location_id: int) -> str:
    """Location names fall back to ``"<Kind> <id>"`` when untranslated."""
    name = names.get(DEFAULT_LANGUAGE)
    if not name:
        return f"{kind} {location_id}"
    return name
