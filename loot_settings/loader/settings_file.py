"""Reading LOOT's settings.toml."""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import tomlkit
from tomlkit.exceptions import ParseError

from loot_settings.exceptions import SettingsFileError

__all__ = ["DEFAULT_LANGUAGE", "read_settings_file", "settings_language"]

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def read_settings_file(path) -> Dict[str, Any]:
    """
    Parse a settings.toml file into plain Python data.

    Raises:
        SettingsFileError: the file cannot be opened or is not valid TOML.
    """
    settings_path = Path(path)
    try:
        # Read bytes so UTF-8 paths and content behave the same on every OS.
        text = settings_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SettingsFileError(
            f"{settings_path} could not be opened for parsing: {exc}"
        ) from exc

    try:
        document = tomlkit.parse(text)
    except ParseError as exc:
        raise SettingsFileError(f"{settings_path} is not valid TOML: {exc}") from exc

    logger.debug("Read settings from %s", settings_path)
    return document.unwrap()


def settings_language(table: Mapping[str, Any]) -> str:
    """The stored UI language, or DEFAULT_LANGUAGE."""
    language = table.get("language")
    return language if isinstance(language, str) and language else DEFAULT_LANGUAGE
