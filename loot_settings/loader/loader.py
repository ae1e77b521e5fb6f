"""
SettingsTableLoader — picks the stored settings for the game LOOT was
started for.

Each entry of the table's ``games`` array is read into a RecordOutcome:

  • malformed record / unknown game type → skipped, scan continues
  • valid record of another game type    → skipped, scan continues
  • valid record of the requested type   → stored overrides applied, scan stops
  • local_path and local_folder both set → ConflictingFields, load aborts

If no record matches, the baseline settings for the requested game are
returned.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from loot_settings.exceptions import (
    ConflictingFields,
    LootSettingsError,
    MalformedRecord,
)
from loot_settings.facts import GameId
from loot_settings.logging_config import DiagnosticCallback, Severity, logging_diagnostics
from loot_settings.migrator import MasterlistSourceMigrator
from loot_settings.resolver import GameHints, GameIdentityResolver
from .models import GameSettings, RecordOutcome
from .paths import local_app_data

__all__ = ["SettingsTableLoader", "load_game_settings"]

logger = logging.getLogger(__name__)

# "SkyrimSE" was both the stored type of Skyrim SE and the folder LOOT
# v0.10.0 created for it; the folder has since been renamed.
_LEGACY_SKYRIMSE_TYPE   = "SkyrimSE"
_CURRENT_SKYRIMSE_FOLDER = "Skyrim Special Edition"


def _optional(record: Mapping[str, Any], key: str, kind) -> Optional[Any]:
    """record[key] if present with the given type, else None."""
    value = record.get(key)
    if kind is float:
        # TOML integers are acceptable header versions; booleans are not.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return None
    return value if isinstance(value, kind) else None


class SettingsTableLoader:
    """
    Build GameSettings from a parsed settings table.

    Usage::

        loader = SettingsTableLoader()
        settings = loader.load(read_settings_file(path), GameId.TES5SE)
        print(settings.masterlist_source)
    """

    def __init__(
        self,
        resolver: Optional[GameIdentityResolver] = None,
        migrator: Optional[MasterlistSourceMigrator] = None,
        diagnostics: Optional[DiagnosticCallback] = None,
        local_app_data_path: Optional[Path] = None,
    ) -> None:
        self._diagnostics = diagnostics or logging_diagnostics(logger)
        self._resolver = resolver or GameIdentityResolver()
        self._migrator = migrator or MasterlistSourceMigrator(diagnostics=self._diagnostics)
        self._local_app_data = local_app_data_path

    # ── Public API ────────────────────────────────────────────────────────

    def load(self, table: Mapping[str, Any], requested: GameId) -> GameSettings:
        """
        Return the settings for the requested game.

        Args:
            table:     parsed settings.toml contents.
            requested: the game LOOT was started for.

        Returns:
            The first stored record whose game type matches the requested
            game's type, or the requested game's baseline settings.

        Raises:
            ConflictingFields: the matching record sets both local_path and
                local_folder.
        """
        requested = GameId(requested)
        baseline = GameSettings.from_facts(requested)

        games = table.get("games")
        if not isinstance(games, list):
            logger.debug("No games array in settings, using defaults for %s", requested.value)
            return baseline

        for index, record in enumerate(games):
            outcome = self.read_record(index, record, baseline)
            if outcome.error is not None:
                if isinstance(outcome.error, ConflictingFields):
                    raise outcome.error
                self._diagnostics(
                    Severity.WARNING,
                    f"Skipping game settings entry {index}: {outcome.error}",
                )
                continue
            if outcome.matched:
                logger.info("Using stored settings for %s", outcome.settings)
                return outcome.settings

        logger.debug("No stored settings match %s, using defaults", requested.value)
        return baseline

    def read_record(self, index: int, record: Any, requested: GameSettings) -> RecordOutcome:
        """Read one entry of the games array; never raises."""
        try:
            settings = self._parse_record(record, requested)
        except LootSettingsError as exc:
            return RecordOutcome(index=index, error=exc)
        return RecordOutcome(index=index, settings=settings)

    # ── Private helpers ───────────────────────────────────────────────────

    def _parse_record(self, record: Any, requested: GameSettings) -> Optional[GameSettings]:
        if not isinstance(record, Mapping):
            raise MalformedRecord("games array element is not a table")

        label = _optional(record, "gameId", str) or _optional(record, "type", str)
        if label is None:
            raise MalformedRecord(
                "'gameId' and 'type' keys both missing from game settings table"
            )

        folder = _optional(record, "folder", str)
        if folder is None:
            raise MalformedRecord("'folder' key missing from game settings table")

        game_id = self._resolver.resolve(label, GameHints.from_table(record))

        stored_types = (label, _optional(record, "type", str))
        if folder == _LEGACY_SKYRIMSE_TYPE and folder in stored_types:
            folder = _CURRENT_SKYRIMSE_FOLDER

        settings = GameSettings.from_facts(game_id, folder)
        if settings.type != requested.type:
            return None

        self._apply_overrides(settings, record)
        return settings

    def _apply_overrides(self, settings: GameSettings, record: Mapping[str, Any]) -> None:
        name = _optional(record, "name", str)
        if name is not None:
            settings.set_name(name)

        master = _optional(record, "master", str)
        if master is not None:
            settings.set_master(master)

        version = _optional(record, "minimumHeaderVersion", float)
        if version is not None:
            settings.set_minimum_header_version(version)

        self._apply_masterlist_source(settings, record)

        path = _optional(record, "path", str)
        if path is not None:
            settings.set_game_path(path)

        local_path = _optional(record, "local_path", str)
        local_folder = _optional(record, "local_folder", str)
        if local_path is not None and local_folder is not None:
            raise ConflictingFields(
                "Game settings have local_path and local_folder set, use only one."
            )
        if local_path is not None:
            settings.set_game_local_path(local_path)
        elif local_folder is not None:
            root = self._local_app_data or local_app_data()
            settings.set_game_local_folder(local_folder, root)

    def _apply_masterlist_source(self, settings: GameSettings, record: Mapping[str, Any]) -> None:
        # An explicit masterlistSource always wins over legacy repo/branch.
        source = _optional(record, "masterlistSource", str)
        if source is not None:
            settings.set_masterlist_source(self._migrator.migrate_source(source))
            return

        url = _optional(record, "repo", str)
        branch = _optional(record, "branch", str)
        if url is None and branch is None:
            return
        if url is None or branch is None:
            raise MalformedRecord(
                "'repo' and 'branch' must both be set when 'masterlistSource' is absent"
            )

        result = self._migrator.migrate_repo_settings(settings.game_id, url, branch)
        if result.ok:
            settings.set_masterlist_source(result.source)


def load_game_settings(
    table: Mapping[str, Any],
    requested: GameId,
    diagnostics: Optional[DiagnosticCallback] = None,
) -> GameSettings:
    """Load settings for ``requested`` with a default-configured loader."""
    return SettingsTableLoader(diagnostics=diagnostics).load(table, requested)
