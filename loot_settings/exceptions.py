"""
Project-wide custom exception hierarchy.
All modules raise subclasses of LootSettingsError, never bare Exception.
"""

__all__ = [
    "LootSettingsError",
    "FactsError",
    "UnrecognizedGameType",
    "SettingsError",
    "MalformedRecord",
    "ConflictingFields",
    "SettingsFileError",
    "FileAccessError",
    "MigrationError",
    "UnmigratableSource",
    "BranchMismatchWarning",
]


class LootSettingsError(Exception):
    """Root exception for all loot-settings errors."""


# ── Facts / identity ──────────────────────────────────────────────────────────

class FactsError(LootSettingsError):
    """Raised when a game identity lookup fails."""


class UnrecognizedGameType(FactsError):
    """Raised when a game type label or game name matches no known identity."""


# ── Settings loading ──────────────────────────────────────────────────────────

class SettingsError(LootSettingsError):
    """Base class for settings table errors."""


class MalformedRecord(SettingsError):
    """Raised when one persisted game record is structurally invalid.

    The loader recovers by skipping the record.
    """


class ConflictingFields(SettingsError):
    """Raised when a game record sets both local_path and local_folder.

    Fatal for the whole load.
    """


class SettingsFileError(SettingsError):
    """Raised when settings.toml cannot be opened or parsed."""


class FileAccessError(SettingsError):
    """Raised when LOOT's data folder for a game cannot be prepared."""


# ── Masterlist migration ──────────────────────────────────────────────────────

class MigrationError(LootSettingsError):
    """Base class for masterlist source migration problems.

    The migrator never raises these; they name the warning kinds it reports.
    """


class UnmigratableSource(MigrationError):
    """The repository URL is neither a local Git repository nor on GitHub."""


class BranchMismatchWarning(MigrationError):
    """A local masterlist repository has a different branch checked out."""
