"""Data models for the migrator module."""

from dataclasses import dataclass
from typing import Optional, Tuple

from loot_settings.exceptions import MigrationError

__all__ = ["MigrationResult"]


@dataclass(frozen=True)
class MigrationResult:
    """
    Outcome of migrating legacy (repo, branch) masterlist settings.

    source is None when the URL could not be migrated; original always
    holds the URL that was given.  warnings holds one UnmigratableSource or
    BranchMismatchWarning per warning reported, in order.
    """
    original: str
    source:   Optional[str]              = None
    warnings: Tuple[MigrationError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.source is not None

    def __str__(self) -> str:
        if self.source is None:
            return f"MigrationResult({self.original!r} not migrated)"
        return f"MigrationResult({self.original!r} → {self.source!r})"
