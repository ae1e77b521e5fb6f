"""
MasterlistSourceMigrator — converts legacy masterlist settings into one
masterlist source (a local file path or a raw-content URL).

Legacy (repo URL, branch) settings, in order:
  1. Old default branch            → DEFAULT_MASTERLIST_BRANCH
  2. VR game on its flat sibling's repo → VR-specific repo
  3. Local Git working copy        → <repo>/masterlist.yaml
     GitHub repository URL         → raw.githubusercontent.com URL
     Anything else                 → not migrated, warning

Already-migrated sources only get their branch bumped when they are an
official repository's raw URL on an old default branch.

Nothing here raises; problems are reported through the diagnostics
callback and in the returned MigrationResult.
"""

import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional, Tuple

from loot_settings.facts import (
    DEFAULT_MASTERLIST_BRANCH,
    MASTERLIST_FILENAME,
    OLD_DEFAULT_BRANCHES,
    OLD_DEFAULT_REPOSITORY_URLS,
    GameId,
    default_masterlist_url,
    old_default_masterlist_urls,
    raw_masterlist_url,
)
from loot_settings.exceptions import BranchMismatchWarning, MigrationError, UnmigratableSource
from loot_settings.logging_config import DiagnosticCallback, Severity, logging_diagnostics
from .git import is_branch_checked_out, is_local_repository
from .models import MigrationResult

__all__ = ["MasterlistSourceMigrator", "GITHUB_REPO_URL_RE", "VR_REPOSITORY_REDIRECTS"]

logger = logging.getLogger(__name__)

GITHUB_REPO_URL_RE = re.compile(
    r"^https://github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$", re.IGNORECASE
)

# The VR games got their own masterlist repositories in LOOT v0.17.0.
VR_REPOSITORY_REDIRECTS: Mapping[GameId, Tuple[str, str]] = MappingProxyType({
    GameId.TES5VR: (
        OLD_DEFAULT_REPOSITORY_URLS[GameId.TES5SE],
        OLD_DEFAULT_REPOSITORY_URLS[GameId.TES5VR],
    ),
    GameId.FO4VR: (
        OLD_DEFAULT_REPOSITORY_URLS[GameId.FO4],
        OLD_DEFAULT_REPOSITORY_URLS[GameId.FO4VR],
    ),
})


class MasterlistSourceMigrator:
    """
    Migrate masterlist repository settings written by older LOOT versions.

    Usage::

        migrator = MasterlistSourceMigrator()
        result = migrator.migrate_repo_settings(
            GameId.TES5, "https://github.com/loot/skyrim.git", "v0.14")
        result.source
        # 'https://raw.githubusercontent.com/loot/skyrim/v0.23/masterlist.yaml'
    """

    def __init__(
        self,
        diagnostics: Optional[DiagnosticCallback] = None,
        default_branch: str = DEFAULT_MASTERLIST_BRANCH,
        old_default_branches: FrozenSet[str] = OLD_DEFAULT_BRANCHES,
        repository_redirects: Mapping[GameId, Tuple[str, str]] = VR_REPOSITORY_REDIRECTS,
        old_default_sources: Optional[Mapping[str, str]] = None,
        masterlist_filename: str = MASTERLIST_FILENAME,
    ) -> None:
        self._diagnostics = diagnostics or logging_diagnostics(logger)
        self._default_branch = default_branch
        self._old_default_branches = old_default_branches
        self._redirects = repository_redirects
        self._old_default_sources = (
            old_default_masterlist_urls()
            if old_default_sources is None else old_default_sources
        )
        self._filename = masterlist_filename

    # ── Public API ────────────────────────────────────────────────────────

    def migrate_repo_settings(self, game_id: GameId, url: str, branch: str) -> MigrationResult:
        """
        Turn a legacy (repository URL, branch) pair into a masterlist source.

        Returns:
            MigrationResult whose source is a local file path, a raw-content
            URL, or None if the URL is neither a local Git repository nor a
            GitHub repository.
        """
        warnings: List[MigrationError] = []

        def warn(kind, message: str) -> None:
            warnings.append(kind(message))
            self._diagnostics(Severity.WARNING, message)

        original = url
        branch = self._migrate_branch(branch)
        url = self._redirect_repository(game_id, url)

        if is_local_repository(url, self._filename):
            repository = Path(url)
            if not is_branch_checked_out(repository, branch):
                warn(
                    BranchMismatchWarning,
                    f"The URL {url} is a local Git repository path but the "
                    f"configured branch {branch} is not checked out. LOOT will "
                    "use the path as the masterlist source, but there may be "
                    "unexpected differences in the loaded metadata if the "
                    f"{branch} branch is not manually checked out before the "
                    "next time the masterlist is updated."
                )
            source = str(repository / self._filename)
            logger.debug("Using local masterlist repository %s", source)
            return MigrationResult(original=original, source=source, warnings=tuple(warnings))

        match = GITHUB_REPO_URL_RE.fullmatch(url)
        if match is None:
            warn(
                UnmigratableSource,
                "Cannot migrate masterlist repository settings as the URL does "
                "not point to a repository on GitHub."
            )
            return MigrationResult(original=original, warnings=tuple(warnings))

        owner, repo = match.group(1), match.group(2)
        source = raw_masterlist_url(owner, repo, branch)
        logger.debug("Migrated %s (%s) to %s", url, branch, source)
        return MigrationResult(original=original, source=source, warnings=tuple(warnings))

    def migrate_source(self, source: str) -> str:
        """
        Bump an official raw masterlist URL on an old default branch to the
        current default branch.  Any other source is returned unchanged.
        """
        repository = self._old_default_sources.get(source)
        if repository is None:
            return source

        new_source = default_masterlist_url(repository)
        self._diagnostics(
            Severity.INFO,
            f"Migrating masterlist source from {source} to {new_source}",
        )
        return new_source

    # ── Private helpers ───────────────────────────────────────────────────

    def _migrate_branch(self, branch: str) -> str:
        if branch not in self._old_default_branches:
            return branch
        self._diagnostics(
            Severity.INFO,
            f"Updating masterlist repository branch from {branch} to {self._default_branch}",
        )
        return self._default_branch

    def _redirect_repository(self, game_id: GameId, url: str) -> str:
        redirect = self._redirects.get(game_id)
        if redirect is None or url != redirect[0]:
            return url
        new_url = redirect[1]
        self._diagnostics(
            Severity.INFO,
            f"Updating masterlist repository URL from {url} to {new_url}",
        )
        return new_url
