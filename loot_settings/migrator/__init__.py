"""
Masterlist source migration — legacy repository settings to a single
local path or raw-content URL.
"""

from .git import checked_out_branch, is_local_repository
from .migrator import GITHUB_REPO_URL_RE, VR_REPOSITORY_REDIRECTS, MasterlistSourceMigrator
from .models import MigrationResult

__all__ = [
    "MasterlistSourceMigrator",
    "MigrationResult",
    "GITHUB_REPO_URL_RE",
    "VR_REPOSITORY_REDIRECTS",
    "checked_out_branch",
    "is_local_repository",
]
