"""
Local Git working copy probes.

Only plain file reads: a masterlist repository counts as local if the
masterlist file and .git/HEAD both exist.  Every OSError is a negative
answer.
"""

from pathlib import Path
from typing import Optional

__all__ = ["is_remote_url", "is_local_repository", "checked_out_branch", "is_branch_checked_out"]

_HEAD_REF_PREFIX = "ref: refs/heads/"


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def is_remote_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def is_local_repository(location: str, filename: str) -> bool:
    """True if location is a non-bare Git working copy containing filename."""
    if is_remote_url(location):
        return False
    root = Path(location)
    return _is_file(root / filename) and _is_file(root / ".git" / "HEAD")


def checked_out_branch(repository: Path) -> Optional[str]:
    """Branch named by .git/HEAD, or None if HEAD is detached or unreadable."""
    try:
        with open(repository / ".git" / "HEAD", encoding="utf-8") as f:
            line = f.readline().rstrip("\r\n")
    except (OSError, UnicodeDecodeError):
        return None
    if not line.startswith(_HEAD_REF_PREFIX):
        return None
    return line[len(_HEAD_REF_PREFIX):]


def is_branch_checked_out(repository: Path, branch: str) -> bool:
    return checked_out_branch(repository) == branch
