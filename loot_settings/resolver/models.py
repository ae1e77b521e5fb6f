"""Data models for the resolver module."""

from dataclasses import dataclass
from pathlib import PureWindowsPath
from typing import Any, Mapping, Optional

__all__ = ["GameHints"]


def _optional_str(table: Mapping[str, Any], key: str) -> Optional[str]:
    value = table.get(key)
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class GameHints:
    """
    Weak signals read from one persisted game record.

    Every field is optional; None means the key was absent (or held a
    value of the wrong type, which the heuristics treat the same way).
    """
    install_path:          Optional[str]  = None   # "path"
    name:                  Optional[str]  = None   # "name"
    master:                Optional[str]  = None   # "master"
    folder:                Optional[str]  = None   # "folder"
    local_path:            Optional[str]  = None   # "local_path"
    local_folder:          Optional[str]  = None   # "local_folder"
    is_base_game_instance: Optional[bool] = None   # 0.18.1 – 0.19.0 only

    @property
    def effective_local_folder(self) -> Optional[str]:
        """local_folder, else the last component of local_path."""
        if self.local_folder is not None:
            return self.local_folder
        if self.local_path is not None:
            return PureWindowsPath(self.local_path).name
        return None

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> "GameHints":
        flag = table.get("isBaseGameInstance")
        return cls(
            install_path=_optional_str(table, "path"),
            name=_optional_str(table, "name"),
            master=_optional_str(table, "master"),
            folder=_optional_str(table, "folder"),
            local_path=_optional_str(table, "local_path"),
            local_folder=_optional_str(table, "local_folder"),
            is_base_game_instance=flag if isinstance(flag, bool) else None,
        )
