import os
from pathlib import Path
from typing import Optional

from path_labels.constants import APP_NAME, HOME_ENV_VAR, WORKSPACES_DIRNAME


def default_root() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / APP_NAME


class CommonRepository:
    """Resolves configuration scopes under the application root."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root or default_root()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def workspaces_dir(self) -> Path:
        return self.root / WORKSPACES_DIRNAME

    def workspace_config_dir(self, name: str) -> Path:
        return self.workspaces_dir / name

    def scope_root(self, workspace: Optional[str] = None) -> Path:
        if workspace is None:
            return self.root
        if not workspace or "/" in workspace or "\\" in workspace or workspace in (".", ".."):
            raise ValueError(f"Invalid workspace name: {workspace!r}")
        return self.workspace_config_dir(workspace)

    def list_workspaces(self) -> list[str]:
        if not self.workspaces_dir.exists():
            return []
        return sorted(
            child.name
            for child in self.workspaces_dir.iterdir()
            if child.is_dir() and not child.name.startswith(".")
        )
