"""A launchable project directory."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A directory that can be opened as a tmux session."""

    base_path: str
    full_path: str
    is_worktree: bool = False
    branch: str = ""
    supports_tmuxp: bool = False

    def friendly_name(self) -> str:
        """Return the name shown to the user when choosing a project."""
        if self.is_worktree:
            return f"{self.base_path} -> {self.branch}"
        return self.full_path

    def session_name(self) -> str:
        """Return the tmux session name; dots are not allowed there."""
        name = os.path.basename(os.path.normpath(self.base_path))
        safe_name = name.replace(".", "_")
        if self.is_worktree:
            return f"{safe_name} -> {self.branch.replace('.', '_')}"
        return safe_name

    def tmuxp_path(self) -> str:
        """Return the path of the project's tmuxp configuration."""
        root = self.full_path if self.is_worktree else self.base_path
        return root + "/.tmuxp.yaml"