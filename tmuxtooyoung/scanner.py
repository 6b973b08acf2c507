"""Discovery of projects inside the configured search directories."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .config import Configuration
from .project import Project

_BRANCH_RE = re.compile(r"refs/heads/(.*)")
_MARKERS = (".git", ".tmuxp.yaml", ".tmux-too-young")


@dataclass(frozen=True)
class WorktreeDetails:
    """One entry of `git worktree list --porcelain`."""

    worktree: str = ""
    branch: str = ""


def scan_project_directories(configuration: Configuration) -> list[Project]:
    """Return the projects found in every configured search directory."""
    return [
        project
        for root in configuration.search_directories
        for project in scan_project_directory(root)
    ]


def scan_project_directory(root_dir: str) -> list[Project]:
    """Return the projects directly inside one search directory."""
    root = prepare_root_dir(root_dir)
    try:
        names = sorted(os.listdir(root))
    except OSError:
        return []

    projects: list[Project] = []
    for name in names:
        base_path = root + name
        if not any(os.path.exists(f"{base_path}/{marker}") for marker in _MARKERS):
            continue
        worktrees = get_worktrees_for_project(base_path)
        if project_has_worktrees(worktrees, base_path):
            for w in worktrees:
                full_path = f"{base_path}/{w.branch}"
                projects.append(
                    Project(
                        base_path=base_path,
                        full_path=full_path,
                        is_worktree=True,
                        branch=w.branch,
                        supports_tmuxp=project_has_tmuxp_file(full_path),
                    )
                )
        else:
            projects.append(
                Project(
                    base_path=base_path,
                    full_path=base_path,
                    supports_tmuxp=project_has_tmuxp_file(base_path),
                )
            )
    return projects


def prepare_root_dir(root_dir: str) -> str:
    """Add a trailing separator and expand the first '~' to the home directory."""
    if not root_dir.endswith(os.sep):
        root_dir += os.sep
    return root_dir.replace("~", str(Path.home()), 1)


def parse_worktree_list(output: str) -> list[WorktreeDetails]:
    """Parse porcelain worktree output, keeping entries that name a branch."""
    worktrees: list[WorktreeDetails] = []
    for block in output.split("\n\n"):
        path = ""
        for line in block.split("\n"):
            key, sep, value = line.partition(" ")
            if not sep:
                continue
            if key == "worktree":
                path = value
            elif key == "branch":
                match = _BRANCH_RE.search(value)
                branch = match.group(1) if match else value
                worktrees.append(WorktreeDetails(worktree=path, branch=branch))
    return worktrees


def get_worktrees_for_project(base_path: str) -> list[WorktreeDetails]:
    """Ask git for the worktrees of the repository at base_path."""
    try:
        result = subprocess.run(
            ["git", "-C", base_path, "worktree", "list", "--porcelain"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=False,
        )
    except OSError:
        return []
    return parse_worktree_list(result.stdout or "")


def project_has_worktrees(worktrees, base_path: str) -> bool:
    """Tell whether the project is laid out as separate worktree directories."""
    if not worktrees:
        return False
    return worktrees[0].worktree != base_path


def project_has_tmuxp_file(path: str) -> bool:
    """Tell whether a tmuxp configuration sits in the given directory."""
    return os.path.exists(path + "/.tmuxp.yaml")