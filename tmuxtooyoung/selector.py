"""Letting the user choose a project with fzf."""

from __future__ import annotations

import subprocess

from .project import Project


class SelectionCancelled(Exception):
    """Raised when the user aborts the chooser."""


class SelectionError(Exception):
    """Raised when the chooser fails or returns no known project."""


def find_project_by_friendly_name(projects, name: str) -> Project | None:
    """Return the first project whose friendly name matches, or None."""
    return next((p for p in projects if p.friendly_name() == name), None)


def get_selection_from_user(projects, initial_search_term: str = "") -> Project:
    """Show the projects in fzf-tmux and return the one chosen."""
    projects = list(projects)
    choices = "".join(p.friendly_name() + "\n" for p in projects)
    command = [
        "fzf-tmux",
        "-p",
        "--cycle",
        "--reverse",
        "--border",
        "--info=inline-right",
        "--header=Select a Project to open in tmux:",
        f"--query={initial_search_term}",
        "-1",
    ]
    try:
        result = subprocess.run(
            command, input=choices, stdout=subprocess.PIPE, text=True, check=False
        )
    except OSError as exc:
        raise SelectionError(str(exc)) from exc

    if result.returncode == 130:
        raise SelectionCancelled()
    if result.returncode != 0:
        raise SelectionError(f"exit status {result.returncode}")

    name = result.stdout.strip()
    selected = find_project_by_friendly_name(projects, name)
    if selected is None:
        raise SelectionError(f"no project named {name!r}")
    return selected