"""Opening or attaching to the tmux session of a chosen project."""

from __future__ import annotations

import os
import subprocess
import sys
import time

from .project import Project


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _run(command: list[str], failure: str) -> None:
    """Run a command attached to the terminal and report a failure."""
    try:
        result = subprocess.run(command, check=False)
    except OSError as exc:
        _report(f"{failure}: {exc}")
        return
    if result.returncode != 0:
        _report(f"{failure}: exit status {result.returncode}")


def _start(command: list[str], failure: str) -> None:
    """Start a command in the background without waiting for it."""
    try:
        subprocess.Popen(command)
    except OSError as exc:
        _report(f"{failure}: {exc}")


def launch_project(project: Project) -> None:
    """Open the project's session, creating it if it is not running yet."""
    if project.supports_tmuxp:
        _launch_using_tmuxp(project)
        return

    underway = session_is_underway(project)
    if is_inside_of_tmux():
        if underway:
            _attach_from_within_tmux(project)
        else:
            _launch_from_within_tmux(project)
    elif underway:
        _attach_from_outside_of_tmux(project)
    else:
        _launch_from_outside_of_tmux(project)


def _launch_from_within_tmux(project: Project) -> None:
    _start(
        ["tmux", "new-session", "-d", "-s", project.session_name(), "-c", project.full_path],
        "Error creating new tmux session",
    )
    wait_for_session_to_be_ready(project)
    _attach_from_within_tmux(project)


def _launch_from_outside_of_tmux(project: Project) -> None:
    _run(
        ["tmux", "new-session", "-s", project.session_name(), "-c", project.full_path],
        "Error creation new session",
    )


def _launch_using_tmuxp(project: Project) -> None:
    _run(
        ["tmuxp", "load", project.tmuxp_path(), "-s", project.session_name(), "-y"],
        "Error running tmuxp",
    )


def _attach_from_within_tmux(project: Project) -> None:
    _start(
        ["tmux", "switch-client", "-t", project.session_name()],
        "Error switching to session",
    )


def _attach_from_outside_of_tmux(project: Project) -> None:
    _run(
        ["tmux", "attach-session", "-t", project.session_name()],
        "Error attaching to exiting session",
    )


def wait_for_session_to_be_ready(
    project: Project, max_tries: int = 5, delay: float = 0.5
) -> bool:
    """Poll until the project's session exists; return whether it appeared."""
    for attempt in range(max_tries):
        if session_is_underway(project):
            return True
        print(
            f"Attempted to open new session [{project.friendly_name()}] "
            "but it isn't ready yet...",
            end="",
        )
        time.sleep(delay)
        if attempt == max_tries - 1:
            print("Giving up on opening new session.")
    return False


def session_is_underway(project: Project) -> bool:
    """Tell whether a tmux session with the project's name is running."""
    try:
        result = subprocess.run(
            ["tmux", "list-sessions"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=False,
        )
    except OSError:
        return False
    name = project.session_name()
    return any(
        name in line.split(":", 1)[0] for line in (result.stdout or "").splitlines()
    )


def is_inside_of_tmux() -> bool:
    """Tell whether this process runs inside a tmux client."""
    return "TMUX" in os.environ