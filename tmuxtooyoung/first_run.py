"""Interactive creation of the configuration file on first use."""

from __future__ import annotations

import sys

from .config import config_exists, create_config

_CLEAR = "\033[H\033[2J"


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print(_CLEAR, end="", flush=True)


def ensure_app_can_run() -> None:
    """Ask for search directories and write the configuration if it is missing."""
    if config_exists():
        return
    directories = get_search_directories_from_user()
    create_config(directories)
    _clear_screen()
    print(config_instructions(directories), end="")
    try:
        input()
    except EOFError:
        pass


def get_search_directories_from_user(read_line=None) -> list[str]:
    """Prompt until at least one directory is given and an empty line ends input."""
    read_line = read_line or input
    directories: list[str] = []
    while True:
        _clear_screen()
        print(input_instructions(directories), end="", flush=True)
        try:
            entry = read_line().strip()
        except EOFError:
            if directories:
                return directories
            raise
        if entry:
            directories.append(entry)
        elif directories:
            return directories


def input_instructions(search_directories) -> str:
    """Return the prompt shown while collecting search directories."""
    directories = list(search_directories)
    lines = [
        "Please enter a directory you would like tmux-too-young to scan for projects.",
        "",
        'For example, if you have a collection of projects inside ~/code/, enter "~/code/".',
        "",
    ]
    if directories:
        lines += [
            "Press enter without entering a value to continue.",
            "",
            f"Existing Search Directories: [{', '.join(directories)}]",
        ]
    else:
        lines += [
            "At least one entry is required.",
            "",
            "Note: You will be prompted for additional directories one you've entered this one.",
        ]
    lines.append("")
    return "\n".join(lines) + "\n> "


def config_instructions(search_directories) -> str:
    """Return the message shown once the configuration file is written."""
    lines = [
        "Thanks!",
        "",
        "`.tmux-too-young.yaml` has been created in your home directory.",
        "",
        "The following search directories will be used:",
        "",
        *(f"* {directory}" for directory in search_directories),
        "",
        "You can update this file when you wish to add/remove search directories.",
        "",
        "PRESS ANY KEY",
    ]
    return "\n".join(lines) + "\n"