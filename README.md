# tmux-too-young

A tmux session opener. It finds your projects, lets you pick one with
`fzf-tmux`, and then opens a tmux session in it or switches to one that is
already running.

## Requirements

These programs must be on your `PATH`:

- `tmux`
- `fzf` (for `fzf-tmux`)
- `git` (to find worktrees)
- `tmuxp` (only for projects that have a `.tmuxp.yaml`)

## Installation

```sh
pip install .
```

## Usage

```sh
tmux-too-young open
tmux-too-young open --search myproj
tmux-too-young open -s myproj
tmux-too-young --version
```

`--search` / `-s` sets the initial query in the picker.

The first time you run `open`, you are asked for one or more directories to
scan for projects. Enter at least one; an empty line ends the list. Your
answers are saved to `~/.tmux-too-young.yaml`:

```yaml
search_directories:
- ~/code/
- ~/work/
```

You can edit this file later to add or remove directories. A leading `~` in
a directory is expanded to your home directory.

## What counts as a project

Each direct subdirectory of a search directory (in sorted order) is a project
if it holds any of:

- a `.git` directory or file
- a `.tmuxp.yaml` file
- a `.tmux-too-young` marker file

If `git worktree list --porcelain` reports that the project's directory is not
itself the first worktree (for example a bare repository with worktrees
checked out beneath it), each worktree that names a branch appears as its own
entry, shown as `project -> branch`, with its directory taken to be
`project/branch`.

## Opening a session

- If the project, or the worktree, has a `.tmuxp.yaml`, it is loaded with
  `tmuxp load <file> -s <session> -y`.
- Otherwise, a tmux session named after the project directory is created, or
  attached to if one whose name contains it is already listed by
  `tmux list-sessions`. Dots in the name become underscores; worktree
  sessions are named `project -> branch`.
  Inside tmux the session is created detached and the client switches to it.
  Outside tmux it is attached in the current terminal.

Pressing Ctrl-C in the picker exits quietly with status 0. If the picker
fails, or what it returns matches no project, the command prints an error and
exits with a non-zero status; the same happens when the configuration file
cannot be read or parsed.

## Using it from Python

- `tmuxtooyoung.config`: `Configuration`, `config_path()`, `get_config()`
  (raises `ConfigError`), `config_exists()`, `create_config()`.
- `tmuxtooyoung.scanner`: `scan_project_directories()`,
  `scan_project_directory()`, `parse_worktree_list()` and helpers.
- `tmuxtooyoung.project`: `Project` with `friendly_name()`, `session_name()`
  and `tmuxp_path()`.
- `tmuxtooyoung.selector`: `get_selection_from_user()`,
  `find_project_by_friendly_name()`, `SelectionCancelled`, `SelectionError`.
- `tmuxtooyoung.launcher`: `launch_project()`, `session_is_underway()`,
  `is_inside_of_tmux()`, `wait_for_session_to_be_ready()`.

## What it does not do

It does not search recursively: only the direct subdirectories of each search
directory are looked at. It has no picker of its own and needs `fzf-tmux`, and
it does not manage or close sessions once they are open.