"""Open tmux sessions for projects and git worktrees picked with fzf."""

__version__ = "0.1.0"