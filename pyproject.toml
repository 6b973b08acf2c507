[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmuxtooyoung"
version = "0.1.0"
description = "A tmux session opener that finds your projects and git worktrees and lets you pick one with fzf."
requires-python = ">=3.10"
keywords = ["tmux", "tmuxp", "fzf", "git", "worktree", "session", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml>=6.0",
    "click>=8.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tmux-too-young = "tmuxtooyoung.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tmuxtooyoung"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
