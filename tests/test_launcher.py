import subprocess
from unittest.mock import MagicMock, patch

import pytest

from tmuxtooyoung.launcher import (
    is_inside_of_tmux,
    launch_project,
    session_is_underway,
    wait_for_session_to_be_ready,
)
from tmuxtooyoung.project import Project


def _plain_project():
    return Project(base_path="/code/my.app", full_path="/code/my.app")


def _completed(stdout="", returncode=0):
    return lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, returncode, stdout=stdout)


def test_is_inside_of_tmux_true(monkeypatch):
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1,0")
    assert is_inside_of_tmux() is True


def test_is_inside_of_tmux_false(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)
    assert is_inside_of_tmux() is False


def test_session_is_underway_when_listed():
    project = _plain_project()
    listing = f"other: 1 windows\n{project.session_name()}: 2 windows (attached)\n"
    with patch("subprocess.run", side_effect=_completed(listing)):
        assert session_is_underway(project) is True


def test_session_is_not_underway_when_absent():
    with patch("subprocess.run", side_effect=_completed("other: 1 windows\n")):
        assert session_is_underway(_plain_project()) is False


def test_session_is_not_underway_when_tmux_missing():
    with patch("subprocess.run", side_effect=FileNotFoundError("tmux")):
        assert session_is_underway(_plain_project()) is False


def test_wait_gives_up_after_max_tries(capsys):
    run = MagicMock(side_effect=_completed(""))
    with patch("subprocess.run", run), patch("time.sleep") as sleep:
        assert wait_for_session_to_be_ready(_plain_project(), max_tries=3, delay=0) is False
    assert run.call_count == 3
    assert sleep.call_count == 3
    assert "Giving up on opening new session." in capsys.readouterr().out


def test_wait_returns_when_session_appears():
    project = _plain_project()
    outputs = iter(["", f"{project.session_name()}: 1 windows\n"])
    run = MagicMock(
        side_effect=lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, stdout=next(outputs))
    )
    with patch("subprocess.run", run), patch("time.sleep"):
        assert wait_for_session_to_be_ready(project, max_tries=5, delay=0) is True
    assert run.call_count == 2


def test_launch_with_tmuxp_loads_file():
    project = Project(base_path="/code/app", full_path="/code/app", supports_tmuxp=True)
    run = MagicMock(side_effect=_completed())
    with patch("subprocess.run", run):
        launch_project(project)
    command = run.call_args_list[0].args[0]
    assert command == [
        "tmuxp", "load", project.tmuxp_path(), "-s", project.session_name(), "-y",
    ]


def test_launch_outside_tmux_creates_session(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)
    project = _plain_project()
    run = MagicMock(side_effect=_completed(""))
    with patch("subprocess.run", run):
        launch_project(project)
    commands = [c.args[0] for c in run.call_args_list]
    assert commands[-1] == [
        "tmux", "new-session", "-s", project.session_name(), "-c", project.full_path,
    ]


def test_launch_outside_tmux_attaches_to_running_session(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)
    project = _plain_project()
    run = MagicMock(side_effect=_completed(f"{project.session_name()}: 1 windows\n"))
    with patch("subprocess.run", run):
        launch_project(project)
    assert run.call_args_list[-1].args[0] == [
        "tmux", "attach-session", "-t", project.session_name(),
    ]


def test_launch_inside_tmux_switches_to_running_session(monkeypatch):
    monkeypatch.setenv("TMUX", "socket")
    project = _plain_project()
    with patch(
        "subprocess.run", side_effect=_completed(f"{project.session_name()}: 1 windows\n")
    ), patch("subprocess.Popen") as popen:
        launch_project(project)
    assert [c.args[0] for c in popen.call_args_list] == [
        ["tmux", "switch-client", "-t", project.session_name()],
    ]


def test_launch_inside_tmux_creates_then_switches(monkeypatch):
    monkeypatch.setenv("TMUX", "socket")
    project = _plain_project()
    with patch("subprocess.run", side_effect=_completed("")), patch(
        "subprocess.Popen"
    ) as popen, patch("time.sleep"):
        launch_project(project)
    assert [c.args[0] for c in popen.call_args_list] == [
        ["tmux", "new-session", "-d", "-s", project.session_name(), "-c", project.full_path],
        ["tmux", "switch-client", "-t", project.session_name()],
    ]


@pytest.mark.parametrize("returncode", [1, 2])
def test_failed_tmuxp_is_reported(capsys, returncode):
    project = Project(base_path="/code/app", full_path="/code/app", supports_tmuxp=True)
    with patch("subprocess.run", side_effect=_completed(returncode=returncode)):
        launch_project(project)
    assert f"Error running tmuxp: exit status {returncode}" in capsys.readouterr().err