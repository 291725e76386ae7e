from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

import pytest

from shellhist.history import Context, FilterMode, History, HistoryStats

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_success_on_zero_exit():
    assert History(command="ls", timestamp=NOW, exit=0).success() is True


def test_failure_on_nonzero_exit():
    assert History(command="false", timestamp=NOW, exit=1, duration=10).success() is False


def test_running_command_counts_as_success():
    assert History(command="sleep 9", timestamp=NOW, exit=-1, duration=-1).success() is True


def test_history_is_immutable():
    h = History(command="ls", timestamp=NOW)
    with pytest.raises(AttributeError):
        h.command = "rm"  # type: ignore[misc]
    assert h.command == "ls"
    changed = replace(h, command="rm")
    assert changed.command == "rm"
    assert h.command == "ls"


def test_filter_mode_lookup_round_trip():
    for mode in FilterMode:
        assert FilterMode(mode.value) is mode
    assert [m.name for m in FilterMode] == ["GLOBAL", "HOST", "SESSION", "DIRECTORY", "WORKSPACE"]


def test_context_keeps_git_root():
    ctx = Context(session="s", cwd="/tmp/x", hostname="h", git_root=Path("/tmp"))
    assert ctx.git_root == Path("/tmp")
    assert Context(session="s", cwd="/", hostname="h").git_root is None


def test_stats_defaults_are_independent():
    a = HistoryStats()
    b = HistoryStats()
    a.exits.append((0, 3))
    assert b.exits == []
    assert a.total == 0 and a.previous is None