"""Tests for the churnmap exception hierarchy."""

from pathlib import Path

import pytest

from churnmap.exceptions import (
    ChurnMapError,
    ConfigurationError,
    HistoryCommandError,
    HistoryError,
    InvalidConfigError,
    InvalidRangeError,
    UntrackedFileError,
)


class TestChurnMapError:
    def test_message_only(self):
        assert str(ChurnMapError("boom")) == "boom"

    def test_details_rendered(self):
        err = ChurnMapError("boom", details={"a": "1", "b": "2"})
        assert str(err) == "boom (a=1, b=2)"


class TestHistoryErrors:
    @pytest.mark.parametrize(
        "err",
        [
            UntrackedFileError(Path("x.py"), "not tracked by git"),
            HistoryCommandError(["git", "log"], 128, "fatal"),
            InvalidRangeError("abc"),
        ],
    )
    def test_hierarchy(self, err):
        assert isinstance(err, HistoryError)
        assert isinstance(err, ChurnMapError)

    def test_untracked_details(self):
        err = UntrackedFileError(Path("x.py"), "not tracked by git")
        assert err.details == {"path": "x.py", "reason": "not tracked by git"}

    def test_untracked_without_path(self):
        assert "None" in str(UntrackedFileError(None, "no backing file"))

    def test_command_error_details(self):
        err = HistoryCommandError(["git", "log", "-L", "1,1:a.py"], 128, "fatal: no\n")
        assert err.details["command"] == "git log -L 1,1:a.py"
        assert err.details["returncode"] == "128"
        assert err.details["stderr"] == "fatal: no"

    def test_command_error_without_returncode(self):
        err = HistoryCommandError(["git"], None)
        assert "returncode" not in err.details

    def test_invalid_range_message(self):
        assert str(InvalidRangeError("abc")).startswith("Invalid line range: 'abc'")


class TestConfigErrors:
    def test_invalid_config_is_configuration_error(self):
        err = InvalidConfigError("workers", 0, "must be at least 1")
        assert isinstance(err, ConfigurationError)
        assert err.key == "workers"
        assert "must be at least 1" in str(err)
