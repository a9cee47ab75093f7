"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import sys

import pytest

from kswitch import __version__
from kswitch.cli import exit_codes
from kswitch.cli.app import main
from kswitch.exceptions import (
    ClusterError,
    ConfigError,
    EnvironmentError,
    KswitchError,
    SelectionError,
    StorageError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            StorageError,
            ConfigError,
            SelectionError,
            UsageError,
            ClusterError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[KswitchError]
    ) -> None:
        assert issubclass(exc_class, KswitchError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(KswitchError, Exception)

    def test_hint_is_stored(self) -> None:
        err = KswitchError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = KswitchError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_cancelled_is_success(self) -> None:
        assert exit_codes.CANCELLED == exit_codes.SUCCESS

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_usage_error_is_nonzero_and_distinct(self) -> None:
        assert exit_codes.USAGE_ERROR not in (
            exit_codes.SUCCESS,
            exit_codes.GENERAL_ERROR,
            exit_codes.UNEXPECTED_ERROR,
        )

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Bootstrap paths
# ---------------------------------------------------------------------------

class TestBootstrap:
    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_help_works_without_ui_packages(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        for name in ("rich", "rich.console", "rich.logging", "questionary", "yaml", "kubernetes"):
            monkeypatch.setitem(sys.modules, name, None)
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_missing_rich_is_environment_error(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            main(["-c"])
