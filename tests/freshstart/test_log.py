"""Tests for leveled terminal logging."""

from __future__ import annotations

import pytest

from freshstart import log


def test_info_goes_to_stdout_and_warning_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    log.info("starting")
    log.warning("careful")

    captured = capsys.readouterr()
    assert "starting" in captured.out
    assert "careful" in captured.err
    assert "careful" not in captured.out


def test_debug_is_hidden_at_default_level(capsys: pytest.CaptureFixture[str]) -> None:
    log.debug("hidden detail")

    assert capsys.readouterr().out == ""


def test_set_level_enables_debug(capsys: pytest.CaptureFixture[str]) -> None:
    log.set_level("DEBUG")
    log.debug("visible detail")

    assert "visible detail" in capsys.readouterr().out


def test_unknown_level_falls_back_to_info() -> None:
    log.set_level("loud")

    assert log.configured_level() is log.LogLevel.INFO


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(log, "_configured_level", None)
    monkeypatch.setenv("FRESHSTART_LOG_LEVEL", "error")

    assert log.configured_level() is log.LogLevel.ERROR
    assert not log.is_enabled(log.LogLevel.WARNING)


def test_no_color_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FRESHSTART_NO_COLOR", raising=False)
    assert log._no_color() is False

    log.set_no_color(True)

    assert log._no_color() is True


def test_warn_is_accepted_as_warning() -> None:
    log.set_level(" Warn ")

    assert log.configured_level() is log.LogLevel.WARNING


def test_level_names_follow_severity_order() -> None:
    assert log.LEVEL_NAMES == ("debug", "info", "success", "warning", "error")
