"""Tests for the install command runner."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from freshstart import exec as exec_util


def test_subprocess_command_runner_inherits_streams(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: dict[str, object] = {}

    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        calls["argv"] = argv
        calls["kwargs"] = kwargs
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)

    request = exec_util.CommandRequest(argv=("pnpm", "install"), cwd=Path("/tmp/project"))
    result = exec_util.SubprocessCommandRunner().run(request)

    assert result == exec_util.CommandResult(argv=("pnpm", "install"), returncode=0)
    assert calls["argv"] == ["pnpm", "install"]
    assert calls["kwargs"] == {"cwd": Path("/tmp/project"), "check": False}


def test_subprocess_command_runner_returns_none_when_missing_executable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def fake_run(argv: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        del argv, kwargs
        raise FileNotFoundError

    monkeypatch.setattr(subprocess, "run", fake_run)

    result = exec_util.SubprocessCommandRunner().run(
        exec_util.CommandRequest(argv=("missing-cmd",))
    )

    assert result is None


def test_run_with_runner_prefers_injected_runner() -> None:
    seen: list[exec_util.CommandRequest] = []

    class Recorder:
        def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult:
            seen.append(request)
            return exec_util.CommandResult(argv=request.argv, returncode=7)

    request = exec_util.CommandRequest(argv=("pnpm", "install"))
    result = exec_util.run_with_runner(request, runner=Recorder())

    assert seen == [request]
    assert result is not None
    assert result.returncode == 7


def test_failure_details() -> None:
    request = exec_util.CommandRequest(argv=("pnpm", "install"))
    failed = exec_util.CommandResult(argv=request.argv, returncode=1)

    assert exec_util.missing_command_detail(request) == (
        "pnpm is not installed or not on PATH"
    )
    assert exec_util.missing_command_detail(exec_util.CommandRequest(argv=())) == (
        "no command configured"
    )
    assert exec_util.command_failure_detail(request, failed) == (
        "pnpm install exited with status 1"
    )
