"""Tests for console prompt helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from freshstart import io


@pytest.mark.parametrize(
    ("answer", "accepted", "expected"),
    [
        ("yes", ("yes",), True),
        ("  YeS\n", ("yes",), True),
        ("y", ("yes",), False),
        ("y", ("y", "yes"), True),
        ("Y ", ("y", "yes"), True),
        ("no", ("y", "yes"), False),
        ("", ("y", "yes"), False),
        ("yess", ("y", "yes"), False),
        (None, ("yes",), False),
    ],
)
def test_is_affirmative(answer: str | None, accepted: tuple[str, ...], expected: bool) -> None:
    assert io.is_affirmative(answer, accepted) is expected


def test_confirm_reads_one_line_from_input() -> None:
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return "Yes"

    with patch("builtins.input", fake_input):
        assert io.confirm("Keep tests? (yes/no):", ("yes",)) is True

    assert prompts == ["Keep tests? (yes/no): "]


def test_confirm_uses_questionary_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeQuestion:
        def ask(self) -> str:
            return "n"

    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    with patch("freshstart.io.questionary.text", return_value=FakeQuestion()) as text:
        assert io.confirm("Install packages now? (y/n):") is False

    text.assert_called_once_with("Install packages now? (y/n):")


def test_ask_aborts_when_questionary_is_cancelled(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    class CancelledQuestion:
        def ask(self) -> None:
            return None

    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    with patch("freshstart.io.questionary.text", return_value=CancelledQuestion()):
        with pytest.raises(SystemExit) as excinfo:
            io.ask("Keep tests?")

    assert excinfo.value.code == 1


def test_die_prints_error_and_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        io.die("boom", code=3)

    assert excinfo.value.code == 3
    assert capsys.readouterr().err == "error: boom\n"
