"""Console I/O helpers for user-facing messages and yes/no prompts."""

from __future__ import annotations

import sys
from collections.abc import Iterable

import questionary


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Returns:
        None.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def die(message: str, code: int = 1) -> None:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def is_affirmative(answer: str | None, accepted: Iterable[str]) -> bool:
    """Return whether a free-text answer is in the accepted token set.

    Matching is case-insensitive and ignores surrounding whitespace. Anything
    else, including an empty answer, counts as a "no".

    Example:
        >>> is_affirmative("  YES ", ("yes",))
        True
        >>> is_affirmative("y", ("yes",))
        False
        >>> is_affirmative("Y", ("y", "yes"))
        True
    """
    if answer is None:
        return False
    tokens = {token.strip().lower() for token in accepted}
    return answer.strip().lower() in tokens


def ask(text: str) -> str:
    """Read one line of operator input for ``text``.

    Blocks until a line is entered. An interrupted questionary prompt aborts
    the process.
    """
    if _use_questionary():
        value = questionary.text(text).ask()
        if value is None:
            die("aborted")
        return str(value)
    return input(f"{text} ")


def confirm(text: str, accepted: Iterable[str] = ("y", "yes")) -> bool:
    """Prompt for a yes/no answer.

    Args:
        text: Prompt label shown to the user.
        accepted: Affirmative tokens; any other answer is a "no".

    Returns:
        ``True`` when the user answered with an accepted token.

    Example:
        Keep tests in the project? (y/n):
    """
    return is_affirmative(ask(text), accepted)
