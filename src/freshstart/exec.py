"""Running the package-manager install as an external process."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class CommandRequest:
    """An external command run in ``cwd`` with the terminal's own streams."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int


class CommandRunner(Protocol):
    """Anything that can execute a ``CommandRequest``.

    ``run`` returns ``None`` when the executable cannot be found.
    """

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv), cwd=request.cwd, check=False
            )
        except FileNotFoundError:
            return None
        return CommandResult(argv=request.argv, returncode=completed.returncode)


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Run ``request`` with ``runner``, or the subprocess runner when omitted."""
    return (runner or _DEFAULT_COMMAND_RUNNER).run(request)


def missing_command_detail(request: CommandRequest) -> str:
    if not request.argv:
        return "no command configured"
    return f"{request.argv[0]} is not installed or not on PATH"


def command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    return f"{' '.join(request.argv)} exited with status {result.returncode}"
