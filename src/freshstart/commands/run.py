"""Implementation for the ``freshstart run`` command."""

from pathlib import Path

from .. import config, log
from ..io import confirm, die, say
from ..models import CleanupProfile
from ..services.cleanup import CleanupOutcome, CleanupRequest, CleanupService
from ..services.errors import ServiceFailure


def render_summary(outcome: CleanupOutcome, profile: CleanupProfile) -> list[str]:
    """Return the closing next-step guidance for a finished run.

    Example:
        Project cleanup complete! Ready for a fresh start.
        Next steps:
          1. Update package.json with your project details
          2. Run: pnpm install
          3. Start coding!
    """
    steps = [f"Update {profile.manifest} with your project details"]
    if not outcome.installed:
        steps.append(f"Run: {profile.install_label}")
    steps.append("Start coding!")
    lines = ["", "Project cleanup complete! Ready for a fresh start.", "Next steps:"]
    lines.extend(f"  {index}. {step}" for index, step in enumerate(steps, start=1))
    return lines


def _resolve_root(args: object) -> Path:
    directory = getattr(args, "directory", None)
    if directory:
        return Path(directory).resolve()
    return Path.cwd().resolve()


def run_cleanup(args: object) -> CleanupOutcome | None:
    """Clean the template project in the current (or given) directory.

    Args:
        args: CLI argument object with ``profile``, ``config`` and
            ``directory`` fields.

    Returns:
        The run outcome. Expected failures exit the process with status 1.

    Example:
        $ freshstart run --profile quick
    """
    root = _resolve_root(args)
    config_path = getattr(args, "config", None)
    try:
        profile = config.load_profile(
            getattr(args, "profile", None),
            root=root,
            config_path=Path(config_path) if config_path else None,
        )
        log.debug(f"Using profile {profile.name} for {root}")
        log.info("Starting project cleanup...")
        service = CleanupService(
            confirm=lambda text: confirm(text, profile.affirmative),
        )
        outcome = service(CleanupRequest(root=root, profile=profile))
    except ServiceFailure as exc:
        message = f"error during cleanup: {exc}"
        if exc.recovery_hint:
            message = f"{message}\nhint: {exc.recovery_hint}"
        die(message)
        return None

    for line in render_summary(outcome, profile):
        say(line)
    return outcome
