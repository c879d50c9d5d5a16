"""Cleanup profile configuration.

Built-in profiles describe the template layouts freshstart knows about. A
JSON file (``--config`` or ``freshstart.json`` in the project root) can
override any profile field.

Example:
    >>> from freshstart.config import builtin_profile
    >>> builtin_profile("classic").affirmative
    ('yes',)
"""

import json
from pathlib import Path

from pydantic import ValidationError

from .models import CleanupProfile, FileTarget
from .services.errors import IoFailedError, ValidationFailedError

PROJECT_CONFIG_FILENAME = "freshstart.json"
DEFAULT_PROFILE = "default"
README_PLACEHOLDER = "# My Project\n\n"

_JEST_CONFIG = FileTarget(path="jest.config.ts", condition="remove_tests")
_TESTS_DIR = FileTarget(path="tests", condition="remove_tests")
_SRC_TESTS_DIR = FileTarget(path="src/tests", condition="remove_tests")
_LOCKFILE = FileTarget(path="pnpm-lock.yaml")
_README = FileTarget(
    path="README.md",
    action="reset",
    content=README_PLACEHOLDER,
    match_case=False,
)
_SAMPLE_SOURCE = FileTarget(path="src/lib/math.ts")
_ENV_TEMPLATE = FileTarget(path=".env.example", action="rename", destination=".env")

BUILTIN_PROFILES: dict[str, CleanupProfile] = {
    "default": CleanupProfile(
        name="default",
        description="Full cleanup with env promotion and an optional script removal",
        affirmative=("y", "yes"),
        targets=(
            _JEST_CONFIG,
            _TESTS_DIR,
            _SRC_TESTS_DIR,
            _LOCKFILE,
            _README,
            _SAMPLE_SOURCE,
            _ENV_TEMPLATE,
        ),
        install_failure="warn",
        self_script="cleanup.ts",
    ),
    "classic": CleanupProfile(
        name="classic",
        description="Strict 'yes' answers, top-level tests only, keeps .env.example",
        affirmative=("yes",),
        targets=(
            _JEST_CONFIG,
            _TESTS_DIR,
            _LOCKFILE,
            _README,
            _SAMPLE_SOURCE,
        ),
        install_failure="warn",
        self_script="cleanup.ts",
    ),
    "quick": CleanupProfile(
        name="quick",
        description="Two prompts only; a failed install stops the run",
        affirmative=("y", "yes"),
        targets=(
            _JEST_CONFIG,
            _TESTS_DIR,
            _SRC_TESTS_DIR,
            _LOCKFILE,
            _README,
            _SAMPLE_SOURCE,
            _ENV_TEMPLATE,
        ),
        install_failure="abort",
        self_script=None,
    ),
}


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed payload as a dict, or ``None`` if the file does not exist.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def profile_names() -> tuple[str, ...]:
    return tuple(BUILTIN_PROFILES)


def builtin_profile(name: str) -> CleanupProfile:
    """Return a copy of a built-in profile by name."""
    normalized = name.strip().lower()
    profile = BUILTIN_PROFILES.get(normalized)
    if profile is None:
        raise ValidationFailedError(
            f"unknown profile: {name}",
            recovery_hint=f"choose one of: {', '.join(profile_names())}",
        )
    return profile.model_copy(deep=True)


def resolve_config_path(root: Path, config_path: Path | None) -> Path | None:
    """Return the override file to apply, if any.

    An explicit path must exist; the project-root default is optional.
    """
    if config_path is not None:
        if not config_path.exists():
            raise IoFailedError(f"config file not found: {config_path}")
        return config_path
    candidate = root / PROJECT_CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def apply_overrides(profile: CleanupProfile, overrides: dict) -> CleanupProfile:
    """Merge an override payload onto ``profile`` and re-validate it."""
    if not isinstance(overrides, dict):
        raise ValidationFailedError("profile overrides must be a JSON object")
    payload = profile.model_dump()
    payload.update(overrides)
    try:
        return CleanupProfile.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailedError(f"invalid profile configuration: {exc}") from exc


def load_profile(
    name: str | None = None,
    *,
    root: Path,
    config_path: Path | None = None,
) -> CleanupProfile:
    """Resolve the profile for a run.

    Args:
        name: Built-in profile name (``default`` when omitted).
        root: Project root, searched for ``freshstart.json``.
        config_path: Explicit override file.

    Returns:
        The validated profile.
    """
    profile = builtin_profile(name or DEFAULT_PROFILE)
    path = resolve_config_path(root, config_path)
    if path is None:
        return profile
    try:
        overrides = load_json(path)
    except json.JSONDecodeError as exc:
        raise ValidationFailedError(f"invalid JSON in {path}: {exc}") from exc
    except OSError as exc:
        raise IoFailedError(f"failed to read {path}: {exc}") from exc
    return apply_overrides(profile, overrides or {})
