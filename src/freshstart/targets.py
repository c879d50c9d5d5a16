"""Filesystem actions applied to cleanup targets.

Every helper treats a missing target as a no-op and reports whether it acted.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .models import FileTarget
from .services.errors import ValidationFailedError


def find_case_insensitive(root: Path, relative: str) -> Path | None:
    """Locate ``relative`` under ``root``, matching the last segment by case.

    Example:
        >>> find_case_insensitive(Path("/nonexistent"), "README.md") is None
        True
    """
    candidate = root / relative
    parent = candidate.parent
    if not parent.is_dir():
        return None
    wanted = candidate.name.lower()
    for entry in sorted(parent.iterdir()):
        if entry.name.lower() == wanted:
            return entry
    return None


def resolve_target(root: Path, target: FileTarget) -> Path | None:
    """Return the existing path for ``target`` or ``None`` if absent."""
    if not target.match_case:
        return find_case_insensitive(root, target.path)
    path = root / target.path
    if path.exists() or path.is_symlink():
        return path
    return None


def remove_path(path: Path) -> bool:
    """Delete a file, symlink or directory tree.

    Returns ``False`` when nothing exists at ``path``.
    """
    if path.is_symlink() or path.is_file():
        path.unlink(missing_ok=True)
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False


def reset_file(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def promote_file(source: Path, destination: Path) -> bool:
    """Rename ``source`` to ``destination``.

    An existing destination is replaced (``Path.replace`` semantics).
    """
    if not source.exists():
        return False
    source.replace(destination)
    return True


def apply_target(root: Path, target: FileTarget) -> str | None:
    """Apply one target and return a past-tense description, or ``None``."""
    if target.action == "rename" and not target.destination:
        raise ValidationFailedError(
            f"rename target {target.path} requires a destination"
        )
    path = resolve_target(root, target)
    if path is None:
        return None
    label = path.relative_to(root).as_posix()
    if target.action == "delete":
        is_dir = path.is_dir() and not path.is_symlink()
        if not remove_path(path):
            return None
        return f"Removed {label}{'/' if is_dir else ''}"
    if target.action == "reset":
        reset_file(path, target.content or "")
        return f"Reset {label}"
    if not promote_file(path, root / target.destination):
        return None
    return f"Renamed {label} to {target.destination}"
