"""In-memory editing of the project manifest (``package.json``)."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from .services.errors import IoFailedError, ValidationFailedError


def render_manifest(payload: dict) -> str:
    """Serialize a manifest payload the way package managers write it.

    Example:
        >>> render_manifest({"name": "demo"})
        '{\\n  "name": "demo"\\n}\\n'
    """
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


class Manifest:
    """Ordered manifest document loaded once and flushed on ``commit``.

    The in-memory payload may diverge from the file between edits; only
    ``commit`` writes it back.
    """

    def __init__(
        self,
        path: Path,
        payload: dict,
        *,
        transient_scripts: Iterable[str] = ("cleanup",),
        drop_module_type: bool = True,
    ) -> None:
        self.path = path
        self.payload = payload
        self.transient_scripts = tuple(transient_scripts)
        self.drop_module_type = drop_module_type
        self._flushed: str | None = None

    @classmethod
    def load(
        cls,
        path: Path,
        *,
        transient_scripts: Iterable[str] = ("cleanup",),
        drop_module_type: bool = True,
    ) -> Manifest:
        """Read a manifest file.

        Fields of unexpected type are left alone; only object-valued
        ``scripts`` and ``devDependencies`` are edited.

        Raises:
            IoFailedError: The file is missing or unreadable.
            ValidationFailedError: The file is not a JSON object.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise IoFailedError(
                f"{path.name} not found in {path.parent}",
                recovery_hint="run freshstart from the template project root",
            ) from exc
        except OSError as exc:
            raise IoFailedError(f"failed to read {path}: {exc}") from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationFailedError(f"invalid JSON in {path.name}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValidationFailedError(f"{path.name} must contain a JSON object")
        manifest = cls(
            path,
            payload,
            transient_scripts=transient_scripts,
            drop_module_type=drop_module_type,
        )
        manifest._flushed = text
        return manifest

    def _mapping(self, key: str) -> dict | None:
        value = self.payload.get(key)
        if isinstance(value, dict):
            return value
        return None

    def reset_identity(self, name: str) -> None:
        self.payload["name"] = name
        self.payload["description"] = ""
        self.payload["keywords"] = []

    def remove_dev_dependencies(self, names: Iterable[str]) -> list[str]:
        """Remove devDependencies by exact name; return the removed names."""
        dev_dependencies = self._mapping("devDependencies")
        if dev_dependencies is None:
            return []
        removed = []
        for name in names:
            if name in dev_dependencies:
                del dev_dependencies[name]
                removed.append(name)
        return removed

    def remove_scripts(self, names: Iterable[str]) -> list[str]:
        scripts = self._mapping("scripts")
        if scripts is None:
            return []
        removed = []
        for name in names:
            if name in scripts:
                del scripts[name]
                removed.append(name)
        return removed

    def drop_transient_fields(self) -> list[str]:
        """Remove the cleanup script entry and the module-type marker.

        Safe to call any number of times. Returns labels for what was removed.
        """
        dropped = [f"scripts.{name}" for name in self.remove_scripts(self.transient_scripts)]
        if self.drop_module_type and self.payload.get("type") == "module":
            del self.payload["type"]
            dropped.append("type")
        return dropped

    def render(self) -> str:
        return render_manifest(self.payload)

    @property
    def dirty(self) -> bool:
        return self.render() != self._flushed

    def commit(self) -> bool:
        """Apply pending transient-field removals, then write if changed.

        Returns ``True`` when the file was written.
        """
        self.drop_transient_fields()
        text = self.render()
        if text == self._flushed:
            return False
        self.path.write_text(text, encoding="utf-8")
        self._flushed = text
        return True
