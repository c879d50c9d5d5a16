"""Pydantic models for cleanup profiles."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TargetAction = Literal["delete", "reset", "rename"]

TargetCondition = Literal["always", "remove_tests"]

InstallFailurePolicy = Literal["warn", "abort"]


class FileTarget(BaseModel):
    """One filesystem target of the cleanup pipeline.

    Attributes:
        path: Path relative to the project root.
        action: ``delete`` (file or tree), ``reset`` (overwrite with
            ``content``) or ``rename`` (move to ``destination``).
        condition: ``always`` or ``remove_tests`` (only when tests are dropped).
        destination: Rename destination relative to the project root.
        content: Replacement text for ``reset`` targets.
        match_case: When false, the final path segment is matched
            case-insensitively.

    Example:
        >>> FileTarget(path="pnpm-lock.yaml")
        FileTarget(path='pnpm-lock.yaml', action='delete', ...)
    """

    model_config = ConfigDict(extra="forbid")

    path: str
    action: TargetAction = "delete"
    condition: TargetCondition = "always"
    destination: str | None = None
    content: str | None = None
    match_case: bool = True

    @field_validator("path", "destination", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().strip("/")
        return value

    @model_validator(mode="after")
    def check_action_fields(self) -> FileTarget:
        if not self.path:
            raise ValueError("target path must not be empty")
        if self.action == "rename" and not self.destination:
            raise ValueError(f"rename target {self.path} requires a destination")
        if self.action == "reset" and self.content is None:
            raise ValueError(f"reset target {self.path} requires content")
        return self


class CleanupProfile(BaseModel):
    """Configuration table that drives one cleanup run.

    Attributes:
        name: Profile name.
        description: One-line description shown by ``freshstart profiles``.
        manifest: Manifest file name.
        affirmative: Accepted "yes" tokens for every prompt.
        test_packages: devDependencies removed with the tests.
        test_scripts: Script entries removed with the tests.
        transient_scripts: Script entries removed before every manifest write.
        drop_module_type: Remove ``"type": "module"`` before every write.
        tsconfig: Compiler configuration file name.
        test_types_entry: Entry removed from ``compilerOptions.types``.
        targets: Ordered filesystem targets.
        install_command: Package-manager install argv.
        install_failure: ``warn`` keeps going, ``abort`` stops the run.
        self_script: Bundled cleanup script; enables the removal prompt.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "custom"
    description: str = ""
    manifest: str = "package.json"
    affirmative: tuple[str, ...] = ("y", "yes")
    test_packages: tuple[str, ...] = ("@jest/globals", "@types/jest", "jest", "ts-jest")
    test_scripts: tuple[str, ...] = ("test", "test:watch")
    transient_scripts: tuple[str, ...] = ("cleanup",)
    drop_module_type: bool = True
    tsconfig: str = "tsconfig.json"
    test_types_entry: str = "jest"
    targets: tuple[FileTarget, ...] = Field(default_factory=tuple)
    install_command: tuple[str, ...] = ("pnpm", "install")
    install_failure: InstallFailurePolicy = "warn"
    self_script: str | None = None

    @field_validator("affirmative", mode="before")
    @classmethod
    def normalize_affirmative(cls, value: object) -> object:
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple)):
            tokens = [str(item).strip().lower() for item in value]
            return tuple(token for token in tokens if token)
        return value

    @field_validator("affirmative")
    @classmethod
    def require_affirmative(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one affirmative token is required")
        return value

    @field_validator("install_command")
    @classmethod
    def require_install_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("install_command must not be empty")
        return value

    @field_validator("self_script", mode="before")
    @classmethod
    def normalize_self_script(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip()
            return normalized or None
        return value

    @property
    def install_label(self) -> str:
        return " ".join(self.install_command)

    def targets_for(self, condition: TargetCondition) -> tuple[FileTarget, ...]:
        return tuple(target for target in self.targets if target.condition == condition)
