"""Template cleanup orchestration.

CleanupService runs the fixed pipeline against a project root: rename the
package, optionally strip the test harness, commit the manifest, apply the
profile's file targets, optionally install packages and optionally remove the
bundled cleanup script. Each step is a no-op when its target is missing, so a
second run on a cleaned project is safe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .. import exec, log, targets, tsconfig
from ..manifest import Manifest
from ..models import CleanupProfile, FileTarget
from ..naming import derive_package_name
from .base import BaseService
from .errors import ExternalCommandFailedError

Confirm = Callable[[str], bool]


class CleanupRequest(BaseModel):
    """Input contract for one cleanup run.

    Attributes:
        root: Project root to clean; its name seeds the package name.
        profile: Configuration table for the run.
    """

    root: Path
    profile: CleanupProfile

    model_config = ConfigDict(arbitrary_types_allowed=True)


@dataclass(frozen=True)
class CleanupOutcome:
    package_name: str
    tests_removed: bool
    install_requested: bool
    installed: bool
    script_removed: bool | None
    actions: tuple[str, ...]


def _answer_hint(profile: CleanupProfile) -> str:
    if "y" in profile.affirmative:
        return "(y/n)"
    return "(yes/no)"


class CleanupService(BaseService[CleanupRequest, CleanupOutcome]):
    """Run the cleanup pipeline with injectable prompts and command runner."""

    def __init__(
        self,
        confirm: Confirm,
        runner: exec.CommandRunner | None = None,
    ) -> None:
        self._confirm = confirm
        self._runner = runner
        self._actions: list[str] = []

    def _record(self, message: str) -> None:
        log.success(message)
        self._actions.append(message)

    def _ask(self, question: str, profile: CleanupProfile) -> bool:
        return self._confirm(f"{question} {_answer_hint(profile)}:")

    def _apply(self, root: Path, target: FileTarget) -> None:
        message = targets.apply_target(root, target)
        if message is None:
            log.debug(f"Skipped {target.path} (not found)")
            return
        self._record(message)

    def _run(self, request: CleanupRequest) -> CleanupOutcome:
        root = request.root
        profile = request.profile
        self._actions = []

        package_name = derive_package_name(root.name)
        if package_name:
            log.info(f"Setting project name to: {package_name}")
        else:
            log.warning(f"could not derive a package name from {root.name!r}")

        manifest = Manifest.load(
            root / profile.manifest,
            transient_scripts=profile.transient_scripts,
            drop_module_type=profile.drop_module_type,
        )
        manifest.reset_identity(package_name)

        tests_removed = not self._ask("Keep tests in the project?", profile)
        if tests_removed:
            self._remove_tests(root, profile, manifest)

        self._commit(manifest, profile)

        for target in profile.targets_for("always"):
            self._apply(root, target)

        install_requested = self._ask("Install packages now?", profile)
        installed = False
        if install_requested:
            installed = self._install(root, profile)

        script_removed: bool | None = None
        if profile.self_script:
            script_removed = self._finish_self_script(
                root, profile.self_script, profile, manifest
            )

        return CleanupOutcome(
            package_name=package_name,
            tests_removed=tests_removed,
            install_requested=install_requested,
            installed=installed,
            script_removed=script_removed,
            actions=tuple(self._actions),
        )

    def _commit(self, manifest: Manifest, profile: CleanupProfile) -> None:
        for label in manifest.drop_transient_fields():
            self._record(f"Removed {label} from {profile.manifest}")
        if manifest.commit():
            self._record(f"Updated {profile.manifest}")

    def _remove_tests(
        self, root: Path, profile: CleanupProfile, manifest: Manifest
    ) -> None:
        log.info("Removing test tooling...")
        removed = manifest.remove_dev_dependencies(profile.test_packages)
        if removed:
            self._record(f"Removed test dependencies: {', '.join(removed)}")
        scripts = manifest.remove_scripts(profile.test_scripts)
        if scripts:
            self._record(f"Removed test scripts: {', '.join(scripts)}")

        for target in profile.targets_for("remove_tests"):
            self._apply(root, target)

        entry = profile.test_types_entry
        try:
            if tsconfig.remove_types_entry(root / profile.tsconfig, entry):
                self._record(f"Removed {entry} types from {profile.tsconfig}")
        except (tsconfig.TsconfigParseError, UnicodeDecodeError) as exc:
            log.warning(
                f"Could not update {profile.tsconfig} automatically ({exc}). "
                f'Please remove "{entry}" from the types array manually.'
            )

    def _install(self, root: Path, profile: CleanupProfile) -> bool:
        log.info(f"Installing packages with {profile.install_label}...")
        request = exec.CommandRequest(argv=profile.install_command, cwd=root)
        try:
            result = exec.run_with_runner(request, runner=self._runner)
        except OSError as exc:
            detail = f"failed to run {profile.install_label}: {exc}"
        else:
            if result is None:
                detail = exec.missing_command_detail(request)
            elif result.returncode != 0:
                detail = exec.command_failure_detail(request, result)
            else:
                self._record("Packages installed successfully")
                return True

        if profile.install_failure == "abort":
            raise ExternalCommandFailedError(
                detail, recovery_hint=f"fix the error and run '{profile.install_label}'"
            )
        log.error(f"Error installing packages: {detail}")
        return False

    def _finish_self_script(
        self,
        root: Path,
        self_script: str,
        profile: CleanupProfile,
        manifest: Manifest,
    ) -> bool:
        if not self._ask("Remove the cleanup script?", profile):
            log.info("Cleanup script kept; you can run it again if needed")
            return False
        self._commit(manifest, profile)
        if targets.remove_path(root / self_script):
            self._record(f"Removed {self_script}")
        else:
            log.debug(f"Skipped {self_script} (not found)")
        return True
