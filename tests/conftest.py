# ruff: noqa: E402

import builtins
import json
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import freshstart.io as io
import freshstart.log as freshstart_log

DOCTEST_MODULES = {
    ROOT / "src" / "freshstart" / "__init__.py",
    ROOT / "src" / "freshstart" / "config.py",
    ROOT / "src" / "freshstart" / "io.py",
    ROOT / "src" / "freshstart" / "manifest.py",
    ROOT / "src" / "freshstart" / "models.py",
    ROOT / "src" / "freshstart" / "naming.py",
    ROOT / "src" / "freshstart" / "tsconfig.py",
}

TEMPLATE_MANIFEST = {
    "name": "ts-template",
    "version": "1.0.0",
    "description": "TypeScript starter template",
    "keywords": ["template", "typescript"],
    "type": "module",
    "scripts": {
        "build": "tsc",
        "test": "jest",
        "test:watch": "jest --watch",
        "cleanup": "tsx cleanup.ts",
    },
    "devDependencies": {
        "@jest/globals": "^29.7.0",
        "@types/jest": "^29.5.12",
        "@types/node": "^20.11.0",
        "jest": "^29.7.0",
        "ts-jest": "^29.1.2",
        "typescript": "^5.4.0",
    },
}

TEMPLATE_TSCONFIG = """{
  // Compiler settings for the starter
  "compilerOptions": {
    "target": "ES2022",
    /* resolve like node does */
    "moduleResolution": "node",
    "types": ["node", "jest"],
    "baseUrl": ".",
    "paths": { "@/*": ["./src/*"] },
  },
  "include": ["src", "tests"]
}
"""


@pytest.fixture(autouse=True)
def _default_prompt_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(freshstart_log, "_configured_level", freshstart_log.LogLevel.INFO)
    monkeypatch.setattr(freshstart_log, "_no_color_override", None)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


@pytest.fixture
def template_project(tmp_path: Path) -> Path:
    """A freshly generated template project in a directory named "My Cool App!!"."""
    root = tmp_path / "My Cool App!!"
    (root / "tests").mkdir(parents=True)
    (root / "src" / "tests").mkdir(parents=True)
    (root / "src" / "lib").mkdir(parents=True)
    (root / "package.json").write_text(
        json.dumps(TEMPLATE_MANIFEST, indent=2) + "\n", encoding="utf-8"
    )
    (root / "tsconfig.json").write_text(TEMPLATE_TSCONFIG, encoding="utf-8")
    (root / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n", encoding="utf-8")
    (root / "README.md").write_text("# TS Template\n\nLong intro.\n", encoding="utf-8")
    (root / "jest.config.ts").write_text("export default {};\n", encoding="utf-8")
    (root / "tests" / "index.test.ts").write_text("test('x', () => {});\n", encoding="utf-8")
    (root / "src" / "tests" / "math.test.ts").write_text("// math\n", encoding="utf-8")
    (root / "src" / "lib" / "math.ts").write_text(
        "export const add = (a: number, b: number) => a + b;\n", encoding="utf-8"
    )
    (root / "src" / "index.ts").write_text("console.log('hi');\n", encoding="utf-8")
    (root / ".env.example").write_text("API_KEY=changeme\n", encoding="utf-8")
    (root / "cleanup.ts").write_text("// cleanup script\n", encoding="utf-8")
    return root


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
