"""Safety tests: module import boundary enforcement.

Only ``mailerlite_cli.ui.app`` may import Textual.  The model, views,
components and state must stay constructible without a running Textual
app, and ``core``/``api`` must never depend on the UI.
"""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src" / "mailerlite_cli"

PURE_UI = [
    SRC / "ui" / "state.py",
    SRC / "ui" / "keys.py",
    SRC / "ui" / "model.py",
    SRC / "ui" / "components",
    SRC / "ui" / "views",
]


def _collect_imports(filepath: Path) -> list[str]:
    """Return all import source strings from a Python file."""
    try:
        tree = ast.parse(filepath.read_text(), filename=str(filepath))
    except SyntaxError:
        return []

    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module:
            imports.append(node.module)
        elif isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(alias.name)
    return imports


def _python_files(path: Path) -> list[Path]:
    return [path] if path.is_file() else sorted(path.rglob("*.py"))


def _violations(paths: list[Path], prefix: str) -> list[str]:
    found: list[str] = []
    for path in paths:
        for pyfile in _python_files(path):
            for imp in _collect_imports(pyfile):
                if imp == prefix or imp.startswith(prefix + "."):
                    found.append(f"{pyfile.relative_to(ROOT)}: {imp}")
    return found


def test_textual_not_imported_by_pure_ui_layers() -> None:
    violations = _violations(PURE_UI, "textual")
    assert not violations, "pure UI layers must not import textual:\n" + "\n".join(
        f"  - {v}" for v in violations
    )


def test_textual_not_imported_by_core_or_api() -> None:
    violations = _violations([SRC / "core", SRC / "api"], "textual")
    assert not violations, "core/ and api/ must not import textual:\n" + "\n".join(
        f"  - {v}" for v in violations
    )


def test_ui_not_imported_by_core_or_api() -> None:
    violations = _violations([SRC / "core", SRC / "api"], "mailerlite_cli.ui")
    assert not violations, "core/ and api/ must not import the UI:\n" + "\n".join(
        f"  - {v}" for v in violations
    )


def test_app_is_the_only_textual_importer() -> None:
    importers = sorted(
        str(pyfile.relative_to(SRC))
        for pyfile in SRC.rglob("*.py")
        if any(imp == "textual" or imp.startswith("textual.") for imp in _collect_imports(pyfile))
    )
    assert importers == ["ui/app.py"]
