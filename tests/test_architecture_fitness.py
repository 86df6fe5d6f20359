"""Architectural fitness functions for the package layering.

core <- services <- apps / cli: inner layers never import outer ones.
"""

import re
from pathlib import Path

ROOT = Path(__file__).parent.parent
PACKAGE_DIR = ROOT / "jwlib_linker"


def _importers(layer: str, forbidden: tuple[str, ...]) -> list[str]:
    pattern = re.compile(
        rf"^\s*(from|import)\s+jwlib_linker\.({'|'.join(forbidden)})\b", re.MULTILINE
    )
    return [
        str(py_file.relative_to(ROOT))
        for py_file in (PACKAGE_DIR / layer).rglob("*.py")
        if pattern.search(py_file.read_text(encoding="utf-8"))
    ]


def test_no_python_modules_at_root():
    """Only entry points and config files live at the repository root."""
    allowed = {"setup.py", "conftest.py", "main.py", "__main__.py"}
    violations = [f.name for f in ROOT.glob("*.py") if f.name not in allowed]
    assert not violations, f"Unexpected Python modules at root: {violations}"


def test_core_does_not_import_outer_layers():
    """Core holds tables, models and settings; it depends on nothing above it."""
    violations = _importers("core", ("services", "apps", "cli", "api_factory"))
    assert not violations, f"Core imports outer layers: {violations}"


def test_services_do_not_import_delivery_layers():
    """The linking engine stays usable without FastAPI or Typer."""
    violations = _importers("services", ("apps", "cli", "api_factory"))
    assert not violations, f"Services import delivery layers: {violations}"


def test_no_web_or_cli_frameworks_below_delivery():
    """FastAPI and Typer stay out of core and services."""
    violations = []
    for layer in ("core", "services"):
        for py_file in (PACKAGE_DIR / layer).rglob("*.py"):
            content = py_file.read_text(encoding="utf-8")
            if re.search(r"^\s*(from|import)\s+(fastapi|typer|rich)\b", content, re.MULTILINE):
                violations.append(str(py_file.relative_to(ROOT)))
    assert not violations, f"Framework imports below the delivery layer: {violations}"
