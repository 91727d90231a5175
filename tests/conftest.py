import sys
import json
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def write_source():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def layered_project(project_root: Path, write_json, write_source) -> Path:
    write_json(
        project_root / ".import-fences.json",
        {
            "rules": [
                {"importTo": "app/core/*", "canImportFrom": ["app.core*", "os", "typing"]},
                {"importTo": "app/ui/*", "canImportFrom": ["app.core*", "app.ui*", "rich*"]},
                {"importTo": "app/__init__.py", "canImportFrom": []},
            ]
        },
    )
    write_source(project_root / "app" / "__init__.py", "")
    write_source(
        project_root / "app" / "core" / "engine.py",
        "import os\nfrom typing import Any\nfrom app.core.models import Model\n",
    )
    write_source(
        project_root / "app" / "ui" / "view.py",
        "from rich.console import Console\nfrom app.core.engine import run\n",
    )
    return project_root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
