from pathlib import Path

from import_fences.config import load_config
from import_fences.errors import SourceParseError
from import_fences.linter import ImportFenceLinter
from import_fences.models import MessageId


def _linter(root: Path) -> ImportFenceLinter:
    return ImportFenceLinter(load_config(root / ".import-fences.json"), root)


def test_clean_project_has_no_diagnostics(layered_project: Path) -> None:
    report = _linter(layered_project).lint_paths([layered_project])

    assert report.is_clean()
    assert report.checked == 3
    assert report.diagnostics == []


def test_violation_is_reported_with_normalized_filename(
    layered_project: Path, write_source
) -> None:
    write_source(
        layered_project / "app" / "core" / "leak.py",
        "import os\nfrom app.ui.view import render\n",
    )

    report = _linter(layered_project).lint_paths([layered_project])

    assert [d.filename for d in report.diagnostics] == ["app/core/leak.py"]
    diagnostic = report.diagnostics[0]
    assert diagnostic.message_id == MessageId.IMPORT_NOT_ALLOWED
    assert diagnostic.location.line == 2
    assert diagnostic.data["imported"] == "app.ui.view"
    assert diagnostic.data["importingTo"] == "app/core/*"


def test_unmatched_file_reports_expected_one_rule(
    layered_project: Path, write_source
) -> None:
    write_source(layered_project / "scripts" / "tool.py", "import app.ui.view\n")

    report = _linter(layered_project).lint_paths([layered_project])

    assert [d.message_id for d in report.diagnostics] == [MessageId.EXPECTED_ONE_RULE]
    assert report.diagnostics[0].data["filename"] == "scripts/tool.py"
    assert report.diagnostics[0].data["matchingRules"] == "[]"


def test_parse_errors_are_collected_and_linting_continues(
    layered_project: Path, write_source
) -> None:
    write_source(layered_project / "app" / "core" / "broken.py", "def (:\n")
    write_source(layered_project / "app" / "ui" / "bad.py", "import requests\n")

    report = _linter(layered_project).lint_paths([layered_project])

    assert len(report.errors) == 1
    assert isinstance(report.errors[0], SourceParseError)
    assert [d.data["imported"] for d in report.diagnostics] == ["requests"]
    assert not report.is_clean()


def test_exempt_files_are_skipped(layered_project: Path) -> None:
    config_file = layered_project / ".import-fences.json"

    report = _linter(layered_project).lint_paths([config_file])

    assert report.exempt == [".import-fences.json"]
    assert report.checked == 0
    assert report.is_clean()


def test_lint_file_matches_lint_paths(layered_project: Path, write_source) -> None:
    leak = write_source(layered_project / "app" / "core" / "leak.py", "import rich\n")
    linter = _linter(layered_project)

    assert linter.lint_file(leak) == linter.lint_paths([leak]).diagnostics


def test_summary_counts_diagnostics(layered_project: Path, write_source) -> None:
    write_source(layered_project / "app" / "core" / "leak.py", "import rich\nimport json\n")
    write_source(layered_project / "other.py", "")

    summary = _linter(layered_project).lint_paths([layered_project]).summary()

    assert summary["importNotAllowed"] == 2
    assert summary["expectedOneRule"] == 1
    assert summary["diagnostics"] == 3
    assert summary["files"] == 5
