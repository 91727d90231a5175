from pathlib import Path
from typing import Iterable, Optional

from import_fences.constants import EXEMPT_FILENAMES
from import_fences.errors import FenceAppError
from import_fences.models import Diagnostic, FenceConfig, LintReport
from import_fences.resolver import check_file, is_exempt
from import_fences.scanner import SourceScanner
from import_fences.utils import normalize_path


class ImportFenceLinter:
    def __init__(
        self,
        config: FenceConfig,
        project_root: Path,
        scanner: Optional[SourceScanner] = None,
        exempt_names: Iterable[str] = EXEMPT_FILENAMES,
    ) -> None:
        self.config = config
        self.project_root = project_root.resolve()
        self.scanner = scanner or SourceScanner()
        self.exempt_names = tuple(exempt_names)

    def normalize(self, path: Path) -> str:
        return normalize_path(path.resolve(), self.project_root)

    def lint_file(self, path: Path) -> list[Diagnostic]:
        normalized = self.normalize(path)
        if is_exempt(normalized, self.exempt_names):
            return []
        edges = self.scanner.read_imports(path)
        return check_file(
            normalized, edges, self.config.rules, exempt_names=self.exempt_names
        )

    def lint_paths(self, paths: Iterable[Path]) -> LintReport:
        report = LintReport()
        for path in self.scanner.iter_source_files(paths):
            normalized = self.normalize(path)
            if is_exempt(normalized, self.exempt_names):
                report.exempt.append(normalized)
                continue
            try:
                report.diagnostics.extend(self.lint_file(path))
            except FenceAppError as exc:
                report.errors.append(exc)
                continue
            report.checked += 1
        return report
