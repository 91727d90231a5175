import ast
import os
from pathlib import Path
from typing import Iterable

from import_fences.constants import SCAN_IGNORED_DIRS, SKIPPED_IMPORTS, SOURCE_SUFFIX
from import_fences.errors import SourceParseError
from import_fences.models import ImportEdge, Location


class SourceScanner:
    def iter_source_files(self, paths: Iterable[Path]) -> list[Path]:
        files: set[Path] = set()
        for path in paths:
            resolved = path.resolve()
            if resolved.is_file():
                files.add(resolved)
                continue
            if resolved.is_dir():
                files.update(self._walk(resolved))
        return sorted(files)

    def _walk(self, directory: Path) -> list[Path]:
        found: list[Path] = []
        for root, dir_names, file_names in os.walk(str(directory), topdown=True):
            dir_names[:] = [
                name
                for name in dir_names
                if not name.startswith(".") and name not in SCAN_IGNORED_DIRS
            ]
            current = Path(root)
            found.extend(
                current / name for name in file_names if name.endswith(SOURCE_SUFFIX)
            )
        return found

    def extract_imports(self, source: str, filename: Path) -> list[ImportEdge]:
        try:
            tree = ast.parse(source, filename=str(filename))
        except (SyntaxError, ValueError) as exc:
            raise SourceParseError(filename, str(exc)) from exc

        edges: list[ImportEdge] = []
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                location = _location(node)
                edges.extend(ImportEdge(alias.name, location) for alias in node.names)
            elif isinstance(node, ast.ImportFrom):
                if node.level == 0 and node.module in SKIPPED_IMPORTS:
                    continue
                specifier = "." * node.level + (node.module or "")
                edges.append(ImportEdge(specifier, _location(node)))
        edges.sort(key=lambda edge: (edge.location.line, edge.location.column))
        return edges

    def read_imports(self, path: Path) -> list[ImportEdge]:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceParseError(path, str(exc)) from exc
        return self.extract_imports(source, path)


def _location(node: ast.stmt) -> Location:
    return Location(
        line=node.lineno,
        column=node.col_offset,
        end_line=node.end_lineno,
        end_column=node.end_col_offset,
    )


def iter_source_files(paths: Iterable[Path]) -> list[Path]:
    return SourceScanner().iter_source_files(paths)


def extract_imports(source: str, filename: Path) -> list[ImportEdge]:
    return SourceScanner().extract_imports(source, filename)
