from typing import Final


CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    ".import-fences.yaml",
    ".import-fences.yml",
    ".import-fences.json",
)

EXEMPT_FILENAMES: Final[tuple[str, ...]] = CONFIG_FILENAMES + (".eslintrc.js",)

REGEX_PATTERN_PREFIX: Final[str] = "re:"
WILDCARD_SUFFIX: Final[str] = "*"

SOURCE_SUFFIX: Final[str] = ".py"

SCAN_IGNORED_DIRS: Final[tuple[str, ...]] = (
    "__pycache__",
    ".venv",
    "venv",
    "node_modules",
    "build",
    "dist",
)

SKIPPED_IMPORTS: Final[tuple[str, ...]] = ("__future__",)
