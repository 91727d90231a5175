from pathlib import Path

from import_fences.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    normalize_path,
    read_yaml,
)


# --- normalize_path ---


def test_normalize_path_strips_project_root() -> None:
    assert normalize_path("/work/proj/src/core/a.py", "/work/proj") == "src/core/a.py"


def test_normalize_path_drops_empty_segments() -> None:
    assert normalize_path("/work/proj//src///a.py", "/work/proj") == "src/a.py"


def test_normalize_path_canonicalizes_backslashes() -> None:
    assert normalize_path("C:\\work\\proj\\src\\a.py", "C:\\work\\proj") == "src/a.py"


def test_normalize_path_keeps_path_outside_root() -> None:
    assert normalize_path("/other/src/a.py", "/work/proj") == "other/src/a.py"


def test_normalize_path_requires_whole_root_segment() -> None:
    assert normalize_path("/work/proj-extra/src/a.py", "/work/proj") == (
        "work/proj-extra/src/a.py"
    )


def test_normalize_path_root_with_trailing_slash() -> None:
    assert normalize_path("/work/proj/src/a.py", "/work/proj/") == "src/a.py"
    assert normalize_path("/work/proj", "/work/proj") == ""


def test_normalize_path_accepts_path_objects() -> None:
    assert normalize_path(Path("/work/proj/.import-fences.yaml"), Path("/work/proj")) == (
        ".import-fences.yaml"
    )


def test_normalize_path_with_empty_root() -> None:
    assert normalize_path("src/a.py", "") == "src/a.py"


# --- read_yaml ---


def test_read_yaml_loads_mapping(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("rules:\n  - importTo: 'src/*'\n", encoding="utf-8")

    assert read_yaml(path) == {"rules": [{"importTo": "src/*"}]}


# --- compact_home_path ---


def test_compact_home_path_under_home(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path / "project") == "~/project"


def test_compact_home_path_home_itself(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"


def test_compact_home_paths_in_text(tmp_path: Path) -> None:
    text = f"Missing required config file: {tmp_path}/project/.import-fences.yaml"

    assert compact_home_paths_in_text(text) == (
        "Missing required config file: ~/project/.import-fences.yaml"
    )
