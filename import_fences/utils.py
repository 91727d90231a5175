import json
from pathlib import Path
from typing import Any

import yaml


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def to_posix(path: str | Path) -> str:
    return str(path).replace("\\", "/")


def normalize_path(file_path: str | Path, project_root: str | Path) -> str:
    """Project-relative path with `/` separators and no empty segments."""
    text = to_posix(file_path)
    root = to_posix(project_root)
    prefix = root.rstrip("/") + "/"
    if root and text == root:
        text = ""
    elif root and text.startswith(prefix):
        text = text[len(prefix) :]
    return "/".join(part for part in text.split("/") if part)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
