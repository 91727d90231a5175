from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from import_fences.constants import CONFIG_FILENAMES
from import_fences.errors import (
    InvalidConfigFormatError,
    InvalidConfigSchemaError,
    InvalidPatternError,
    MissingConfigFileError,
)
from import_fences.matching import compile_pattern
from import_fences.models import FenceConfig, Policy
from import_fences.utils import read_json, read_yaml

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"

_VALIDATOR: Optional[Draft202012Validator] = None


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def config_validator() -> Draft202012Validator:
    global _VALIDATOR
    if _VALIDATOR is None:
        _VALIDATOR = Draft202012Validator(read_json(SCHEMA_PATH))
    return _VALIDATOR


def find_config(start: Path) -> Optional[Path]:
    current = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def _read_payload(path: Path) -> Any:
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        if path.suffix in (".yaml", ".yml"):
            return read_yaml(path)
        return read_json(path)
    except Exception as exc:
        raise InvalidConfigFormatError(path, str(exc)) from exc


def _compile_list(raw: Optional[list[str]]) -> Optional[tuple]:
    if raw is None:
        return None
    return tuple(compile_pattern(item) for item in raw)


def parse_config(payload: Any, source: Path) -> FenceConfig:
    error = next(iter(config_validator().iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(source, format_schema_error(error))

    policies: list[Policy] = []
    for index, item in enumerate(payload["rules"]):
        try:
            policies.append(
                Policy(
                    import_to=compile_pattern(item["importTo"]),
                    can_import_from=_compile_list(item.get("canImportFrom")),
                    cannot_import_from=_compile_list(item.get("cannotImportFrom"))
                    or (),
                )
            )
        except InvalidPatternError as exc:
            raise InvalidConfigSchemaError(source, f"{exc} at rules.{index}") from exc
    return FenceConfig(rules=tuple(policies))


def load_config(path: Path) -> FenceConfig:
    return parse_config(_read_payload(path), path)
