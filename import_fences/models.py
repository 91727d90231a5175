from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from import_fences.matching import Pattern, pattern_text


class MessageId(str, Enum):
    EXPECTED_ONE_RULE = "expectedOneRule"
    IMPORT_NOT_ALLOWED = "importNotAllowed"
    IMPORT_FORBIDDEN = "importForbidden"


@dataclass(frozen=True)
class Policy:
    import_to: Pattern
    can_import_from: Optional[tuple[Pattern, ...]] = None
    cannot_import_from: tuple[Pattern, ...] = ()

    @property
    def allowed_texts(self) -> list[str]:
        return [pattern_text(item) for item in self.can_import_from or ()]

    @property
    def forbidden_texts(self) -> list[str]:
        return [pattern_text(item) for item in self.cannot_import_from]

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"importTo": pattern_text(self.import_to)}
        if self.can_import_from is not None:
            payload["canImportFrom"] = self.allowed_texts
        if self.cannot_import_from:
            payload["cannotImportFrom"] = self.forbidden_texts
        return payload


PolicySet = tuple[Policy, ...]


@dataclass(frozen=True)
class FenceConfig:
    rules: PolicySet


@dataclass(frozen=True)
class ConfigError:
    path: str
    matching: tuple[Policy, ...]


Resolution = Union[Policy, ConfigError]


@dataclass(frozen=True)
class Location:
    line: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None


@dataclass(frozen=True)
class ImportEdge:
    specifier: str
    location: Location


@dataclass(frozen=True)
class Diagnostic:
    message_id: MessageId
    filename: str
    location: Location
    data: dict[str, str]
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {
            "messageId": self.message_id.value,
            "filename": self.filename,
            "line": self.location.line,
            "column": self.location.column,
            "message": self.message,
        }


@dataclass
class LintReport:
    diagnostics: list[Diagnostic] = field(default_factory=list)
    errors: list[Exception] = field(default_factory=list)
    exempt: list[str] = field(default_factory=list)
    checked: int = 0

    def is_clean(self) -> bool:
        return not self.diagnostics and not self.errors

    def summary(self) -> dict[str, int]:
        counts = {message_id.value: 0 for message_id in MessageId}
        for diagnostic in self.diagnostics:
            counts[diagnostic.message_id.value] += 1
        counts["files"] = self.checked
        counts["diagnostics"] = len(self.diagnostics)
        counts["errors"] = len(self.errors)
        counts["exempt"] = len(self.exempt)
        return counts

    def by_file(self) -> dict[str, list[Diagnostic]]:
        grouped: dict[str, list[Diagnostic]] = {}
        for diagnostic in self.diagnostics:
            grouped.setdefault(diagnostic.filename, []).append(diagnostic)
        return grouped
