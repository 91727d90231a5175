"""Policy resolution and import checks for a single file.

Every function here is pure: results depend only on the normalized path,
the import edges and the policy set, so files can be checked in any order.
"""

import json
from typing import Iterable, Sequence

from import_fences.constants import EXEMPT_FILENAMES
from import_fences.matching import matches
from import_fences.messages import render_message
from import_fences.models import (
    ConfigError,
    Diagnostic,
    ImportEdge,
    Location,
    MessageId,
    Policy,
    Resolution,
)


FILE_START = Location(line=1, column=0, end_line=1, end_column=5)


def _dump(payload: object) -> str:
    return json.dumps(payload, separators=(",", ":"))


def is_exempt(path: str, exempt_names: Iterable[str] = EXEMPT_FILENAMES) -> bool:
    return path in tuple(exempt_names)


def resolve(path: str, policies: Sequence[Policy]) -> Resolution:
    matching = tuple(policy for policy in policies if matches(path, policy.import_to))
    if len(matching) != 1:
        return ConfigError(path=path, matching=matching)
    return matching[0]


def check_import(policy: Policy, specifier: str) -> bool:
    """True if the allow-list admits the specifier (no allow-list admits all)."""
    if policy.can_import_from is None:
        return True
    return any(matches(specifier, target) for target in policy.can_import_from)


def is_denied(policy: Policy, specifier: str) -> bool:
    return any(matches(specifier, target) for target in policy.cannot_import_from)


def expected_one_rule(error: ConfigError) -> Diagnostic:
    data = {
        "filename": error.path,
        "matchingRules": _dump([policy.as_dict() for policy in error.matching]),
    }
    return Diagnostic(
        message_id=MessageId.EXPECTED_ONE_RULE,
        filename=error.path,
        location=FILE_START,
        data=data,
        message=render_message(MessageId.EXPECTED_ONE_RULE, data),
    )


def _import_diagnostic(
    path: str, policy: Policy, edge: ImportEdge, denied: bool
) -> Diagnostic:
    if denied:
        message_id = MessageId.IMPORT_FORBIDDEN
        data = {
            "importingTo": policy.as_dict()["importTo"],
            "forbiddenFolders": _dump(policy.forbidden_texts),
        }
    else:
        message_id = MessageId.IMPORT_NOT_ALLOWED
        data = {
            "importingTo": policy.as_dict()["importTo"],
            "allowedFolders": _dump(policy.allowed_texts),
        }
    data["imported"] = edge.specifier
    return Diagnostic(
        message_id=message_id,
        filename=path,
        location=edge.location,
        data=data,
        message=render_message(message_id, data),
    )


def check_file(
    path: str,
    edges: Iterable[ImportEdge],
    policies: Sequence[Policy],
    exempt_names: Iterable[str] = EXEMPT_FILENAMES,
) -> list[Diagnostic]:
    if is_exempt(path, exempt_names):
        return []

    resolution = resolve(path, policies)
    if isinstance(resolution, ConfigError):
        return [expected_one_rule(resolution)]

    diagnostics: list[Diagnostic] = []
    for edge in edges:
        if is_denied(resolution, edge.specifier):
            diagnostics.append(_import_diagnostic(path, resolution, edge, denied=True))
        elif not check_import(resolution, edge.specifier):
            diagnostics.append(_import_diagnostic(path, resolution, edge, denied=False))
    return diagnostics
