"""Pattern matching for policy paths and import specifiers.

A pattern is one of:

- an exact string, matched by equality;
- a prefix string ending in ``*``, matched with ``str.startswith``;
- a compiled regular expression, matched with ``re.Pattern.search``, so the
  expression's own ``^``/``$`` decide how much of the candidate must match.

Configuration files spell regular expressions as strings with a ``re:``
prefix; ``compile_pattern`` turns those into ``re.Pattern`` objects.
"""

import re
from typing import Union

from import_fences.constants import REGEX_PATTERN_PREFIX, WILDCARD_SUFFIX
from import_fences.errors import InvalidPatternError

Pattern = Union[str, re.Pattern]


def matches(candidate: str, pattern: Pattern) -> bool:
    if isinstance(pattern, re.Pattern):
        return pattern.search(candidate) is not None
    if isinstance(pattern, str):
        if pattern.endswith(WILDCARD_SUFFIX):
            return candidate.startswith(pattern[: -len(WILDCARD_SUFFIX)])
        return candidate == pattern
    raise TypeError(f"Unsupported pattern type: {type(pattern).__name__}")


def compile_pattern(raw: str) -> Pattern:
    if not raw.startswith(REGEX_PATTERN_PREFIX):
        return raw
    expression = raw[len(REGEX_PATTERN_PREFIX) :]
    try:
        return re.compile(expression)
    except re.error as exc:
        raise InvalidPatternError(raw, str(exc)) from exc


def pattern_text(pattern: Pattern) -> str:
    if isinstance(pattern, re.Pattern):
        return f"{REGEX_PATTERN_PREFIX}{pattern.pattern}"
    return pattern
