"""
Validation of raw include/exclude lists.

Validators never raise. They return every violation found, as human-readable
strings, and leave it to the caller to reject the configuration (for example
with `check_includes_excludes`).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from scopefilter.errors import InvalidIncludesExcludesError
from scopefilter.includes_excludes import WILDCARD

# Given a name and whether it is only a prefix, return rule violations.
NamespaceNameValidator = Callable[[str, bool], list[str]]

DNS1123_LABEL_MAX_LENGTH = 63
_DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
_DNS1123_LABEL_RE = re.compile(_DNS1123_LABEL_FMT)
_DNS1123_LABEL_ERR = (
    "a lowercase RFC 1123 label must consist of lower case alphanumeric characters or '-', "
    "and must start and end with an alphanumeric character "
    f"(e.g. 'my-name' or '123-abc', regex used for validation is '{_DNS1123_LABEL_FMT}')"
)


def validate_includes_excludes(includes: Sequence[str], excludes: Sequence[str]) -> list[str]:
    """
    Check that the lists form a valid include/exclude pair:

    - `*` in includes must be the only entry
    - `*` is not allowed in excludes
    - no item may be both included and excluded (exact string comparison;
      globs that overlap are not detected)
    """
    violations: list[str] = []

    include_set = set(includes)
    exclude_set = set(excludes)

    if len(include_set) > 1 and WILDCARD in include_set:
        violations.append("includes list must either contain '*' only, or a non-empty list of items")

    if WILDCARD in exclude_set:
        violations.append("excludes list cannot contain '*'")

    for item in sorted(exclude_set):
        if item in include_set:
            violations.append(f"excludes list cannot contain an item in the includes list: {item}")

    return violations


def validate_namespace_includes_excludes(
    includes: Sequence[str],
    excludes: Sequence[str],
    validate_name: NamespaceNameValidator | None = None,
) -> list[str]:
    """
    Like `validate_includes_excludes`, and additionally checks every entry
    other than `*` is a valid namespace name.
    """
    if validate_name is None:
        validate_name = validate_namespace_name

    violations = validate_includes_excludes(includes, excludes)

    # `*` is not a valid namespace name but is allowed in includes; in
    # excludes it has already been reported above.
    for name in sorted(set(includes)) + sorted(set(excludes)):
        if name == WILDCARD:
            continue
        for msg in validate_name(name, False):
            violations.append(f'invalid namespace "{name}": {msg}')

    return violations


def validate_namespace_name(name: str, prefix: bool = False) -> list[str]:
    """
    Kubernetes namespace name rules (an RFC 1123 label). With `prefix`, the
    name is only the start of a generated name, so a trailing `-` is fine.
    """
    if prefix:
        name = _mask_trailing_dash(name)

    errors: list[str] = []
    if len(name) > DNS1123_LABEL_MAX_LENGTH:
        errors.append(f"must be no more than {DNS1123_LABEL_MAX_LENGTH} characters")
    if not _DNS1123_LABEL_RE.fullmatch(name):
        errors.append(_DNS1123_LABEL_ERR)
    return errors


def check_includes_excludes(violations: Sequence[str]) -> None:
    """Raise `InvalidIncludesExcludesError` if there are any violations."""
    if violations:
        raise InvalidIncludesExcludesError(violations)


def _mask_trailing_dash(name: str) -> str:
    if len(name) > 1 and name.endswith("-"):
        return name[:-2] + "a"
    return name
