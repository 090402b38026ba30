"""Exception types raised by scopefilter."""

from __future__ import annotations

from collections.abc import Sequence


class ScopeFilterError(Exception):
    """Base exception for the library."""


class GlobSyntaxError(ScopeFilterError, ValueError):
    """A pattern could not be compiled as a glob."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid glob pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class ResourceNotFoundError(ScopeFilterError, LookupError):
    """A resource resolver could not resolve an identifier."""


class InvalidIncludesExcludesError(ScopeFilterError, ValueError):
    """An include/exclude pair failed validation."""

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


class ConfigError(ScopeFilterError, ValueError):
    """Malformed configuration values."""
