"""
Include/exclude filtering over string identifiers.

Everything in the includes list except what the excludes list matches is
included. `*` in includes means "include everything"; it is not valid in
excludes. An empty includes list also means "include everything".

Usage::

    from scopefilter import IncludesExcludesBuilder

    namespaces = IncludesExcludesBuilder().includes("app-*").excludes("app-tmp").build()
    namespaces.should_include("app-web")  # True
    namespaces.should_include("app-tmp")  # False
"""

from __future__ import annotations

from collections.abc import Iterable

from scopefilter.pattern_set import PatternSet

WILDCARD = "*"

# Display placeholders for empty lists
_EMPTY_INCLUDES = "*"
_EMPTY_EXCLUDES = "<none>"


class IncludesExcludes:
    """
    A read-only include/exclude decision. Build one with `IncludesExcludesBuilder`
    or construct it directly from pattern lists.

    The pair is not validated here; see `scopefilter.validation`.
    """

    def __init__(self, includes: Iterable[str] = (), excludes: Iterable[str] = ()) -> None:
        self._includes = PatternSet(includes)
        self._excludes = PatternSet(excludes)

    def get_includes(self) -> list[str]:
        return self._includes.as_list()

    def get_excludes(self) -> list[str]:
        return self._excludes.as_list()

    def should_include(self, candidate: str) -> bool:
        """
        Whether `candidate` should be included. An exclude match always wins;
        otherwise the candidate is included if includes is empty, contains `*`,
        or has a matching pattern.
        """
        if self._excludes.matches(candidate):
            return False

        return (
            len(self._includes) == 0
            or WILDCARD in self._includes
            or self._includes.matches(candidate)
        )

    def include_everything(self) -> bool:
        """True if excludes is empty and includes is empty or exactly `*`."""
        return len(self._excludes) == 0 and (
            len(self._includes) == 0
            or (len(self._includes) == 1 and WILDCARD in self._includes)
        )

    def includes_string(self) -> str:
        """Comma-separated includes for display, or `*` if empty."""
        return _as_string(self.get_includes(), _EMPTY_INCLUDES)

    def excludes_string(self) -> str:
        """Comma-separated excludes for display, or `<none>` if empty."""
        return _as_string(self.get_excludes(), _EMPTY_EXCLUDES)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncludesExcludes):
            return NotImplemented
        return self._includes == other._includes and self._excludes == other._excludes

    def __repr__(self) -> str:
        return f"IncludesExcludes(includes={self.get_includes()!r}, excludes={self.get_excludes()!r})"


class IncludesExcludesBuilder:
    """
    Accumulates include and exclude patterns. `build()` returns an independent
    `IncludesExcludes`; later builder calls do not affect filters already built.
    """

    def __init__(self) -> None:
        self._includes = PatternSet()
        self._excludes = PatternSet()

    def includes(self, *items: str) -> IncludesExcludesBuilder:
        """Add include patterns. `*` means "include everything"."""
        self._includes.add(*items)
        return self

    def excludes(self, *items: str) -> IncludesExcludesBuilder:
        self._excludes.add(*items)
        return self

    def build(self) -> IncludesExcludes:
        return IncludesExcludes(self._includes, self._excludes)


def _as_string(items: list[str], empty: str) -> str:
    if not items:
        return empty
    return ", ".join(items)
