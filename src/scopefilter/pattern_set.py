"""A set of glob patterns that can be matched against candidate strings."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from scopefilter.errors import GlobSyntaxError
from scopefilter.globs import compile_glob

logger = logging.getLogger(__name__)


class PatternSet:
    """
    Distinct patterns, each either a literal or a glob expression.

    Membership (`in`, `has`) is exact-string. `matches` evaluates every pattern
    as a glob. If any pattern in the set is malformed, `matches` is false for
    every candidate: one bad pattern suppresses all the others.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: set[str] = set(patterns)

    def add(self, *patterns: str) -> PatternSet:
        self._patterns.update(patterns)
        return self

    def as_list(self) -> list[str]:
        """Patterns in sorted order."""
        return sorted(self._patterns)

    def size(self) -> int:
        return len(self._patterns)

    def has(self, literal: str) -> bool:
        return literal in self._patterns

    def matches(self, candidate: str) -> bool:
        """True if any pattern fully matches `candidate`."""
        compiled: list[re.Pattern[str]] = []
        for pattern in self.as_list():
            try:
                compiled.append(compile_glob(pattern))
            except GlobSyntaxError as e:
                logger.debug("Not matching %r: %s", candidate, e)
                return False
        return any(regex.fullmatch(candidate) for regex in compiled)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, literal: object) -> bool:
        return literal in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternSet):
            return NotImplemented
        return self._patterns == other._patterns

    def __repr__(self) -> str:
        return f"PatternSet({self.as_list()!r})"
