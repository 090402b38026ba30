"""
Glob pattern compilation.

Patterns match whole strings and have no notion of path separators:

- `*` matches any run of characters, including none
- `?` matches exactly one character
- `[abc]`, `[a-z]`, `[!abc]` match one character from (or not from) a class
- `{a,b}` matches any of the comma-separated alternatives (alternatives nest)
- `\\x` matches `x` literally

Unclosed `[` or `{`, empty classes, reversed ranges and a trailing `\\` are
compile errors.
"""

from __future__ import annotations

import re
from functools import lru_cache

from scopefilter.errors import GlobSyntaxError


@lru_cache(maxsize=1024)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern into a regex to be used with `fullmatch`.
    Raises `GlobSyntaxError` if the pattern is malformed.
    """
    return re.compile(_GlobTranslator(pattern).translate(), re.DOTALL)


class _GlobTranslator:
    """Recursive-descent translation of one glob pattern into regex source."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.pos = 0

    def translate(self) -> str:
        return self._sequence(in_braces=False)

    def _error(self, reason: str) -> GlobSyntaxError:
        return GlobSyntaxError(self.pattern, reason)

    def _at_end(self) -> bool:
        return self.pos >= len(self.pattern)

    def _next(self) -> str:
        c = self.pattern[self.pos]
        self.pos += 1
        return c

    def _sequence(self, in_braces: bool) -> str:
        parts: list[str] = []
        while not self._at_end():
            if in_braces and self.pattern[self.pos] in ",}":
                break
            c = self._next()
            if c == "*":
                # Runs of stars are equivalent to a single star.
                while not self._at_end() and self.pattern[self.pos] == "*":
                    self.pos += 1
                parts.append(".*")
            elif c == "?":
                parts.append(".")
            elif c == "[":
                parts.append(self._char_class())
            elif c == "{":
                parts.append(self._alternatives())
            elif c == "\\":
                parts.append(re.escape(self._escaped()))
            else:
                parts.append(re.escape(c))
        return "".join(parts)

    def _escaped(self) -> str:
        if self._at_end():
            raise self._error("trailing escape character")
        return self._next()

    def _alternatives(self) -> str:
        options: list[str] = []
        while True:
            options.append(self._sequence(in_braces=True))
            if self._at_end():
                raise self._error("unclosed '{'")
            if self._next() == "}":
                break
        return "(?:" + "|".join(options) + ")"

    def _char_class(self) -> str:
        negate = False
        if not self._at_end() and self.pattern[self.pos] == "!":
            negate = True
            self.pos += 1

        items: list[str] = []
        while True:
            if self._at_end():
                raise self._error("unclosed '['")
            c = self._next()
            if c == "]":
                break
            if c == "\\":
                c = self._escaped()
            # A '-' between two characters forms a range, unless it closes the class.
            if (
                self.pos + 1 < len(self.pattern)
                and self.pattern[self.pos] == "-"
                and self.pattern[self.pos + 1] != "]"
            ):
                self.pos += 1
                hi = self._next()
                if hi == "\\":
                    hi = self._escaped()
                if hi < c:
                    raise self._error(f"invalid range '{c}-{hi}'")
                items.append(f"{re.escape(c)}-{re.escape(hi)}")
            else:
                items.append(re.escape(c))

        if not items:
            raise self._error("empty character class")
        return "[" + ("^" if negate else "") + "".join(items) + "]"
