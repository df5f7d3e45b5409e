"""Case-insensitive glob matching over whole path strings."""

from __future__ import annotations

import re

from .exceptions import InvalidArgumentError


class PatternMatcher:
    """A compiled glob pattern.

    ``*`` matches any run of characters (path separators included) and
    ``?`` matches exactly one character.  Every other character is
    literal.  Matching is case-insensitive and anchored at both ends.
    """

    __slots__ = ("pattern", "_regex")

    def __init__(self, pattern: str):
        if not pattern:
            raise InvalidArgumentError("Glob pattern must not be empty")
        self.pattern = pattern
        self._regex = re.compile(_translate(pattern), re.IGNORECASE | re.DOTALL)

    def matches(self, candidate: str) -> bool:
        """Return ``True`` if *candidate* matches the whole pattern."""
        return self._regex.fullmatch(candidate) is not None

    def __call__(self, candidate: str) -> bool:
        return self.matches(candidate)

    def __repr__(self) -> str:
        return f"PatternMatcher({self.pattern!r})"


def _translate(pattern: str) -> str:
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return "".join(parts)


def compile_pattern(pattern: str) -> PatternMatcher:
    """Compile a glob *pattern* into a :class:`PatternMatcher`."""
    return PatternMatcher(pattern)


def glob_match(pattern: str, candidate: str) -> bool:
    """One-shot helper: does *candidate* match *pattern*?"""
    return PatternMatcher(pattern).matches(candidate)
