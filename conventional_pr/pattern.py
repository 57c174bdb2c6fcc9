"""Compiled regular expression matcher for titles, commits and branches."""

import re

from .exceptions import ConfigurationError


class PatternMatcher:
    """A regular expression compiled once and evaluated many times."""

    def __init__(self, pattern: re.Pattern) -> None:
        self._pattern = pattern

    @classmethod
    def compile(cls, pattern: str, error: type[ConfigurationError] = ConfigurationError) -> "PatternMatcher":
        """Compile ``pattern``.

        Args:
        ----
            pattern: Regular expression source
            error: Configuration error raised when the pattern is malformed

        Returns:
        -------
            PatternMatcher wrapping the compiled expression

        """
        try:
            return cls(re.compile(pattern))
        except re.error as e:
            msg = f"invalid pattern {pattern!r}: {e}"
            raise error(msg) from e

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def matches(self, subject: str) -> bool:
        """Check whether the pattern occurs anywhere in ``subject``."""
        return self._pattern.search(subject) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternMatcher):
            return NotImplemented
        return self._pattern == other._pattern

    def __hash__(self) -> int:
        return hash(self._pattern)

    def __repr__(self) -> str:
        return f"<PatternMatcher({self.pattern!r})>"
