"""Error types for pathmatch.

A non-matching path is never an error; it is a normal
``PathMatchResult(matches=False)``. Everything here signals a broken
route table or an input that exceeds a configured limit.
"""

from __future__ import annotations


class PathMatchError(Exception):
    """Base class for pattern and input-size errors."""


class PatternSyntaxError(PathMatchError):
    """A pattern segment cannot be interpreted.

    Raised at compile time: it indicates a mistake by the author of the
    pattern, not a bad user-supplied path.
    """

    def __init__(self, pattern: str, segment: str, reason: str) -> None:
        self.pattern = pattern
        self.segment = segment
        super().__init__(f"invalid segment {segment!r} in pattern {pattern!r}: {reason}")


class SegmentCapacityError(PathMatchError):
    """A path or pattern has more segments than the configured limit."""

    def __init__(self, count: int, max_: int, source: str = "path") -> None:
        self.count = count
        self.max = max_
        self.source = source
        super().__init__(
            f"too many {source} segments: more than {max_} (saw at least {count})"
        )


class InvalidTypeTagError(PathMatchError):
    """A parameter type tag cannot be registered."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"invalid parameter type tag: {tag!r}")


class TooManyRoutesError(PathMatchError):
    """Route table has too many routes (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many routes: {count} exceeds maximum {max_}")
