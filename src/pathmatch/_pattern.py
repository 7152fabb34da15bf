"""Pattern tokens and pattern compilation.

Every pattern segment is classified by its text alone:

| Segment          | Token            |
|------------------|------------------|
| ``*``            | SingleWildcard   |
| ``**``           | MultiWildcard    |
| ``:name``        | NamedParam       |
| ``:name:type``   | NamedParam       |
| anything else    | Literal          |

The Token union is pattern-matchable via match/case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from pathmatch._errors import PatternSyntaxError
from pathmatch._segments import MAX_PATH_SEGMENTS, to_segments

logger = logging.getLogger("pathmatch.pattern")

PATTERN_CACHE_SIZE = 1024


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches a URL segment with exactly this text."""

    text: str


@dataclass(frozen=True, slots=True)
class SingleWildcard:
    """``*``: matches exactly one URL segment of any content."""


@dataclass(frozen=True, slots=True)
class MultiWildcard:
    """``**``: matches zero or more URL segments.

    Not backtracking: once past a ``**``, URL segments are absorbed one at
    a time until the next token matches, and the first such match is kept.
    """


@dataclass(frozen=True, slots=True)
class NamedParam:
    """``:name`` or ``:name:type``: binds one URL segment to *name*.

    type_tag is lower-cased, or None for an untyped parameter. An empty
    tag (``:name:``) is kept as ``""`` and never matches.
    """

    name: str
    type_tag: str | None = None


type Token = Literal | SingleWildcard | MultiWildcard | NamedParam

_SINGLE = SingleWildcard()
_MULTI = MultiWildcard()


def parse_segment(segment: str, pattern: str | None = None) -> Token:
    """Classify a single pattern segment.

    Raises:
        PatternSyntaxError: If a named parameter has no name (``:``, ``::int``).
    """
    if segment == "*":
        return _SINGLE
    if segment == "**":
        return _MULTI
    if segment.startswith(":"):
        name, sep, type_tag = segment[1:].partition(":")
        if not name:
            raise PatternSyntaxError(
                segment if pattern is None else pattern,
                segment,
                "cannot extract a parameter name",
            )
        return NamedParam(name=name, type_tag=type_tag.lower() if sep else None)
    return Literal(segment)


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled route pattern: the raw string plus its tokens.

    Immutable; safe to share between threads and to cache.
    """

    raw: str
    tokens: tuple[Token, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        """Names of the named parameters, in pattern order."""
        return tuple(t.name for t in self.tokens if isinstance(t, NamedParam))

    @property
    def type_tags(self) -> tuple[str, ...]:
        """Declared type tags of typed parameters, in pattern order."""
        return tuple(
            t.type_tag
            for t in self.tokens
            if isinstance(t, NamedParam) and t.type_tag is not None
        )

    def __str__(self) -> str:
        return self.raw


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def compile_pattern(pattern: str, max_segments: int = MAX_PATH_SEGMENTS) -> PathPattern:
    """Segment and classify *pattern*.

    Every segment is classified up-front, so a malformed segment is
    reported even when matching would never reach it. Results are cached
    per (pattern, max_segments).

    Raises:
        PatternSyntaxError: If any segment is malformed.
        SegmentCapacityError: If the pattern has more than *max_segments* segments.
    """
    segments = to_segments(pattern, max_segments, source="pattern")
    tokens = tuple(parse_segment(s, pattern) for s in segments)
    logger.debug("compiled pattern %r into %d tokens", pattern, len(tokens))
    return PathPattern(raw=pattern, tokens=tokens)
