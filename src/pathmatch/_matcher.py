"""Matcher — walk URL segments and pattern tokens in lock-step.

Single forward scan, no backtracking:
- Literal / NamedParam / SingleWildcard consume one URL segment each
- A leading ``**`` matches everything; a trailing ``**`` matches the rest
- A ``**`` followed by more tokens absorbs URL segments one at a time
  until the next token matches again (first anchor wins)

INV: a failed match never carries parameters. Partial bindings are
dropped and the shared NO_MATCH result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, overload

from pathmatch._pattern import (
    Literal,
    MultiWildcard,
    NamedParam,
    SingleWildcard,
    compile_pattern,
)
from pathmatch._registry import DEFAULT_REGISTRY
from pathmatch._segments import MAX_PATH_SEGMENTS, to_segments

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pathmatch._pattern import PathPattern, Token
    from pathmatch._registry import TypeRegistry

logger = logging.getLogger("pathmatch.matcher")


@dataclass(frozen=True, slots=True)
class PathParam:
    """A named parameter bound during a successful match.

    value is the raw URL segment text, never decoded.
    """

    name: str
    value: str

    def get_as[T](self, type_: Callable[[str], T]) -> T:
        """Convert the value with *type_* (``int``, ``float``, ``uuid.UUID``...).

        Raises whatever *type_* raises, typically ValueError.
        """
        return type_(self.value)


@dataclass(frozen=True, slots=True)
class PathMatchResult:
    """Whether a URL matched a pattern, and the parameters it bound.

    Truthy exactly when matches is True:

    >>> result = match_path("/users/andrew", "/users/:name")
    >>> bool(result), result.get("name")
    (True, 'andrew')
    """

    matches: bool
    params: tuple[PathParam, ...] = ()

    def __bool__(self) -> bool:
        return self.matches

    def as_dict(self) -> MappingProxyType[str, str]:
        """Parameters as a read-only name -> value mapping.

        If a name is bound more than once, the last binding wins.
        """
        return MappingProxyType({p.name: p.value for p in self.params})

    @overload
    def get(self, name: str) -> str | None: ...
    @overload
    def get[D](self, name: str, default: D) -> str | D: ...

    def get(self, name: str, default: Any = None) -> Any:
        """Raw value of the first parameter named *name*, or *default*."""
        for param in self.params:
            if param.name == name:
                return param.value
        return default

    def get_as[T, D](
        self, name: str, type_: Callable[[str], T], default: D | None = None
    ) -> T | D | None:
        """First parameter named *name* converted with *type_*, or *default*.

        Conversion errors propagate; declare a type tag in the pattern
        (``:id:int``) to guarantee the value converts.
        """
        for param in self.params:
            if param.name == name:
                return param.get_as(type_)
        return default


NO_MATCH = PathMatchResult(matches=False)
_MATCH_ALL = PathMatchResult(matches=True)


def match_tokens(
    url_segments: Sequence[str],
    tokens: Sequence[Token],
    registry: TypeRegistry = DEFAULT_REGISTRY,
) -> PathMatchResult:
    """Run the matching state machine over pre-split URL segments and tokens.

    Neither input sequence is mutated.
    """
    if tokens and isinstance(tokens[0], MultiWildcard):
        return _MATCH_ALL

    params: list[PathParam] = []
    url_idx = 0
    token_idx = 0
    absorbing = False

    while url_idx < len(url_segments) and token_idx < len(tokens):
        segment = url_segments[url_idx]
        match tokens[token_idx]:
            case SingleWildcard():
                url_idx += 1
                token_idx += 1
                absorbing = False
                continue
            case NamedParam(name=name, type_tag=tag) if (
                tag is None or registry.accepts(tag, segment)
            ):
                params.append(PathParam(name, segment))
                url_idx += 1
                token_idx += 1
                absorbing = False
                continue
            case MultiWildcard():
                if token_idx == len(tokens) - 1:
                    return PathMatchResult(True, tuple(params))
                token_idx += 1
                absorbing = True
                continue
            case Literal(text=text) if text == segment:
                url_idx += 1
                token_idx += 1
                absorbing = False
                continue

        # No token rule applied to this segment.
        if not absorbing:
            return NO_MATCH
        url_idx += 1

    if url_idx < len(url_segments):
        return NO_MATCH
    remaining = tokens[token_idx:]
    if remaining and not (len(remaining) == 1 and isinstance(remaining[0], MultiWildcard)):
        return NO_MATCH
    return PathMatchResult(True, tuple(params))


class PathMatcher:
    """Configurable entry point: segment limit plus type registry.

    Usage::

        matcher = PathMatcher(max_segments=32)
        result = matcher.match("/bank/12345/balance", "/bank/:account-id:int/balance")
        result.get_as("account-id", int)  # 12345

    Patterns are compiled once and cached; instances are immutable and
    may be shared between threads.
    """

    __slots__ = ("_max_segments", "_registry")

    def __init__(
        self,
        max_segments: int = MAX_PATH_SEGMENTS,
        registry: TypeRegistry = DEFAULT_REGISTRY,
    ) -> None:
        if max_segments < 1:
            msg = f"max_segments must be positive, got {max_segments}"
            raise ValueError(msg)
        self._max_segments = max_segments
        self._registry = registry

    @property
    def max_segments(self) -> int:
        return self._max_segments

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def compile(self, pattern: str) -> PathPattern:
        """Compile *pattern* under this matcher's segment limit.

        Raises:
            PatternSyntaxError: If the pattern is malformed.
            SegmentCapacityError: If the pattern has too many segments.
        """
        compiled = compile_pattern(pattern, self._max_segments)
        for tag in compiled.type_tags:
            if not self._registry.contains(tag):
                logger.warning(
                    "pattern %r declares unknown parameter type %r; it will never match",
                    pattern,
                    tag,
                )
        return compiled

    def match(self, url: str, pattern: str | PathPattern) -> PathMatchResult:
        """Match *url* against *pattern*.

        Raises:
            PatternSyntaxError: If the pattern is malformed.
            SegmentCapacityError: If either input has too many segments.
        """
        if isinstance(pattern, str):
            pattern = compile_pattern(pattern, self._max_segments)
        url_segments = to_segments(url, self._max_segments, source="url")
        return match_tokens(url_segments, pattern.tokens, self._registry)


_DEFAULT_MATCHER = PathMatcher()


def match_path(url: str, pattern: str) -> PathMatchResult:
    """Match *url* against *pattern* with the default limit and registry.

    >>> match_path("/users/abc", "/users/:id:int").matches
    False

    Raises:
        PatternSyntaxError: If the pattern is malformed.
        SegmentCapacityError: If either input has more than 64 segments.
    """
    return _DEFAULT_MATCHER.match(url, pattern)
