"""RouteTable — ordered patterns with first-match-wins semantics.

Routes are tried in order; the first pattern that matches the URL wins
and later routes are never consulted. If nothing matches, the
on_no_match fallback (if any) is returned.

Every pattern is compiled when the table is built, so a broken pattern
fails at configuration time rather than on the first request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathmatch._errors import TooManyRoutesError
from pathmatch._matcher import NO_MATCH, PathMatcher, PathMatchResult, match_tokens
from pathmatch._registry import DEFAULT_REGISTRY
from pathmatch._segments import MAX_PATH_SEGMENTS, to_segments

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pathmatch._config import RouteTableConfig
    from pathmatch._pattern import PathPattern
    from pathmatch._registry import TypeRegistry

logger = logging.getLogger("pathmatch.routes")

MAX_ROUTES = 1024


@dataclass(frozen=True, slots=True)
class Route[A]:
    """A compiled pattern paired with its action."""

    pattern: PathPattern
    action: A


@dataclass(frozen=True, slots=True)
class RouteMatch[A]:
    """The outcome of RouteTable.match().

    pattern is None when the action came from the on_no_match fallback;
    result is then NO_MATCH.
    """

    action: A
    result: PathMatchResult
    pattern: PathPattern | None = None

    @property
    def params(self) -> dict[str, str]:
        """Bound parameters as a plain dict."""
        return dict(self.result.as_dict())


@dataclass(frozen=True, slots=True)
class RouteTable[A]:
    """Immutable first-match-wins route table.

    Usage::

        table = RouteTable.from_routes(
            [("/users/:id:int", "user_detail"), ("/static/**", "static")],
            on_no_match="not_found",
        )
        table.match("/users/42").params  # {"id": "42"}
    """

    routes: tuple[Route[A], ...]
    on_no_match: A | None = None
    max_segments: int = MAX_PATH_SEGMENTS
    registry: TypeRegistry = DEFAULT_REGISTRY

    def __post_init__(self) -> None:
        if len(self.routes) > MAX_ROUTES:
            raise TooManyRoutesError(len(self.routes), MAX_ROUTES)

    @classmethod
    def from_routes(
        cls,
        routes: Iterable[tuple[str, A]],
        on_no_match: A | None = None,
        max_segments: int = MAX_PATH_SEGMENTS,
        registry: TypeRegistry = DEFAULT_REGISTRY,
    ) -> RouteTable[A]:
        """Compile (pattern, action) pairs into a RouteTable.

        Raises:
            PatternSyntaxError: If any pattern is malformed.
            SegmentCapacityError: If any pattern has too many segments.
            TooManyRoutesError: If there are more than MAX_ROUTES routes.
        """
        pairs = tuple(routes)
        if len(pairs) > MAX_ROUTES:
            raise TooManyRoutesError(len(pairs), MAX_ROUTES)
        matcher = PathMatcher(max_segments, registry)
        compiled = tuple(Route(matcher.compile(p), action) for p, action in pairs)
        logger.debug("loaded route table with %d routes", len(compiled))
        return cls(
            routes=compiled,
            on_no_match=on_no_match,
            max_segments=max_segments,
            registry=registry,
        )

    def match(self, url: str) -> RouteMatch[A] | None:
        """Return the first matching route, the fallback, or None.

        Raises:
            SegmentCapacityError: If *url* has too many segments.
        """
        url_segments = to_segments(url, self.max_segments, source="url")
        for route in self.routes:
            result = match_tokens(url_segments, route.pattern.tokens, self.registry)
            if result:
                return RouteMatch(route.action, result, route.pattern)
        if self.on_no_match is not None:
            return RouteMatch(self.on_no_match, NO_MATCH)
        return None

    def __len__(self) -> int:
        return len(self.routes)


def load_route_table[A](
    config: RouteTableConfig[A], registry: TypeRegistry = DEFAULT_REGISTRY
) -> RouteTable[A]:
    """Load a RouteTable from configuration.

    Raises:
        PatternSyntaxError: If any pattern is malformed.
        SegmentCapacityError: If any pattern has too many segments.
        TooManyRoutesError: If there are more than MAX_ROUTES routes.
    """
    return RouteTable.from_routes(
        ((r.pattern, r.action) for r in config.routes),
        on_no_match=config.on_no_match,
        max_segments=config.max_segments,
        registry=registry,
    )
