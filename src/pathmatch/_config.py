"""Config types for data-driven route tables.

Config-driven construction path:
  dict → parse_route_table_config() → RouteTableConfig → load_route_table() → RouteTable

Accepted shape (JSON or YAML, parsed by the caller)::

    max_segments: 64            # optional
    routes:
      - pattern: /users/:id:int
        action: user_detail
      - pattern: /static/**
        action: static
    on_no_match: not_found      # optional

Parsing only checks the shape. Patterns are compiled, and pattern errors
raised, by load_route_table().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pathmatch._segments import MAX_PATH_SEGMENTS


@dataclass(frozen=True, slots=True)
class RouteConfig[A]:
    """A pattern and the action returned when it matches."""

    pattern: str
    action: A


@dataclass(frozen=True, slots=True)
class RouteTableConfig[A]:
    """Configuration for a RouteTable."""

    routes: tuple[RouteConfig[A], ...]
    on_no_match: A | None = None
    max_segments: int = MAX_PATH_SEGMENTS


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_route_table_config(data: dict[str, Any]) -> RouteTableConfig[Any]:
    """Parse a dict into a RouteTableConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    routes = tuple(_parse_route(r) for r in raw_routes)

    max_segments = data.get("max_segments", MAX_PATH_SEGMENTS)
    # bool is an int subclass; reject it explicitly
    if not isinstance(max_segments, int) or isinstance(max_segments, bool):
        msg = f"'max_segments' must be an integer, got {type(max_segments).__name__}"
        raise ConfigParseError(msg)
    if max_segments < 1:
        msg = f"'max_segments' must be positive, got {max_segments}"
        raise ConfigParseError(msg)

    return RouteTableConfig(
        routes=routes,
        on_no_match=data.get("on_no_match"),
        max_segments=max_segments,
    )


def _parse_route(data: dict[str, Any]) -> RouteConfig[Any]:
    """Parse a single route config dict."""
    if not isinstance(data, dict):
        msg = f"route must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "pattern" not in data:
        msg = "route missing required field 'pattern'"
        raise ConfigParseError(msg)
    if "action" not in data:
        msg = "route missing required field 'action'"
        raise ConfigParseError(msg)

    pattern = data["pattern"]
    if not isinstance(pattern, str):
        msg = f"route 'pattern' must be a string, got {type(pattern).__name__}"
        raise ConfigParseError(msg)

    return RouteConfig(pattern=pattern, action=data["action"])
