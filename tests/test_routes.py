"""Tests for RouteTable and config-driven loading."""

from __future__ import annotations

import json

import pytest
import yaml

from pathmatch import (
    MAX_ROUTES,
    NO_MATCH,
    PathMatchError,
    PatternSyntaxError,
    RouteTable,
    SegmentCapacityError,
    TooManyRoutesError,
    TypeRegistryBuilder,
    load_route_table,
    parse_route_table_config,
)

ROUTES_YAML = """
max_segments: 16
routes:
  - pattern: /users/:id:int
    action: user_detail
  - pattern: /users/:username
    action: user_by_name
  - pattern: /users/**/settings
    action: settings
  - pattern: /static/**
    action: static
on_no_match: not_found
"""


class TestRouteTable:
    def _table(self) -> RouteTable[str]:
        return RouteTable.from_routes(
            [
                ("/users/:id:int", "user_detail"),
                ("/users/:username", "user_by_name"),
                ("/static/**", "static"),
            ]
        )

    def test_first_match_wins(self) -> None:
        match = self._table().match("/users/42")
        assert match is not None
        assert match.action == "user_detail"
        assert match.params == {"id": "42"}
        assert match.pattern is not None
        assert match.pattern.raw == "/users/:id:int"

    def test_falls_through_to_later_route(self) -> None:
        match = self._table().match("/users/andrew")
        assert match is not None
        assert match.action == "user_by_name"
        assert match.params == {"username": "andrew"}

    def test_no_match_returns_none(self) -> None:
        assert self._table().match("/orders/1") is None

    def test_on_no_match_fallback(self) -> None:
        table = RouteTable.from_routes([("/a", "a")], on_no_match="default")
        match = table.match("/b")
        assert match is not None
        assert match.action == "default"
        assert match.result is NO_MATCH
        assert match.pattern is None
        assert match.params == {}

    def test_empty_table(self) -> None:
        table: RouteTable[str] = RouteTable.from_routes([])
        assert len(table) == 0
        assert table.match("/") is None

    def test_len(self) -> None:
        assert len(self._table()) == 3

    def test_broken_pattern_fails_at_build_time(self) -> None:
        with pytest.raises(PatternSyntaxError):
            RouteTable.from_routes([("/ok", "ok"), ("/users/:", "broken")])

    def test_url_over_capacity(self) -> None:
        table = RouteTable.from_routes([("/**", "all")], max_segments=2)
        with pytest.raises(SegmentCapacityError):
            table.match("/a/b/c")

    def test_pattern_over_capacity(self) -> None:
        with pytest.raises(SegmentCapacityError):
            RouteTable.from_routes([("/a/b/c", "x")], max_segments=2)

    def test_too_many_routes(self) -> None:
        routes = [(f"/r{i}", i) for i in range(MAX_ROUTES + 1)]
        with pytest.raises(TooManyRoutesError) as exc_info:
            RouteTable.from_routes(routes)
        assert exc_info.value.count == MAX_ROUTES + 1
        assert isinstance(exc_info.value, PathMatchError)

    def test_route_count_checked_before_compiling(self) -> None:
        routes = [(f"/r{i}", i) for i in range(MAX_ROUTES)] + [("/::int", "broken")]
        with pytest.raises(TooManyRoutesError):
            RouteTable.from_routes(routes)

    def test_custom_registry(self) -> None:
        registry = TypeRegistryBuilder().param_type("even", lambda t: int(t) % 2 == 0).build()
        table = RouteTable.from_routes(
            [("/n/:v:even", "even"), ("/n/:v", "odd")], registry=registry
        )
        assert table.match("/n/4").action == "even"  # type: ignore[union-attr]
        assert table.match("/n/3").action == "odd"  # type: ignore[union-attr]


class TestLoadRouteTable:
    def test_from_yaml(self) -> None:
        config = parse_route_table_config(yaml.safe_load(ROUTES_YAML))
        table = load_route_table(config)

        assert table.max_segments == 16
        assert table.match("/users/7").action == "user_detail"  # type: ignore[union-attr]
        assert table.match("/users/a/b/settings").action == "settings"  # type: ignore[union-attr]
        assert table.match("/static/css/site.css").action == "static"  # type: ignore[union-attr]
        assert table.match("/nope").action == "not_found"  # type: ignore[union-attr]

    def test_from_json(self) -> None:
        data = json.loads('{"routes": [{"pattern": "/health", "action": "health"}]}')
        table = load_route_table(parse_route_table_config(data))
        assert table.match("/health?verbose=1").action == "health"  # type: ignore[union-attr]
        assert table.match("/other") is None

    def test_broken_pattern_is_config_time_error(self) -> None:
        config = parse_route_table_config({"routes": [{"pattern": "/::int", "action": "x"}]})
        with pytest.raises(PatternSyntaxError):
            load_route_table(config)

    def test_too_many_routes(self) -> None:
        data = {"routes": [{"pattern": f"/r{i}", "action": i} for i in range(MAX_ROUTES + 1)]}
        with pytest.raises(TooManyRoutesError):
            load_route_table(parse_route_table_config(data))
