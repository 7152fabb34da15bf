"""pathmatch — match request paths against route patterns.

All public types are exported from this module for flat imports:

    from pathmatch import match_path, PathMatcher, RouteTable

Pattern syntax: literal segments, ``*`` (one segment), ``**`` (zero or
more segments), ``:name`` and ``:name:type`` (named parameters).

    >>> match_path("/bank/12345/balance", "/bank/:account-id:int/balance").as_dict()
    mappingproxy({'account-id': '12345'})
"""

__version__ = "0.1.0"

# Config types — see pathmatch._config for details
from pathmatch._config import (
    ConfigParseError,
    RouteConfig,
    RouteTableConfig,
    parse_route_table_config,
)

# Errors
from pathmatch._errors import (
    InvalidTypeTagError,
    PathMatchError,
    PatternSyntaxError,
    SegmentCapacityError,
    TooManyRoutesError,
)

# Matching
from pathmatch._matcher import (
    NO_MATCH,
    PathMatcher,
    PathMatchResult,
    PathParam,
    match_path,
    match_tokens,
)
from pathmatch._param_types import ParamType

# Pattern tokens
from pathmatch._pattern import (
    Literal,
    MultiWildcard,
    NamedParam,
    PathPattern,
    SingleWildcard,
    Token,
    compile_pattern,
    parse_segment,
)

# Registry — see pathmatch._registry for details
from pathmatch._registry import (
    DEFAULT_REGISTRY,
    TypeRegistry,
    TypeRegistryBuilder,
    register_builtin_types,
)

# Route tables
from pathmatch._routes import (
    MAX_ROUTES,
    Route,
    RouteMatch,
    RouteTable,
    load_route_table,
)
from pathmatch._segments import MAX_PATH_SEGMENTS, iter_segments, to_segments

__all__ = [
    # Segmenter
    "MAX_PATH_SEGMENTS",
    "iter_segments",
    "to_segments",
    # Pattern tokens
    "Literal",
    "SingleWildcard",
    "MultiWildcard",
    "NamedParam",
    "Token",
    "PathPattern",
    "parse_segment",
    "compile_pattern",
    # Parameter types
    "ParamType",
    "TypeRegistry",
    "TypeRegistryBuilder",
    "register_builtin_types",
    "DEFAULT_REGISTRY",
    # Matching
    "PathParam",
    "PathMatchResult",
    "PathMatcher",
    "NO_MATCH",
    "match_path",
    "match_tokens",
    # Route tables
    "Route",
    "RouteMatch",
    "RouteTable",
    "load_route_table",
    "MAX_ROUTES",
    # Config types
    "RouteConfig",
    "RouteTableConfig",
    "ConfigParseError",
    "parse_route_table_config",
    # Errors
    "PathMatchError",
    "PatternSyntaxError",
    "SegmentCapacityError",
    "InvalidTypeTagError",
    "TooManyRoutesError",
]
