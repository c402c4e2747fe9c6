"""Waypoint: typed route parsing with composable backtracking parsers.

A parser consumes a prefix of a ``Route`` (path parts plus query) and
yields a value and the rest of the route. Parsers compose by sequencing,
ordered alternation, and merging of disjoint records.

Basic usage::

    from waypoint import Route, end, lit, parse, segment

    user = lit("users").then(segment("id", "int")).then(end)
    parse(user, Route.parse("/users/42"), {})   # {"id": 42}
    parse(user, Route.parse("/teams/7"), {})    # {}

Point-free style::

    from waypoint import Parser, alt, map, pipe

    user_id = pipe(user, map(lambda r: r["id"]), alt(Parser.of(0)))
"""

__version__ = "0.1.0"
__all__ = [
    "CONVERTERS",
    "ConfigurationError",
    "FieldOverlapError",
    "Monoid",
    "Parser",
    "ParserInstances",
    "ParserMonoid",
    "QueryParams",
    "Route",
    "RouteConfig",
    "WaypointError",
    "alt",
    "ap",
    "ap_first",
    "ap_second",
    "chain",
    "chain_first",
    "end",
    "flatten",
    "get_parser_monoid",
    "lit",
    "map",
    "one_of",
    "parse",
    "parser",
    "pipe",
    "query_param",
    "segment",
    "succeed",
    "then",
    "zero",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Monoid": "waypoint.engine",
    "Parser": "waypoint.engine",
    "ParserInstances": "waypoint.engine",
    "ParserMonoid": "waypoint.engine",
    "get_parser_monoid": "waypoint.engine",
    "parse": "waypoint.engine",
    "parser": "waypoint.engine",
    "zero": "waypoint.engine",
    "alt": "waypoint.combinators",
    "ap": "waypoint.combinators",
    "ap_first": "waypoint.combinators",
    "ap_second": "waypoint.combinators",
    "chain": "waypoint.combinators",
    "chain_first": "waypoint.combinators",
    "flatten": "waypoint.combinators",
    "map": "waypoint.combinators",
    "one_of": "waypoint.combinators",
    "pipe": "waypoint.combinators",
    "then": "waypoint.combinators",
    "Route": "waypoint.routing.route",
    "QueryParams": "waypoint.routing.query",
    "CONVERTERS": "waypoint.routing.converters",
    "end": "waypoint.routing.matchers",
    "lit": "waypoint.routing.matchers",
    "query_param": "waypoint.routing.matchers",
    "segment": "waypoint.routing.matchers",
    "succeed": "waypoint.routing.matchers",
    "RouteConfig": "waypoint.config",
    "ConfigurationError": "waypoint.errors",
    "FieldOverlapError": "waypoint.errors",
    "WaypointError": "waypoint.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
