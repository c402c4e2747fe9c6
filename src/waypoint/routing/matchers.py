"""Primitive route parsers.

Each matcher yields a record (a dict) with a declared key set, so
``Parser.then`` can reject overlapping merges when the parser is built::

    lit("users")                -> {}
    segment("id", "int")        -> {"id": 42}
    segment("rest", "path")     -> {"rest": "docs/api/v2"}
    query_param("page", "int")  -> {"page": 3}
"""

import logging
from collections.abc import Mapping
from typing import Any

from waypoint.engine import Outcome, Parser
from waypoint.routing.converters import get_converter
from waypoint.routing.route import Route

logger = logging.getLogger("waypoint.routing")

type Record = dict[str, Any]

_MISSING: Any = object()


def lit(literal: str) -> Parser[Record]:
    """Match one path part equal to *literal*."""

    def run(r: Route) -> Outcome[Record]:
        if r.parts and r.parts[0] == literal:
            return {}, r.advance()
        return None

    return Parser(run, frozenset())


def segment(name: str, param_type: str = "str") -> Parser[Record]:
    """Capture one path part as ``{name: value}``.

    The ``path`` converter captures every remaining part, joined by ``/``.
    """
    converter = get_converter(param_type, name)
    greedy = param_type == "path"

    def run(r: Route) -> Outcome[Record]:
        if not r.parts:
            return None
        count = len(r.parts) if greedy else 1
        raw = "/".join(r.parts[:count])
        value = converter(raw)
        if value is None:
            logger.debug("Segment %r rejected %.40r as %s", name, raw, param_type)
            return None
        return {name: value}, r.advance(count)

    return Parser(run, frozenset({name}))


def query_param(name: str, param_type: str = "str", default: Any = _MISSING) -> Parser[Record]:
    """Read the first query value for *name* as ``{name: value}``.

    A matched key is removed from the remaining route. A missing key
    yields *default* when one is given, otherwise no match.
    """
    converter = get_converter(param_type, name)

    def run(r: Route) -> Outcome[Record]:
        raw = r.query.get(name)
        if raw is None:
            if default is _MISSING:
                return None
            return {name: default}, r
        value = converter(raw)
        if value is None:
            logger.debug("Query param %r rejected %.40r as %s", name, raw, param_type)
            return None
        return {name: value}, r.without_query(name)

    return Parser(run, frozenset({name}))


def succeed(record: Mapping[str, Any]) -> Parser[Record]:
    """Always match, yielding a fresh copy of *record*."""
    frozen = dict(record)
    return Parser(lambda r: (dict(frozen), r), frozenset(frozen))


def _end(r: Route) -> Outcome[Record]:
    if r.parts:
        return None
    return {}, r


# Matches only when every path part has been consumed
end: Parser[Record] = Parser(_end, frozenset())
