"""Parser engine: composable backtracking parsers over ``Route`` values.

A ``Parser`` wraps one pure function::

    run(route) -> (value, remaining_route) | None

``None`` is the only failure signal. ``chain`` and ``alt`` are the two
primitive combinators; ``map``, ``ap`` and ``then`` are derived from
``chain`` and ``of`` so they cannot drift from it.

Usage::

    users = lit("users").then(segment("id", "int")).then(end)
    parse(users, Route.parse("/users/42"), {})  # -> {"id": 42}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Protocol

from waypoint.errors import FieldOverlapError
from waypoint.routing.route import Route

logger = logging.getLogger("waypoint.engine")

# Outcome of a single parser application
type Outcome[A] = tuple[A, Route] | None


@dataclass(frozen=True, slots=True)
class Parser[A]:
    """An immutable parser producing values of type ``A``.

    ``fields`` is the key set of the record the parser yields, when it is
    known while the parser is being built. ``then`` uses it to reject
    overlapping merges up front; ``None`` means unknown.
    """

    run: Callable[[Route], Outcome[A]]
    fields: frozenset[str] | None = None

    @staticmethod
    def of[B](a: B) -> Parser[B]:
        """Succeed with *a* without consuming anything."""
        fields = frozenset(a) if isinstance(a, Mapping) else None
        return Parser(lambda r: (a, r), fields)

    def map[B](self, f: Callable[[A], B]) -> Parser[B]:
        return self.chain(lambda a: Parser.of(f(a)))

    def ap[B](self, fab: Parser[Callable[[A], B]]) -> Parser[B]:
        """Apply the functions parsed by *fab* to this parser's values.

        *fab* consumes first, then this parser consumes what it left.
        """
        return fab.chain(lambda f: self.map(f))

    def chain[B](self, f: Callable[[A], Parser[B]]) -> Parser[B]:
        """Run this parser, then the parser ``f(value)`` on the remainder."""

        def run(r: Route) -> Outcome[B]:
            outcome = self.run(r)
            if outcome is None:
                return None
            a, rest = outcome
            return f(a).run(rest)

        return Parser(run)

    def alt(self, that: Parser[A]) -> Parser[A]:
        """Try this parser; on no-match, try *that* on the original route."""
        fields = self.fields if self.fields == that.fields else None
        return _or_else(self, lambda: that, fields)

    def then[B: Mapping[str, Any]](self, that: Parser[B]) -> Parser[dict[str, Any]]:
        """Parse two records in sequence and merge them into one dict.

        Raises ``FieldOverlapError`` right away when both sides declare
        fields and they intersect, or when the records merged at run time
        share a key.
        """
        if self.fields is not None and that.fields is not None:
            overlap = self.fields & that.fields
            if overlap:
                raise FieldOverlapError(overlap)
            fields: frozenset[str] | None = self.fields | that.fields
        else:
            fields = None
        merged = that.ap(self.map(_assign))
        return Parser(merged.run, fields)


def zero[A]() -> Parser[A]:
    """A parser that never matches."""
    return Parser(_no_match)


def parse[A](parser: Parser[A], route: Route, default: A) -> A:
    """Run *parser* on *route*, returning *default* on no-match.

    The remaining route is discarded.
    """
    outcome = parser.run(route)
    if outcome is None:
        logger.debug("No match for %s, falling back to default", route)
        return default
    return outcome[0]


class Monoid[T](Protocol):
    """An associative ``concat`` with an identity element ``empty``."""

    @property
    def empty(self) -> T: ...

    def concat(self, x: T, y: T) -> T: ...


@dataclass(frozen=True, slots=True)
class ParserMonoid[A]:
    """Parsers under ordered alternation, with ``zero()`` as identity."""

    empty: Parser[A]

    def concat(self, x: Parser[A], y: Parser[A]) -> Parser[A]:
        return x.alt(y)

    def concat_all(self, parsers: Iterable[Parser[A]]) -> Parser[A]:
        """Fold *parsers* left to right; ``empty`` when there are none.

        Folding from the first parser rather than ``empty`` keeps a field
        set shared by every alternative.
        """
        items = iter(parsers)
        first = next(items, None)
        if first is None:
            return self.empty
        return reduce(self.concat, items, first)


def get_parser_monoid[A]() -> ParserMonoid[A]:
    return ParserMonoid(empty=zero())


@dataclass(frozen=True, slots=True)
class ParserInstances:
    """Functor / Applicative / Monad / Alternative operations for ``Parser``.

    Uncurried, subject-first shapes, for code written against those
    abstractions rather than against ``Parser`` methods. ``alt`` takes
    the second alternative as a zero-argument callable so it is only
    built when the first one fails.
    """

    map: Callable[[Parser[Any], Callable[[Any], Any]], Parser[Any]]
    of: Callable[[Any], Parser[Any]]
    ap: Callable[[Parser[Callable[[Any], Any]], Parser[Any]], Parser[Any]]
    chain: Callable[[Parser[Any], Callable[[Any], Parser[Any]]], Parser[Any]]
    alt: Callable[[Parser[Any], Callable[[], Parser[Any]]], Parser[Any]]
    zero: Callable[[], Parser[Any]]


parser = ParserInstances(
    map=lambda ma, f: ma.map(f),
    of=Parser.of,
    ap=lambda mab, ma: ma.ap(mab),
    chain=lambda ma, f: ma.chain(f),
    alt=lambda fx, f: _or_else(fx, f),
    zero=zero,
)


# --- Helpers


def _no_match(_r: Route) -> None:
    return None


def _or_else[A](
    fa: Parser[A],
    that: Callable[[], Parser[A]],
    fields: frozenset[str] | None = None,
) -> Parser[A]:
    def run(r: Route) -> Outcome[A]:
        outcome = fa.run(r)
        if outcome is None:
            return that().run(r)
        return outcome

    return Parser(run, fields)


def _assign(a: Mapping[str, Any]) -> Callable[[Mapping[str, Any]], dict[str, Any]]:
    def merge(b: Mapping[str, Any]) -> dict[str, Any]:
        overlap = a.keys() & b.keys()
        if overlap:
            raise FieldOverlapError(frozenset(overlap))
        return {**a, **b}

    return merge
