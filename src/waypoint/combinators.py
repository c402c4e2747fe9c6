"""Curried, subject-last parser combinators.

Each function mirrors a ``Parser`` method or a ``parser`` operation and
returns a one-argument function, so parsers can be assembled with
``pipe`` instead of method chains or intermediate names::

    user = pipe(
        lit("users"),
        then(segment("id", "int")),
        map(lambda record: record["id"]),
        alt(Parser.of(0)),
    )
"""

from collections.abc import Callable, Mapping
from functools import reduce
from typing import Any

from waypoint.engine import Parser, get_parser_monoid, parser


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """Thread *value* through *functions*, left to right."""
    return reduce(lambda acc, f: f(acc), functions, value)


def identity[A](a: A) -> A:
    return a


def alt[A](that: Parser[A] | Callable[[], Parser[A]]) -> Callable[[Parser[A]], Parser[A]]:
    """Fall back to *that* (a parser, or a thunk building one) on no-match."""
    thunk: Callable[[], Parser[A]] = (lambda: that) if isinstance(that, Parser) else that

    def apply(fa: Parser[A]) -> Parser[A]:
        return parser.alt(fa, thunk)

    return apply


def ap[A, B](fa: Parser[A]) -> Callable[[Parser[Callable[[A], B]]], Parser[B]]:
    def apply(fab: Parser[Callable[[A], B]]) -> Parser[B]:
        return parser.ap(fab, fa)

    return apply


def ap_first[A, B](fb: Parser[B]) -> Callable[[Parser[A]], Parser[A]]:
    """Run the subject, then *fb*; keep the subject's value."""

    def apply(fa: Parser[A]) -> Parser[A]:
        return parser.ap(parser.map(fa, lambda a: lambda _b: a), fb)

    return apply


def ap_second[A, B](fb: Parser[B]) -> Callable[[Parser[A]], Parser[B]]:
    """Run the subject, then *fb*; keep *fb*'s value."""

    def apply(fa: Parser[A]) -> Parser[B]:
        return parser.ap(parser.map(fa, lambda _a: lambda b: b), fb)

    return apply


def chain[A, B](f: Callable[[A], Parser[B]]) -> Callable[[Parser[A]], Parser[B]]:
    def apply(ma: Parser[A]) -> Parser[B]:
        return parser.chain(ma, f)

    return apply


def chain_first[A, B](f: Callable[[A], Parser[B]]) -> Callable[[Parser[A]], Parser[A]]:
    """Run the subject, then ``f(value)``; keep the subject's value."""

    def apply(ma: Parser[A]) -> Parser[A]:
        return parser.chain(ma, lambda a: parser.map(f(a), lambda _b: a))

    return apply


def flatten[A](mma: Parser[Parser[A]]) -> Parser[A]:
    return parser.chain(mma, identity)


def map[A, B](f: Callable[[A], B]) -> Callable[[Parser[A]], Parser[B]]:
    def apply(fa: Parser[A]) -> Parser[B]:
        return parser.map(fa, f)

    return apply


def then[B: Mapping[str, Any]](fb: Parser[B]) -> Callable[[Parser[Any]], Parser[dict[str, Any]]]:
    """Merge the subject's record with *fb*'s, subject first."""

    def apply(fa: Parser[Any]) -> Parser[dict[str, Any]]:
        return fa.then(fb)

    return apply


def one_of[A](*parsers: Parser[A]) -> Parser[A]:
    """First parser that matches, in argument order. No parsers never matches."""
    return get_parser_monoid().concat_all(parsers)
