"""Tests for waypoint.routing.matchers — primitive route parsers."""

import pytest

from waypoint.combinators import alt, map, pipe
from waypoint.engine import Parser, parse
from waypoint.errors import ConfigurationError, FieldOverlapError
from waypoint.routing.matchers import end, lit, query_param, segment, succeed
from waypoint.routing.route import Route


class TestLit:
    def test_consumes_matching_part(self) -> None:
        assert lit("users").run(Route.parse("/users/42")) == ({}, Route(("42",)))

    def test_rejects_other_part(self) -> None:
        assert lit("users").run(Route.parse("/teams/42")) is None

    def test_rejects_empty_route(self) -> None:
        assert lit("users").run(Route()) is None

    def test_declares_no_fields(self) -> None:
        assert lit("users").fields == frozenset()


class TestSegment:
    def test_str(self) -> None:
        assert segment("name").run(Route.parse("/ada/x")) == ({"name": "ada"}, Route(("x",)))

    def test_int(self) -> None:
        assert segment("id", "int").run(Route.parse("/42")) == ({"id": 42}, Route())

    def test_int_rejects_text(self) -> None:
        assert segment("id", "int").run(Route.parse("/abc")) is None

    def test_int_rejects_negative(self) -> None:
        assert segment("id", "int").run(Route.parse("/-1")) is None

    def test_float(self) -> None:
        outcome = segment("price", "float").run(Route.parse("/9.5"))
        assert outcome == ({"price": 9.5}, Route())

    def test_path_consumes_rest(self) -> None:
        route = Route.parse("/docs/api/v2?x=1")
        assert segment("rest", "path").run(route) == (
            {"rest": "docs/api/v2"},
            Route.parse("/?x=1"),
        )

    def test_empty_route(self) -> None:
        assert segment("name").run(Route()) is None
        assert segment("rest", "path").run(Route()) is None

    def test_oversized_int_no_match(self) -> None:
        # int() refuses strings past the interpreter's digit limit
        route = Route(("9" * 5000,))
        assert segment("id", "int").run(route) is None
        assert parse(segment("id", "int"), route, {}) == {}

    def test_path_keeps_decoded_newline(self) -> None:
        route = Route.parse("/a%0Ab/c")
        assert segment("rest", "path").run(route) == ({"rest": "a\nb/c"}, Route())
        assert segment("name").run(route) == ({"name": "a\nb"}, Route(("c",)))

    def test_decoded_slash_rejected_by_str(self) -> None:
        assert segment("name").run(Route.parse("/a%2Fb")) is None

    def test_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="uuid"):
            segment("id", "uuid")

    def test_declares_field(self) -> None:
        assert segment("id", "int").fields == frozenset({"id"})


class TestQueryParam:
    def test_reads_and_consumes(self) -> None:
        route = Route.parse("/search?q=chirp&page=2")
        assert query_param("q").run(route) == ({"q": "chirp"}, Route.parse("/search?page=2"))

    def test_typed(self) -> None:
        outcome = query_param("page", "int").run(Route.parse("/?page=3"))
        assert outcome == ({"page": 3}, Route())

    def test_oversized_int_no_match(self) -> None:
        route = Route.parse("/?page=" + "9" * 5000)
        assert query_param("page", "int").run(route) is None
        assert parse(query_param("page", "int"), route, {}) == {}

    def test_bad_value_no_match(self) -> None:
        assert query_param("page", "int").run(Route.parse("/?page=abc")) is None

    def test_missing_no_default(self) -> None:
        assert query_param("page").run(Route.parse("/a")) is None

    def test_missing_with_default(self) -> None:
        route = Route.parse("/a")
        assert query_param("page", "int", default=1).run(route) == ({"page": 1}, route)

    def test_default_none(self) -> None:
        route = Route.parse("/a")
        assert query_param("q", default=None).run(route) == ({"q": None}, route)

    def test_does_not_touch_path(self) -> None:
        route = Route.parse("/a/b?q=x")
        _, rest = query_param("q").run(route)
        assert rest.parts == ("a", "b")

    def test_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError):
            query_param("q", "bool")


class TestEnd:
    def test_matches_exhausted_path(self) -> None:
        assert end.run(Route()) == ({}, Route())

    def test_ignores_query(self) -> None:
        route = Route.parse("/?utm=x")
        assert end.run(route) == ({}, route)

    def test_rejects_remaining_parts(self) -> None:
        assert end.run(Route(("a",))) is None


class TestSucceed:
    def test_yields_copy(self) -> None:
        record = {"page": 1}
        p = succeed(record)
        value, rest = p.run(Route(("a",)))
        assert value == {"page": 1}
        assert rest == Route(("a",))
        value["page"] = 2
        assert p.run(Route())[0] == {"page": 1}
        assert record == {"page": 1}

    def test_declares_fields(self) -> None:
        assert succeed({"a": 1, "b": 2}).fields == frozenset({"a", "b"})


class TestComposition:
    """Whole routes built from the primitives."""

    user = lit("users").then(segment("id", "int")).then(end)
    search = lit("search").then(query_param("q")).then(query_param("page", "int", default=1))

    def test_user(self) -> None:
        assert parse(self.user, Route.parse("/users/42"), {}) == {"id": 42}

    def test_user_trailing_parts(self) -> None:
        assert parse(self.user, Route.parse("/users/42/edit"), {}) == {}

    def test_search(self) -> None:
        assert parse(self.search, Route.parse("/search?q=x&page=4"), {}) == {"q": "x", "page": 4}
        assert parse(self.search, Route.parse("/search?q=x"), {}) == {"q": "x", "page": 1}

    def test_overlap_rejected(self) -> None:
        with pytest.raises(FieldOverlapError):
            segment("id").then(query_param("id"))

    def test_router_style_dispatch(self) -> None:
        home = end.map(lambda _r: ("home",))
        user = (lit("users").then(segment("id", "int")).then(end)).map(lambda r: ("user", r["id"]))
        app = pipe(home, alt(user), alt(Parser.of(("not_found",))))

        assert parse(app, Route.parse("/"), None) == ("home",)
        assert parse(app, Route.parse("/users/7"), None) == ("user", 7)
        assert parse(app, Route.parse("/nope"), None) == ("not_found",)

    def test_point_free_projection(self) -> None:
        user_id = pipe(self.user, map(lambda r: r["id"]), alt(Parser.of(0)))
        assert parse(user_id, Route.parse("/users/5"), -1) == 5
        assert parse(user_id, Route.parse("/teams/5"), -1) == 0
