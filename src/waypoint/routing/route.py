"""Route frozen dataclass: the value every parser consumes."""

from dataclasses import dataclass, field, replace
from urllib.parse import quote, unquote, urlsplit

from waypoint.config import DEFAULT_CONFIG, RouteConfig
from waypoint.routing.query import QueryParams


@dataclass(frozen=True, slots=True)
class Route:
    """A parsed URL: path parts plus query parameters.

    Parsers consume ``parts`` from the front and may drop query keys;
    what they leave is again a ``Route``::

        Route.parse("/users/42?tab=posts")
        -> Route(parts=("users", "42"), query=QueryParams({'tab': 'posts'}))
    """

    parts: tuple[str, ...] = ()
    query: QueryParams = field(default_factory=QueryParams)

    @classmethod
    def parse(cls, url: str, config: RouteConfig = DEFAULT_CONFIG) -> "Route":
        """Build a route from a URL or path string. Fragments are ignored."""
        split = urlsplit(url)
        parts = tuple(p for p in split.path.split("/") if p)
        if config.decode_segments:
            parts = tuple(unquote(p, encoding=config.encoding) for p in parts)
        query = QueryParams.parse(
            split.query,
            keep_blank_values=config.keep_blank_values,
            encoding=config.encoding,
        )
        return cls(parts=parts, query=query)

    @classmethod
    def empty(cls) -> "Route":
        return cls()

    @property
    def is_empty(self) -> bool:
        """True when no path parts and no query parameters remain."""
        return not self.parts and not self.query

    def advance(self, count: int = 1) -> "Route":
        """Drop the first *count* path parts."""
        return replace(self, parts=self.parts[count:])

    def without_query(self, key: str) -> "Route":
        """Drop *key* from the query parameters."""
        return replace(self, query=self.query.without(key))

    def __str__(self) -> str:
        path = "/" + "/".join(quote(p, safe="") for p in self.parts)
        if self.query:
            return f"{path}?{self.query}"
        return path
