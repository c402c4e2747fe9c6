"""Waypoint exception hierarchy.

A parser that does not match never raises: no-match is ``None`` from
``Parser.run``. These types cover misuse caught while parsers are built
(or, for record merges the builder could not check, while they run).
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a parser is assembled from invalid parts.

    Typically raised at construction time, e.g. an unknown converter name.
    """


class FieldOverlapError(ConfigurationError):
    """Two record parsers merged with ``then`` share result fields.

    Merging never overwrites a field. ``fields`` holds the shared names.
    """

    def __init__(self, fields: frozenset[str], detail: str = "") -> None:
        self.fields = fields
        names = ", ".join(sorted(fields))
        super().__init__(detail or f"Merged parsers share result fields: {names}")
