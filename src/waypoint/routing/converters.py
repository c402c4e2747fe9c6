"""Typed value converters for path segments and query values.

A converter turns raw route text into a typed value, or ``None`` when the
text is not a valid value of that type. Matchers treat ``None`` as no-match,
so conversion never raises out of a parser.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from waypoint.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Converter:
    """A named pattern plus the function that builds the typed value.

    ``pattern`` must match the whole raw text; ``convert`` may still
    reject it by raising ``ValueError`` (e.g. integers past the interpreter's
    digit limit).
    """

    name: str
    pattern: re.Pattern[str]
    convert: Callable[[str], Any]

    def __call__(self, raw: str) -> Any | None:
        if not self.pattern.fullmatch(raw):
            return None
        try:
            return self.convert(raw)
        except ValueError:
            return None


def _converter(name: str, pattern: str, convert: Callable[[str], Any]) -> Converter:
    # DOTALL so decoded newlines behave the same for every converter
    return Converter(name, re.compile(pattern, re.DOTALL), convert)


CONVERTERS: dict[str, Converter] = {
    c.name: c
    for c in (
        _converter("str", r"[^/]+", str),
        _converter("int", r"\d+", int),
        _converter("float", r"\d+(?:\.\d+)?", float),
        _converter("path", r".+", str),  # every remaining part, "/"-joined
    )
}


def get_converter(param_type: str, name: str) -> Converter:
    """Look up *param_type* for the parameter *name*.

    Raises ``ConfigurationError`` for an unregistered type.
    """
    try:
        return CONVERTERS[param_type]
    except KeyError:
        known = ", ".join(sorted(CONVERTERS))
        msg = f"Unknown converter {param_type!r} for {name!r}. Known converters: {known}"
        raise ConfigurationError(msg) from None
