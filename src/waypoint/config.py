"""Route parsing configuration.

RouteConfig is a frozen dataclass: immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """How ``Route.parse`` turns a URL string into a route.

    All fields have sensible defaults. Override what you need::

        config = RouteConfig(decode_segments=False)
    """

    # Path
    decode_segments: bool = True  # Percent-decode each path part ("a%20b" -> "a b")

    # Query string
    keep_blank_values: bool = True  # "?flag=" keeps flag with value ""
    encoding: str = "utf-8"


DEFAULT_CONFIG = RouteConfig()
