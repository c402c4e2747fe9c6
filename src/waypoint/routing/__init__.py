"""Routing: the route value parsers consume, plus primitive matchers.

A ``Route`` is the parsed form of a URL (path parts and query). The
matchers here are the leaves that ``waypoint.engine`` combinators compose.
"""
