"""Immutable query string parameters.

Implements ``Mapping[str, str]``: ``__getitem__`` returns the first value
for a key, ``get_list`` returns all of them.
"""

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qs, urlencode


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Field name -> tuple of values, in query string order.

    Compares and hashes by content so routes holding it stay value types.
    """

    _data: dict[str, tuple[str, ...]]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Iterable[str]] | None = None) -> None:
        self._data = {key: tuple(values) for key, values in (data or {}).items()}

    @classmethod
    def parse(
        cls,
        query_string: str,
        *,
        keep_blank_values: bool = True,
        encoding: str = "utf-8",
    ) -> "QueryParams":
        """Parse a raw query string (without the leading ``?``)."""
        return cls(parse_qs(query_string, keep_blank_values=keep_blank_values, encoding=encoding))

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def __str__(self) -> str:
        return urlencode(self._data, doseq=True)

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, ()))

    def without(self, key: str) -> "QueryParams":
        """Return a copy with *key* removed. Missing keys are not an error."""
        if key not in self._data:
            return self
        return QueryParams({k: v for k, v in self._data.items() if k != key})
