"""Immutable query string parameters.

Implements ``Mapping[str, str]``; repeated keys stay available through
``get_list`` and ``to_dict``.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    ``to_dict`` collapses single values to ``str`` and keeps repeated
    keys as ``list[str]``, the shape route handlers receive.
    """

    _data: dict[str, list[str]]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes = b"") -> None:
        object.__setattr__(self, "_raw", query_string)
        parsed = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryParams({self.to_dict()!r})"

    @property
    def raw(self) -> bytes:
        """The undecoded query string."""
        return self._raw

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def to_dict(self) -> dict[str, str | list[str]]:
        """Return ``{key: value}`` with repeated keys as lists."""
        return {
            key: values[0] if len(values) == 1 else list(values)
            for key, values in self._data.items()
        }
