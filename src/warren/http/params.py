"""Request parameters: query string and form/JSON bodies as one mapping.

Routing entry points read their input through a single ``params``
mapping, whatever the transport: ``?title=x``, an url-encoded form, or
a JSON object all end up here.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl


class Params(Mapping[str, Any]):
    """Read-only multi-valued parameters.

    Indexing yields the first value under a name, which is what a form
    field or a query argument usually means; :meth:`get_list` yields
    them all.
    """

    __slots__ = ("_lists",)

    def __init__(self, lists: Mapping[str, list[Any]] | None = None) -> None:
        # Names without values are dropped so iteration and indexing agree
        object.__setattr__(
            self,
            "_lists",
            {name: list(values) for name, values in (lists or {}).items() if values},
        )

    @classmethod
    def from_query_string(cls, raw: bytes | str) -> Params:
        text = raw.decode("latin-1") if isinstance(raw, bytes) else raw
        lists: dict[str, list[str]] = {}
        for name, value in parse_qsl(text, keep_blank_values=True):
            lists.setdefault(name, []).append(value)
        return cls(lists)

    @classmethod
    def from_object(cls, obj: Mapping[str, Any]) -> Params:
        """Wrap a decoded JSON object; every member, arrays included, is one value."""
        return cls({name: [value] for name, value in obj.items()})

    def merged(self, other: Params) -> Params:
        """New Params where *other*'s names replace this one's."""
        return Params(self._lists | other._lists)

    def __getitem__(self, name: str) -> Any:
        return self._lists[name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def __repr__(self) -> str:
        return f"Params({self._lists!r})"

    def get_list(self, name: str) -> list[Any]:
        return list(self._lists.get(name, ()))

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """The first value as an int; *default* when absent or not a number."""
        try:
            return int(self[name])
        except (KeyError, TypeError, ValueError):
            return default
