"""Request header access and ``Cookie`` parsing."""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Request headers keyed by lowercase name.

    Indexing gives the first value sent under a name; repeated headers
    are kept and available through :meth:`get_list`.
    """

    __slots__ = ("_values",)

    def __init__(self, pairs: Iterable[tuple[bytes, bytes]] = ()) -> None:
        values: dict[str, list[str]] = {}
        for name, value in pairs:
            values.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        object.__setattr__(self, "_values", values)

    def __getitem__(self, name: str) -> str:
        return self._values[name.lower()][0]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"

    def get(self, name: str, default: str | None = None) -> str | None:  # type: ignore[override]
        values = self._values.get(name.lower())
        return values[0] if values else default

    def get_list(self, name: str) -> list[str]:
        """Every value sent under *name*, in arrival order."""
        return list(self._values.get(name.lower(), ()))


def parse_cookies(header: str) -> dict[str, str]:
    """``a=1; b=2`` to ``{"a": "1", "b": "2"}``; pairs without ``=`` are skipped."""
    pairs = (chunk.partition("=") for chunk in header.split(";"))
    return {name.strip(): value.strip() for name, sep, value in pairs if sep}
