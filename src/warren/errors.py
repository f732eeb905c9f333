"""Warren exception hierarchy.

Shared across the resolver, the layout compositor, and the request
handler so every module raises and catches the same types.

A route that does not exist is *not* an exception: the resolver reports
it as a ``RouteMatch`` in the ``NOT_FOUND`` state and the handler renders
the not-found document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from warren.routing.audit import RouteConflict


class WarrenError(Exception):
    """Base for all warren-specific errors."""


class ConfigurationError(WarrenError):
    """Raised when app configuration is invalid."""


@dataclass(frozen=True, slots=True)
class HTTPError(WarrenError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """Raised by entry points that want a not-found response."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """The ``route.py`` exists but exports no handler for this method."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )


class DuplicateRouteError(WarrenError):
    """Two physical files collapse to the same logical route.

    Raised by the request pipeline when the duplicate-route audit reports
    conflicts.  Ambiguous routing is fatal: the page is replaced by a
    diagnostic document instead of picking one of the files.
    """

    def __init__(self, conflicts: list[RouteConflict]) -> None:
        self.conflicts = conflicts
        super().__init__(f"{len(conflicts)} duplicate route(s) after group normalization")

    def messages(self) -> list[str]:
        """One line per conflict plus one line per colliding original."""
        lines: list[str] = []
        for conflict in self.conflicts:
            lines.append(f"Duplicate route found after normalization: {conflict.path}")
            lines.extend(f"- Grouped original route: {original}" for original in conflict.originals)
        return lines


class LayoutContractError(WarrenError):
    """A layout is missing the placeholder its children render into."""

    def __init__(self, template_name: str, placeholder: str, summary: str = "") -> None:
        self.template_name = template_name
        self.placeholder = placeholder
        self.summary = summary or f"The layout file does not contain {{{{ {placeholder} }}}}"
        super().__init__(f"{self.summary}: {template_name}")
