"""Route resolution — URL path to route-table entry.

Resolution runs once per request, in strict precedence order:

1. Private-route guard (before any filesystem matching)
2. Empty URL -> the app root's default document
3. Literal/group match (exact, wins outright)
4. Single ``[param]`` match
5. ``[...param]`` catch-all match
6. Not found

Dynamic and catch-all candidates are tried most-specific first rather
than in directory enumeration order, so the winner does not depend on
the platform.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from warren.config import RouteRoles
from warren.routing.guard import is_blocked
from warren.routing.inventory import RouteEntry, RouteInventory
from warren.routing.matchers import find_group, match_catch_all, match_single
from warren.routing.segments import Segment, join, normalize

logger = logging.getLogger("warren.routing")

ParamValue = str | list[str]


class ResolveState(Enum):
    """Stages of one resolution; a RouteMatch ends in one of the last three."""

    UNRESOLVED = "unresolved"
    GUARD = "guard"
    GROUP_CHECK = "group_check"
    DYNAMIC_CHECK = "dynamic_check"
    CATCHALL_CHECK = "catchall_check"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    BLOCKED = "blocked"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Outcome of resolving one URL.

    Attributes:
        state: ``RESOLVED``, ``NOT_FOUND`` or ``BLOCKED``.
        entry: The matched file, or ``None``.
        params: ``name -> str`` for ``[name]``, ``name -> list[str]``
            for ``[...name]``.
        layout_segments: Directory that seeds layout discovery.  For a
            match this is the entry's physical directory, group folders
            included, so groups contribute their own layouts.
        pathname: The URL as resolved, with a leading ``/``.
    """

    state: ResolveState = ResolveState.UNRESOLVED
    entry: RouteEntry | None = None
    params: dict[str, ParamValue] = field(default_factory=dict)
    layout_segments: tuple[Segment, ...] = ()
    pathname: str = "/"

    @property
    def found(self) -> bool:
        return self.state is ResolveState.RESOLVED and self.entry is not None

    @property
    def path(self) -> str | None:
        """Physical path of the matched file, relative to the app root."""
        return self.entry.path if self.entry is not None else None


def specificity(entry: RouteEntry, roles: RouteRoles) -> tuple[int, int, int, int, str]:
    """Sort key: most specific template first.

    Fewer dynamic segments, then a longer literal prefix, then shallower
    depth, then entry point before default document, then path.
    """
    logical = entry.logical_segments
    prefix = 0
    for segment in logical[:-1]:
        if segment.is_dynamic or segment.is_catch_all:
            break
        prefix += 1
    role_rank = 0 if entry.filename == roles.entry_point else 1
    dynamic = entry.dynamic_count + entry.catch_all_count
    return (dynamic, -prefix, len(logical), role_rank, entry.path)


class RouteResolver:
    """Resolves URLs against one inventory snapshot.

    Usage::

        resolver = RouteResolver(scan("app"), config.roles)
        match = resolver.resolve("/posts/42")
        match.params  # {"id": "42"}
    """

    __slots__ = ("_catch_all", "_dynamic", "inventory", "private_marker", "roles")

    def __init__(
        self,
        inventory: RouteInventory,
        roles: RouteRoles | None = None,
        *,
        private_marker: str = "_",
    ) -> None:
        self.inventory = inventory
        self.roles = roles or RouteRoles()
        self.private_marker = private_marker

        by_specificity = sorted(inventory, key=lambda e: specificity(e, self.roles))
        self._dynamic: tuple[RouteEntry, ...] = tuple(
            e
            for e in by_specificity
            if e.dynamic_count == 1 and not e.has_catch_all and e.filename in self.roles.routable
        )
        self._catch_all: tuple[RouteEntry, ...] = tuple(
            e
            for e in by_specificity
            if e.filename == self.roles.entry_point
            and e.catch_all_count == 1
            and len(e.logical_segments) >= 2
            and e.logical_segments[-2].is_catch_all
        )

    def resolve(self, url_path: str, fetch_site: str | None = None) -> RouteMatch:
        """Resolve *url_path* to at most one entry.

        Args:
            url_path: The request path, without query string.
            fetch_site: Value of the ``Sec-Fetch-Site`` request header.
        """
        url = normalize(url_path)
        pathname = "/" + join(url)

        state = ResolveState.GUARD
        if is_blocked(url_path, fetch_site, self.private_marker):
            logger.debug("Blocked direct access to private route %s", pathname)
            return RouteMatch(ResolveState.BLOCKED, pathname=pathname)

        if not url:
            entry = self.inventory.get(self.roles.document)
            if entry is None:
                return RouteMatch(ResolveState.NOT_FOUND, pathname=pathname)
            return self._resolved(entry, {}, pathname, state)

        state = ResolveState.GROUP_CHECK
        entry = find_group(url, self.inventory, self.roles)
        if entry is not None:
            return self._resolved(entry, {}, pathname, state)

        state = ResolveState.DYNAMIC_CHECK
        for candidate in self._dynamic:
            captured = match_single(url, candidate.logical_segments[:-1])
            if captured is not None:
                name, value = captured
                return self._resolved(candidate, {name: value}, pathname, state)

        state = ResolveState.CATCHALL_CHECK
        for candidate in self._catch_all:
            caught = match_catch_all(url, candidate.logical_segments[:-1])
            if caught is not None:
                name, values = caught
                return self._resolved(candidate, {name: values}, pathname, state)

        logger.debug("No route matched %s", pathname)
        return RouteMatch(ResolveState.NOT_FOUND, layout_segments=url, pathname=pathname)

    def _resolved(
        self,
        entry: RouteEntry,
        params: dict[str, ParamValue],
        pathname: str,
        via: ResolveState,
    ) -> RouteMatch:
        logger.debug("Resolved %s to %s (%s)", pathname, entry.path, via.value)
        return RouteMatch(
            ResolveState.RESOLVED,
            entry=entry,
            params=params,
            layout_segments=entry.directory,
            pathname=pathname,
        )
