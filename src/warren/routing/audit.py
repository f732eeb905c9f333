"""Duplicate route detection.

Group folders vanish from URLs, so ``(a)/blog/route.py`` and
``(b)/blog/route.py`` both claim ``/blog``.  :func:`audit` only reports
such collisions; deciding to halt rendering is the caller's job.
"""

from dataclasses import dataclass

from warren.config import RouteRoles
from warren.routing.inventory import RouteInventory


@dataclass(frozen=True, slots=True)
class RouteConflict:
    """Several physical files that normalize to one logical route.

    Attributes:
        path: The group-stripped path they share.
        originals: The colliding physical paths, in inventory order.
    """

    path: str
    originals: tuple[str, ...]


def audit(inventory: RouteInventory, roles: RouteRoles) -> list[RouteConflict]:
    """Return one conflict per logical route claimed by more than one file.

    Only routable files (entry points and default documents) count;
    layouts and assets may legitimately repeat across groups.
    """
    by_logical: dict[str, list[str]] = {}
    for entry in inventory:
        if entry.filename not in roles.routable:
            continue
        by_logical.setdefault(entry.logical_path, []).append(entry.path)

    return [
        RouteConflict(path=path, originals=tuple(originals))
        for path, originals in by_logical.items()
        if len(originals) > 1
    ]
