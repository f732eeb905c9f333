"""The three ways a URL can address a file in the route table.

Each matcher is a pure function over segments (and, for groups, the
inventory snapshot).  Precedence between them lives in the resolver.
"""

from __future__ import annotations

from collections.abc import Sequence

from warren.config import RouteRoles
from warren.routing.inventory import RouteEntry, RouteInventory
from warren.routing.segments import Segment, SegmentKind, texts


def find_group(
    url_segments: Sequence[Segment],
    inventory: RouteInventory,
    roles: RouteRoles,
) -> RouteEntry | None:
    """Find the literal entry that owns a URL, looking through group folders.

    A ``route`` file strictly outranks an ``index`` file for the same
    URL; beyond that, inventory order decides.

    When the URL spells a group folder itself (``/(admin)/users``), the
    physical path is looked up as written instead.  A URL spelling
    ``[param]`` or ``[...param]`` never matches here; such text is only
    ever a captured value.
    """
    if any(segment.is_dynamic or segment.is_catch_all for segment in url_segments):
        return None

    url = texts(url_segments)
    route_target = (*url, roles.entry_point)
    index_target = (*url, roles.document)

    if any(segment.is_group for segment in url_segments):
        for target in (route_target, index_target):
            for entry in inventory:
                if texts(entry.segments) == target:
                    return entry
        return None

    best: RouteEntry | None = None
    for entry in inventory:
        logical = texts(entry.logical_segments)
        if logical == route_target:
            return entry
        if logical == index_target and best is None:
            best = entry
    return best


def match_single(
    url_segments: Sequence[Segment],
    template_segments: Sequence[Segment],
) -> tuple[str, str] | None:
    """Match a URL against a template with exactly one ``[name]`` segment.

    Segment counts must be equal; a mismatch is a non-match.  Literal
    template segments must equal the URL segment exactly.

    Returns:
        ``(name, value)`` on a match, else ``None``.

    Raises:
        ValueError: If the template does not have exactly one dynamic
            segment, or has a catch-all segment.
    """
    kinds = [segment.kind for segment in template_segments]
    if kinds.count(SegmentKind.DYNAMIC) != 1 or SegmentKind.CATCH_ALL in kinds:
        msg = f"Template {texts(template_segments)!r} must have exactly one [param] segment"
        raise ValueError(msg)

    if len(url_segments) != len(template_segments):
        return None

    captured: tuple[str, str] | None = None
    for url_segment, template_segment in zip(url_segments, template_segments, strict=True):
        if template_segment.is_dynamic:
            captured = (template_segment.name, url_segment.text)
        elif template_segment.text != url_segment.text:
            return None
    return captured


def match_catch_all(
    url_segments: Sequence[Segment],
    template_segments: Sequence[Segment],
) -> tuple[str, list[str]] | None:
    """Match a URL against a template ending in ``[...name]``.

    Everything before the marker must equal the URL's leading segments.
    At least one URL segment must remain; the remainder is captured in
    order.

    Returns:
        ``(name, values)`` on a match, else ``None``.
    """
    for index, segment in enumerate(template_segments):
        if segment.is_catch_all:
            break
    else:
        return None

    prefix = texts(template_segments[:index])
    if len(url_segments) <= len(prefix):
        return None
    if texts(url_segments[: len(prefix)]) != prefix:
        return None
    return segment.name, [s.text for s in url_segments[len(prefix) :]]
