"""Private route guard.

Folders whose name starts with the private marker (``_partials/``) hold
fragments meant to be fetched by the app's own pages, never navigated
to directly.  The browser's ``Sec-Fetch-Site`` header tells the two
apart.
"""

from warren.routing.segments import normalize

SAME_ORIGIN = "same-origin"


def is_private(url_path: str, marker: str = "_") -> bool:
    """True if any segment of *url_path* starts with *marker*."""
    if not marker:
        return False
    return any(segment.text.startswith(marker) for segment in normalize(url_path))


def is_blocked(url_path: str, fetch_site: str | None, marker: str = "_") -> bool:
    """True when a private path is requested from anywhere but same-origin.

    Checked before any filesystem matching, so a blocked request learns
    nothing about which private routes exist.
    """
    return is_private(url_path, marker) and fetch_site != SAME_ORIGIN
