"""Filesystem route table: inventory, matchers, resolver, and audit.

The app directory mirrors URLs::

    app/
      index.html               # GET /
      layout.html              # root layout ({{ content }})
      (marketing)/about/
        index.html             # GET /about
      posts/[id]/route.py      # /posts/42       -> {"id": "42"}
      docs/[...slug]/route.py  # /docs/a/b       -> {"slug": ["a", "b"]}
      _partials/row/index.html # same-origin fetches only
"""

from warren.routing.audit import RouteConflict, audit
from warren.routing.guard import is_blocked
from warren.routing.inventory import RouteEntry, RouteInventory, read_cache, scan
from warren.routing.matchers import find_group, match_catch_all, match_single
from warren.routing.resolver import ResolveState, RouteMatch, RouteResolver
from warren.routing.segments import Segment, SegmentKind, normalize

__all__ = [
    "ResolveState",
    "RouteConflict",
    "RouteEntry",
    "RouteInventory",
    "RouteMatch",
    "RouteResolver",
    "Segment",
    "SegmentKind",
    "audit",
    "find_group",
    "is_blocked",
    "match_catch_all",
    "match_single",
    "normalize",
    "read_cache",
    "scan",
]
