"""Page rendering: layout chains, composition, and diagnostics.

A resolved document is rendered first, then wrapped by every
``layout.html`` between it and the app root::

    app/
      layout.html            # root: {{ content }}
      blog/
        layout.html          # nested: {{ child_content }}
        [slug]/
          index.html         # leaf

Routing entry points (``route.py``) return data and are never wrapped.
"""

from warren.pages.compositor import compose, render_leaf
from warren.pages.diagnostics import Diagnostics
from warren.pages.layouts import build_chain, validate_chain
from warren.pages.types import LayoutChain, LayoutFile

__all__ = [
    "Diagnostics",
    "LayoutChain",
    "LayoutFile",
    "build_chain",
    "compose",
    "render_leaf",
    "validate_chain",
]
