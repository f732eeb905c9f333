"""Layout chain discovery and placeholder validation.

Walks the resolved route's directory from the app root down, collecting
every layout file on the way.  Each layout is checked for the
placeholder its child renders into before anything is rendered: a
layout without one would silently drop the page.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from warren.config import RouteRoles
from warren.errors import LayoutContractError
from warren.pages.types import LayoutChain, LayoutFile
from warren.routing.inventory import RouteInventory
from warren.routing.segments import Segment, join

CONTENT = "content"
CHILD_CONTENT = "child_content"


def placeholder_pattern(name: str) -> re.Pattern[str]:
    """Regex matching ``{{ name }}``, optionally followed by filters."""
    return re.compile(r"\{\{-?\s*" + re.escape(name) + r"\s*(?:\|[^}]*)?-?\}\}")


_PATTERNS = {
    CONTENT: placeholder_pattern(CONTENT),
    CHILD_CONTENT: placeholder_pattern(CHILD_CONTENT),
}


def has_placeholder(source: str, placeholder: str) -> bool:
    return _PATTERNS[placeholder].search(source) is not None


def build_chain(
    inventory: RouteInventory,
    directory: Sequence[Segment],
    roles: RouteRoles,
    *,
    validate: bool = True,
) -> LayoutChain:
    """Collect the layouts wrapping a route in *directory*.

    Args:
        inventory: Snapshot to look layouts up in.
        directory: The resolved route's physical directory segments.
        roles: File-role names (for the layout filename).
        validate: Check placeholder contracts (default True).

    Returns:
        The chain, root first.

    Raises:
        LayoutContractError: If the root layout is missing or a layout
            lacks its placeholder.
    """
    layouts: list[LayoutFile] = []
    root_entry = inventory.get(roles.layout)
    if root_entry is not None:
        layouts.append(LayoutFile(root_entry.path, depth=0, placeholder=CONTENT))

    for depth in range(1, len(directory) + 1):
        candidate = join([*directory[:depth], roles.layout])
        entry = inventory.get(candidate)
        if entry is not None:
            layouts.append(LayoutFile(entry.path, depth=depth, placeholder=CHILD_CONTENT))

    chain = LayoutChain(tuple(layouts))
    if validate:
        validate_chain(chain, inventory.root, roles)
    return chain


def validate_chain(chain: LayoutChain, root: Path, roles: RouteRoles) -> None:
    """Check every layout in *chain* for its placeholder.

    Raises:
        LayoutContractError: On the first violation found, root first.
    """
    if chain.root is None:
        raise LayoutContractError(
            str(root / roles.layout), CONTENT, summary="The root layout file is missing"
        )
    for layout in chain.layouts:
        source = (root / layout.template_name).read_text(encoding="utf-8")
        if not has_placeholder(source, layout.placeholder):
            raise LayoutContractError(layout.template_name, layout.placeholder)
