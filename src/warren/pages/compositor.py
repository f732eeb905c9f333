"""Layout composition — leaf first, then layouts inside-out.

The leaf document is rendered to a string.  Nested layouts are folded
around it from the deepest directory outward, each bound to
``child_content``.  The root layout is applied last, exactly once, with
the result bound to ``content``.

Every pass renders into its own string.  If a pass fails, the exception
propagates and nothing from earlier passes leaks into a response.
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any

from kida import Environment
from kida.template import Markup

from warren.pages.diagnostics import Diagnostics
from warren.pages.layouts import CHILD_CONTENT, CONTENT
from warren.pages.types import LayoutChain


def render_leaf(env: Environment, template_name: str, context: dict[str, Any]) -> str:
    """Render the route's own document."""
    template = env.get_template(template_name)
    return template.render(context)


def compose(
    env: Environment,
    *,
    layout_chain: LayoutChain,
    leaf_html: str,
    context: dict[str, Any],
    diagnostics: Diagnostics | None = None,
) -> str:
    """Wrap pre-rendered leaf HTML in its layout chain.

    Args:
        env: The kida ``Environment`` for loading layout templates.
        layout_chain: Layouts from root (outermost) to deepest.
        leaf_html: Pre-rendered leaf document HTML.
        context: Variables shared by every layout.
        diagnostics: Non-fatal error regions appended to the content
            handed to the root layout.

    Returns:
        The complete document.
    """
    html = leaf_html
    capture = diagnostics.capture_warnings() if diagnostics is not None else nullcontext()
    with capture:
        for layout in reversed(layout_chain.nested):
            template = env.get_template(layout.template_name)
            html = template.render({**context, CHILD_CONTENT: Markup(html)})

    if diagnostics:
        html = "".join((str(html), str(diagnostics.render())))

    root = layout_chain.root
    if root is None:
        return html
    template = env.get_template(root.template_name)
    return template.render({**context, CONTENT: Markup(html)})
