"""Diagnostic documents and HTTP error responses.

Fatal problems (ambiguous routes, broken layout contracts, exceptions
while rendering) never produce a blank page or a partial one.  The
error regions are substituted into the root layout's ``<body>`` so the
page keeps the site's structure; if the root layout itself cannot be
rendered, a built-in document is used instead.
"""

from __future__ import annotations

import html
import logging
import re
import traceback
from pathlib import Path
from typing import Any

from kida import Environment
from kida.template import Markup

from warren.errors import DuplicateRouteError, HTTPError, LayoutContractError
from warren.http.response import Response
from warren.pages.diagnostics import Diagnostics

logger = logging.getLogger("warren.server")

_BODY_RE = re.compile(r"<body\b[^>]*>.*?</body>", re.DOTALL | re.IGNORECASE)

# Template variable the diagnostic regions are bound to
_SLOT = "warren_diagnostics"

FALLBACK_DOCUMENT = (
    '<!DOCTYPE html>\n<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
    "<title>Error</title>\n</head>\n"
    '<body class="fatal-error">{body}</body>\n</html>'
)


def error_region(message: str, *, detail: str | None = None) -> str:
    """One ``<div class="error">`` region; *detail* is shown in bold."""
    body = html.escape(message)
    if detail:
        body += f"<br><strong>{html.escape(detail)}</strong>"
    return f"<div class='error'>{body}</div>"


def describe(exc: BaseException, *, debug: bool = False) -> str:
    """Error regions explaining *exc*."""
    if isinstance(exc, DuplicateRouteError):
        return "<div class='error'>" + "<br>".join(html.escape(m) for m in exc.messages()) + "</div>"
    if isinstance(exc, LayoutContractError):
        return error_region(exc.summary, detail=exc.template_name)
    region = error_region(f"Unhandled Exception: {exc}")
    if debug:
        tb = "".join(traceback.format_exception(exc))
        region += f"<pre class='traceback'>{html.escape(tb)}</pre>"
    return region


def render_diagnostic_page(
    env: Environment,
    root_layout: Path | None,
    body_html: str,
    context: dict[str, Any],
) -> str:
    """Put *body_html* in place of the root layout's ``<body>`` element.

    Args:
        env: kida environment used to render the modified layout source.
        root_layout: Path to the root layout, or ``None`` if there is none.
        body_html: Pre-escaped error regions.
        context: Variables the root layout expects.
    """
    source = _read(root_layout) if root_layout is not None else None
    if source is not None and _BODY_RE.search(source):
        replaced = _BODY_RE.sub(
            lambda _m: f'<body class="fatal-error">{{{{ {_SLOT} }}}}</body>', source, count=1
        )
        try:
            return env.from_string(replaced).render({**context, _SLOT: Markup(body_html)})
        except Exception:
            logger.exception("Root layout failed while rendering a diagnostic page")
    return FALLBACK_DOCUMENT.format(body=body_html)


def diagnostic_response(
    exc: BaseException,
    *,
    env: Environment,
    root_layout: Path | None,
    context: dict[str, Any],
    diagnostics: Diagnostics,
    debug: bool = False,
) -> Response:
    """Build the 500 diagnostic document for a fatal render failure.

    Regions already in *diagnostics* (warnings seen before the failure)
    are kept ahead of the fatal one.
    """
    if isinstance(exc, (DuplicateRouteError, LayoutContractError)):
        logger.error("%s", exc)
    else:
        logger.error("Render failed", exc_info=exc)
    body = str(diagnostics.render()) + describe(exc, debug=debug)
    return Response(body=render_diagnostic_page(env, root_layout, body, context), status=500)


def http_error_response(exc: HTTPError) -> Response:
    """Plain response for an HTTPError raised by an entry point."""
    logger.debug("%d %s", exc.status, exc.detail)
    resp = Response(body=exc.detail or f"Error {exc.status}", content_type="text/plain; charset=utf-8")
    resp = resp.with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return None
