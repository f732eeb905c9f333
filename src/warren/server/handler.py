"""The request pipeline behind ``App.__call__``.

Nothing else in warren reads raw ASGI messages.  A request goes:

1. into a Request, then through the middleware stack
2. to a route table (rescanned, or the one pinned at startup)
3. through the resolver, where the private-route guard has the first say
4. nowhere further if the table holds duplicates: that is a 500 page
5. to its ``route.py`` if one matched, whose data bypasses layouts
6. otherwise to the leaf document (or not-found document), wrapped in
   its layout chain from the innermost layout out
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from warren._internal.asgi import Receive, Scope, Send
from warren._internal.invoke import invoke
from warren.config import AppConfig
from warren.errors import DuplicateRouteError, HTTPError
from warren.http.request import Request
from warren.http.response import Response
from warren.middleware.protocol import Next
from warren.pages.compositor import compose, render_leaf
from warren.pages.diagnostics import Diagnostics
from warren.pages.entrypoint import find_handler, load_module, resolve_kwargs
from warren.pages.layouts import build_chain
from warren.pages.metadata import load_metadata
from warren.routing.resolver import RouteMatch
from warren.routing.table import RouteTable
from warren.server.errors import (
    FALLBACK_DOCUMENT,
    diagnostic_response,
    error_region,
    http_error_response,
)
from warren.server.negotiation import negotiate
from warren.server.sender import send_response

logger = logging.getLogger("warren.server")

DEFAULT_NOT_FOUND = "<h1>404</h1><p>This page could not be found.</p>"


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    config: AppConfig,
    kida_env: Environment,
    route_table: Callable[[], RouteTable],
    middleware: tuple[Callable[..., Any], ...] = (),
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    async def dispatch(req: Request) -> Response:
        return await render_request(req, config=config, kida_env=kida_env, table=route_table())

    try:
        response = await _chain(middleware, dispatch)(request)
    except HTTPError as exc:
        response = http_error_response(exc)
    except Exception as exc:
        # Failures outside the render (middleware, route scan) still get a page
        logger.exception("500 %s %s", request.method, request.path)
        body = FALLBACK_DOCUMENT.format(body=error_region(f"Unhandled Exception: {exc}"))
        response = Response(body=body, status=500)

    await send_response(response, send, head=request.method == "HEAD")


def _chain(middleware: tuple[Callable[..., Any], ...], innermost: Next) -> Next:
    """Wrap *innermost* so the first registered middleware runs first."""

    def wrap(mw: Callable[..., Any], call_next: Next) -> Next:
        async def step(req: Request) -> Response:
            return await mw(req, call_next)

        return step

    for mw in reversed(middleware):
        innermost = wrap(mw, innermost)
    return innermost


async def render_request(
    request: Request,
    *,
    config: AppConfig,
    kida_env: Environment,
    table: RouteTable,
) -> Response:
    """Resolve and render one request against a route table snapshot.

    Raises:
        HTTPError: Raised by a routing entry point; the caller maps it.
    """
    roles = config.roles
    path = _strip_base_path(request.path, config.base_path)
    match = table.resolver.resolve(path, request.fetch_site)
    context = page_context(request, match, config, table)
    diagnostics = Diagnostics()
    root_layout = table.root / roles.layout

    try:
        if table.conflicts:
            raise DuplicateRouteError(list(table.conflicts))

        if match.found and match.entry.filename == roles.entry_point:
            return await call_entry_point(request, match, table)

        chain = build_chain(table.inventory, match.layout_segments, roles)
        with diagnostics.capture_warnings():
            if match.found:
                leaf_html = render_leaf(kida_env, match.entry.path, context)
                status = 200
            else:
                leaf_html = _render_not_found(kida_env, table, config, context)
                status = 404
        html = compose(
            kida_env,
            layout_chain=chain,
            leaf_html=leaf_html,
            context=context,
            diagnostics=diagnostics,
        )
    except HTTPError:
        raise
    except Exception as exc:
        return diagnostic_response(
            exc,
            env=kida_env,
            root_layout=root_layout,
            context=context,
            diagnostics=diagnostics,
            debug=config.debug,
        )

    return Response(body=html, status=status)


async def call_entry_point(request: Request, match: RouteMatch, table: RouteTable) -> Response:
    """Run a ``route.py`` handler and negotiate its return value."""
    assert match.entry is not None
    module = load_module(table.root / match.entry.path)
    func = find_handler(module, request.method)
    kwargs = await resolve_kwargs(func, request, match.params)
    result = await invoke(func, **kwargs)
    return negotiate(result)


def page_context(
    request: Request,
    match: RouteMatch,
    config: AppConfig,
    table: RouteTable,
) -> dict[str, Any]:
    """Variables shared by the leaf document and every layout."""
    return {
        "request": request,
        "query": request.query,
        "route_params": dict(match.params),
        "pathname": match.pathname,
        "base_url": config.base_url,
        "metadata": load_metadata(table.root / config.metadata_name, match.pathname),
    }


def _render_not_found(
    env: Environment,
    table: RouteTable,
    config: AppConfig,
    context: dict[str, Any],
) -> str:
    if config.not_found_name in table.inventory:
        return render_leaf(env, config.not_found_name, context)
    return DEFAULT_NOT_FOUND


def _strip_base_path(path: str, base_path: str) -> str:
    base = base_path.rstrip("/")
    if base and (path == base or path.startswith(base + "/")):
        return path[len(base) :] or "/"
    return path
