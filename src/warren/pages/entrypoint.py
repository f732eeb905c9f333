"""``route.py`` entry points: directories that answer with data.

An entry point exports functions named after HTTP methods (``get``,
``post``, ...), or one ``handler`` for any method.  It is executed fresh
from disk for every request, the same way the route table is rescanned,
so edits show up without a restart.

A handler declares what it wants by parameter name:

``request``
    the :class:`~warren.http.request.Request` (also matched by annotation)
``params``
    query string merged with the decoded body
``route_params``
    every captured route parameter as a dict
any captured name
    ``[id]`` fills ``id``; a single value is passed through the
    annotation (``id: int``) when that conversion succeeds
"""

from __future__ import annotations

import importlib.util
import inspect
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any

from warren.errors import ConfigurationError, MethodNotAllowed

if TYPE_CHECKING:
    from warren.http.request import Request

HTTP_METHODS = frozenset({"get", "post", "put", "delete", "patch", "head", "options"})
CATCH_ALL_HANDLER = "handler"


def load_module(path: Path) -> ModuleType:
    """Execute *path* as a module that is never registered in ``sys.modules``."""
    loader_spec = importlib.util.spec_from_file_location(
        f"_warren_route_{abs(hash(str(path)))}", path
    )
    if loader_spec is None or loader_spec.loader is None:
        msg = f"Cannot load routing entry point: {path}"
        raise ConfigurationError(msg)
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


def _exported(module: ModuleType, name: str) -> Callable[..., Any] | None:
    candidate = getattr(module, name, None)
    return candidate if callable(candidate) else None


def allowed_methods(module: ModuleType) -> frozenset[str]:
    """Upper-case methods *module* answers, used for the ``Allow`` header."""
    if _exported(module, CATCH_ALL_HANDLER):
        return frozenset(map(str.upper, HTTP_METHODS))
    answered = {m.upper() for m in HTTP_METHODS if _exported(module, m)}
    if "GET" in answered:
        answered.add("HEAD")
    return frozenset(answered)


def find_handler(module: ModuleType, method: str) -> Callable[..., Any]:
    """The function for *method*, else ``handler``, else 405.

    HEAD falls back to ``get``; the sender drops the body.
    """
    found = _exported(module, method.lower())
    if found is None and method.upper() == "HEAD":
        found = _exported(module, "get")
    if found is None:
        found = _exported(module, CATCH_ALL_HANDLER)
    if found is None:
        raise MethodNotAllowed(allowed_methods(module))
    return found


def _coerce(value: Any, annotation: Any) -> Any:
    if not isinstance(value, str) or annotation is inspect.Parameter.empty:
        return value
    try:
        return annotation(value)
    except (TypeError, ValueError):
        return value


async def resolve_kwargs(
    handler: Callable[..., Any],
    request: Request,
    route_params: dict[str, Any],
) -> dict[str, Any]:
    """Keyword arguments for *handler*; parameters nothing can fill are left out."""
    from warren.http.request import Request as RequestType

    filled: dict[str, Any] = {}
    for name, parameter in inspect.signature(handler, eval_str=True).parameters.items():
        if name == "request" or parameter.annotation is RequestType:
            filled[name] = request
        elif name == "params":
            filled[name] = await request.params()
        elif name == "route_params":
            filled[name] = dict(route_params)
        elif name in route_params:
            filled[name] = _coerce(route_params[name], parameter.annotation)
    return filled
