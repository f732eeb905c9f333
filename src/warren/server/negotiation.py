"""Turning entry-point return values into Responses.

A ``route.py`` handler returns plain data and the type decides the
response:

=====================  ==============================================
``Response``           sent as is
``Redirect``           its status, with ``Location``
``str``                200 ``text/html``
``bytes``              200 ``application/octet-stream``
``dict`` / ``list``    200 ``application/json``
``None``               204 with no body
``(value, status)``    *value* negotiated, then the status replaced
``(value, status, h)`` as above, plus the headers in ``h``
=====================  ==============================================
"""

import json as json_module
from typing import Any

from warren.errors import ConfigurationError
from warren.http.response import HTML, JSON, Redirect, Response

OCTET_STREAM = "application/octet-stream"


def _redirect(redirect: Redirect) -> Response:
    return Response(
        body="",
        status=redirect.status,
        headers=(("Location", redirect.url), *redirect.headers),
    )


def negotiate(value: Any) -> Response:
    """The Response for *value*; unknown types are a ConfigurationError."""
    match value:
        case Response():
            return value
        case Redirect():
            return _redirect(value)
        case str():
            return Response(body=value, content_type=HTML)
        case bytes():
            return Response(body=value, content_type=OCTET_STREAM)
        case dict() | list():
            return Response(body=json_module.dumps(value, default=str), content_type=JSON)
        case None:
            return Response(status=204)
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case (inner, int() as status, dict() as extra):
            return negotiate(inner).with_status(status).with_headers(extra)
        case _:
            msg = (
                f"A route handler returned {type(value).__name__!r}; return str, "
                "bytes, dict, list, None, a Response, or a Redirect instead."
            )
            raise ConfigurationError(msg)
