"""Outgoing responses.

Pages, entry points, and diagnostic documents all end up as a
:class:`Response`.  Values are never mutated; ``with_*`` calls hand back
modified copies, so middleware can decorate a response safely.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

HTML = "text/html; charset=utf-8"
JSON = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers, and a str or bytes payload.

    ``Content-Type`` lives in its own field; ``Content-Length`` is
    computed when the response is sent.  ``headers`` holds everything
    else, in order, duplicates allowed.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = HTML
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with one more header appended."""
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Copy with every item of *headers* appended."""
        extra = tuple(headers.items())
        return replace(self, headers=self.headers + extra)

    def header(self, name: str) -> str | None:
        """First value of a header set on this response, case-insensitive."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), None)

    @property
    def body_bytes(self) -> bytes:
        """Payload encoded as UTF-8 when it was given as text."""
        body = self.body
        return body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        body = self.body
        return body.decode("utf-8") if isinstance(body, bytes) else body


@dataclass(frozen=True, slots=True)
class Redirect:
    """Returned from a ``route.py`` handler to send the client elsewhere."""

    url: str
    status: int = 302
    headers: tuple[tuple[str, str], ...] = ()
