"""The incoming request as entry points and templates see it.

Everything known when the ASGI scope arrives is a frozen field.  The body
arrives later, so it is read on demand and memoized; ``route.py``
handlers usually only ask for :meth:`Request.params`.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncIterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

from warren._internal.asgi import Receive
from warren.http.headers import Headers, parse_cookies
from warren.http.params import Params

_FORM_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request.

    Attributes:
        query: Parsed query string.
        query_string: The raw query string, without the ``?``.
        cookies: ``Cookie`` header as a name-value mapping.
    """

    method: str
    path: str
    headers: Headers
    query: Params
    query_string: str = ""
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None
    cookies: Mapping[str, str] = field(default_factory=dict)

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    # Body and params, filled on first read
    _memo: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def fetch_site(self) -> str | None:
        """The ``Sec-Fetch-Site`` header (``same-origin``, ``cross-site``, ...)."""
        return self.headers.get("sec-fetch-site")

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Path plus query string, as the client sent it."""
        if not self.query_string:
            return self.path
        return f"{self.path}?{self.query_string}"

    async def stream(self) -> AsyncIterator[bytes]:
        """Yield body chunks straight from ASGI ``receive``.

        Single use; prefer :meth:`body`, which can be called repeatedly.
        """
        if self._receive is None:
            return
        more = True
        while more:
            message = await self._receive()
            chunk = message.get("body", b"")
            if chunk:
                yield chunk
            more = message.get("more_body", False)

    async def body(self) -> bytes:
        if "body" not in self._memo:
            self._memo["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._memo["body"]

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        return json_module.loads(await self.body())

    async def params(self) -> Params:
        """Query parameters merged with the decoded body.

        JSON objects and url-encoded forms are understood; body values
        win over query values with the same name.  Other bodies leave
        the query parameters as they are.
        """
        if "params" in self._memo:
            return self._memo["params"]

        merged = self.query
        if self.method not in ("GET", "HEAD"):
            media_type = (self.content_type or "").partition(";")[0].strip().lower()
            raw = await self.body()
            if raw and "json" in media_type:
                payload = json_module.loads(raw)
                if isinstance(payload, dict):
                    merged = merged.merged(Params.from_object(payload))
            elif raw and media_type in ("", _FORM_TYPE):
                merged = merged.merged(Params.from_query_string(raw))

        self._memo["params"] = merged
        return merged

    @classmethod
    def from_asgi(cls, scope: MutableMapping[str, Any], receive: Receive) -> Request:
        """Build from an ASGI HTTP scope; the body stays unread."""
        headers = Headers(tuple(scope.get("headers", ())))
        query_string = scope.get("query_string", b"").decode("latin-1")
        server, client = scope.get("server"), scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=headers,
            query=Params.from_query_string(query_string),
            query_string=query_string,
            http_version=scope.get("http_version", "1.1"),
            server=(server[0], server[1]) if server else None,
            client=(client[0], client[1]) if client else None,
            cookies=parse_cookies(headers.get("cookie", "")),
            _receive=receive,
        )
