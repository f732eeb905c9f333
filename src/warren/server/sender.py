"""Writing a :class:`Response` to the ASGI ``send`` channel."""

from warren._internal.asgi import Send
from warren.http.response import Response

# Statuses whose responses never carry a body
_BODYLESS = frozenset({204, 304})


def _encode(name: str, value: str) -> tuple[bytes, bytes]:
    return name.lower().encode("latin-1"), value.encode("latin-1")


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send the start message with computed headers, then the whole body at once.

    ``content-type`` always comes first and ``content-length`` last.  For
    a HEAD request the length is that of the GET body, which is withheld.
    """
    status = response.status
    body = b"" if status < 200 or status in _BODYLESS else response.body_bytes
    headers = [
        _encode("content-type", response.content_type),
        *(_encode(name, value) for name, value in response.headers),
        _encode("content-length", str(len(body))),
    ]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": b"" if head else body})
