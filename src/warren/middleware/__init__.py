"""Middleware: any callable matching the protocol, no base class.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response
"""

from warren.middleware.protocol import Middleware, Next

__all__ = ["Middleware", "Next"]
