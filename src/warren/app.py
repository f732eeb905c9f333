"""The warren application object.

Two phases: during setup, middleware, template filters and globals, and
lifecycle hooks are registered; the first ASGI call (or ``app.run()``)
compiles them into an immutable runtime and no further registration is
allowed.  Routes are never registered; they come from ``app_dir``.
"""

import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from kida import Environment

from warren._internal.asgi import Receive, Scope, Send
from warren._internal.invoke import invoke
from warren.config import AppConfig
from warren.errors import LayoutContractError
from warren.middleware.protocol import Middleware
from warren.pages.layouts import build_chain
from warren.routing.table import RouteTable, load_route_table
from warren.server.handler import handle_request
from warren.templating.integration import create_environment

type Hook = Callable[[], Any]


@dataclass(slots=True)
class _Setup:
    """Everything registered before the app starts serving."""

    middleware: list[Middleware] = field(default_factory=list)
    filters: dict[str, Callable[..., Any]] = field(default_factory=dict)
    globals: dict[str, Any] = field(default_factory=dict)
    startup: list[Hook] = field(default_factory=list)
    shutdown: list[Hook] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class _Runtime:
    """What requests are served with, built once by ``_freeze``."""

    kida_env: Environment
    middleware: tuple[Middleware, ...]
    pinned_table: RouteTable | None


class App:
    """An ASGI application serving ``config.app_dir``::

        app = App(AppConfig(app_dir="app"))

        @app.template_filter()
        def money(value: float) -> str:
            return f"${value:,.2f}"

    The setup-to-runtime transition happens under a lock with a second
    check inside, so concurrent first requests build one kida
    environment between them.
    """

    __slots__ = ("_lock", "_runtime", "_setup", "config")

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._setup = _Setup()
        self._runtime: _Runtime | None = None
        self._lock = threading.Lock()

    # -- Setup --

    def add_middleware(self, middleware: Middleware) -> None:
        """Wrap every request (pages, entry points, diagnostics) in *middleware*."""
        self._require_setup().middleware.append(middleware)

    def template_filter(
        self, name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator: expose a function to templates as ``{{ x | name }}``."""
        return self._registrar(self._setup.filters, name)

    def template_global(
        self, name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator: expose a value or function to every template."""
        return self._registrar(self._setup.globals, name)

    def on_startup(self, func: Hook) -> Hook:
        self._require_setup().startup.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        self._require_setup().shutdown.append(func)
        return func

    def _registrar(
        self, table: dict[str, Any], name: str | None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        def register(func: Callable[..., Any]) -> Callable[..., Any]:
            self._require_setup()
            table[name or func.__name__] = func
            return func

        return register

    def _require_setup(self) -> _Setup:
        if self._runtime is not None:
            msg = (
                "Cannot modify the app after it has started serving; register "
                "middleware, filters, and hooks before the first request or app.run()."
            )
            raise RuntimeError(msg)
        return self._setup

    # -- Route table --

    def route_table(self) -> RouteTable:
        """The route table for the next request.

        A fresh scan by default; with ``rescan_routes=False`` the table
        built when the app froze.
        """
        if self._runtime is not None and self._runtime.pinned_table is not None:
            return self._runtime.pinned_table
        return load_route_table(self.config)

    def check(self) -> list[str]:
        """Problems that would break rendering, without serving a request.

        Duplicate routes are listed first, then every distinct layout
        contract violation reachable from a default document.
        """
        table = load_route_table(self.config)
        roles = self.config.roles
        problems = [
            f"Duplicate route {conflict.path}: {', '.join(conflict.originals)}"
            for conflict in table.conflicts
        ]
        for entry in table.inventory:
            if entry.filename != roles.document:
                continue
            try:
                build_chain(table.inventory, entry.directory, roles)
            except LayoutContractError as exc:
                if str(exc) not in problems:
                    problems.append(str(exc))
        return problems

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Serve with pounce on ``config.host``/``config.port`` unless overridden.

        Single worker; reloads on file changes when ``debug=True``.
        """
        self._ensure_frozen()

        from warren.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_dirs=self.config.reload_dirs,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        runtime = self._ensure_frozen()
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            config=self.config,
            kida_env=runtime.kida_env,
            route_table=self.route_table,
            middleware=runtime.middleware,
        )

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        """Answer lifespan events until shutdown; hooks run in order."""
        while True:
            event = (await receive())["type"]
            if event == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif event == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        for hook in self._setup.startup:
            await invoke(hook)

    async def shutdown(self) -> None:
        for hook in self._setup.shutdown:
            await invoke(hook)

    # -- Freezing --

    def _ensure_frozen(self) -> _Runtime:
        runtime = self._runtime
        if runtime is not None:
            return runtime
        with self._lock:
            if self._runtime is None:
                self._runtime = self._freeze()
            return self._runtime

    def _freeze(self) -> _Runtime:
        """Build the runtime from the setup. Caller holds ``_lock``."""
        setup = self._setup
        pinned = None if self.config.rescan_routes else load_route_table(self.config)
        runtime = _Runtime(
            kida_env=create_environment(self.config, setup.filters, setup.globals),
            middleware=tuple(setup.middleware),
            pinned_table=pinned,
        )
        if self.config.debug:
            for problem in self.check():
                sys.stderr.write(f"warren: {problem}\n")
        return runtime
