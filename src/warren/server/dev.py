"""Development server.

Starts a pounce ASGI server with the live warren App object.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
) -> None:
    """Serve *app* with pounce in a single worker.

    Pounce's ``run()`` takes an import string, but warren has a live
    ``App`` object, so ``pounce.Server`` is used directly.  Templates
    are watched alongside Python files since the app directory holds
    both.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=(".html", ".json"),
        reload_dirs=reload_dirs,
    )
    Server(config, app).run()
