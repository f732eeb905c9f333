"""Warren — filesystem routing and nested layouts for HTML apps.

The app directory is the route table.  Folders are URL segments,
``(group)`` folders organize files without touching the URL, and
``[param]`` / ``[...param]`` folders capture dynamic segments::

    from warren import App, AppConfig

    app = App(AppConfig(app_dir="app"))
    app.run()

``app.run()`` serves the app with pounce.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DuplicateRouteError",
    "HTTPError",
    "LayoutContractError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "WarrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from warren.app import App

        return App

    if name == "AppConfig":
        from warren.config import AppConfig

        return AppConfig

    if name == "Request":
        from warren.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from warren.http import response as _resp

        return getattr(_resp, name)

    if name in ("Middleware", "Next"):
        from warren.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in (
        "ConfigurationError",
        "DuplicateRouteError",
        "HTTPError",
        "LayoutContractError",
        "MethodNotAllowed",
        "NotFound",
        "WarrenError",
    ):
        from warren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
