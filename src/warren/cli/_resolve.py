"""Turns a command-line argument into an App instance.

Shared by every ``warren`` subcommand.
"""

import importlib
import os
import sys

from warren.app import App
from warren.config import AppConfig


def resolve_app(target: str) -> App:
    """Resolve *target* to a warren App instance.

    An existing directory becomes ``App(AppConfig(app_dir=target))``.
    Anything else is an import string in ``"module:attribute"`` form;
    the attribute defaults to ``"app"``.  A callable that is not an
    App is treated as a factory and called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a warren ``App``.
    """
    if os.path.isdir(target):
        return App(AppConfig(app_dir=target))

    module_path, _, attr_name = target.partition(":")
    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name or "app")

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {target!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{target!r} resolved to {type(obj).__name__}, not a warren.App instance"
        raise TypeError(msg)

    return obj


def load_or_exit(target: str) -> App:
    """``resolve_app`` for commands: prints the error and exits 1."""
    try:
        return resolve_app(target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
