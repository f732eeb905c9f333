"""``warren run`` — development server command."""

import argparse

from warren.cli._resolve import load_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it with pounce.

    ``--host`` and ``--port`` override the app config.
    """
    app = load_or_exit(args.app)
    app.run(host=args.host, port=args.port)
