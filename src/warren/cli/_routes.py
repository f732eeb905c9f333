"""``warren routes`` — list the routable files in the app directory."""

import argparse

from warren.cli._resolve import load_or_exit
from warren.routing.segments import join, strip_groups


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of URL pattern, role, and file for every route.

    Layouts, metadata, and other support files are not listed.  Rows
    follow the inventory order (sorted by path).
    """
    app = load_or_exit(args.app)
    table = app.route_table()
    roles = app.config.roles

    rows: list[tuple[str, str, str]] = []
    for entry in table.inventory:
        if entry.filename == roles.entry_point:
            role = "entry"
        elif entry.filename == roles.document:
            role = "page"
        else:
            continue
        pattern = "/" + join(strip_groups(entry.directory))
        rows.append((pattern, role, entry.path))

    if not rows:
        print("No routes found.")
        return

    max_pattern = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    fmt = f"{{:<{max_pattern}}}  {{:<5}}  {{}}"
    print(fmt.format("PATH", "ROLE", "FILE"))
    print("-" * min(max_pattern + 7 + max(len(r[2]) for r in rows), 80))
    for pattern, role, path in rows:
        print(fmt.format(pattern, role, path))

    for conflict in table.conflicts:
        print(f"duplicate: {conflict.path} ({', '.join(conflict.originals)})")
