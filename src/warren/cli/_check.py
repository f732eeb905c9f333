"""``warren check`` — duplicate route and layout contract validation.

Prints every problem found and exits with code 1 if there are any.
"""

import argparse
import sys

from warren.cli._resolve import load_or_exit


def run_check(args: argparse.Namespace) -> None:
    app = load_or_exit(args.app)
    problems = app.check()
    if not problems:
        print("No problems found.")
        return
    for problem in problems:
        print(problem, file=sys.stderr)
    print(f"{len(problems)} problem(s) found.", file=sys.stderr)
    raise SystemExit(1)
