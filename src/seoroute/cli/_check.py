"""``seoroute check`` — alias data validation command.

Builds the alias index from a documents file and prints a summary.
Exits with code 1 on conflicts (see ``AliasIndex.build``).
"""

import argparse

from seoroute.cli._load import load_app


def run_check(args: argparse.Namespace) -> None:
    """Validate the aliases in ``args.file``."""
    app = load_app(args)
    entries = list(app.index)
    expired = sum(1 for entry in entries if entry.is_expired)
    documents = len(app.store) if app.store is not None else 0
    print(
        f"OK: {len(entries) - expired} live aliases, {expired} expired aliases "
        f"across {documents} documents"
    )
