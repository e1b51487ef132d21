"""Shared loading for CLI commands.

Turns a documents file into an ``App`` with its index built, or exits
with a readable message.
"""

import argparse
import sys

from seoroute.app import App
from seoroute.config import AppConfig
from seoroute.errors import ConfigurationError
from seoroute.store import InMemoryDocumentStore, load_documents


def load_app(args: argparse.Namespace) -> App:
    """Build an App from ``args.file`` and ``args.fallback``.

    Exits with code 1 on unreadable files, an invalid fallback template,
    and alias conflicts.
    """
    try:
        documents = load_documents(args.file)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = AppConfig(fallback_path=args.fallback)
    try:
        config.fallback_route()
        return App(config, store=InMemoryDocumentStore(documents), documents=documents)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
