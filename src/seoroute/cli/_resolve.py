"""``seoroute resolve`` — show what a URL resolves to."""

import argparse
import sys

from seoroute.cli._load import load_app
from seoroute.errors import InvalidOriginError
from seoroute.routing.outcome import NotFound, RedirectToCanonical, ServeById, ServeDirect


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` and print the outcome.

    Exits with code 1 when nothing matches.
    """
    app = load_app(args)
    try:
        outcome = app.resolve_url(args.url, args.origin)
    except InvalidOriginError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    match outcome:
        case ServeDirect(document_id=document_id, key=key):
            print(f"serve {document_id} (key: {key})")
        case RedirectToCanonical(url=url, expired=expired):
            print(f"redirect {url}" + (" (expired alias)" if expired else ""))
        case ServeById(document_id=document_id):
            print(f"serve {document_id} (by id)")
        case NotFound(path=path):
            print(f"not found: {path}")
            raise SystemExit(1)
