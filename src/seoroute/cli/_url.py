"""``seoroute url`` — generate the URL for a document."""

import argparse
import sys

from seoroute.cli._load import load_app


def run_url(args: argparse.Namespace) -> None:
    """Print the path for ``args.document_id`` and optional ``--key``.

    Extra ``NAME=VALUE`` arguments become the query string, in order.
    """
    app = load_app(args)
    assert app.store is not None
    document = app.store.get(args.document_id)
    if document is None:
        print(f"Error: no document with id {args.document_id!r}", file=sys.stderr)
        raise SystemExit(1)

    params: dict[str, str] = {}
    for item in args.params:
        name, sep, value = item.partition("=")
        if not sep or not name:
            print(f"Error: expected NAME=VALUE, got {item!r}", file=sys.stderr)
            raise SystemExit(2)
        params[name] = value

    print(app.url_for(document, args.key, **params))
