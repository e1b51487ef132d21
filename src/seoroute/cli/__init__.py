"""seoroute CLI — validate alias data and try resolution and generation.

Entry point registered as ``seoroute`` in ``pyproject.toml``::

    [project.scripts]
    seoroute = "seoroute.cli:main"

Every command reads a JSON array of documents (``id``, ``url`` /
``aliases``, ``expired_url`` / ``expired_aliases``).
"""

import argparse
import logging
import sys

from seoroute.routing.fallback import DEFAULT_TEMPLATE


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``seoroute`` command."""
    parser = argparse.ArgumentParser(
        prog="seoroute",
        description="seoroute — SEO-friendly alias URLs for documents.",
    )
    parser.add_argument(
        "--fallback",
        default=DEFAULT_TEMPLATE,
        help=f"Fallback route template (default: {DEFAULT_TEMPLATE})",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- seoroute check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate alias data")
    check_parser.add_argument("file", help="JSON file with documents")

    # -- seoroute aliases -------------------------------------------------
    aliases_parser = subparsers.add_parser("aliases", help="List indexed aliases")
    aliases_parser.add_argument("file", help="JSON file with documents")

    # -- seoroute resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a URL or path")
    resolve_parser.add_argument("file", help="JSON file with documents")
    resolve_parser.add_argument("url", help="Absolute URL or path (e.g. /Product/baz/)")
    resolve_parser.add_argument(
        "--origin",
        default="http://localhost",
        help="Origin for relative paths (default: http://localhost)",
    )

    # -- seoroute url -----------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate the URL for a document")
    url_parser.add_argument("file", help="JSON file with documents")
    url_parser.add_argument("document_id", help="Document id")
    url_parser.add_argument("--key", default=None, help="Alias key (e.g. baz)")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="NAME=VALUE",
        help="Extra query parameters, in order",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        from seoroute.cli._check import run_check

        run_check(args)
    elif args.command == "aliases":
        from seoroute.cli._aliases import run_aliases

        run_aliases(args)
    elif args.command == "resolve":
        from seoroute.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "url":
        from seoroute.cli._url import run_url

        run_url(args)
