"""``seoroute aliases`` — list indexed aliases.

Prints a table of PATH, DOCUMENT, KEY, and STATUS. Expired rows show
the canonical path they redirect to.
"""

import argparse

from seoroute.cli._load import load_app


def run_aliases(args: argparse.Namespace) -> None:
    """Print every entry of the alias index built from ``args.file``."""
    app = load_app(args)

    rows: list[tuple[str, str, str, str]] = []
    for entry in sorted(app.index, key=lambda e: (e.document_id, e.key, e.is_expired)):
        if entry.is_expired:
            status = f"expired -> /{entry.canonical_path}"
        else:
            status = "live"
        rows.append(("/" + entry.source_path, entry.document_id, entry.key, status))

    if not rows:
        print("No aliases.")
        return

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_doc = max(max(len(r[1]) for r in rows), 8)  # "DOCUMENT" header
    max_key = max(max(len(r[2]) for r in rows), 3)  # "KEY" header

    fmt = f"{{:<{max_path}}}  {{:<{max_doc}}}  {{:<{max_key}}}  {{}}"
    print(fmt.format("PATH", "DOCUMENT", "KEY", "STATUS"))
    print("-" * min(max_path + max_doc + max_key + 6 + max(len(r[3]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))
