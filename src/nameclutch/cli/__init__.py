"""Unified CLI for the nameclutch storefront.

Usage:
    nameclutch catalog list [--category X] [--search X] [--featured]
    nameclutch catalog show <id|name>
    nameclutch catalog categories
    nameclutch catalog validate
    nameclutch catalog remove <id>
    nameclutch pitch show <id|name> [--json] [--pitches <path>]
    nameclutch pitch preview <name> [--category X] [--tld X] [--json]
    nameclutch serve [--host X] [--port N] [--reload]
"""

import argparse
import sys

from nameclutch.cli.catalog import (
    cmd_catalog_categories,
    cmd_catalog_list,
    cmd_catalog_remove,
    cmd_catalog_show,
    cmd_catalog_validate,
)
from nameclutch.cli.pitch import cmd_pitch_preview, cmd_pitch_show
from nameclutch.cli.serve import cmd_serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nameclutch",
        description="Premium domain storefront: catalog and pitch tools",
    )
    parser.add_argument(
        "--data", default=None,
        help="Path to the editable domains.json (default: data/domains.json)",
    )
    parser.add_argument(
        "--fallback", default=None,
        help="Path to the read-only domains.json (default: public/domains.json)",
    )
    sub = parser.add_subparsers(dest="command")

    # catalog
    cat = sub.add_parser("catalog", help="Catalog operations")
    cat_sub = cat.add_subparsers(dest="subcommand")

    ls = cat_sub.add_parser("list", help="List domains with filters")
    ls.add_argument("--category", default=None, help="Exact category (or 'all')")
    ls.add_argument("--search", default=None, help="Substring of the domain name")
    ls.add_argument("--featured", action="store_true", help="Featured domains only")

    show = cat_sub.add_parser("show", help="Show a catalog entry")
    show.add_argument("ref", help="Listing id or domain name")

    cat_sub.add_parser("categories", help="List category filters")
    cat_sub.add_parser("validate", help="Validate the catalog")

    rm = cat_sub.add_parser("remove", help="Remove a domain by id")
    rm.add_argument("id", type=int)

    # pitch
    pitch = sub.add_parser("pitch", help="Pitch copy")
    pitch_sub = pitch.add_subparsers(dest="subcommand")

    pitch_show = pitch_sub.add_parser(
        "show", help="Show the pitch for a catalog domain",
    )
    pitch_show.add_argument("ref", help="Listing id or domain name")
    pitch_show.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )
    pitch_show.add_argument(
        "--pitches", default=None,
        help="Path to pitches.yaml with authored pitches",
    )

    pitch_preview = pitch_sub.add_parser(
        "preview", help="Generate a pitch for a domain not in the catalog",
    )
    pitch_preview.add_argument("name", help="Domain name, e.g. acme.com")
    pitch_preview.add_argument("--category", default="", help="Listing category")
    pitch_preview.add_argument(
        "--tld", default=None,
        help="TLD (default: everything after the first dot)",
    )
    pitch_preview.add_argument("--price", default="", help="Display price")
    pitch_preview.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # serve (top-level)
    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        ("catalog", "list"): cmd_catalog_list,
        ("catalog", "show"): cmd_catalog_show,
        ("catalog", "categories"): cmd_catalog_categories,
        ("catalog", "validate"): cmd_catalog_validate,
        ("catalog", "remove"): cmd_catalog_remove,
        ("pitch", "show"): cmd_pitch_show,
        ("pitch", "preview"): cmd_pitch_preview,
    }

    # Handle top-level commands (no subcommand)
    if args.command == "serve":
        return cmd_serve(args)

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
