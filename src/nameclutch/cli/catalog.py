"""Catalog CLI commands."""

import argparse

from nameclutch.catalog.listing import Listing
from nameclutch.catalog.query import categories, find_by_name, find_listing, list_listings
from nameclutch.catalog.store import ListingStore
from nameclutch.catalog.validator import validate_catalog
from nameclutch.config import settings


def open_store(args: argparse.Namespace) -> ListingStore:
    return ListingStore(args.data, args.fallback)


def find_listing_ref(catalog: dict, ref: str) -> Listing | None:
    """Look a listing up by numeric id or by domain name."""
    if ref.isdigit():
        return find_listing(catalog, int(ref))
    return find_by_name(catalog, ref)


def cmd_catalog_list(args: argparse.Namespace) -> int:
    catalog = open_store(args).load()
    results = list_listings(
        catalog,
        category=args.category,
        search=args.search,
        featured_only=args.featured,
    )

    if not results:
        print("No domains found matching your criteria.")
        return 0

    print(f"\n  {'ID':<5} {'Name':<32} {'Price':<12} {'Category':<20} {'Featured':<8}")
    print(f"  {'─' * 80}")
    for listing in results:
        print(
            f"  {listing.id!s:<5} {listing.name:<32} {listing.price:<12} "
            f"{listing.category:<20} {'yes' if listing.featured else '':<8}"
        )
    print(f"\n  {len(results)} domain(s)")
    return 0


def cmd_catalog_show(args: argparse.Namespace) -> int:
    catalog = open_store(args).load()
    listing = find_listing_ref(catalog, args.ref)
    if not listing:
        print(f"ERROR: Domain '{args.ref}' not found in catalog")
        return 1

    print(f"\n  {listing.name}")
    print(f"  {'─' * max(len(listing.name), 40)}")
    for key, value in listing.to_dict().items():
        if key in ("name", "pitch"):
            continue
        print(f"  {key + ':':<12}{'' if value is None else value}")
    print(f"  {'pitch:':<12}{'authored' if listing.pitch else 'generated on view'}")
    print()
    return 0


def cmd_catalog_categories(args: argparse.Namespace) -> int:
    catalog = open_store(args).load()
    for category in categories(catalog):
        print(f"  {category}")
    return 0


def cmd_catalog_validate(args: argparse.Namespace) -> int:
    catalog = open_store(args).load()
    result = validate_catalog(catalog)
    print(result.summary())
    return 0 if result.passed else 1


def cmd_catalog_remove(args: argparse.Namespace) -> int:
    if not settings.admin_enabled:
        print("ERROR: Catalog edits are disabled in production")
        return 1

    store = open_store(args)
    if not store.remove(args.id):
        print(f"ERROR: No domain with id {args.id} in {store.editable_path}")
        return 1
    print(f"  Removed domain {args.id}.")
    print(f"  Catalog saved to {store.editable_path}.")
    return 0
