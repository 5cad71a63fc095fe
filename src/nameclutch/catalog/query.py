"""Query operations on the catalog."""

import re
from typing import Iterable, Iterator

from nameclutch.catalog.listing import Listing

ALL_CATEGORIES = "all"

_NOT_PRICE_CHAR = re.compile(r"[^0-9.]")


def all_listings(catalog: dict) -> Iterator[Listing]:
    """Yield a Listing for every entry in the catalog."""
    for entry in catalog.get("domains", []):
        if isinstance(entry, dict):
            yield Listing.from_dict(entry)


def find_listing(catalog: dict, listing_id: int) -> Listing | None:
    """Find a listing by exact id.

    Returns:
        The Listing or None if not found.
    """
    for listing in all_listings(catalog):
        if same_id(listing.id, listing_id):
            return listing
    return None


def same_id(entry_id: object, listing_id: int) -> bool:
    """Exact id match; a boolean id never matches (True == 1 in Python)."""
    if isinstance(entry_id, bool) or not isinstance(entry_id, (int, float)):
        return False
    return entry_id == listing_id


def find_by_name(catalog: dict, name: str) -> Listing | None:
    """Find a listing by domain name (case-insensitive)."""
    wanted = name.strip().lower()
    for listing in all_listings(catalog):
        if listing.name.lower() == wanted:
            return listing
    return None


def categories(catalog: dict) -> list[str]:
    """Category filter options: "all" then each category in first-seen order."""
    seen: list[str] = []
    for listing in all_listings(catalog):
        if listing.category not in seen:
            seen.append(listing.category)
    return [ALL_CATEGORIES] + seen


def parse_price(price: str) -> float:
    """Best-effort numeric value of a display price ("$4,999" -> 4999.0).

    Anything that is not a plain number once stripped to digits and dots
    counts as 0.
    """
    cleaned = _NOT_PRICE_CHAR.sub("", str(price))
    if not cleaned:
        return 0.0
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


def filter_listings(
    listings: Iterable[Listing],
    category: str = ALL_CATEGORIES,
    search: str = "",
) -> list[Listing]:
    """Keep listings in ``category`` whose name contains ``search``.

    Category is an exact match unless it is "all"; search is a
    case-insensitive substring match on the name.
    """
    term = (search or "").lower()
    results = []
    for listing in listings:
        if category and category != ALL_CATEGORIES and listing.category != category:
            continue
        if term not in listing.name.lower():
            continue
        results.append(listing)
    return results


def sort_for_display(listings: Iterable[Listing]) -> list[Listing]:
    """Most expensive first; ties broken alphabetically by name."""
    return sorted(
        listings,
        key=lambda l: (-parse_price(l.price), l.name.casefold(), l.name),
    )


def list_listings(
    catalog: dict,
    category: str | None = None,
    search: str | None = None,
    featured_only: bool = False,
) -> list[Listing]:
    """List listings with optional filters, in display order.

    Args:
        catalog: Loaded catalog dict.
        category: Exact category, or None/"all" for every category.
        search: Substring of the domain name.
        featured_only: Only include featured listings.

    Returns:
        Matching listings sorted by sort_for_display.
    """
    listings = filter_listings(
        all_listings(catalog),
        category=category or ALL_CATEGORIES,
        search=search or "",
    )
    if featured_only:
        listings = [l for l in listings if l.featured]
    return sort_for_display(listings)
