"""Catalog module — load, query, validate, and edit domains.json."""

from nameclutch.catalog.listing import Listing
from nameclutch.catalog.loader import load_catalog, save_catalog
from nameclutch.catalog.query import (
    all_listings,
    categories,
    find_by_name,
    find_listing,
    list_listings,
)
from nameclutch.catalog.store import ListingStore
from nameclutch.catalog.updater import remove_listing
from nameclutch.catalog.validator import validate_catalog

__all__ = [
    "Listing",
    "ListingStore",
    "load_catalog",
    "save_catalog",
    "all_listings",
    "categories",
    "find_by_name",
    "find_listing",
    "list_listings",
    "remove_listing",
    "validate_catalog",
]
