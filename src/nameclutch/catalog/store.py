"""Listing store — the catalog as seen by the HTTP surface and the CLI.

Reads re-open the document every time; there is no cache and no locking.
Removals only ever touch the editable file, never the read-only fallback.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nameclutch.catalog.listing import Listing
from nameclutch.catalog.loader import empty_catalog, load_catalog, read_catalog, save_catalog
from nameclutch.catalog.query import all_listings, find_listing
from nameclutch.catalog.updater import remove_listing
from nameclutch.paths import editable_catalog_path, fallback_catalog_path

logger = logging.getLogger(__name__)


class ListingStore:
    """domains.json backed store: editable file first, fallback second."""

    def __init__(
        self,
        editable_path: Path | str | None = None,
        fallback_path: Path | str | None = None,
    ) -> None:
        self.editable_path = Path(editable_path) if editable_path else editable_catalog_path()
        self.fallback_path = Path(fallback_path) if fallback_path else fallback_catalog_path()

    def load(self) -> dict:
        """Raw catalog document; empty when nothing is readable."""
        return load_catalog(self.editable_path, self.fallback_path)

    def list_all(self) -> list[Listing]:
        return list(all_listings(self.load()))

    def find(self, listing_id: int) -> Listing | None:
        return find_listing(self.load(), listing_id)

    def remove(self, listing_id: int) -> bool:
        """Remove a listing from the editable catalog.

        Returns:
            True if the listing was found and the file rewritten, False if
            no listing has that id (or there is no editable catalog).
        """
        try:
            catalog = read_catalog(self.editable_path)
        except FileNotFoundError:
            catalog = empty_catalog()
        if not remove_listing(catalog, listing_id):
            return False
        save_catalog(catalog, self.editable_path)
        logger.info("Removed listing %s from %s", listing_id, self.editable_path)
        return True
