"""Programmatic catalog edits."""

from nameclutch.catalog.query import same_id


def remove_listing(catalog: dict, listing_id: int) -> bool:
    """Remove every entry whose id equals ``listing_id``.

    Args:
        catalog: Loaded catalog dict (mutated in place).
        listing_id: Listing id to drop.

    Returns:
        True if anything was removed.
    """
    domains = catalog.get("domains", [])
    kept = [
        entry for entry in domains
        if not (isinstance(entry, dict) and same_id(entry.get("id"), listing_id))
    ]
    if len(kept) == len(domains):
        return False
    catalog["domains"] = kept
    return True
