"""
Domains Router
==============
Catalog listing, search, pitch lookup and admin removal.
"""
import math

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from nameclutch.catalog.query import categories, list_listings
from nameclutch.catalog.store import ListingStore
from nameclutch.config import Settings, settings
from nameclutch.paths import pitches_path
from nameclutch.pitch.data import load_authored_pitches, resolve_pitch
from nameclutch.pitch.render import contact_links
from nameclutch.web.schemas import PitchResponse, SearchResponse

router = APIRouter()


def get_store() -> ListingStore:
    """Store bound to the configured data paths (overridable in tests)."""
    return ListingStore()


def get_settings() -> Settings:
    return settings


@router.get("")
def list_domains(store: ListingStore = Depends(get_store)):
    """Full catalog document, exactly as stored."""
    return store.load()


@router.get("/search", response_model=SearchResponse)
def search_domains(
    category: str = "all",
    q: str = "",
    store: ListingStore = Depends(get_store),
):
    """Catalog filtered by category and name, most expensive first."""
    catalog = store.load()
    listings = list_listings(catalog, category=category, search=q)
    return {
        "categories": categories(catalog),
        "domains": [l.to_dict() for l in listings],
    }


@router.get("/{listing_id}/pitch", response_model=PitchResponse)
def get_pitch(
    listing_id: int,
    store: ListingStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    """Authored pitch if the listing has one, generated copy otherwise."""
    listing = store.find(listing_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="Not found")

    resolved = resolve_pitch(listing, load_authored_pitches(pitches_path()))
    return {
        "id": listing.id,
        "name": listing.name,
        "source": resolved.source,
        "pitch": resolved.pitch.to_dict(),
        "links": contact_links(listing, config.CONTACT_EMAIL, config.CONTACT_NAME),
    }


@router.delete("/{listing_id}")
def delete_domain(
    listing_id: str,
    store: ListingStore = Depends(get_store),
    config: Settings = Depends(get_settings),
):
    """Remove one listing by id. Disabled in production."""
    if not config.admin_enabled:
        return JSONResponse({"error": "Admin API disabled in production"}, status_code=403)

    parsed = _parse_id(listing_id)
    if parsed is None:
        return JSONResponse({"error": "Invalid id"}, status_code=400)

    if not store.remove(parsed):
        return JSONResponse({"ok": False, "error": "Not found"}, status_code=404)

    return {"ok": True, "domains": store.load()["domains"]}


def _parse_id(raw: str) -> float | None:
    """Numeric value of a path id, or None when it is not a finite number."""
    # Digit separators ("1_0") are not a valid id.
    if "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value
