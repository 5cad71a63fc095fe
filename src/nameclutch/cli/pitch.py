"""Pitch CLI commands."""

import argparse
import json

from nameclutch.catalog.listing import Listing
from nameclutch.cli.catalog import find_listing_ref, open_store
from nameclutch.config import settings
from nameclutch.paths import pitches_path
from nameclutch.pitch.data import ResolvedPitch, load_authored_pitches, resolve_pitch
from nameclutch.pitch.render import contact_links, render_text


def cmd_pitch_show(args: argparse.Namespace) -> int:
    catalog = open_store(args).load()
    listing = find_listing_ref(catalog, args.ref)
    if not listing:
        print(f"ERROR: Domain '{args.ref}' not found in catalog")
        return 1

    overrides = load_authored_pitches(args.pitches or pitches_path())
    resolved = resolve_pitch(listing, overrides)
    _print_pitch(listing, resolved, as_json=args.json)
    return 0


def cmd_pitch_preview(args: argparse.Namespace) -> int:
    if "." not in args.name:
        print(f"ERROR: '{args.name}' is not a domain name")
        return 1

    listing = Listing.from_dict({
        "id": 0,
        "name": args.name,
        "price": args.price,
        "tld": args.tld,
        "category": args.category,
    })
    _print_pitch(listing, resolve_pitch(listing), as_json=args.json)
    return 0


def _print_pitch(listing: Listing, resolved: ResolvedPitch, as_json: bool) -> None:
    if as_json:
        payload = {
            "name": listing.name,
            "source": resolved.source,
            "pitch": resolved.pitch.to_dict(),
            "links": contact_links(listing, settings.CONTACT_EMAIL, settings.CONTACT_NAME),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    print(render_text(listing, resolved.pitch, settings.CONTACT_EMAIL, settings.CONTACT_NAME))
    print(f"  ({resolved.source} pitch)")
