"""Pitch generator — derives marketing copy for a listing.

Takes a Listing without an authored pitch, scores its name, applies the
copy rules for its category and TLD, and assembles a Pitch. Pure and
deterministic: same listing in, identical pitch out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nameclutch.pitch.data import Pitch
from nameclutch.pitch.rules import (
    MAX_HOOKS,
    angle_for,
    matching_hooks,
    taglines_for,
    uses_for,
    vibe_for,
)
from nameclutch.pitch.scoring import NameScore, score_name

if TYPE_CHECKING:
    from nameclutch.catalog.listing import Listing


def generate_pitch(listing: Listing) -> Pitch:
    """Generate a pitch from a listing's name, category and TLD.

    Args:
        listing: Catalog listing. Only name, category and tld are read.

    Returns:
        A freshly built Pitch; bullets are the score line, the
        "Great for" line, then at most three hooks.
    """
    score = score_name(listing.name)
    category = listing.category

    angle = angle_for(category)
    hooks = matching_hooks(score, listing.tld)[:MAX_HOOKS]
    suggested_uses = uses_for(category)

    return Pitch(
        headline=f"{listing.name} — {angle}",
        subhead=(
            f"A clean, memorable name positioned for {category}. "
            "Strong visual balance and easy recall — ideal for a serious build."
        ),
        paragraph=_paragraph(listing.name, listing.tld, vibe_for(category)),
        bullets=[
            _score_line(score),
            f"Great for: {' / '.join(suggested_uses)}",
            *hooks,
        ],
        taglines=taglines_for(category),
    )


def _score_line(score: NameScore) -> str:
    return (
        f"Brandability score: {score.brandability}/10 • "
        f"Pronounceability: {score.pronounceability}/10 • "
        f"Brevity: {score.brevity}/10"
    )


def _paragraph(name: str, tld: str, vibe_line: str) -> str:
    return (
        f"{name} is the kind of name that looks premium on a landing page "
        "and feels natural in conversation. "
        f"{vibe_line} "
        f"With a {tld} extension and a clean letter-shape, it’s easy to brand "
        "across a logo, favicon, and social handles — "
        "and it stays memorable when people only hear it once."
    )
