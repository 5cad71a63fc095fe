"""Pitch rendering — text and HTML views of a listing's spotlight.

Fields are always emitted in display order: headline, subhead, price,
paragraph, bullets, taglines, then the contact links.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING
from urllib.parse import quote

from nameclutch.pitch.data import Pitch

if TYPE_CHECKING:
    from nameclutch.catalog.listing import Listing


def site_url(name: str) -> str:
    """Outbound link to the domain itself."""
    return f"https://{name}"


def inquiry_mailto(listing: Listing, email: str, contact_name: str) -> str:
    """Pre-filled email link for an inquiry about ``listing``."""
    subject = f"Domain inquiry: {listing.name}"
    body = (
        f"Hi {contact_name},\n\n"
        f"I'm interested in {listing.name} ({listing.price}).\n\n"
        "My offer / questions:\n- \n\n"
        "Thanks!"
    )
    return f"mailto:{email}?subject={_uri_component(subject)}&body={_uri_component(body)}"


def contact_links(listing: Listing, email: str, contact_name: str) -> dict[str, str]:
    return {
        "site": site_url(listing.name),
        "email": inquiry_mailto(listing, email, contact_name),
    }


def initials(name: str) -> str:
    """Two-letter placeholder shown when a listing has no logo."""
    return name.split(".", 1)[0][:2].upper()


def render_text(
    listing: Listing,
    pitch: Pitch,
    email: str | None = None,
    contact_name: str = "",
) -> str:
    """Render a pitch as indented plain text for the terminal."""
    lines = [
        f"\n  {pitch.headline}",
        f"  {'─' * max(len(pitch.headline), 40)}",
        f"  {pitch.subhead}",
        "",
        f"  Price:    {listing.price}",
        "",
        f"  {pitch.paragraph}",
        "",
    ]
    for bullet in pitch.bullets:
        lines.append(f"  - {bullet}")
    if pitch.taglines:
        lines.append("")
        lines.append("  Tagline ideas:")
        for tagline in pitch.taglines:
            lines.append(f"    “{tagline}”")
    lines.append("")
    lines.append(f"  Visit:    {site_url(listing.name)}")
    if email:
        lines.append(f"  Email:    {inquiry_mailto(listing, email, contact_name)}")
    lines.append("")
    return "\n".join(lines)


def render_html(
    listing: Listing,
    pitch: Pitch,
    email: str | None = None,
    contact_name: str = "",
) -> str:
    """Render a pitch as a self-contained HTML fragment."""
    parts = [
        f'<section class="spotlight {_attr_esc(listing.gradient)}">',
        '  <div class="eyebrow">Domain spotlight</div>',
        f"  <h2>{_esc(pitch.headline)}</h2>",
        f'  <p class="subhead">{_esc(pitch.subhead)}</p>',
        f'  <div class="price">{_esc(listing.price)}</div>',
        f'  <p class="paragraph">{_esc(pitch.paragraph)}</p>',
        _render_bullets(pitch.bullets),
        _render_taglines(pitch.taglines),
        _render_preview(listing),
        _render_cta_links(listing, email, contact_name),
        "</section>",
    ]
    return "\n".join(p for p in parts if p)


# ── HTML fragment renderers ──────────────────────────────────────────


def _render_bullets(bullets: list[str]) -> str:
    if not bullets:
        return ""
    lines = ['  <ul class="bullets">']
    for b in bullets:
        lines.append(f"    <li>{_esc(b)}</li>")
    lines.append("  </ul>")
    return "\n".join(lines)


def _render_taglines(taglines: list[str]) -> str:
    if not taglines:
        return ""
    lines = ['  <div class="taglines">']
    for t in taglines:
        lines.append(f'    <div class="tagline">“{_esc(t)}”</div>')
    lines.append("  </div>")
    return "\n".join(lines)


def _render_preview(listing: Listing) -> str:
    if listing.logo:
        return (
            f'  <img class="logo" src="{_attr_esc(listing.logo)}" '
            f'alt="{_attr_esc(listing.name)} logo">'
        )
    return f'  <div class="initials">{_esc(initials(listing.name))}</div>'


def _render_cta_links(listing: Listing, email: str | None, contact_name: str) -> str:
    links = [
        f'  <a href="{_attr_esc(site_url(listing.name))}" class="cta" '
        'target="_blank" rel="noopener noreferrer">Inquire</a>'
    ]
    if email:
        links.append(
            f'  <a href="{_attr_esc(inquiry_mailto(listing, email, contact_name))}" '
            'class="cta-email">Email</a>'
        )
    return "\n".join(links)


def _uri_component(text: str) -> str:
    # Matches encodeURIComponent's unreserved set.
    return quote(text, safe="-_.!~*'()")


def _esc(text: str) -> str:
    return html.escape(str(text), quote=False)


def _attr_esc(text: str) -> str:
    return html.escape(str(text), quote=True)
