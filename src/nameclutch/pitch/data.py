"""Pitch records and authored-versus-derived resolution.

Priority: listing.pitch > pitches.yaml > generated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from nameclutch.pitch import AUTHORED, DERIVED, PITCH_FIELDS

if TYPE_CHECKING:
    from nameclutch.catalog.listing import Listing


@dataclass
class Pitch:
    """All copy shown in a listing's spotlight, in display order."""

    headline: str
    subhead: str
    paragraph: str
    bullets: list[str] = field(default_factory=list)
    taglines: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "headline": self.headline,
            "subhead": self.subhead,
            "paragraph": self.paragraph,
            "bullets": list(self.bullets),
            "taglines": list(self.taglines),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Pitch | None:
        """Build a Pitch from its JSON/YAML shape.

        Returns None when ``data`` is not a complete pitch mapping, so a
        null or half-filled ``pitch`` field counts as "no authored pitch".
        """
        if not is_pitch_mapping(data):
            return None
        return cls(
            headline=data["headline"],
            subhead=data["subhead"],
            paragraph=data["paragraph"],
            bullets=[str(b) for b in data["bullets"]],
            taglines=[str(t) for t in data["taglines"]],
        )


def is_pitch_mapping(data: Any) -> bool:
    """Check that ``data`` has every pitch field with the right shape."""
    if not isinstance(data, dict):
        return False
    for key in PITCH_FIELDS[:3]:
        if not isinstance(data.get(key), str):
            return False
    for key in PITCH_FIELDS[3:]:
        if not isinstance(data.get(key), list):
            return False
    return True


@dataclass(frozen=True)
class ResolvedPitch:
    """A pitch tagged with where it came from (authored or derived)."""

    pitch: Pitch
    source: str

    @property
    def authored(self) -> bool:
        return self.source == AUTHORED


def load_authored_pitches(path: Path | str | None) -> dict[str, Pitch]:
    """Load hand-written pitches keyed by domain name from a YAML file.

    Expected shape::

        example.com:
          headline: ...
          subhead: ...
          paragraph: ...
          bullets: [...]
          taglines: [...]

    A missing or unreadable file yields an empty mapping; incomplete
    entries are skipped.
    """
    if not path:
        return {}
    pitch_path = Path(path)
    if not pitch_path.exists():
        return {}
    try:
        with open(pitch_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError):
        return {}
    if not isinstance(raw, dict):
        return {}

    pitches: dict[str, Pitch] = {}
    for name, entry in raw.items():
        pitch = Pitch.from_dict(entry)
        if pitch is not None:
            pitches[str(name).lower()] = pitch
    return pitches


def resolve_pitch(
    listing: Listing,
    overrides: dict[str, Pitch] | None = None,
) -> ResolvedPitch:
    """Pick the pitch to display for a listing.

    An authored pitch on the listing always wins and the generator is
    never called for it. Otherwise an entry in ``overrides`` (see
    load_authored_pitches) is used, and only then is copy generated.
    """
    if listing.pitch is not None:
        return ResolvedPitch(pitch=listing.pitch, source=AUTHORED)

    if overrides:
        override = overrides.get(listing.name.lower())
        if override is not None:
            return ResolvedPitch(pitch=override, source=AUTHORED)

    from nameclutch.pitch.generator import generate_pitch

    return ResolvedPitch(pitch=generate_pitch(listing), source=DERIVED)
