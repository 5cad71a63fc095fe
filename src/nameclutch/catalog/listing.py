"""Listing record — one domain for sale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nameclutch.pitch.data import Pitch


@dataclass
class Listing:
    """A domain listing as stored in domains.json."""

    id: int
    name: str
    price: str = ""
    tld: str = ""
    featured: bool = False
    category: str = ""
    gradient: str = ""
    logo: str | None = None
    pitch: Pitch | None = None

    @classmethod
    def from_dict(cls, entry: dict[str, Any]) -> Listing:
        """Build a Listing from a catalog entry.

        Missing optional keys take their defaults. A missing tld is taken
        from the name ("acme.com.au" -> ".com.au").
        """
        name = str(entry.get("name", ""))
        tld = entry.get("tld")
        if not tld and "." in name:
            tld = "." + name.split(".", 1)[1]
        return cls(
            id=entry.get("id"),
            name=name,
            price=str(entry.get("price", "")),
            tld=tld or "",
            featured=bool(entry.get("featured", False)),
            category=str(entry.get("category", "")),
            gradient=str(entry.get("gradient", "")),
            logo=entry.get("logo") or None,
            pitch=Pitch.from_dict(entry.get("pitch")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "tld": self.tld,
            "featured": self.featured,
            "category": self.category,
            "gradient": self.gradient,
            "logo": self.logo,
            "pitch": self.pitch.to_dict() if self.pitch else None,
        }
