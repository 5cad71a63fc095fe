"""
Domain Schemas
==============
Response models for the catalog endpoints.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PitchBody(BaseModel):
    """Spotlight copy for one listing"""

    headline: str
    subhead: str
    paragraph: str
    bullets: List[str] = Field(default_factory=list)
    taglines: List[str] = Field(default_factory=list)


class ContactLinks(BaseModel):
    site: str = Field(..., description="Outbound link to the domain")
    email: str = Field(..., description="Pre-filled mailto: inquiry link")


class PitchResponse(BaseModel):
    """Resolved pitch for a listing"""

    id: int
    name: str
    source: str = Field(..., description="authored or derived")
    pitch: PitchBody
    links: ContactLinks

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "ab.com",
                "source": "derived",
                "pitch": {
                    "headline": "ab.com — future-proof signal",
                    "subhead": "A clean, memorable name positioned for AI tools. ...",
                    "paragraph": "ab.com is the kind of name that ...",
                    "bullets": [
                        "Brandability score: 9/10 • Pronounceability: 10/10 • Brevity: 10/10",
                        "Great for: Startup / SaaS / Newsletter",
                    ],
                    "taglines": ["Launch fast. Look premium."],
                },
                "links": {"site": "https://ab.com", "email": "mailto:..."},
            }
        }
    )


class SearchResponse(BaseModel):
    """Filtered catalog in display order"""

    categories: List[str]
    domains: List[Dict[str, Any]]
