"""Pitch generation — marketing copy for domain listings.

A listing either carries a hand-written pitch, which is always shown
verbatim, or gets one derived from its name, category and TLD by a
fixed set of scoring rules and copy templates. Derived pitches are
recomputed on every request and never written back to the catalog.
"""

AUTHORED = "authored"
DERIVED = "derived"

PITCH_FIELDS = ("headline", "subhead", "paragraph", "bullets", "taglines")
