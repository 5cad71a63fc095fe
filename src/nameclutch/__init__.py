"""nameclutch — a storefront for premium domain-name listings.

A JSON-backed listing catalog, a deterministic pitch generator for
listings without hand-written copy, and thin HTTP/CLI surfaces on top.
"""

__version__ = "0.1.0"
