"""
API Routers
===========
Each router handles a specific area of the API.
"""
from . import domains, health

__all__ = ["domains", "health"]
