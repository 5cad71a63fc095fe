"""HTTP surface for the storefront (FastAPI)."""
