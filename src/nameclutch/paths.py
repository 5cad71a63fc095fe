"""Data file path resolution.

Resolves canonical paths to the listing documents. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    NAMECLUTCH_ROOT — project root (default: current working directory)
    NAMECLUTCH_DATA_PATH — editable catalog (default: <root>/data/domains.json)
    NAMECLUTCH_FALLBACK_PATH — read-only catalog (default: <root>/public/domains.json)
    NAMECLUTCH_PITCHES_PATH — authored pitch overrides (default: <root>/data/pitches.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("NAMECLUTCH_ROOT", str(Path.cwd())))


def editable_catalog_path() -> Path:
    """Return the path to the writable domains.json."""
    env = os.environ.get("NAMECLUTCH_DATA_PATH")
    if env:
        return Path(env)
    return project_root() / "data" / "domains.json"


def fallback_catalog_path() -> Path:
    """Return the path to the read-only domains.json shipped with the site."""
    env = os.environ.get("NAMECLUTCH_FALLBACK_PATH")
    if env:
        return Path(env)
    return project_root() / "public" / "domains.json"


def pitches_path() -> Path:
    """Return the path to pitches.yaml."""
    env = os.environ.get("NAMECLUTCH_PITCHES_PATH")
    if env:
        return Path(env)
    return project_root() / "data" / "pitches.yaml"
