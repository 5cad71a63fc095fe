"""Shared test fixtures for nameclutch."""

import shutil
from pathlib import Path

import pytest

from nameclutch.catalog.loader import load_catalog
from nameclutch.catalog.store import ListingStore

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def catalog():
    return load_catalog(FIXTURES / "domains.json", FIXTURES / "missing.json")


@pytest.fixture
def editable_catalog(tmp_path) -> Path:
    """A writable copy of the fixture catalog."""
    target = tmp_path / "data" / "domains.json"
    target.parent.mkdir()
    shutil.copy(FIXTURES / "domains.json", target)
    return target


@pytest.fixture
def store(editable_catalog, tmp_path):
    return ListingStore(editable_catalog, tmp_path / "public" / "domains.json")
