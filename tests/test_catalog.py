"""Tests for the catalog module."""

import json
from pathlib import Path

import pytest

from nameclutch.catalog.listing import Listing
from nameclutch.catalog.loader import load_catalog, read_catalog, save_catalog
from nameclutch.catalog.query import (
    all_listings,
    categories,
    filter_listings,
    find_by_name,
    find_listing,
    list_listings,
    parse_price,
    same_id,
    sort_for_display,
)
from nameclutch.catalog.store import ListingStore
from nameclutch.catalog.updater import remove_listing
from nameclutch.catalog.validator import validate_catalog

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoader:
    def test_load_returns_dict(self, catalog):
        assert isinstance(catalog, dict)
        assert len(catalog["domains"]) == 6

    def test_read_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            read_catalog("/nonexistent/domains.json")

    def test_read_wrong_shape_raises(self, tmp_path):
        f = tmp_path / "domains.json"
        f.write_text('{"items": []}')
        with pytest.raises(ValueError):
            read_catalog(f)

    def test_falls_back_when_editable_missing(self, tmp_path):
        data = load_catalog(tmp_path / "missing.json", FIXTURES / "domains.json")
        assert len(data["domains"]) == 6

    def test_falls_back_when_editable_malformed(self, tmp_path):
        bad = tmp_path / "domains.json"
        bad.write_text("{not json")
        data = load_catalog(bad, FIXTURES / "domains.json")
        assert len(data["domains"]) == 6

    def test_editable_preferred(self, tmp_path):
        editable = tmp_path / "domains.json"
        editable.write_text('{"domains": [{"id": 9, "name": "only.com"}]}')
        data = load_catalog(editable, FIXTURES / "domains.json")
        assert [d["id"] for d in data["domains"]] == [9]

    def test_both_missing_is_empty(self, tmp_path):
        assert load_catalog(tmp_path / "a.json", tmp_path / "b.json") == {"domains": []}

    def test_both_malformed_is_empty(self, tmp_path):
        a = tmp_path / "a.json"
        b = tmp_path / "b.json"
        a.write_text("[]")
        b.write_text("nope")
        assert load_catalog(a, b) == {"domains": []}

    def test_default_paths_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("NAMECLUTCH_DATA_PATH", str(tmp_path / "none.json"))
        monkeypatch.setenv("NAMECLUTCH_FALLBACK_PATH", str(FIXTURES / "domains.json"))
        assert len(load_catalog()["domains"]) == 6

    def test_save_formatting(self, tmp_path):
        out = tmp_path / "domains.json"
        save_catalog({"domains": [{"id": 1, "name": "ab.com"}]}, out)
        text = out.read_text()
        assert text.endswith("}\n")
        assert '  "domains": [' in text
        assert json.loads(text)["domains"][0]["name"] == "ab.com"


class TestListing:
    def test_from_dict_defaults(self):
        listing = Listing.from_dict({"id": 7, "name": "acme.com.au"})
        assert listing.tld == ".com.au"
        assert listing.featured is False
        assert listing.logo is None
        assert listing.pitch is None

    def test_from_dict_authored_pitch(self, catalog):
        listing = Listing.from_dict(catalog["domains"][3])
        assert listing.pitch is not None
        assert listing.pitch.taglines == ["Think bigger."]

    def test_to_dict_keys(self, catalog):
        listing = Listing.from_dict(catalog["domains"][0])
        assert list(listing.to_dict()) == [
            "id", "name", "price", "tld", "featured",
            "category", "gradient", "logo", "pitch",
        ]


class TestQuery:
    def test_all_listings_yields_all(self, catalog):
        assert len(list(all_listings(catalog))) == 6

    def test_all_listings_skips_non_objects(self):
        assert list(all_listings({"domains": ["junk", {"id": 1, "name": "a.com"}]}))[0].id == 1

    def test_find_listing_exists(self, catalog):
        listing = find_listing(catalog, 3)
        assert listing is not None
        assert listing.name == "pixelcraft.work"

    def test_find_listing_missing(self, catalog):
        assert find_listing(catalog, 99) is None

    def test_find_listing_ignores_boolean_id(self):
        catalog = {"domains": [{"id": True, "name": "a.com"}]}
        assert find_listing(catalog, 1) is None

    @pytest.mark.parametrize("entry_id,expected", [
        (1, True),
        (1.0, True),
        (True, False),
        ("1", False),
        (None, False),
    ])
    def test_same_id(self, entry_id, expected):
        assert same_id(entry_id, 1) is expected

    def test_find_by_name_case_insensitive(self, catalog):
        assert find_by_name(catalog, "AB.COM").id == 1

    def test_categories_first_seen_order(self, catalog):
        assert categories(catalog) == [
            "all", "AI tools", "Finance & Lending", "Design", "AI", "Premium", "Brand",
        ]

    def test_categories_empty_catalog(self):
        assert categories({"domains": []}) == ["all"]

    @pytest.mark.parametrize("price,expected", [
        ("$4,999", 4999.0),
        ("$12,500", 12500.0),
        ("1.5k", 1.5),
        ("Make an offer", 0.0),
        ("", 0.0),
        ("1.2.3", 0.0),
    ])
    def test_parse_price(self, price, expected):
        assert parse_price(price) == expected

    def test_sort_price_desc_then_name(self, catalog):
        names = [l.name for l in sort_for_display(all_listings(catalog))]
        assert names == [
            "ledgerly.com.au",
            "ab.com",
            "brainai.com",
            "pixelcraft.work",
            "northwind.io",
            "123.com",
        ]

    def test_filter_by_category_exact(self, catalog):
        results = filter_listings(all_listings(catalog), category="AI")
        assert [l.name for l in results] == ["brainai.com"]

    def test_filter_all(self, catalog):
        assert len(filter_listings(all_listings(catalog), category="all")) == 6

    def test_filter_search_case_insensitive(self, catalog):
        results = filter_listings(all_listings(catalog), search="AI")
        assert [l.name for l in results] == ["brainai.com"]

    def test_filter_combined_no_match(self, catalog):
        assert filter_listings(all_listings(catalog), category="Design", search="ab") == []

    def test_list_listings_featured(self, catalog):
        results = list_listings(catalog, featured_only=True)
        assert [l.name for l in results] == ["ab.com", "brainai.com"]

    def test_list_listings_search_sorted(self, catalog):
        results = list_listings(catalog, search=".com")
        assert [l.name for l in results] == [
            "ledgerly.com.au", "ab.com", "brainai.com", "123.com",
        ]


class TestUpdater:
    def test_remove_existing(self, catalog):
        assert remove_listing(catalog, 2) is True
        assert [d["id"] for d in catalog["domains"]] == [1, 3, 4, 5, 6]

    def test_remove_missing(self, catalog):
        assert remove_listing(catalog, 42) is False
        assert len(catalog["domains"]) == 6

    def test_boolean_id_never_matches(self):
        catalog = {"domains": [{"id": True, "name": "a.com"}]}
        assert remove_listing(catalog, 1) is False


class TestValidator:
    def test_fixture_passes(self, catalog):
        result = validate_catalog(catalog)
        assert result.passed
        assert result.total_listings == 6
        assert "PASSED" in result.summary()

    def test_missing_domains_list(self):
        result = validate_catalog({})
        assert not result.passed

    def test_duplicate_ids(self):
        entry = {"id": 1, "name": "a.com", "price": "$1", "tld": ".com", "category": "x"}
        result = validate_catalog({"domains": [entry, dict(entry, name="b.com")]})
        assert any("duplicate id" in e for e in result.errors)

    def test_name_without_dot(self):
        entry = {"id": 1, "name": "localhost", "price": "$1", "tld": ".com", "category": "x"}
        result = validate_catalog({"domains": [entry]})
        assert any("dotted domain" in e for e in result.errors)

    def test_missing_fields(self):
        result = validate_catalog({"domains": [{"id": 1, "name": "a.com"}]})
        assert any("missing fields" in e for e in result.errors)

    def test_incomplete_pitch(self):
        entry = {
            "id": 1, "name": "a.com", "price": "$1", "tld": ".com", "category": "x",
            "pitch": {"headline": "only"},
        }
        result = validate_catalog({"domains": [entry]})
        assert any("pitch" in e for e in result.errors)

    def test_tld_mismatch_is_warning(self):
        entry = {"id": 1, "name": "a.com", "price": "$1", "tld": ".io", "category": "x"}
        result = validate_catalog({"domains": [entry]})
        assert result.passed
        assert any("tld" in w for w in result.warnings)
        assert "WARNINGS" in result.summary()


class TestListingStore:
    def test_list_all(self, store):
        listings = store.list_all()
        assert len(listings) == 6
        assert all(isinstance(l, Listing) for l in listings)

    def test_list_all_empty_when_nothing_exists(self, tmp_path):
        store = ListingStore(tmp_path / "a.json", tmp_path / "b.json")
        assert store.list_all() == []

    def test_list_all_uses_fallback(self, tmp_path):
        store = ListingStore(tmp_path / "a.json", FIXTURES / "domains.json")
        assert len(store.list_all()) == 6

    def test_find(self, store):
        assert store.find(6).name == "northwind.io"
        assert store.find(60) is None

    def test_remove_persists(self, store, editable_catalog):
        assert store.remove(1) is True
        on_disk = json.loads(editable_catalog.read_text())
        assert [d["id"] for d in on_disk["domains"]] == [2, 3, 4, 5, 6]
        assert store.find(1) is None

    def test_remove_not_found_leaves_file(self, store, editable_catalog):
        before = editable_catalog.read_text()
        assert store.remove(99) is False
        assert editable_catalog.read_text() == before

    def test_remove_without_editable_file(self, tmp_path):
        store = ListingStore(tmp_path / "missing.json", FIXTURES / "domains.json")
        assert store.remove(1) is False
        assert not (tmp_path / "missing.json").exists()

    def test_remove_keeps_unicode(self, tmp_path):
        f = tmp_path / "domains.json"
        f.write_text(
            json.dumps({"domains": [
                {"id": 1, "name": "a.com"},
                {"id": 2, "name": "b.com", "category": "Café — Brand"},
            ]}),
            encoding="utf-8",
        )
        assert ListingStore(f, tmp_path / "none.json").remove(1)
        assert "Café — Brand" in f.read_text(encoding="utf-8")
