from __future__ import annotations

import json
from pathlib import Path

from outfit_core.catalog import DEFAULT_USER_ID, Catalog, catalog_from_dict, load_catalog


def test_bundled_catalog_loads(catalog: Catalog):
    assert catalog.is_ready()
    assert len(catalog.users) == 2
    assert len(catalog.outfits) == 6
    assert len(catalog.wardrobe) == 15
    assert len(catalog.product_stores) == 8
    assert len(catalog.products) == 6
    assert len(catalog.stores) == 4

    business = catalog.outfits[0]
    assert business.items[0].image_url == "/outfit-placeholders/white-shirt.jpg"
    assert catalog.products[0].store_name == "Zara"
    assert "minimalist" in catalog.stores[2].styles


def test_unknown_user_falls_back_to_demo_profile(catalog: Catalog):
    assert catalog.user("user456").id == "user456"
    assert catalog.user("nobody").id == DEFAULT_USER_ID
    assert catalog.user(None).id == DEFAULT_USER_ID


def test_empty_catalog_is_not_ready():
    empty = catalog_from_dict({})
    assert not empty.is_ready()
    assert empty.user("user123") is None


def test_rows_are_read_leniently():
    catalog = catalog_from_dict(
        {
            "users": [{"id": 9, "style_preferences": {"colors": ["red", 4], "styles": "boho"}}],
            "products": [{"id": "3", "name": "Scarf", "price": "cheap"}],
        }
    )
    user = catalog.users[0]
    assert user.id == "9"
    assert user.style_preferences.colors == ("red",)
    assert user.style_preferences.styles == ()
    assert catalog.products[0].id == 3
    assert catalog.products[0].price is None


def test_load_catalog_from_path(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"stores": [{"id": 1, "name": "Local", "description": "corner shop", "categories": ["tops"]}]}),
        encoding="utf-8",
    )
    catalog = load_catalog(path)
    assert catalog.is_ready()
    assert catalog.stores[0].categories == ("tops",)
    assert catalog.outfits == ()
