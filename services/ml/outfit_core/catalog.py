from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from .config import CONFIG

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "user123"


@dataclass(frozen=True, slots=True)
class StylePreferences:
    colors: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ()
    styles: tuple[str, ...] = ()
    occasions: tuple[str, ...] = ()
    seasons: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class UserProfile:
    id: str
    name: str
    style_preferences: StylePreferences


@dataclass(frozen=True, slots=True)
class OutfitItem:
    id: int
    type: str | None
    category: str | None
    color: str | None
    pattern: str | None
    style: str | None
    season: str | None
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class Outfit:
    id: int
    name: str
    occasion: str | None
    season: str | None
    style: str | None
    items: tuple[OutfitItem, ...] = ()


@dataclass(frozen=True, slots=True)
class WardrobeItem:
    id: int
    category: str | None
    color: str | None
    pattern: str | None
    material: str | None
    style: str | None
    season: str | None


@dataclass(frozen=True, slots=True)
class ProductStore:
    id: int
    name: str
    logo: str | None


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    category: str | None
    color: str | None
    pattern: str | None
    material: str | None
    style: str | None
    season: str | None
    price: float | None
    currency: str | None
    store_id: int | None
    store_name: str | None
    store_logo_url: str | None
    image_url: str | None
    product_url: str | None


@dataclass(frozen=True, slots=True)
class Store:
    id: int
    name: str
    description: str
    logo_url: str | None
    store_url: str | None
    categories: tuple[str, ...] = ()
    styles: tuple[str, ...] = ()
    price_range: str | None = None


@dataclass(frozen=True, slots=True)
class Catalog:
    """Static lookup tables the scorer consumes. Loaded once per process."""

    users: tuple[UserProfile, ...] = ()
    outfits: tuple[Outfit, ...] = ()
    wardrobe: tuple[WardrobeItem, ...] = ()
    product_stores: tuple[ProductStore, ...] = ()
    products: tuple[Product, ...] = ()
    stores: tuple[Store, ...] = ()

    def is_ready(self) -> bool:
        return bool(self.outfits or self.products or self.stores)

    def user(self, user_id: str | None) -> UserProfile | None:
        """Return the profile for `user_id`, falling back to the demo user."""
        by_id = {u.id: u for u in self.users}
        if user_id in by_id:
            return by_id[user_id]
        return by_id.get(DEFAULT_USER_ID)


def _strs(values: Any) -> tuple[str, ...]:
    if not isinstance(values, list):
        return ()
    return tuple(v for v in values if isinstance(v, str))


def _user_from_row(row: dict[str, Any]) -> UserProfile:
    prefs = row.get("style_preferences") or {}
    return UserProfile(
        id=str(row["id"]),
        name=row.get("name", ""),
        style_preferences=StylePreferences(
            colors=_strs(prefs.get("colors")),
            patterns=_strs(prefs.get("patterns")),
            styles=_strs(prefs.get("styles")),
            occasions=_strs(prefs.get("occasions")),
            seasons=_strs(prefs.get("seasons")),
        ),
    )


def _outfit_from_row(row: dict[str, Any]) -> Outfit:
    items = tuple(
        OutfitItem(
            id=int(item["id"]),
            type=item.get("type"),
            category=item.get("category"),
            color=item.get("color"),
            pattern=item.get("pattern"),
            style=item.get("style"),
            season=item.get("season"),
            image_url=item.get("image_url"),
        )
        for item in row.get("items") or []
    )
    return Outfit(
        id=int(row["id"]),
        name=row.get("name", ""),
        occasion=row.get("occasion"),
        season=row.get("season"),
        style=row.get("style"),
        items=items,
    )


def _wardrobe_from_row(row: dict[str, Any]) -> WardrobeItem:
    return WardrobeItem(
        id=int(row["id"]),
        category=row.get("category"),
        color=row.get("color"),
        pattern=row.get("pattern"),
        material=row.get("material"),
        style=row.get("style"),
        season=row.get("season"),
    )


def _product_from_row(row: dict[str, Any]) -> Product:
    price = row.get("price")
    return Product(
        id=int(row["id"]),
        name=row.get("name", ""),
        category=row.get("category"),
        color=row.get("color"),
        pattern=row.get("pattern"),
        material=row.get("material"),
        style=row.get("style"),
        season=row.get("season"),
        price=float(price) if isinstance(price, (int, float)) else None,
        currency=row.get("currency"),
        store_id=row.get("store_id"),
        store_name=row.get("store_name"),
        store_logo_url=row.get("store_logo_url"),
        image_url=row.get("image_url"),
        product_url=row.get("product_url"),
    )


def _store_from_row(row: dict[str, Any]) -> Store:
    return Store(
        id=int(row["id"]),
        name=row.get("name", ""),
        description=row.get("description", ""),
        logo_url=row.get("logo_url"),
        store_url=row.get("store_url"),
        categories=_strs(row.get("categories")),
        styles=_strs(row.get("styles")),
        price_range=row.get("price_range"),
    )


def catalog_from_dict(payload: dict[str, Any]) -> Catalog:
    return Catalog(
        users=tuple(_user_from_row(r) for r in payload.get("users") or []),
        outfits=tuple(_outfit_from_row(r) for r in payload.get("outfits") or []),
        wardrobe=tuple(_wardrobe_from_row(r) for r in payload.get("wardrobe") or []),
        product_stores=tuple(
            ProductStore(id=int(r["id"]), name=r.get("name", ""), logo=r.get("logo"))
            for r in payload.get("product_stores") or []
        ),
        products=tuple(_product_from_row(r) for r in payload.get("products") or []),
        stores=tuple(_store_from_row(r) for r in payload.get("stores") or []),
    )


def load_catalog(path: str | Path | None = None) -> Catalog:
    catalog_path = Path(path or CONFIG.catalog_path)
    payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    catalog = catalog_from_dict(payload)
    logger.info(
        "catalog_loaded path=%s outfits=%d wardrobe=%d products=%d stores=%d",
        catalog_path,
        len(catalog.outfits),
        len(catalog.wardrobe),
        len(catalog.products),
        len(catalog.stores),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_catalog()
