from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

CATEGORIES = ["t-shirt", "blouse", "sweater", "jacket", "dress", "pants", "jeans", "skirt", "shorts"]
COLORS = ["black", "white", "blue", "red", "green", "yellow", "purple", "pink", "gray", "brown"]
PATTERNS = ["solid", "striped", "floral", "checkered", "dotted"]
MATERIALS = ["cotton", "polyester", "denim", "silk", "leather", "wool"]
STYLES = ["casual", "formal", "business", "athleisure", "boho", "vintage", "minimal"]
SEASONS = ["spring", "summer", "fall", "winter", "all-season"]

# Reference RGB values for the named palette, including catalog-only colors.
PALETTE_RGB: dict[str, tuple[int, int, int]] = {
    "black": (20, 20, 20),
    "white": (240, 240, 240),
    "blue": (40, 90, 200),
    "red": (200, 30, 40),
    "green": (40, 150, 60),
    "yellow": (240, 210, 40),
    "purple": (120, 50, 160),
    "pink": (240, 150, 190),
    "gray": (128, 128, 128),
    "brown": (120, 75, 40),
    "beige": (225, 205, 170),
    "navy": (20, 30, 90),
}

# Vision labels are free text; these map a label term to an enumeration value.
_CATEGORY_TERMS: dict[str, str] = {
    "t-shirt": "t-shirt",
    "tee": "t-shirt",
    "blouse": "blouse",
    "sweatshirt": "sweater",
    "shirt": "blouse",
    "sweater": "sweater",
    "hoodie": "sweater",
    "jacket": "jacket",
    "coat": "jacket",
    "outerwear": "jacket",
    "dress": "dress",
    "gown": "dress",
    "jeans": "jeans",
    "denim": "jeans",
    "trousers": "pants",
    "pants": "pants",
    "skirt": "skirt",
    "shorts": "shorts",
}
_PATTERN_TERMS = {
    "stripe": "striped",
    "striped": "striped",
    "floral": "floral",
    "flower": "floral",
    "plaid": "checkered",
    "check": "checkered",
    "tartan": "checkered",
    "polka dot": "dotted",
    "dot": "dotted",
}
_MATERIAL_TERMS = {m: m for m in MATERIALS} | {"jean": "denim", "knit": "wool"}
_STYLE_TERMS = {
    "formal wear": "formal",
    "formal": "formal",
    "suit": "business",
    "business": "business",
    "sportswear": "athleisure",
    "active pants": "athleisure",
    "vintage": "vintage",
    "casual": "casual",
}

DEEPFASHION_CATEGORIES = [
    "Anorak", "Blazer", "Blouse", "Bomber", "Button-Down", "Cardigan", "Flannel",
    "Halter", "Henley", "Hoodie", "Jacket", "Jersey", "Parka", "Peacoat", "Poncho",
    "Sweater", "Tank", "Tee", "Top", "Turtleneck", "Capris", "Chinos", "Culottes",
    "Cutoffs", "Gauchos", "Jeans", "Jeggings", "Jodhpurs", "Joggers", "Leggings",
    "Sarong", "Shorts", "Skirt", "Sweatpants", "Sweatshorts", "Trunks", "Caftan",
    "Cape", "Coat", "Coverup", "Dress", "Jumpsuit", "Kaftan", "Kimono", "Nightdress",
    "Onesie", "Robe", "Romper", "Shirtdress", "Sundress",
]

DEEPFASHION_ATTRIBUTES: dict[str, list[str]] = {
    "textures": ["Furry", "Knit", "Pleated", "Ripped", "Sheer", "Solid", "Stripe", "Floral", "Check"],
    "fabrics": ["Denim", "Cotton", "Leather", "Silk", "Wool", "Suede", "Linen", "Chiffon", "Polyester"],
    "fits": ["Fitted", "Loose", "Oversized", "Regular", "Relaxed", "Slim", "Straight", "Skinny"],
    "neckTypes": ["Crew", "Halter", "Hooded", "V-Neck", "Round", "Collar", "Turtle", "Cowl"],
    "sleeveTypes": ["Long", "Short", "Sleeveless", "Three-quarter", "Cap"],
    "styles": ["Casual", "Formal", "Business", "Athletic", "Bohemian", "Vintage", "Minimalist"],
}

# Singular output key per attribute group.
_DEEPFASHION_OUTPUT_KEYS = {
    "textures": "texture",
    "fabrics": "fabric",
    "fits": "fit",
    "neckTypes": "neckType",
    "sleeveTypes": "sleeveType",
    "styles": "style",
}

DEEPFASHION_COMPATIBLE_ITEMS: list[dict[str, Any]] = [
    {
        "id": 101,
        "category": "Jeans",
        "attributes": {"texture": "Solid", "fabric": "Denim", "fit": "Slim", "style": "Casual"},
        "compatibility": 0.92,
        "imageUrl": "https://images.unsplash.com/photo-1542272604-787c3835535d?q=80&w=300",
    },
    {
        "id": 102,
        "category": "T-shirt",
        "attributes": {
            "texture": "Solid",
            "fabric": "Cotton",
            "fit": "Regular",
            "neckType": "Crew",
            "sleeveType": "Short",
            "style": "Casual",
        },
        "compatibility": 0.88,
        "imageUrl": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?q=80&w=300",
    },
    {
        "id": 103,
        "category": "Jacket",
        "attributes": {"texture": "Solid", "fabric": "Leather", "fit": "Regular", "style": "Casual"},
        "compatibility": 0.85,
        "imageUrl": "https://images.unsplash.com/photo-1551028719-00167b16eac5?q=80&w=300",
    },
]


@dataclass(slots=True)
class Classification:
    category: str
    color: str
    pattern: str
    material: str
    style: str
    season: str
    confidence: float


@dataclass(slots=True)
class VisionLabel:
    description: str
    score: float


def _choice(rng: np.random.Generator, values: list[str]) -> str:
    return values[int(rng.integers(0, len(values)))]


def mock_classification(rng: np.random.Generator) -> Classification:
    return Classification(
        category=_choice(rng, CATEGORIES),
        color=_choice(rng, COLORS),
        pattern=_choice(rng, PATTERNS),
        material=_choice(rng, MATERIALS),
        style=_choice(rng, STYLES),
        season=_choice(rng, SEASONS),
        confidence=round(0.5 + float(rng.random()) * 0.5, 2),
    )


def nearest_color_name(rgb: tuple[float, float, float]) -> str:
    target = np.asarray(rgb, dtype=np.float32)
    names = list(PALETTE_RGB)
    refs = np.asarray([PALETTE_RGB[n] for n in names], dtype=np.float32)
    dists = np.linalg.norm(refs - target, axis=1)
    return names[int(np.argmin(dists))]


def _first_term(labels: Iterable[VisionLabel], terms: dict[str, str]) -> tuple[str | None, float]:
    for label in labels:
        text = label.description.lower()
        for term, value in terms.items():
            if term in text:
                return value, label.score
    return None, 0.0


def labels_to_attributes(
    labels: list[VisionLabel],
    dominant_rgb: tuple[float, float, float] | None,
    rng: np.random.Generator,
) -> Classification | None:
    """Map free-text vision labels onto the attribute enumerations.

    Returns None when no label names a known garment category. Attributes the
    labels say nothing about are filled from the mock distribution.
    """
    ordered = sorted(labels, key=lambda label: label.score, reverse=True)
    category, confidence = _first_term(ordered, _CATEGORY_TERMS)
    if category is None:
        return None

    pattern, _ = _first_term(ordered, _PATTERN_TERMS)
    material, _ = _first_term(ordered, _MATERIAL_TERMS)
    style, _ = _first_term(ordered, _STYLE_TERMS)
    color = nearest_color_name(dominant_rgb) if dominant_rgb is not None else _choice(rng, COLORS)

    return Classification(
        category=category,
        color=color,
        pattern=pattern or "solid",
        material=material or _choice(rng, MATERIALS),
        style=style or _choice(rng, STYLES),
        season=_choice(rng, SEASONS),
        confidence=round(float(confidence), 2),
    )


def _random_probabilities(rng: np.random.Generator, n: int) -> list[float]:
    raw = rng.random(n)
    return [round(float(p), 2) for p in raw / raw.sum()]


def simulate_deepfashion(rng: np.random.Generator) -> dict[str, Any]:
    category = _choice(rng, DEEPFASHION_CATEGORIES)
    confidence = round(0.7 + float(rng.random()) * 0.3, 2)

    attributes: dict[str, str] = {}
    detailed: dict[str, dict[str, float]] = {
        "categories": {
            category: confidence,
            _choice(rng, DEEPFASHION_CATEGORIES): round(confidence * 0.8, 2),
        }
    }
    for group, values in DEEPFASHION_ATTRIBUTES.items():
        probs = _random_probabilities(rng, len(values))
        attributes[_DEEPFASHION_OUTPUT_KEYS[group]] = values[int(np.argmax(probs))]
        detailed[group] = dict(zip(values, probs))

    return {
        "category": category,
        "confidence": confidence,
        "attributes": attributes,
        "detailedPredictions": detailed,
    }
