"""Allergy name normalisation and icon lookup."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

ICON_BASE_PATH = "/static/allergy_icons"

# Canonical allergy name -> icon file.
_CANONICAL_ICONS: Dict[str, str] = {
    "celery": "celery.svg",
    "corn": "corn.svg",
    "crustaceans": "crustaceans.svg",
    "eggs": "eggs.svg",
    "fish": "fish.svg",
    "gluten": "gluten.svg",
    "lupin": "lupin.svg",
    "milk": "milk.svg",
    "mollusc": "mollusc.svg",
    "mustard": "mustard.svg",
    "nuts": "nuts.svg",
    "peanuts": "peanuts.svg",
    "propolis": "propolis.svg",
    "sesame": "sesame.svg",
    "soya": "soya.svg",
    "sulphites": "sulphites.svg",
}

# Alternative names, spellings and misspellings -> canonical name.
SYNONYMS: Dict[str, str] = {
    "soy": "soya",
    "dairy": "milk",
    "wheat": "gluten",
    "shellfish": "crustaceans",
    "sulfites": "sulphites",
    "molluscs": "mollusc",
    "tree nuts": "nuts",
    "seseme": "sesame",
}

ALLERGY_ICON_MAP: Dict[str, str] = {
    **{name: f"{ICON_BASE_PATH}/{filename}" for name, filename in _CANONICAL_ICONS.items()},
    **{alias: f"{ICON_BASE_PATH}/{_CANONICAL_ICONS[target]}" for alias, target in SYNONYMS.items()},
}


def normalize_allergy_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def canonical_allergy(name: Optional[str]) -> str:
    """Return the canonical spelling for an allergy name (normalised)."""

    normalized = normalize_allergy_name(name)
    return SYNONYMS.get(normalized, normalized)


def icon_for(name: Optional[str]) -> Optional[str]:
    """Return the icon path for an allergy, or None when it has no icon.

    Callers render the allergy name as plain text when this returns None.
    """

    return ALLERGY_ICON_MAP.get(normalize_allergy_name(name))


def has_icon(name: Optional[str]) -> bool:
    return normalize_allergy_name(name) in ALLERGY_ICON_MAP


def available_allergies() -> List[str]:
    """Every name the icon table knows, synonyms included."""

    return list(ALLERGY_ICON_MAP.keys())


def unique_allergies(names: Iterable[str]) -> List[str]:
    """Drop synonym spellings whose canonical form is also present, sorted."""

    available = {normalize_allergy_name(name) for name in names if normalize_allergy_name(name)}
    unique = [
        name
        for name in available
        if not (name in SYNONYMS and SYNONYMS[name] in available)
    ]
    return sorted(unique)


__all__ = [
    "ALLERGY_ICON_MAP",
    "SYNONYMS",
    "available_allergies",
    "canonical_allergy",
    "has_icon",
    "icon_for",
    "normalize_allergy_name",
    "unique_allergies",
]
