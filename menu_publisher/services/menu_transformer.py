"""Normalise raw menu documents into the canonical Menu tree."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from menu_publisher.config.settings import DEFAULT_LANGUAGE
from menu_publisher.schemas import (
    Addon,
    Category,
    CategoryTranslation,
    Extra,
    Item,
    ItemTranslation,
    Menu,
    MenuTranslation,
    Option,
)

logger = logging.getLogger(__name__)


class MalformedItemError(ValueError):
    """Raised when a raw item does not carry the structure the viewer relies on."""


def _first(record: Dict[str, Any], *keys: str) -> Any:
    """Return the first truthy value among `keys`; legacy names come first."""

    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def parse_price(value: Any) -> float:
    """Numeric price parsing; anything unusable becomes 0."""

    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        price = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    if price != price or price < 0:  # NaN or negative
        return 0.0
    return price


def _order(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _entries(raw: Any, model: type) -> List[Any]:
    if not isinstance(raw, list):
        return []
    entries = []
    for entry in raw:
        if isinstance(entry, dict) and "price" in entry:
            entry = {**entry, "price": parse_price(entry.get("price"))}
        try:
            entries.append(model.model_validate(entry))
        except ValidationError:
            logger.warning("Ignoring unreadable %s entry: %r", model.__name__.lower(), entry)
    return entries


def _translations(raw: Any, model: type) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        return {}
    parsed: Dict[str, Any] = {}
    for language, payload in raw.items():
        if not isinstance(payload, dict):
            continue
        try:
            parsed[str(language)] = model.model_validate(payload)
        except ValidationError:
            logger.warning("Ignoring malformed %s translation for language %s", model.__name__, language)
    return parsed


def transform_item(raw_item: Dict[str, Any]) -> Item:
    """Build an Item from a raw record; every item must carry a `flags` object."""

    if not isinstance(raw_item, dict):
        raise MalformedItemError(f"Malformed item: expected an object, got {type(raw_item).__name__}")
    item_id = _text(raw_item.get("id"))
    flags = raw_item.get("flags")
    if not isinstance(flags, dict):
        label = _first(raw_item, "item_name", "name") or item_id or "<unnamed>"
        raise MalformedItemError(f"Malformed item '{label}': missing 'flags' object")

    return Item(
        id=item_id,
        item_name=_text(_first(raw_item, "item_name", "name")),
        item_description=_text(_first(raw_item, "item_description", "description")),
        item_price=parse_price(_first(raw_item, "item_price", "price")),
        item_order=_order(_first(raw_item, "item_order", "menu_order", "order")),
        is_active=flags.get("active") is not False,
        vegetarian=bool(flags.get("vegetarian", False)),
        vegan=bool(flags.get("vegan", False)),
        spicy=bool(flags.get("spicy", False)),
        allergies=[
            name.strip() for name in raw_item.get("allergies") or [] if isinstance(name, str) and name.strip()
        ],
        options=_entries(raw_item.get("options"), Option),
        extras=_entries(raw_item.get("extras"), Extra),
        addons=_entries(raw_item.get("addons"), Addon),
        translations=_translations(raw_item.get("translations"), ItemTranslation),
    )


def transform_category(raw_category: Dict[str, Any], rejected: Optional[List[str]] = None) -> Category:
    items: List[Item] = []
    for raw_item in raw_category.get("items") or []:
        try:
            items.append(transform_item(raw_item))
        except MalformedItemError as exc:
            logger.warning("%s (category %s)", exc, raw_category.get("id"))
            if rejected is not None:
                rejected.append(str(exc))
    items.sort(key=lambda item: item.item_order)

    return Category(
        id=_text(raw_category.get("id")),
        cat_name=_text(_first(raw_category, "cat_name", "name")),
        cat_description=_text(_first(raw_category, "cat_description", "description")),
        cat_header=_text(_first(raw_category, "cat_header", "header")),
        cat_footer=_text(_first(raw_category, "cat_footer", "footer")),
        cat_order=_order(_first(raw_category, "cat_order", "order")),
        items=items,
        extras=_entries(raw_category.get("extras"), Extra),
        addons=_entries(raw_category.get("addons"), Addon),
        translations=_translations(raw_category.get("translations"), CategoryTranslation),
    )


def transform(raw_document: Dict[str, Any], *, menu_id: Optional[str] = None, url: Optional[str] = None) -> Menu:
    """Return the canonical Menu for a published snapshot or a flat menu record."""

    if not isinstance(raw_document, dict):
        raise ValueError("Menu document must be a JSON object")

    meta = raw_document.get("menu")
    if not isinstance(meta, dict):
        meta = raw_document

    rejected: List[str] = []
    categories = [
        transform_category(raw_category, rejected)
        for raw_category in raw_document.get("categories") or []
        if isinstance(raw_category, dict)
    ]
    categories.sort(key=lambda category: category.cat_order)

    default_language = _text(raw_document.get("defaultLanguage")) or DEFAULT_LANGUAGE
    languages = [str(code) for code in raw_document.get("languages") or []]
    if default_language not in languages:
        languages.insert(0, default_language)

    menu_type = _first(meta, "menu_type", "type")
    return Menu(
        id=menu_id or _text(meta.get("id")),
        menu_name=_text(_first(meta, "menu_name", "name")) or "Untitled Menu",
        menu_description=_text(_first(meta, "menu_description", "description")),
        menu_type=menu_type if menu_type in ("web", "printable") else "web",
        categories=categories,
        last_updated=_text(_first(raw_document, "lastUpdated", "updatedAt"))
        or datetime.now(timezone.utc).isoformat(),
        published_url=url,
        languages=languages,
        default_language=default_language,
        translations=_translations(meta.get("translations"), MenuTranslation),
        rejected_items=rejected,
    )


__all__ = ["MalformedItemError", "parse_price", "transform", "transform_category", "transform_item"]
