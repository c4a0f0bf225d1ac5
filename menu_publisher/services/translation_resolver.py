"""Resolve display text for menu entities in the requested language.

Every lookup follows the same chain: when the requested language is the
default language the canonical value is returned untouched; otherwise a
non-empty translation wins, and anything missing falls back to the canonical
value. Lookups never raise for absent translations.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from menu_publisher.config.settings import DEFAULT_LANGUAGE
from menu_publisher.schemas import Category, Item, Menu
from menu_publisher.services.allergy_icons import canonical_allergy
from menu_publisher.services.ui_translations import ALLERGY_NAME_TRANSLATIONS, UI_TRANSLATIONS

logger = logging.getLogger(__name__)

Translatable = Union[Menu, Category, Item]


def _canonical_attribute(entity: Translatable, field: str) -> str:
    mapping = entity.TRANSLATION_MODEL.CANONICAL_FIELDS
    if field not in mapping:
        raise ValueError(f"{type(entity).__name__} has no translatable field '{field}'")
    return mapping[field]


def resolve(
    entity: Translatable,
    field: str,
    requested_language: str,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """Return the text shown for `field` of `entity` in `requested_language`."""

    canonical = getattr(entity, _canonical_attribute(entity, field)) or ""
    if requested_language == default_language:
        return canonical

    translation = entity.translations.get(requested_language)
    if translation is not None:
        value = getattr(translation, field)
        if value:
            return value
    return canonical


def resolve_indexed(
    entity: Union[Category, Item],
    field: str,
    index: int,
    canonical: str,
    requested_language: str,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """Return the text of entry `index` of an options/extras/addons array."""

    if field not in entity.TRANSLATION_MODEL.INDEXED_FIELDS:
        raise ValueError(f"{type(entity).__name__} has no translatable list '{field}'")
    if requested_language == default_language:
        return canonical

    translation = entity.translations.get(requested_language)
    if translation is None:
        return canonical
    values = getattr(translation, field)
    if 0 <= index < len(values) and values[index]:
        return values[index]
    return canonical


def ui_text(key: str, requested_language: str, default_language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a static interface string; the key itself is the last resort."""

    for language in (requested_language, default_language):
        value = UI_TRANSLATIONS.get(language, {}).get(key)
        if value:
            return value
    logger.debug("No UI string for key %s (%s/%s)", key, requested_language, default_language)
    return key


def allergy_name(name: str, requested_language: str, default_language: str = DEFAULT_LANGUAGE) -> str:
    """Return the localised display name of an allergy."""

    key = canonical_allergy(name)
    for language in (requested_language, default_language):
        value = ALLERGY_NAME_TRANSLATIONS.get(language, {}).get(key)
        if value:
            return value
    return (name or "").strip()


class MenuTranslator:
    """Resolver bound to a language pair, handed to the templates."""

    def __init__(self, requested_language: str, default_language: Optional[str] = None):
        self.default_language = default_language or DEFAULT_LANGUAGE
        self.language = requested_language or self.default_language

    def _resolve(self, entity: Translatable, field: str) -> str:
        return resolve(entity, field, self.language, self.default_language)

    def _indexed(self, entity: Union[Category, Item], field: str, index: int, canonical: str) -> str:
        return resolve_indexed(entity, field, index, canonical, self.language, self.default_language)

    def t(self, key: str) -> str:
        return ui_text(key, self.language, self.default_language)

    def menu_name(self, menu: Menu) -> str:
        return self._resolve(menu, "name")

    def menu_description(self, menu: Menu) -> str:
        return self._resolve(menu, "description")

    def category_name(self, category: Category) -> str:
        return self._resolve(category, "name")

    def category_description(self, category: Category) -> str:
        return self._resolve(category, "description")

    def category_header(self, category: Category) -> str:
        return self._resolve(category, "header")

    def category_footer(self, category: Category) -> str:
        return self._resolve(category, "footer")

    def category_extra_text(self, category: Category, index: int) -> str:
        return self._indexed(category, "extras", index, category.extras[index].label)

    def category_addon_text(self, category: Category, index: int) -> str:
        return self._indexed(category, "addons", index, category.addons[index].label)

    def item_name(self, item: Item) -> str:
        return self._resolve(item, "name")

    def item_description(self, item: Item) -> str:
        return self._resolve(item, "description")

    def option_text(self, item: Item, index: int) -> str:
        return self._indexed(item, "options", index, item.options[index].label)

    def extra_text(self, item: Item, index: int) -> str:
        return self._indexed(item, "extras", index, item.extras[index].label)

    def addon_text(self, item: Item, index: int) -> str:
        return self._indexed(item, "addons", index, item.addons[index].label)

    def allergy_name(self, name: str) -> str:
        return allergy_name(name, self.language, self.default_language)


__all__ = [
    "MenuTranslator",
    "allergy_name",
    "resolve",
    "resolve_indexed",
    "ui_text",
]
