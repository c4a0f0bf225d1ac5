import pytest

from menu_publisher.schemas import Category, Item, ItemTranslation, Menu, MenuTranslation, Option
from menu_publisher.services.translation_resolver import (
    MenuTranslator,
    allergy_name,
    resolve,
    resolve_indexed,
    ui_text,
)


def _item(**overrides):
    data = {
        "id": "i1",
        "item_name": "Soup",
        "item_description": "Tomato soup",
        "options": [Option(label="Small", price=4), Option(label="Large", price=6)],
        "translations": {
            "es": ItemTranslation(name="Sopa", description="", options=["Pequeña", ""]),
        },
    }
    data.update(overrides)
    return Item(**data)


def test_default_language_returns_canonical_value_even_with_translation():
    item = _item(translations={"en": ItemTranslation(name="Broth")})

    assert resolve(item, "name", "en", "en") == "Soup"


def test_translation_wins_when_present():
    assert resolve(_item(), "name", "es", "en") == "Sopa"


def test_empty_translation_falls_back_to_canonical():
    assert resolve(_item(), "description", "es", "en") == "Tomato soup"


def test_missing_language_falls_back_to_canonical():
    assert resolve(_item(), "name", "de", "en") == "Soup"


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError):
        resolve(_item(), "price", "es", "en")


def test_category_fields_map_to_cat_prefixed_attributes():
    category = Category(id="c1", cat_name="Starters", cat_header="Daily")

    assert resolve(category, "name", "es", "en") == "Starters"
    assert resolve(category, "header", "en", "en") == "Daily"


def test_indexed_entries_fall_back_per_position():
    item = _item()

    assert resolve_indexed(item, "options", 0, "Small", "es", "en") == "Pequeña"
    assert resolve_indexed(item, "options", 1, "Large", "es", "en") == "Large"
    assert resolve_indexed(item, "options", 5, "Huge", "es", "en") == "Huge"


def test_ui_text_falls_back_to_default_language_then_key():
    assert ui_text("vegan", "es") == "🌱 Vegano"
    assert ui_text("addons", "fr") == ui_text("addons", "en")
    assert ui_text("noSuchKey", "es") == "noSuchKey"


def test_allergy_name_uses_canonical_spelling():
    assert allergy_name("Soy", "es") == allergy_name("soya", "es")
    assert allergy_name("unknown thing ", "es") == "unknown thing"


def test_menu_translator_binds_language_pair():
    menu = Menu(id="m1", menu_name="Lunch", translations={"de": MenuTranslation(name="Mittag")})
    item = _item()

    german = MenuTranslator("de")
    spanish = MenuTranslator("es")

    assert german.menu_name(menu) == "Mittag"
    assert spanish.menu_name(menu) == "Lunch"
    assert spanish.item_name(item) == "Sopa"
    assert spanish.option_text(item, 0) == "Pequeña"
    assert MenuTranslator("").language == "en"
