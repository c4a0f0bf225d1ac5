import asyncio
import json

from menu_publisher.services.publish_service import (
    build_menu_export,
    format_category_translations,
    format_item_translations,
    format_menu_translations,
    handle_export_request,
    snapshot_path,
)

from conftest import FakeStorage


def test_format_translations_rename_fields_and_drop_empty_entries():
    stored = {
        "es": {"cat_name": "Entrantes", "cat_description": "", "translated_extras": ["Pan"], "translated_addons": []},
        "de": {"cat_name": "", "header": ""},
    }

    assert format_category_translations(stored) == {"es": {"name": "Entrantes", "extras": ["Pan"]}}


def test_format_item_and_menu_translations():
    assert format_item_translations(
        {"es": {"item_name": "Sopa", "item_description": "De tomate", "translated_options": ["Pequeña"]}}
    ) == {"es": {"name": "Sopa", "description": "De tomate", "options": ["Pequeña"]}}
    assert format_menu_translations({"de": {"menu_name": "Mittag", "menu_description": None}, "es": {}}) == {
        "de": {"name": "Mittag"}
    }


def test_export_keeps_category_order_and_sorts_items(repository):
    repository.translations[("menus", "m1", "es")] = {"menu_name": "Almuerzo"}
    repository.translations[("menu_items", "i1", "de")] = {"item_name": "Suppe"}

    export = asyncio.run(build_menu_export("m1", repository))
    document = export.document

    assert [category["id"] for category in document["categories"]] == ["c2", "c1"]
    assert [category["order"] for category in document["categories"]] == [0, 1]
    assert [item["id"] for item in document["categories"][0]["items"]] == ["i1", "i2"]
    assert document["menu"]["translations"] == {"es": {"name": "Almuerzo"}}
    assert document["languages"] == ["de", "en", "es"]
    assert document["defaultLanguage"] == "en"
    assert "created_at" not in document["categories"][0]["items"][0]
    assert export.skipped == []


def test_missing_references_are_skipped_and_reported(repository):
    repository.records["categories"]["c2"]["items"].append("ghost-item")
    repository.records["menus"]["m1"]["categories"].append("ghost-category")

    export = asyncio.run(build_menu_export("m1", repository))

    assert [category["id"] for category in export.document["categories"]] == ["c2", "c1"]
    assert sorted(export.skipped) == ["categories/ghost-category", "menu_items/ghost-item"]


def test_publish_then_unpublish_round_trip(repository, storage):
    published = asyncio.run(handle_export_request({"menuId": "m1", "action": "publish"}, repository, storage))

    assert published["success"] is True
    assert published["message"] == "Menu exported successfully with translations"
    assert published["url"] == storage.public_url(snapshot_path("m1"))
    stored = storage.objects[snapshot_path("m1")]
    assert stored["content_type"] == "application/json"
    assert stored["cache_control"] == "300"
    assert json.loads(stored["data"])["menu"]["name"] == "Lunch"
    assert [entry["menuId"] for entry in repository.published] == ["m1"]
    assert repository.published[0]["slug"] == "lunch"

    unpublished = asyncio.run(handle_export_request({"menuId": "m1", "action": "unpublish"}, repository, storage))

    assert unpublished == {
        "action": "unpublish",
        "menuId": "m1",
        "success": True,
        "message": "Menu unpublished successfully",
    }
    assert snapshot_path("m1") not in storage.objects
    assert repository.published == []


def test_republishing_replaces_the_previous_snapshot(repository, storage):
    asyncio.run(handle_export_request({"menuId": "m1", "action": "publish"}, repository, storage))
    repository.records["menus"]["m1"]["menu_name"] = "Brunch"
    asyncio.run(handle_export_request({"menuId": "m1", "action": "publish"}, repository, storage))

    assert list(storage.objects) == [snapshot_path("m1")]
    assert json.loads(storage.objects[snapshot_path("m1")]["data"])["menu"]["name"] == "Brunch"
    assert len(repository.published) == 1


def test_unpublishing_a_never_published_menu_succeeds(repository, storage):
    result = asyncio.run(handle_export_request({"menuId": "m1", "action": "unpublish"}, repository, storage))

    assert result["success"] is True
    assert storage.removed == [snapshot_path("m1")]


def test_invalid_requests_return_failure_envelopes(repository, storage):
    missing_id = asyncio.run(handle_export_request({"action": "publish"}, repository, storage))
    bad_action = asyncio.run(handle_export_request({"menuId": "m1", "action": "archive"}, repository, storage))
    unknown_menu = asyncio.run(handle_export_request({"menuId": "nope", "action": "publish"}, repository, storage))

    assert missing_id == {"action": "publish", "menuId": "unknown", "success": False, "message": "Menu ID is required"}
    assert bad_action["success"] is False
    assert bad_action["message"] == "Action must be 'publish' or 'unpublish'"
    assert unknown_menu["success"] is False
    assert unknown_menu["message"] == "Menu not found: nope"
    assert storage.objects == {}


def test_storage_failure_is_reported(repository):
    storage = FakeStorage(fail_on=("menus/",))

    result = asyncio.run(handle_export_request({"menuId": "m1", "action": "publish"}, repository, storage))

    assert result["success"] is False
    assert result["message"] == "Publish failed"
    assert repository.published == []


def test_non_string_menu_id_is_rejected(repository, storage):
    result = asyncio.run(handle_export_request({"menuId": 42, "action": "publish"}, repository, storage))

    assert result == {
        "action": "publish",
        "menuId": "unknown",
        "success": False,
        "message": "Menu ID must be a string",
    }
    assert storage.objects == {}


def test_export_keeps_item_sequence_for_equal_orders(repository):
    items = repository.records["menu_items"]
    repository.records["categories"]["c2"]["items"] = ["i2", "i1", "i3"]
    items["i1"]["menu_order"] = 1
    items["i2"]["menu_order"] = 1
    items["i3"]["menu_order"] = 0

    export = asyncio.run(build_menu_export("m1", repository))

    assert [item["id"] for item in export.document["categories"][0]["items"]] == ["i3", "i2", "i1"]
