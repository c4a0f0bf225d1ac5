"""Export a menu tree, with its translations, to a public JSON snapshot."""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from menu_publisher.config.settings import DEFAULT_LANGUAGE, MENU_CACHE_CONTROL
from menu_publisher.services.menu_repository import (
    CATEGORIES,
    MENU_ITEMS,
    MENUS,
    RepositoryError,
    SupabaseMenuRepository,
)
from menu_publisher.services.storage import StorageError, SupabaseStorage

logger = logging.getLogger(__name__)

PUBLISH_ACTIONS = ("publish", "unpublish")

# stored translation field -> exported translation field
_MENU_TRANSLATION_FIELDS = (("menu_name", "name"), ("menu_description", "description"))
_CATEGORY_TRANSLATION_FIELDS = (
    ("cat_name", "name"),
    ("cat_description", "description"),
    ("header", "header"),
    ("footer", "footer"),
    ("translated_extras", "extras"),
    ("translated_addons", "addons"),
)
_ITEM_TRANSLATION_FIELDS = (
    ("item_name", "name"),
    ("item_description", "description"),
    ("translated_options", "options"),
    ("translated_extras", "extras"),
    ("translated_addons", "addons"),
)


class PublishValidationError(ValueError):
    """Raised when a publish request is missing or has invalid input."""


class MenuNotFoundError(LookupError):
    """Raised when the menu to publish does not exist."""


@dataclass
class MenuExport:
    document: Dict[str, Any]
    languages: List[str]
    record: Dict[str, Any] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)


@dataclass
class PublishResult:
    url: str
    path: str
    languages: List[str]
    skipped: List[str] = field(default_factory=list)


def snapshot_path(menu_id: str) -> str:
    return f"menus/menu-{menu_id}.json"


def _format_translations(
    translations: Dict[str, Dict[str, Any]], fields: Tuple[Tuple[str, str], ...]
) -> Dict[str, Dict[str, Any]]:
    formatted: Dict[str, Dict[str, Any]] = {}
    for language, record in translations.items():
        if not record:
            continue
        entry = {target: record.get(source) for source, target in fields if record.get(source)}
        if entry:
            formatted[language] = entry
    return formatted


def format_menu_translations(translations: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    return _format_translations(translations, _MENU_TRANSLATION_FIELDS)


def format_category_translations(translations: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Reshape stored category translations; empty fields and languages are dropped."""

    return _format_translations(translations, _CATEGORY_TRANSLATION_FIELDS)


def format_item_translations(translations: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Reshape stored item translations; arrays stay aligned with the item's own arrays."""

    return _format_translations(translations, _ITEM_TRANSLATION_FIELDS)


def _item_sort_key(item: Dict[str, Any]) -> float:
    for key in ("menu_order", "item_order", "order"):
        value = item.get(key)
        if value is not None:
            try:
                return float(value)
            except (TypeError, ValueError):
                return 0
    return 0


async def _export_item(
    item_id: str, repository: SupabaseMenuRepository, languages: set, skipped: List[str]
) -> Optional[Dict[str, Any]]:
    record = await repository.get_item(item_id)
    if record is None:
        logger.warning("Skipping missing menu item %s", item_id)
        skipped.append(f"{MENU_ITEMS}/{item_id}")
        return None

    translations = format_item_translations(await repository.get_translations(MENU_ITEMS, item_id))
    languages.update(translations)

    item = {key: value for key, value in record.items() if key not in ("created_at", "updated_at")}
    item["id"] = item_id
    if translations:
        item["translations"] = translations
    return item


async def _export_category(
    category_id: str,
    position: int,
    repository: SupabaseMenuRepository,
    languages: set,
    skipped: List[str],
) -> Optional[Dict[str, Any]]:
    record = await repository.get_category(category_id)
    if record is None:
        logger.warning("Skipping missing category %s", category_id)
        skipped.append(f"{CATEGORIES}/{category_id}")
        return None

    translations = format_category_translations(await repository.get_translations(CATEGORIES, category_id))
    languages.update(translations)

    item_ids = record.get("items") or []
    exported_items = await asyncio.gather(
        *(_export_item(str(item_id), repository, languages, skipped) for item_id in item_ids)
    )
    items = [item for item in exported_items if item is not None]
    items.sort(key=_item_sort_key)

    category: Dict[str, Any] = {
        "id": category_id,
        "name": record.get("cat_name"),
        "header": record.get("header"),
        "description": record.get("cat_description"),
        "footer": record.get("footer"),
        "order": position,
        "items": items,
        "addons": record.get("addons") or [],
        "extras": record.get("extras") or [],
    }
    if translations:
        category["translations"] = translations
    return category


async def build_menu_export(menu_id: str, repository: SupabaseMenuRepository) -> MenuExport:
    """Assemble the published document for a menu.

    Categories and items referenced by the menu but missing from the database
    are skipped and reported in `MenuExport.skipped`; the export goes ahead.
    """

    menu = await repository.get_menu(menu_id)
    if menu is None:
        raise MenuNotFoundError(f"Menu not found: {menu_id}")

    languages = {DEFAULT_LANGUAGE}
    skipped: List[str] = []

    menu_translations = format_menu_translations(await repository.get_translations(MENUS, menu_id))
    languages.update(menu_translations)

    category_ids = menu.get("categories") or []
    exported = await asyncio.gather(
        *(
            _export_category(str(category_id), position, repository, languages, skipped)
            for position, category_id in enumerate(category_ids)
        )
    )
    categories = [category for category in exported if category is not None]

    menu_meta: Dict[str, Any] = {
        "id": menu_id,
        "name": menu.get("menu_name"),
        "description": menu.get("menu_description"),
        "type": menu.get("menu_type"),
    }
    if menu_translations:
        menu_meta["translations"] = menu_translations

    sorted_languages = sorted(languages)
    document = {
        "menu": menu_meta,
        "languages": sorted_languages,
        "defaultLanguage": DEFAULT_LANGUAGE,
        "categories": categories,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
    return MenuExport(document=document, languages=sorted_languages, record=menu, skipped=skipped)


def _slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")


async def _register_published_menu(
    menu_id: str, export: MenuExport, url: str, repository: SupabaseMenuRepository
) -> None:
    meta = export.document["menu"]
    menu = export.record
    entries = [entry for entry in await repository.get_published_menus() if entry.get("menuId") != menu_id]
    entries.append(
        {
            "menuId": menu_id,
            "name": meta.get("name") or "",
            "slug": _slugify(meta.get("name") or menu_id),
            "description": meta.get("description") or "",
            "isActive": menu.get("isActive") is not False,
            "order": menu.get("menu_order") or 0,
            "publishedAt": export.document["lastUpdated"],
            "publishedUrl": url,
        }
    )
    entries.sort(key=lambda entry: entry.get("order") or 0)
    await repository.save_published_menus(entries)


async def _unregister_published_menu(menu_id: str, repository: SupabaseMenuRepository) -> None:
    entries = await repository.get_published_menus()
    remaining = [entry for entry in entries if entry.get("menuId") != menu_id]
    if len(remaining) != len(entries):
        await repository.save_published_menus(remaining)


async def publish_menu(
    menu_id: str, repository: SupabaseMenuRepository, storage: SupabaseStorage
) -> PublishResult:
    """Write the menu snapshot to its deterministic path, replacing any previous one."""

    export = await build_menu_export(menu_id, repository)
    path = snapshot_path(menu_id)
    payload = json.dumps(export.document, indent=2, ensure_ascii=False).encode("utf-8")
    url = await storage.upload(
        path,
        payload,
        content_type="application/json",
        cache_control=MENU_CACHE_CONTROL,
    )
    await _register_published_menu(menu_id, export, url, repository)

    logger.info(
        "Menu export completed: %d categories, %d languages, saved to %s",
        len(export.document["categories"]),
        len(export.languages),
        url,
    )
    return PublishResult(url=url, path=path, languages=export.languages, skipped=export.skipped)


async def unpublish_menu(menu_id: str, repository: SupabaseMenuRepository, storage: SupabaseStorage) -> bool:
    """Remove the snapshot; returns False when it was already absent."""

    path = snapshot_path(menu_id)
    removed = await storage.remove(path)
    if removed:
        logger.info("Deleted menu file: %s", path)
    else:
        logger.info("Menu file not found (already deleted?): %s", path)
    await _unregister_published_menu(menu_id, repository)
    return removed


def _validate_request(payload: Dict[str, Any]) -> Tuple[str, str]:
    menu_id = payload.get("menuId") or payload.get("menu_id")
    action = payload.get("action")
    if menu_id is not None and not isinstance(menu_id, str):
        raise PublishValidationError("Menu ID must be a string")
    if not menu_id or not menu_id.strip():
        raise PublishValidationError("Menu ID is required")
    if action not in PUBLISH_ACTIONS:
        raise PublishValidationError("Action must be 'publish' or 'unpublish'")
    return menu_id.strip(), action


async def handle_export_request(
    payload: Dict[str, Any], repository: SupabaseMenuRepository, storage: SupabaseStorage
) -> Dict[str, Any]:
    """Run a publish/unpublish request and report the outcome as an envelope."""

    action = payload.get("action") if isinstance(payload.get("action"), str) else None
    menu_id = payload.get("menuId") or payload.get("menu_id")
    if not isinstance(menu_id, str):
        menu_id = None
    envelope: Dict[str, Any] = {"action": action or "unknown", "menuId": menu_id or "unknown"}

    try:
        menu_id, action = _validate_request(payload)
        logger.info("%s menu with translations: %s", action, menu_id)
        if action == "unpublish":
            await unpublish_menu(menu_id, repository, storage)
            return {**envelope, "success": True, "message": "Menu unpublished successfully"}

        result = await publish_menu(menu_id, repository, storage)
        response = {
            **envelope,
            "success": True,
            "message": "Menu exported successfully with translations",
            "url": result.url,
            "languages": result.languages,
        }
        if result.skipped:
            response["skipped"] = result.skipped
        return response
    except (PublishValidationError, MenuNotFoundError) as exc:
        logger.warning("Rejected %s request for %s: %s", envelope["action"], envelope["menuId"], exc)
        return {**envelope, "success": False, "message": str(exc)}
    except (RepositoryError, StorageError) as exc:
        logger.error("Error in %s for %s: %s", envelope["action"], envelope["menuId"], exc)
        return {**envelope, "success": False, "message": f"{envelope['action'].capitalize()} failed"}
    except Exception:
        logger.exception("Unexpected failure in %s for %s", envelope["action"], envelope["menuId"])
        return {**envelope, "success": False, "message": "Operation failed"}


__all__ = [
    "MenuExport",
    "MenuNotFoundError",
    "PublishResult",
    "PublishValidationError",
    "build_menu_export",
    "format_category_translations",
    "format_item_translations",
    "format_menu_translations",
    "handle_export_request",
    "publish_menu",
    "snapshot_path",
    "unpublish_menu",
]
