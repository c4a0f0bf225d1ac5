"""Supabase access to the editable menu records and their translations."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, TypeVar

from httpx import HTTPError as HttpxError
from postgrest import APIError as PostgrestAPIError

from menu_publisher.config.settings import SUPPORTED_LANGUAGES
from menu_publisher.config.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)
T = TypeVar("T")

MENUS = "menus"
CATEGORIES = "categories"
MENU_ITEMS = "menu_items"
TRANSLATIONS = "translations"
WEBSITE_CONFIG = "website_config"
WEBSITE_CONFIG_ID = "default"

COLLECTION_BY_KIND = {"menu": MENUS, "category": CATEGORIES, "item": MENU_ITEMS}


class RepositoryError(RuntimeError):
    """Raised when the menu database cannot be read or written."""


class SupabaseMenuRepository:
    """Reads and writes menu records stored in Supabase tables.

    Translations live in a single `translations` table keyed by
    (collection, record_id, language) with the translated fields in `data`.
    """

    def __init__(self, client: Any = None):
        self._supabase = client

    def _client(self) -> Any:
        client = self._supabase or get_supabase_client()
        if client is None:
            raise RepositoryError("Supabase client is not configured.")
        return client

    async def _run(self, operation: Callable[[Any], T], *, label: str) -> T:
        def _call() -> T:
            start = time.monotonic()
            result = operation(self._client())
            logger.debug(
                "Supabase call succeeded",
                extra={"label": label, "duration_ms": round((time.monotonic() - start) * 1000, 2)},
            )
            return result

        try:
            return await asyncio.to_thread(_call)
        except PostgrestAPIError as exc:
            logger.error("%s failed (%s): %s", label, exc.code, exc.message)
            raise RepositoryError(f"Database request failed: {label}") from exc
        except HttpxError as exc:
            logger.error("Supabase unreachable during %s: %s", label, exc)
            raise RepositoryError("Supabase unreachable.") from exc

    async def get_record(self, collection: str, record_id: str) -> Optional[Dict[str, Any]]:
        """Return a record with its `id`, or None when it does not exist."""

        def _request(client: Any) -> List[Dict[str, Any]]:
            response = client.table(collection).select("*").eq("id", record_id).limit(1).execute()
            return response.data or []

        rows = await self._run(_request, label=f"get {collection}/{record_id}")
        return rows[0] if rows else None

    async def get_menu(self, menu_id: str) -> Optional[Dict[str, Any]]:
        return await self.get_record(MENUS, menu_id)

    async def get_category(self, category_id: str) -> Optional[Dict[str, Any]]:
        return await self.get_record(CATEGORIES, category_id)

    async def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        return await self.get_record(MENU_ITEMS, item_id)

    async def update_record(self, collection: str, record_id: str, values: Dict[str, Any]) -> None:
        payload = {**values, "updated_at": datetime.now(timezone.utc).isoformat()}

        def _request(client: Any) -> None:
            client.table(collection).update(payload).eq("id", record_id).execute()

        await self._run(_request, label=f"update {collection}/{record_id}")

    async def get_translations(self, collection: str, record_id: str) -> Dict[str, Dict[str, Any]]:
        """Return stored translations keyed by language, supported languages only."""

        def _request(client: Any) -> List[Dict[str, Any]]:
            response = (
                client.table(TRANSLATIONS)
                .select("language,data")
                .eq("collection", collection)
                .eq("record_id", record_id)
                .execute()
            )
            return response.data or []

        rows = await self._run(_request, label=f"translations {collection}/{record_id}")
        return {
            row["language"]: row.get("data") or {}
            for row in rows
            if row.get("language") in SUPPORTED_LANGUAGES
        }

    async def get_translation(self, collection: str, record_id: str, language: str) -> Optional[Dict[str, Any]]:
        def _request(client: Any) -> List[Dict[str, Any]]:
            response = (
                client.table(TRANSLATIONS)
                .select("data")
                .eq("collection", collection)
                .eq("record_id", record_id)
                .eq("language", language)
                .limit(1)
                .execute()
            )
            return response.data or []

        rows = await self._run(_request, label=f"translation {collection}/{record_id}/{language}")
        if not rows:
            return None
        return rows[0].get("data") or {}

    async def save_translation(
        self, collection: str, record_id: str, language: str, data: Dict[str, Any]
    ) -> None:
        row = {
            "collection": collection,
            "record_id": record_id,
            "language": language,
            "data": data,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        def _request(client: Any) -> None:
            client.table(TRANSLATIONS).upsert(row, on_conflict="collection,record_id,language").execute()

        await self._run(_request, label=f"save translation {collection}/{record_id}/{language}")

    async def get_published_menus(self) -> List[Dict[str, Any]]:
        """Return the raw `published_menus` entries of the website config."""

        config = await self.get_record(WEBSITE_CONFIG, WEBSITE_CONFIG_ID)
        entries = (config or {}).get("published_menus") or []
        return [entry for entry in entries if isinstance(entry, dict)]

    async def save_published_menus(self, entries: List[Dict[str, Any]]) -> None:
        row = {
            "id": WEBSITE_CONFIG_ID,
            "published_menus": entries,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        def _request(client: Any) -> None:
            client.table(WEBSITE_CONFIG).upsert(row).execute()

        await self._run(_request, label="save website config")


__all__ = [
    "CATEGORIES",
    "COLLECTION_BY_KIND",
    "MENUS",
    "MENU_ITEMS",
    "RepositoryError",
    "SupabaseMenuRepository",
]
