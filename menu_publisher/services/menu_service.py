"""Read side of the public viewer: published listing and menu snapshots."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx
from pydantic import ValidationError

from menu_publisher.config.settings import DEFAULT_LANGUAGE, LISTING_FETCH_CONCURRENCY
from menu_publisher.schemas import Menu, MenuTranslation, PublishedMenuSummary
from menu_publisher.services.menu_repository import MENUS, SupabaseMenuRepository
from menu_publisher.services.menu_transformer import transform
from menu_publisher.services.publish_service import format_menu_translations, snapshot_path
from menu_publisher.services.storage import SupabaseStorage

logger = logging.getLogger(__name__)

TranslationFetcher = Callable[[str], Awaitable[Dict[str, Dict[str, Any]]]]


async def get_published_menus(repository: SupabaseMenuRepository) -> List[PublishedMenuSummary]:
    """Active entries of the website config listing, in display order."""

    summaries = []
    for entry in await repository.get_published_menus():
        if entry.get("isActive") is False or not entry.get("menuId"):
            continue
        summaries.append(
            PublishedMenuSummary(
                id=str(entry["menuId"]),
                name=entry.get("name") or "",
                description=entry.get("description") or "",
                url=entry.get("publishedUrl") or "",
                last_updated=str(entry.get("publishedAt") or ""),
                slug=entry.get("slug") or str(entry["menuId"]),
                order=entry.get("order") or 0,
            )
        )
    summaries.sort(key=lambda summary: summary.order)
    return summaries


async def load_listing_translations(
    summaries: List[PublishedMenuSummary],
    fetch: TranslationFetcher,
    *,
    limit: int = LISTING_FETCH_CONCURRENCY,
) -> List[PublishedMenuSummary]:
    """Attach menu translations to each summary, at most `limit` fetches at a time.

    A failed fetch or an unreadable stored translation leaves that one
    summary untranslated.
    """

    semaphore = asyncio.Semaphore(max(limit, 1))

    async def _load(summary: PublishedMenuSummary) -> PublishedMenuSummary:
        async with semaphore:
            try:
                raw = await fetch(summary.id)
            except Exception as exc:
                logger.warning("Could not fetch translations for menu %s: %s", summary.id, exc)
                return summary
        try:
            translations = {
                language: MenuTranslation.model_validate(entry)
                for language, entry in format_menu_translations(raw).items()
            }
        except (ValidationError, AttributeError) as exc:
            logger.warning("Ignoring unreadable translations for menu %s: %s", summary.id, exc)
            return summary
        return summary.model_copy(update={"translations": translations})

    return list(await asyncio.gather(*(_load(summary) for summary in summaries)))


def repository_translation_fetcher(repository: SupabaseMenuRepository) -> TranslationFetcher:
    async def _fetch(menu_id: str) -> Dict[str, Dict[str, Any]]:
        return await repository.get_translations(MENUS, menu_id)

    return _fetch


def summary_text(
    summary: PublishedMenuSummary,
    field: str,
    requested_language: str,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    canonical = getattr(summary, field) or ""
    if requested_language == default_language:
        return canonical
    translation = summary.translations.get(requested_language)
    value = getattr(translation, field, None) if translation is not None else None
    return value or canonical


async def get_menu_data(
    menu_id: str,
    summaries: List[PublishedMenuSummary],
    storage: SupabaseStorage,
    http_client: httpx.AsyncClient,
) -> Optional[Menu]:
    """Fetch and normalise a published snapshot; None when it cannot be loaded."""

    target = next((summary for summary in summaries if summary.id == menu_id), None)
    if target is not None and target.url:
        url = target.url
    else:
        url = storage.public_url(snapshot_path(menu_id))
        logger.info("Constructing snapshot URL as fallback: %s", url)

    try:
        response = await http_client.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as exc:
        logger.error("Error fetching menu data for %s: %s", menu_id, exc)
        return None
    if response.status_code != 200:
        logger.error("Failed to fetch menu %s: %s", menu_id, response.status_code)
        return None

    try:
        return transform(response.json(), menu_id=menu_id, url=url)
    except ValueError as exc:
        logger.error("Menu snapshot %s is unreadable: %s", menu_id, exc)
        return None


__all__ = [
    "get_menu_data",
    "get_published_menus",
    "load_listing_translations",
    "repository_translation_fetcher",
    "summary_text",
]
