"""FastAPI dependencies shared by the routers."""

from typing import AsyncIterator, Optional

import httpx
from fastapi import Header, Request

from menu_publisher.services.auth_utils import extract_bearer_token, verify_access_token
from menu_publisher.services.menu_repository import SupabaseMenuRepository
from menu_publisher.services.settings_store import CookieKeyValueStore, ViewerSettings
from menu_publisher.services.storage import SupabaseStorage
from menu_publisher.services.translate_service import OpenAITextTranslator


def get_menu_repository() -> SupabaseMenuRepository:
    return SupabaseMenuRepository()


def get_storage() -> SupabaseStorage:
    return SupabaseStorage()


def get_text_translator() -> OpenAITextTranslator:
    return OpenAITextTranslator()


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=10.0) as client:
        yield client


async def get_current_user_id(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> str:
    """Resolve the authenticated admin user from the bearer token."""

    token = extract_bearer_token(authorization)
    return await verify_access_token(token)


def get_settings_store(request: Request) -> CookieKeyValueStore:
    return CookieKeyValueStore(request.cookies)


def load_viewer_settings(request: Request) -> ViewerSettings:
    return ViewerSettings.load(CookieKeyValueStore(request.cookies))
