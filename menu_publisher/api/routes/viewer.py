"""Server-rendered public menu viewer."""

import logging
from pathlib import Path
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from menu_publisher.api.dependencies import (
    get_http_client,
    get_menu_repository,
    get_settings_store,
    get_storage,
    load_viewer_settings,
)
from menu_publisher.config.settings import (
    LANGUAGE_LABELS,
    RESTAURANT_FACEBOOK_URL,
    RESTAURANT_NAME,
)
from menu_publisher.schemas import Item
from menu_publisher.services import allergy_icons
from menu_publisher.services.menu_repository import RepositoryError, SupabaseMenuRepository
from menu_publisher.services.menu_service import (
    get_menu_data,
    get_published_menus,
    load_listing_translations,
    repository_translation_fetcher,
    summary_text,
)
from menu_publisher.services.settings_store import CookieKeyValueStore, ViewerSettings
from menu_publisher.services.storage import SupabaseStorage
from menu_publisher.services.translation_resolver import MenuTranslator

router = APIRouter()
logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_price(value: float) -> str:
    return f"{value:.2f}"


def display_price(item: Item, translator: MenuTranslator) -> str:
    """Item price, or "from <cheapest option>" when the price comes from options."""

    if item.price_from_options:
        lowest = min(option.price for option in item.options)
        return f"{translator.t('from')}{format_price(lowest)}"
    return format_price(item.item_price)


templates.env.globals.update(
    icon_for=allergy_icons.icon_for,
    format_price=format_price,
    display_price=display_price,
    summary_text=summary_text,
    restaurant_name=RESTAURANT_NAME,
    facebook_url=RESTAURANT_FACEBOOK_URL,
    language_labels=LANGUAGE_LABELS,
)


def _context(request: Request, settings: ViewerSettings, default_language: Optional[str] = None, **extra):
    return {
        "request": request,
        "settings": settings,
        "tr": MenuTranslator(settings.language, default_language),
        **extra,
    }


def _safe_next(next_url: Optional[str]) -> str:
    if next_url and next_url.startswith("/") and not next_url.startswith("//"):
        return next_url
    return "/"


@router.get("/", response_class=HTMLResponse)
async def home_page(
    request: Request,
    settings: ViewerSettings = Depends(load_viewer_settings),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
):
    error = None
    try:
        menus = await get_published_menus(repository)
        menus = await load_listing_translations(menus, repository_translation_fetcher(repository))
    except RepositoryError as exc:
        logger.error("Error fetching published menus: %s", exc)
        menus, error = [], "errorLoadingMenus"
    return templates.TemplateResponse(request, "home.html", _context(request, settings, menus=menus, error=error))


@router.get("/menu/{menu_id}", response_class=HTMLResponse)
async def menu_page(
    menu_id: str,
    request: Request,
    settings: ViewerSettings = Depends(load_viewer_settings),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    storage: SupabaseStorage = Depends(get_storage),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        summaries = await get_published_menus(repository)
    except RepositoryError as exc:
        logger.warning("Listing unavailable, using fallback snapshot URL for %s: %s", menu_id, exc)
        summaries = []
    menu = await get_menu_data(menu_id, summaries, storage, http_client)
    if menu is None:
        return templates.TemplateResponse(
            request, "not_found.html", _context(request, settings), status_code=404
        )
    context = _context(request, settings, menu.default_language, menu=menu)
    return templates.TemplateResponse(request, "menu.html", context)


@router.get("/allergies", response_class=HTMLResponse)
async def allergies_page(request: Request, settings: ViewerSettings = Depends(load_viewer_settings)):
    allergies = allergy_icons.unique_allergies(allergy_icons.available_allergies())
    return templates.TemplateResponse(
        request, "allergies.html", _context(request, settings, allergies=allergies)
    )


@router.get("/preferences/language/{language_code}")
async def set_language(
    language_code: str,
    next_url: Optional[str] = Query(default=None, alias="next"),
    store: CookieKeyValueStore = Depends(get_settings_store),
):
    settings = ViewerSettings.load(store)
    settings.set_language(language_code)
    settings.save(store)
    response = RedirectResponse(_safe_next(next_url), status_code=303)
    store.apply(response)
    return response


@router.get("/preferences/allergies")
async def toggle_allergies(
    next_url: Optional[str] = Query(default=None, alias="next"),
    visible: Optional[bool] = None,
    store: CookieKeyValueStore = Depends(get_settings_store),
):
    settings = ViewerSettings.load(store)
    if visible is None:
        settings.toggle_allergies()
    else:
        settings.set_allergies_visible(visible)
    settings.save(store)
    response = RedirectResponse(_safe_next(next_url), status_code=303)
    store.apply(response)
    return response
