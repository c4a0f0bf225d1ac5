from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from menu_publisher.api.dependencies import get_current_user_id, get_menu_repository, get_text_translator
from menu_publisher.schemas import (
    TranslateCategoryRequest,
    TranslateItemRequest,
    TranslateMenuRequest,
    TranslateResponse,
)
from menu_publisher.services.menu_repository import SupabaseMenuRepository
from menu_publisher.services.translate_service import (
    OpenAITextTranslator,
    TranslationError,
    translate_entity,
)

router = APIRouter()

ERROR_STATUS = {
    "unauthenticated": 401,
    "invalid-argument": 400,
    "not-found": 404,
    "internal": 500,
}


async def _translate(
    kind: str,
    entity_id: Optional[str],
    target_language: Optional[str],
    repository: SupabaseMenuRepository,
    translator: OpenAITextTranslator,
) -> TranslateResponse:
    try:
        translation, cached = await translate_entity(kind, entity_id, target_language, repository, translator)
    except TranslationError as exc:
        raise HTTPException(status_code=ERROR_STATUS.get(exc.code, 500), detail=exc.message) from exc

    language = target_language.strip().lower() if target_language else ""
    message = (
        f"Translation already exists for {language}"
        if cached
        else f"Successfully auto-translated to {language}"
    )
    return TranslateResponse(translation=translation, message=message, cached=cached)


@router.post("/translate/item", response_model=TranslateResponse)
async def translate_item_endpoint(
    payload: TranslateItemRequest,
    _user_id: str = Depends(get_current_user_id),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    translator: OpenAITextTranslator = Depends(get_text_translator),
) -> TranslateResponse:
    return await _translate("item", payload.item_id, payload.target_language, repository, translator)


@router.post("/translate/category", response_model=TranslateResponse)
async def translate_category_endpoint(
    payload: TranslateCategoryRequest,
    _user_id: str = Depends(get_current_user_id),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    translator: OpenAITextTranslator = Depends(get_text_translator),
) -> TranslateResponse:
    return await _translate("category", payload.category_id, payload.target_language, repository, translator)


@router.post("/translate/menu", response_model=TranslateResponse)
async def translate_menu_endpoint(
    payload: TranslateMenuRequest,
    _user_id: str = Depends(get_current_user_id),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    translator: OpenAITextTranslator = Depends(get_text_translator),
) -> TranslateResponse:
    return await _translate("menu", payload.menu_id, payload.target_language, repository, translator)
