from typing import Any, Dict

from fastapi import APIRouter, Depends

from menu_publisher.api.dependencies import get_current_user_id, get_menu_repository, get_storage
from menu_publisher.schemas import ImageResizeRequest
from menu_publisher.services.image_service import process_entity_image
from menu_publisher.services.menu_repository import SupabaseMenuRepository
from menu_publisher.services.storage import SupabaseStorage

router = APIRouter()


@router.post("/images/process")
async def process_image_endpoint(
    payload: ImageResizeRequest,
    _user_id: str = Depends(get_current_user_id),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    storage: SupabaseStorage = Depends(get_storage),
) -> Dict[str, Any]:
    """Resize an uploaded image for a menu, category or item."""

    return await process_entity_image(payload.model_dump(by_alias=True), repository, storage)
