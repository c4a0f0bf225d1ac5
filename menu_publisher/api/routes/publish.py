import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from menu_publisher.api.dependencies import get_current_user_id, get_menu_repository, get_storage
from menu_publisher.schemas import ExportRequest, ExportResponse
from menu_publisher.services.menu_repository import SupabaseMenuRepository
from menu_publisher.services.publish_service import handle_export_request
from menu_publisher.services.storage import SupabaseStorage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/menus/export", response_model=ExportResponse, response_model_exclude_none=True)
async def export_menu_endpoint(
    payload: ExportRequest,
    user_id: str = Depends(get_current_user_id),
    repository: SupabaseMenuRepository = Depends(get_menu_repository),
    storage: SupabaseStorage = Depends(get_storage),
) -> Dict[str, Any]:
    logger.info("Export requested by %s: %s %s", user_id, payload.action, payload.menu_id)
    return await handle_export_request(
        {"menuId": payload.menu_id, "action": payload.action},
        repository,
        storage,
    )
