"""Resize uploaded images into the small/large derivatives shown by the viewer."""

from __future__ import annotations

import asyncio
import base64
import binascii
import io
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from PIL import Image, UnidentifiedImageError

from menu_publisher.config.settings import MAX_IMAGE_BYTES
from menu_publisher.services.menu_repository import COLLECTION_BY_KIND, SupabaseMenuRepository
from menu_publisher.services.storage import SupabaseStorage

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = re.compile(r"^data:image/[a-z0-9.+-]+;base64,", re.IGNORECASE)
WEBP_QUALITY = 85


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int


TARGET_DIMENSIONS: Dict[str, Dict[str, Dimensions]] = {
    "1:1": {"small": Dimensions(100, 100), "large": Dimensions(500, 500)},
    "16:9": {"small": Dimensions(178, 100), "large": Dimensions(889, 500)},
}


class ImageProcessingError(ValueError):
    """Raised for invalid image input or an image Pillow cannot read."""


def derived_paths(collection: str, entity_id: str) -> Dict[str, str]:
    return {
        size: f"images/{collection}/{size}/{entity_id}.webp"
        for size in ("small", "large")
    }


def decode_image_data(image_data: str) -> bytes:
    """Decode base64 image data, with or without a data-URL prefix."""

    raw = DATA_URL_PREFIX.sub("", image_data.strip())
    try:
        data = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageProcessingError("Image data is not valid base64") from exc
    if not data:
        raise ImageProcessingError("Image data is required")
    if len(data) > MAX_IMAGE_BYTES:
        raise ImageProcessingError("File size too large (max 10MB)")
    return data


def center_crop_box(width: int, height: int, target: Dimensions) -> Tuple[int, int, int, int]:
    """Largest centred box with the target's aspect ratio."""

    target_ratio = target.width / target.height
    source_ratio = width / height
    crop_width, crop_height = width, height
    if source_ratio > target_ratio:
        crop_width = round(height * target_ratio)
    elif source_ratio < target_ratio:
        crop_height = round(width / target_ratio)
    left = round((width - crop_width) / 2)
    top = round((height - crop_height) / 2)
    return left, top, left + crop_width, top + crop_height


def resize_to_webp(data: bytes, target: Dimensions) -> bytes:
    try:
        with Image.open(io.BytesIO(data)) as source:
            image = source.convert("RGBA") if source.mode in ("P", "LA") else source.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageProcessingError("Invalid image data") from exc

    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGB")
    box = center_crop_box(image.width, image.height, target)
    logger.info(
        "Processing image: %dx%d -> crop %dx%d -> resize %dx%d",
        image.width,
        image.height,
        box[2] - box[0],
        box[3] - box[1],
        target.width,
        target.height,
    )
    resized = image.crop(box).resize((target.width, target.height), Image.Resampling.LANCZOS)
    output = io.BytesIO()
    resized.save(output, format="WEBP", quality=WEBP_QUALITY, method=6)
    return output.getvalue()


def _validate(payload: Dict[str, Any]) -> Tuple[str, str, str, str]:
    entity_id = payload.get("id")
    image_data = payload.get("imageData")
    aspect_ratio = payload.get("aspectRatio")
    kind = payload.get("kind") or "menu"
    if not entity_id:
        raise ImageProcessingError("ID is required")
    if not image_data:
        raise ImageProcessingError("Image data is required")
    if aspect_ratio not in TARGET_DIMENSIONS:
        raise ImageProcessingError("Aspect ratio must be '1:1' or '16:9'")
    if kind not in COLLECTION_BY_KIND:
        raise ImageProcessingError(f"Unknown record kind: {kind}")
    return str(entity_id), str(image_data), aspect_ratio, kind


async def _cleanup(paths: List[str], storage: SupabaseStorage) -> None:
    results = await asyncio.gather(*(storage.remove(path) for path in paths), return_exceptions=True)
    for path, result in zip(paths, results):
        if isinstance(result, Exception):
            logger.warning("Cleanup of %s failed: %s", path, result)


async def process_entity_image(
    payload: Dict[str, Any], repository: SupabaseMenuRepository, storage: SupabaseStorage
) -> Dict[str, Any]:
    """Resize, upload and attach an image; the result is always an envelope."""

    entity_id = str(payload.get("id") or "")
    # Paths whose upload was started; only these are removed on failure.
    attempted: List[str] = []
    try:
        entity_id, image_data, aspect_ratio, kind = _validate(payload)
        collection = COLLECTION_BY_KIND[kind]
        logger.info("Processing %s image: %s, aspect ratio: %s", kind, entity_id, aspect_ratio)

        if await repository.get_record(collection, entity_id) is None:
            raise ImageProcessingError(f"{kind.capitalize()} not found: {entity_id}")

        source = decode_image_data(image_data)
        paths = derived_paths(collection, entity_id)
        dimensions = TARGET_DIMENSIONS[aspect_ratio]
        urls: Dict[str, str] = {}
        processed_size = 0
        for size in ("small", "large"):
            encoded = await asyncio.to_thread(resize_to_webp, source, dimensions[size])
            processed_size += len(encoded)
            attempted.append(paths[size])
            urls[size] = await storage.upload(paths[size], encoded, content_type="image/webp")
            logger.info("%s image uploaded: %s", size.capitalize(), paths[size])

        await repository.update_record(
            collection,
            entity_id,
            {
                "image": {
                    "smallUrl": urls["small"],
                    "largeUrl": urls["large"],
                    "aspectRatio": aspect_ratio,
                    "uploadedAt": datetime.now(timezone.utc).isoformat(),
                }
            },
        )
    except Exception as exc:
        if isinstance(exc, ImageProcessingError):
            logger.warning("Rejected image for %s: %s", entity_id or "unknown", exc)
            message = str(exc)
        else:
            logger.exception("Error processing image for %s", entity_id or "unknown")
            message = "Image processing failed"
        if attempted:
            await _cleanup(attempted, storage)
        return {"success": False, "message": message, "id": entity_id or "unknown"}

    compression = (len(source) - processed_size) / len(source) * 100
    logger.info(
        "Image processing complete. Original: %.1fKB, Processed: %.1fKB, Compression: %.1f%%",
        len(source) / 1024,
        processed_size / 1024,
        compression,
    )
    return {
        "success": True,
        "message": "Image processed and uploaded successfully",
        "data": {
            "id": entity_id,
            "smallUrl": urls["small"],
            "largeUrl": urls["large"],
            "aspectRatio": aspect_ratio,
            "compression": f"{compression:.1f}% reduction",
            "originalSize": f"{len(source) / 1024:.1f}KB",
            "processedSize": f"{processed_size / 1024:.1f}KB",
        },
    }


__all__ = [
    "ImageProcessingError",
    "TARGET_DIMENSIONS",
    "center_crop_box",
    "decode_image_data",
    "derived_paths",
    "process_entity_image",
    "resize_to_webp",
]
