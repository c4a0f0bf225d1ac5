"""Public object storage for published snapshots and derived images."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from menu_publisher.config.settings import STORAGE_BUCKET
from menu_publisher.config.supabase_client import SUPABASE_PUBLIC_URL, get_supabase_client

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when an object cannot be written to or removed from storage."""


class SupabaseStorage:
    """Thin wrapper over a public Supabase storage bucket.

    Objects are public through the bucket policy, so their URL is derived
    from the path alone.
    """

    def __init__(self, client: Any = None, bucket: str = STORAGE_BUCKET, base_url: Optional[str] = None):
        self._supabase = client
        self.bucket = bucket
        self.base_url = (base_url or SUPABASE_PUBLIC_URL).rstrip("/")

    def _bucket(self) -> Any:
        client = self._supabase or get_supabase_client()
        if client is None:
            raise StorageError("Supabase client is not configured.")
        return client.storage.from_(self.bucket)

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/storage/v1/object/public/{self.bucket}/{path}"

    async def upload(
        self,
        path: str,
        data: bytes,
        *,
        content_type: str,
        cache_control: Optional[str] = None,
    ) -> str:
        """Write (or overwrite) an object and return its public URL."""

        file_options = {"content-type": content_type, "upsert": "true"}
        if cache_control:
            file_options["cache-control"] = cache_control

        def _request() -> None:
            self._bucket().upload(path=path, file=data, file_options=file_options)

        try:
            await asyncio.to_thread(_request)
        except StorageError:
            raise
        except Exception as exc:  # storage3 raises its own error hierarchy
            logger.error("Upload of %s failed: %s", path, exc)
            raise StorageError(f"Could not upload {path}") from exc
        logger.info("Uploaded %s (%d bytes)", path, len(data))
        return self.public_url(path)

    async def remove(self, path: str) -> bool:
        """Delete an object; returns False when there was nothing to delete."""

        def _request() -> Any:
            return self._bucket().remove([path])

        try:
            removed = await asyncio.to_thread(_request)
        except StorageError:
            raise
        except Exception as exc:  # storage3 raises its own error hierarchy
            logger.error("Removal of %s failed: %s", path, exc)
            raise StorageError(f"Could not remove {path}") from exc
        return bool(removed)


__all__ = ["StorageError", "SupabaseStorage"]
