"""Helpers for authenticating admin callers with Supabase access tokens."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException
from supabase_auth.errors import AuthApiError, AuthError

from menu_publisher.config.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)


def extract_bearer_token(header_value: Optional[str]) -> str:
    """Return the Bearer token from an Authorization header."""

    if not header_value:
        raise HTTPException(status_code=401, detail="Authentication required")
    parts = header_value.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Bearer token")
    token = parts[1].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing Bearer token")
    return token


def decode_access_token(access_token: str) -> Dict[str, Any]:
    """Return the decoded (unverified) JWT payload of an access token."""

    if not access_token:
        raise HTTPException(status_code=401, detail="Authentication required")

    try:
        payload_segment = access_token.split(".")[1]
        padding = "=" * (-len(payload_segment) % 4)
        decoded = base64.urlsafe_b64decode((payload_segment + padding).encode("ascii"))
        return json.loads(decoded.decode("utf-8"))
    except (IndexError, ValueError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid access token") from exc


async def verify_access_token(access_token: str) -> str:
    """Ask Supabase Auth to validate the token and return the user id."""

    claims = decode_access_token(access_token)
    client = get_supabase_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Authentication service is not configured")

    try:
        response = await asyncio.to_thread(client.auth.get_user, access_token)
    except (AuthError, AuthApiError) as exc:
        logger.info("Access token rejected for sub=%s: %s", claims.get("sub"), exc)
        raise HTTPException(status_code=401, detail="Invalid access token") from exc

    user = getattr(response, "user", None)
    if user is None or not getattr(user, "id", None):
        raise HTTPException(status_code=401, detail="Invalid access token")
    return str(user.id)


__all__ = ["decode_access_token", "extract_bearer_token", "verify_access_token"]
