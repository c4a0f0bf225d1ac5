"""Supabase connection settings shared by the menu tables, the public bucket and auth."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()

logger = logging.getLogger(__name__)

SUPABASE_URL = (os.getenv("SUPABASE_URL") or "").rstrip("/")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# Base of published object URLs; set it when the bucket is served through a CDN.
SUPABASE_PUBLIC_URL = (os.getenv("SUPABASE_PUBLIC_URL") or SUPABASE_URL).rstrip("/")


@lru_cache(maxsize=1)
def get_supabase_client() -> Optional[Client]:
    """Shared client, or None when the project is not configured."""

    api_key = SUPABASE_SERVICE_ROLE_KEY or SUPABASE_ANON_KEY
    if not SUPABASE_URL or not api_key:
        logger.warning("Supabase is not configured; set SUPABASE_URL and a project key")
        return None
    if not SUPABASE_SERVICE_ROLE_KEY:
        # Uploads and translation writes then depend on row-level policies for the anon role.
        logger.warning("SUPABASE_SERVICE_ROLE_KEY is not set, falling back to the anon key")
    return create_client(SUPABASE_URL, api_key)


__all__ = [
    "get_supabase_client",
    "SUPABASE_PUBLIC_URL",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
]
