"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


def _split_codes(raw: str) -> Tuple[str, ...]:
    return tuple(code.strip().lower() for code in raw.split(",") if code.strip())


DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en").strip().lower() or "en"

# Languages stored as translation records and exported with a snapshot.
SUPPORTED_LANGUAGES = _split_codes(os.getenv("SUPPORTED_LANGUAGES", "es,de,nl,fr,it,pt"))

# Languages offered by the public viewer's language selector.
VIEWER_LANGUAGES = _split_codes(os.getenv("VIEWER_LANGUAGES", "en,es,de"))

LANGUAGE_LABELS = {
    "en": "English",
    "es": "Español",
    "de": "Deutsch",
    "nl": "Nederlands",
    "fr": "Français",
    "it": "Italiano",
    "pt": "Português",
}

STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "menus-public")
MENU_CACHE_CONTROL = os.getenv("MENU_CACHE_CONTROL", "300")
MAX_IMAGE_BYTES = 10 * 1024 * 1024

# Snapshots are always fetched fresh; nothing reads this yet.
MENU_CACHE_TIMEOUT_SECONDS = 5 * 60

LISTING_FETCH_CONCURRENCY = int(os.getenv("LISTING_FETCH_CONCURRENCY", "4"))

TRANSLATION_MODEL = os.getenv("TRANSLATION_MODEL", "gpt-4.1-mini")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RESTAURANT_NAME = os.getenv("RESTAURANT_NAME", "Our Restaurant")
RESTAURANT_FACEBOOK_URL = os.getenv("RESTAURANT_FACEBOOK_URL", "")


__all__ = [
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "VIEWER_LANGUAGES",
    "LANGUAGE_LABELS",
    "STORAGE_BUCKET",
    "MENU_CACHE_CONTROL",
    "MAX_IMAGE_BYTES",
    "MENU_CACHE_TIMEOUT_SECONDS",
    "LISTING_FETCH_CONCURRENCY",
    "TRANSLATION_MODEL",
    "LOG_LEVEL",
    "RESTAURANT_NAME",
    "RESTAURANT_FACEBOOK_URL",
]
