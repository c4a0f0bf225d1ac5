"""Viewer preferences persisted through a small key-value store."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

from fastapi import Response

from menu_publisher.config.settings import DEFAULT_LANGUAGE, VIEWER_LANGUAGES

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "menu-language"
ALLERGIES_VISIBLE_KEY = "menu_allergies_visible"
COOKIE_MAX_AGE = 365 * 24 * 3600


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class CookieKeyValueStore(KeyValueStore):
    """Reads request cookies; writes are queued until `apply` sets them on a response."""

    def __init__(self, cookies: Mapping[str, str]):
        self._cookies = dict(cookies)
        self._pending: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._pending.get(key, self._cookies.get(key))

    def set(self, key: str, value: str) -> None:
        self._pending[key] = value

    def apply(self, response: Response) -> None:
        for key, value in self._pending.items():
            response.set_cookie(key, value, max_age=COOKIE_MAX_AGE, samesite="lax")


@dataclass
class ViewerSettings:
    language: str = DEFAULT_LANGUAGE
    allergies_visible: bool = True
    supported_languages: Sequence[str] = VIEWER_LANGUAGES

    @classmethod
    def load(cls, store: KeyValueStore, supported_languages: Sequence[str] = VIEWER_LANGUAGES) -> "ViewerSettings":
        settings = cls(supported_languages=supported_languages)
        saved_language = store.get(LANGUAGE_KEY)
        if saved_language and saved_language in supported_languages:
            settings.language = saved_language
        stored_visibility = store.get(ALLERGIES_VISIBLE_KEY)
        if stored_visibility is not None:
            settings.allergies_visible = stored_visibility == "true"
        return settings

    def set_language(self, language_code: str) -> str:
        code = (language_code or "").strip().lower()
        if code not in self.supported_languages:
            logger.warning("Language code %r is not supported. Falling back to %s", language_code, DEFAULT_LANGUAGE)
            code = DEFAULT_LANGUAGE
        self.language = code
        return code

    def set_allergies_visible(self, visible: bool) -> None:
        self.allergies_visible = visible

    def toggle_allergies(self) -> bool:
        self.allergies_visible = not self.allergies_visible
        return self.allergies_visible

    def save(self, store: KeyValueStore) -> None:
        store.set(LANGUAGE_KEY, self.language)
        store.set(ALLERGIES_VISIBLE_KEY, "true" if self.allergies_visible else "false")


__all__ = [
    "ALLERGIES_VISIBLE_KEY",
    "CookieKeyValueStore",
    "KeyValueStore",
    "LANGUAGE_KEY",
    "MemoryKeyValueStore",
    "ViewerSettings",
]
