"""Machine translation of menu entities into the supported languages."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from menu_publisher.config.openai_client import get_openai_client
from menu_publisher.config.settings import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, TRANSLATION_MODEL
from menu_publisher.services.menu_repository import (
    COLLECTION_BY_KIND,
    RepositoryError,
    SupabaseMenuRepository,
)

logger = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Typed failure of a translate operation; `code` drives the HTTP status."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class TranslatableKind:
    """Which fields of a record are sent for translation and where results are stored."""

    collection: str
    scalar_fields: Tuple[str, ...]
    # (source array field, stored translation field)
    list_fields: Tuple[Tuple[str, str], ...]


TRANSLATABLE_KINDS: Dict[str, TranslatableKind] = {
    "item": TranslatableKind(
        collection=COLLECTION_BY_KIND["item"],
        scalar_fields=("item_name", "item_description"),
        list_fields=(
            ("options", "translated_options"),
            ("extras", "translated_extras"),
            ("addons", "translated_addons"),
        ),
    ),
    "category": TranslatableKind(
        collection=COLLECTION_BY_KIND["category"],
        scalar_fields=("cat_name", "cat_description", "header", "footer"),
        list_fields=(("extras", "translated_extras"), ("addons", "translated_addons")),
    ),
    "menu": TranslatableKind(
        collection=COLLECTION_BY_KIND["menu"],
        scalar_fields=("menu_name", "menu_description"),
        list_fields=(),
    ),
}


class OpenAITextTranslator:
    """Translate batches of short menu texts with a single chat completion."""

    def __init__(self, client: Any = None, model: str = TRANSLATION_MODEL):
        self._client = client
        self.model = model

    def _request(self, texts: List[str], source_language: str, target_language: str) -> str:
        client = self._client or get_openai_client()
        completion = client.chat.completions.create(
            model=self.model,
            temperature=0,
            response_format={"type": "json_object"},
            messages=[
                {
                    "role": "system",
                    "content": (
                        "You translate restaurant menu texts. "
                        "Reply ONLY with JSON of the form {\"translations\": [str]} holding exactly one "
                        "translation per input text, in the same order. Keep dish names that are "
                        "proper nouns unchanged."
                    ),
                },
                {
                    "role": "user",
                    "content": (
                        f"Translate from '{source_language}' to '{target_language}':\n"
                        + json.dumps(texts, ensure_ascii=False)
                    ),
                },
            ],
        )
        return completion.choices[0].message.content or ""

    async def translate(self, texts: Sequence[str], source_language: str, target_language: str) -> List[str]:
        raw = await asyncio.to_thread(self._request, list(texts), source_language, target_language)
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Translation response is not JSON: %s", raw[:280])
            raise TranslationError("internal", "Translation service returned invalid JSON") from exc

        translations = payload.get("translations") if isinstance(payload, dict) else None
        if not isinstance(translations, list) or len(translations) != len(texts):
            logger.warning("Translation response has the wrong shape: %s", raw[:280])
            raise TranslationError("internal", "Translation service returned an unexpected payload")
        return [str(value or "") for value in translations]


def _entry_text(entry: Any) -> str:
    if isinstance(entry, dict):
        return str(entry.get("option") or entry.get("item") or entry.get("label") or "")
    return str(entry or "")


def _collect_texts(record: Dict[str, Any], kind: TranslatableKind) -> List[str]:
    texts = [str(record.get(name) or "") for name in kind.scalar_fields]
    for source, _ in kind.list_fields:
        texts.extend(_entry_text(entry) for entry in record.get(source) or [])
    return texts


def _assemble(record: Dict[str, Any], kind: TranslatableKind, results: List[str]) -> Dict[str, Any]:
    position = iter(results)
    translation: Dict[str, Any] = {name: next(position) for name in kind.scalar_fields}
    for source, target in kind.list_fields:
        translation[target] = [next(position) for _ in record.get(source) or []]
    return translation


def _normalize_stored(stored: Dict[str, Any], kind: TranslatableKind) -> Dict[str, Any]:
    translation: Dict[str, Any] = {name: stored.get(name) or "" for name in kind.scalar_fields}
    for _, target in kind.list_fields:
        translation[target] = list(stored.get(target) or [])
    return translation


def validate_language(target_language: Optional[str]) -> str:
    if not target_language:
        raise TranslationError("invalid-argument", "targetLanguage is required")
    language = target_language.strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        raise TranslationError("invalid-argument", f"Unsupported language: {target_language}")
    return language


async def translate_entity(
    kind_name: str,
    entity_id: Optional[str],
    target_language: Optional[str],
    repository: SupabaseMenuRepository,
    translator: OpenAITextTranslator,
) -> Tuple[Dict[str, Any], bool]:
    """Translate one record; returns (translation, already_existed).

    A stored translation for the language is returned unchanged without
    calling the translation API.
    """

    kind = TRANSLATABLE_KINDS.get(kind_name)
    if kind is None:
        raise TranslationError("invalid-argument", f"Unknown entity kind: {kind_name}")
    if not entity_id:
        raise TranslationError("invalid-argument", f"{kind_name} id and targetLanguage required")
    language = validate_language(target_language)

    logger.info("Auto-translating %s %s to %s", kind_name, entity_id, language)
    try:
        record = await repository.get_record(kind.collection, entity_id)
        if record is None:
            raise TranslationError("not-found", f"{kind_name.capitalize()} {entity_id} not found")

        existing = await repository.get_translation(kind.collection, entity_id, language)
        if existing is not None:
            logger.info("Translation already exists for %s in %s", entity_id, language)
            return _normalize_stored(existing, kind), True

        texts = _collect_texts(record, kind)
        indices = [index for index, text in enumerate(texts) if text.strip()]
        if not indices:
            raise TranslationError("invalid-argument", "No translatable text found")

        logger.info("Translating %d texts from %s to %s", len(indices), DEFAULT_LANGUAGE, language)
        translated = await translator.translate(
            [texts[index].strip() for index in indices], DEFAULT_LANGUAGE, language
        )
        results = [""] * len(texts)
        for index, value in zip(indices, translated):
            results[index] = value

        translation = _assemble(record, kind, results)
        await repository.save_translation(kind.collection, entity_id, language, translation)
    except TranslationError:
        raise
    except RepositoryError as exc:
        logger.error("Auto-translate storage error for %s %s: %s", kind_name, entity_id, exc)
        raise TranslationError("internal", "Auto-translation failed") from exc
    except Exception as exc:
        logger.exception("Auto-translate error for %s %s", kind_name, entity_id)
        raise TranslationError("internal", "Auto-translation failed") from exc

    logger.info("Successfully translated %s %s to %s", kind_name, entity_id, language)
    return translation, False


__all__ = [
    "OpenAITextTranslator",
    "TRANSLATABLE_KINDS",
    "TranslationError",
    "translate_entity",
    "validate_language",
]
