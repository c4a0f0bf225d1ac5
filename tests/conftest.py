import copy
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from menu_publisher.services.menu_repository import RepositoryError, SupabaseMenuRepository
from menu_publisher.services.storage import StorageError, SupabaseStorage
from menu_publisher.services.translate_service import OpenAITextTranslator


class FakeMenuRepository(SupabaseMenuRepository):
    """In-memory stand-in for the Supabase tables."""

    def __init__(self, records: Optional[Dict[str, Dict[str, Dict[str, Any]]]] = None):
        super().__init__(client=object())
        self.records: Dict[str, Dict[str, Dict[str, Any]]] = copy.deepcopy(records or {})
        self.translations: Dict[Tuple[str, str, str], Dict[str, Any]] = {}
        self.published: List[Dict[str, Any]] = []
        self.updates: List[Tuple[str, str, Dict[str, Any]]] = []
        self.saved_translations: List[Tuple[str, str, str]] = []
        self.failing_translations: set = set()

    async def get_record(self, collection: str, record_id: str) -> Optional[Dict[str, Any]]:
        record = self.records.get(collection, {}).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def update_record(self, collection: str, record_id: str, values: Dict[str, Any]) -> None:
        self.updates.append((collection, record_id, values))
        self.records.setdefault(collection, {}).setdefault(record_id, {}).update(values)

    async def get_translations(self, collection: str, record_id: str) -> Dict[str, Dict[str, Any]]:
        if record_id in self.failing_translations:
            raise RepositoryError(f"Database request failed: translations {collection}/{record_id}")
        return {
            language: copy.deepcopy(data)
            for (stored_collection, stored_id, language), data in self.translations.items()
            if stored_collection == collection and stored_id == record_id
        }

    async def get_translation(self, collection: str, record_id: str, language: str) -> Optional[Dict[str, Any]]:
        data = self.translations.get((collection, record_id, language))
        return copy.deepcopy(data) if data is not None else None

    async def save_translation(self, collection: str, record_id: str, language: str, data: Dict[str, Any]) -> None:
        self.saved_translations.append((collection, record_id, language))
        self.translations[(collection, record_id, language)] = copy.deepcopy(data)

    async def get_published_menus(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.published)

    async def save_published_menus(self, entries: List[Dict[str, Any]]) -> None:
        self.published = copy.deepcopy(entries)


class FakeStorage(SupabaseStorage):
    def __init__(self, fail_on: Sequence[str] = ()):
        super().__init__(client=object(), bucket="menus-public", base_url="https://project.supabase.co")
        self.objects: Dict[str, Dict[str, Any]] = {}
        self.removed: List[str] = []
        self.fail_on = tuple(fail_on)

    async def upload(self, path: str, data: bytes, *, content_type: str, cache_control: Optional[str] = None) -> str:
        if any(marker in path for marker in self.fail_on):
            raise StorageError(f"Could not upload {path}")
        self.objects[path] = {"data": data, "content_type": content_type, "cache_control": cache_control}
        return self.public_url(path)

    async def remove(self, path: str) -> bool:
        self.removed.append(path)
        return self.objects.pop(path, None) is not None


class FakeTranslator(OpenAITextTranslator):
    def __init__(self):
        super().__init__(client=object(), model="test-model")
        self.calls: List[Tuple[List[str], str, str]] = []

    async def translate(self, texts: Sequence[str], source_language: str, target_language: str) -> List[str]:
        self.calls.append((list(texts), source_language, target_language))
        return [f"[{target_language}] {text}" for text in texts]


def sample_records() -> Dict[str, Dict[str, Dict[str, Any]]]:
    return {
        "menus": {
            "m1": {
                "id": "m1",
                "menu_name": "Lunch",
                "menu_description": "Served daily",
                "menu_type": "web",
                "categories": ["c2", "c1"],
                "menu_order": 2,
            }
        },
        "categories": {
            "c1": {
                "id": "c1",
                "cat_name": "Desserts",
                "cat_description": "",
                "header": "",
                "footer": "",
                "items": ["i3"],
                "extras": [],
                "addons": [],
            },
            "c2": {
                "id": "c2",
                "cat_name": "Starters",
                "cat_description": "Small plates",
                "header": "Daily",
                "footer": "Ask staff",
                "items": ["i2", "i1"],
                "extras": [{"item": "Bread", "price": 1.5}],
                "addons": [{"item": "Sauce"}],
            },
        },
        "menu_items": {
            "i1": {
                "id": "i1",
                "item_name": "Soup",
                "item_description": "Tomato soup",
                "item_price": "4.50",
                "menu_order": 1,
                "flags": {"active": True, "vegetarian": False},
                "allergies": ["celery"],
                "options": [],
                "extras": [],
                "addons": [],
                "created_at": "2024-01-01T00:00:00Z",
            },
            "i2": {
                "id": "i2",
                "item_name": "Salad",
                "item_description": "",
                "item_price": 0,
                "menu_order": 2,
                "flags": {"active": True, "vegan": True},
                "allergies": [],
                "options": [{"option": "Small", "price": 5}, {"option": "Large", "price": 8}],
                "extras": [],
                "addons": [],
            },
            "i3": {
                "id": "i3",
                "item_name": "Cake",
                "item_description": "Chocolate",
                "item_price": 6,
                "menu_order": 1,
                "flags": {"active": True},
                "allergies": ["eggs", "milk"],
                "options": [],
                "extras": [],
                "addons": [],
            },
        },
    }


@pytest.fixture
def repository() -> FakeMenuRepository:
    return FakeMenuRepository(sample_records())


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator()
