import asyncio
import types

import pytest
from postgrest import APIError

from menu_publisher.services.menu_repository import RepositoryError, SupabaseMenuRepository
from menu_publisher.services.storage import StorageError, SupabaseStorage


class FakeQuery:
    def __init__(self, table, rows, calls, error=None):
        self.table = table
        self.rows = rows
        self.calls = calls
        self.error = error
        self.filters = {}

    def select(self, *_args):
        return self

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def limit(self, _count):
        return self

    def upsert(self, row, **kwargs):
        self.calls.append(("upsert", self.table, row, kwargs))
        return self

    def update(self, values):
        self.calls.append(("update", self.table, values))
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        data = [
            row for row in self.rows.get(self.table, [])
            if all(row.get(column) == value for column, value in self.filters.items())
        ]
        return types.SimpleNamespace(data=data)


class FakeSupabase:
    def __init__(self, rows=None, error=None):
        self.rows = rows or {}
        self.calls = []
        self.error = error

    def table(self, name):
        return FakeQuery(name, self.rows, self.calls, self.error)


def test_get_record_returns_none_when_absent():
    repository = SupabaseMenuRepository(FakeSupabase({"menus": [{"id": "m1", "menu_name": "Lunch"}]}))

    assert asyncio.run(repository.get_menu("m1"))["menu_name"] == "Lunch"
    assert asyncio.run(repository.get_menu("m2")) is None


def test_translations_are_limited_to_supported_languages():
    rows = {
        "translations": [
            {"collection": "menus", "record_id": "m1", "language": "es", "data": {"menu_name": "Almuerzo"}},
            {"collection": "menus", "record_id": "m1", "language": "ja", "data": {"menu_name": "Ranchi"}},
        ]
    }
    repository = SupabaseMenuRepository(FakeSupabase(rows))

    assert asyncio.run(repository.get_translations("menus", "m1")) == {"es": {"menu_name": "Almuerzo"}}


def test_save_translation_upserts_on_the_composite_key():
    client = FakeSupabase()
    repository = SupabaseMenuRepository(client)

    asyncio.run(repository.save_translation("menu_items", "i1", "de", {"item_name": "Suppe"}))

    operation, table, row, kwargs = client.calls[0]
    assert (operation, table) == ("upsert", "translations")
    assert row["data"] == {"item_name": "Suppe"}
    assert kwargs == {"on_conflict": "collection,record_id,language"}


def test_postgrest_errors_become_repository_errors():
    error = APIError({"message": "boom", "code": "500", "hint": None, "details": None})
    repository = SupabaseMenuRepository(FakeSupabase(error=error))

    with pytest.raises(RepositoryError):
        asyncio.run(repository.get_item("i1"))


class FakeBucket:
    def __init__(self, existing=(), fail=False):
        self.objects = set(existing)
        self.fail = fail
        self.uploads = []

    def upload(self, path, file, file_options):
        if self.fail:
            raise RuntimeError("storage down")
        self.uploads.append((path, file_options))
        self.objects.add(path)

    def remove(self, paths):
        removed = [{"name": path} for path in paths if path in self.objects]
        self.objects.difference_update(paths)
        return removed


def _storage(bucket):
    client = types.SimpleNamespace(storage=types.SimpleNamespace(from_=lambda _name: bucket))
    return SupabaseStorage(client=client, bucket="menus-public", base_url="https://project.supabase.co/")


def test_storage_upload_returns_public_url():
    bucket = FakeBucket()

    url = asyncio.run(
        _storage(bucket).upload("menus/menu-m1.json", b"{}", content_type="application/json", cache_control="300")
    )

    assert url == "https://project.supabase.co/storage/v1/object/public/menus-public/menus/menu-m1.json"
    assert bucket.uploads[0][1] == {"content-type": "application/json", "upsert": "true", "cache-control": "300"}


def test_storage_remove_reports_absence():
    storage = _storage(FakeBucket(existing={"menus/menu-m1.json"}))

    assert asyncio.run(storage.remove("menus/menu-m1.json")) is True
    assert asyncio.run(storage.remove("menus/menu-m1.json")) is False


def test_storage_failures_are_wrapped():
    with pytest.raises(StorageError):
        asyncio.run(_storage(FakeBucket(fail=True)).upload("a.json", b"{}", content_type="application/json"))
