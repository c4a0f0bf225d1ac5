from fastapi import Response

from menu_publisher.services.settings_store import (
    ALLERGIES_VISIBLE_KEY,
    LANGUAGE_KEY,
    CookieKeyValueStore,
    MemoryKeyValueStore,
    ViewerSettings,
)


def test_defaults_when_nothing_is_stored():
    settings = ViewerSettings.load(MemoryKeyValueStore())

    assert settings.language == "en"
    assert settings.allergies_visible is True


def test_settings_round_trip_through_the_store():
    store = MemoryKeyValueStore()
    settings = ViewerSettings.load(store)
    settings.set_language("DE")
    settings.toggle_allergies()
    settings.save(store)

    reloaded = ViewerSettings.load(store)

    assert reloaded.language == "de"
    assert reloaded.allergies_visible is False
    assert store.values == {LANGUAGE_KEY: "de", ALLERGIES_VISIBLE_KEY: "false"}


def test_unsupported_language_falls_back_to_default():
    settings = ViewerSettings()

    assert settings.set_language("nl") == "en"
    assert settings.language == "en"


def test_unsupported_stored_language_is_ignored():
    settings = ViewerSettings.load(MemoryKeyValueStore({LANGUAGE_KEY: "xx"}))

    assert settings.language == "en"


def test_cookie_store_writes_only_on_apply():
    store = CookieKeyValueStore({LANGUAGE_KEY: "es"})
    store.set(ALLERGIES_VISIBLE_KEY, "false")
    response = Response()

    assert store.get(LANGUAGE_KEY) == "es"
    assert store.get(ALLERGIES_VISIBLE_KEY) == "false"
    assert "set-cookie" not in response.headers

    store.apply(response)

    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{ALLERGIES_VISIBLE_KEY}=false")
    assert "SameSite=lax" in cookie
