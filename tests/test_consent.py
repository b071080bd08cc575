from __future__ import annotations

import pytest

from adapters.consent_storage import JsonFileStorage, MemoryStorage
from core.domain.models import ConsentLevel
from core.interfaces.storage import KeyValueStorage
from core.services.consent import STORAGE_KEY, ConsentStore, CookieConsentController


class BrokenStorage:
    def get_item(self, key: str) -> str | None:
        raise OSError("storage disabled")

    def set_item(self, key: str, value: str) -> None:
        raise OSError("storage disabled")


def test_backends_satisfy_protocol(tmp_path):
    assert isinstance(MemoryStorage(), KeyValueStorage)
    assert isinstance(JsonFileStorage(tmp_path / "consent.json"), KeyValueStorage)


def test_no_decision_yet():
    store = ConsentStore(MemoryStorage())
    assert store.get() is None
    assert CookieConsentController(store).banner_visible


def test_last_write_wins():
    storage = MemoryStorage()
    store = ConsentStore(storage)
    store.set(ConsentLevel.ALL)
    store.set("necessary")
    assert store.get() is ConsentLevel.NECESSARY
    assert storage.get_item(STORAGE_KEY) == "necessary"


def test_unknown_stored_value_reads_as_no_decision():
    store = ConsentStore(MemoryStorage({STORAGE_KEY: "maybe"}))
    assert store.get() is None


def test_set_rejects_unknown_level():
    with pytest.raises(ValueError):
        ConsentStore(MemoryStorage()).set("everything")


@pytest.mark.parametrize(
    ("action", "expected"),
    [("accept", ConsentLevel.ALL), ("reject", ConsentLevel.NECESSARY), ("close", None)],
)
def test_banner_actions(action, expected):
    controller = CookieConsentController(ConsentStore(MemoryStorage()))
    controller.handle_action(action)
    assert controller.consent is expected
    assert not controller.banner_visible


def test_existing_decision_hides_banner():
    store = ConsentStore(MemoryStorage({STORAGE_KEY: "all"}))
    assert not CookieConsentController(store).banner_visible


def test_unavailable_storage_is_ignored():
    store = ConsentStore(BrokenStorage())
    store.set(ConsentLevel.ALL)
    assert store.get() is None
    assert CookieConsentController(store).banner_visible


def test_json_file_storage_roundtrip(tmp_path):
    path = tmp_path / "nested" / "consent.json"
    ConsentStore(JsonFileStorage(path)).set(ConsentLevel.ALL)
    assert ConsentStore(JsonFileStorage(path)).get() is ConsentLevel.ALL


def test_json_file_storage_corrupt_file_reads_empty(tmp_path):
    path = tmp_path / "consent.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.get_item(STORAGE_KEY) is None
    storage.set_item(STORAGE_KEY, "necessary")
    assert storage.get_item(STORAGE_KEY) == "necessary"
