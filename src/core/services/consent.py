"""Cookie-consent preference handling.

The preference is a single key in a key-value store: `all` or `necessary`,
absence meaning "no decision yet". Writes are last-write-wins. An
unavailable store never breaks the page: reads give "no decision" and
writes are dropped.
"""

from __future__ import annotations

import logging

from core.domain.models import ConsentLevel
from core.interfaces.storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "lares_cookie_consent"


class ConsentStore:
    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def get(self) -> ConsentLevel | None:
        try:
            raw = self._storage.get_item(self._key)
        except OSError as exc:
            logger.debug("Consent storage unreadable: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return ConsentLevel(raw)
        except ValueError:
            return None

    def set(self, level: ConsentLevel | str) -> None:
        value = ConsentLevel(level).value
        try:
            self._storage.set_item(self._key, value)
        except OSError as exc:
            logger.debug("Consent storage unavailable, preference not saved: %s", exc)


_ACTIONS = {
    "accept": ConsentLevel.ALL,
    "reject": ConsentLevel.NECESSARY,
}


class CookieConsentController:
    """Banner state machine: visible until the visitor picks an option."""

    def __init__(self, store: ConsentStore) -> None:
        self._store = store
        self.banner_visible = store.get() is None

    @property
    def consent(self) -> ConsentLevel | None:
        return self._store.get()

    def handle_action(self, action: str) -> None:
        """`accept` stores `all`, `reject` stores `necessary`; any action hides the banner."""

        level = _ACTIONS.get(action)
        if level is not None:
            self._store.set(level)
        self.banner_visible = False
