"""Key-value storage contract (browser localStorage semantics)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Backends may raise `OSError` when unavailable; callers decide what to do."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...
