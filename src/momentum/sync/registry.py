# SPDX-License-Identifier: MIT

import asyncio
from typing import Any, TypeVar

from momentum.sync.field import SyncedField
from momentum.sync.store import StateStore

T = TypeVar("T")


class DuplicateFieldError(Exception):
    """Raised when a second field is created for a key that is already owned."""

    pass


class FieldRegistry:
    """Owns the synced fields of one session, at most one per store key."""

    def __init__(self, store: StateStore) -> None:
        self.store = store
        self._fields: dict[str, SyncedField[Any]] = {}

    def field(self, key: str, initial: T) -> SyncedField[T]:
        if key in self._fields:
            raise DuplicateFieldError(f"A field for '{key}' already exists")
        field = SyncedField.create(key, initial, self.store)
        self._fields[key] = field
        return field

    def get(self, key: str) -> SyncedField[Any]:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def keys(self) -> list[str]:
        return list(self._fields)

    async def wait_loaded(self) -> None:
        await asyncio.gather(*(field.wait_loaded() for field in self._fields.values()))

    async def drain(self) -> None:
        while any(field.pending for field in self._fields.values()):
            for field in list(self._fields.values()):
                await field.drain()

    async def close(self) -> None:
        await self.drain()
        await self.store.close()
