# SPDX-License-Identifier: MIT

import asyncio
import logging
from copy import deepcopy
from typing import Any, Callable, Coroutine, Generic, TypeVar

from momentum.sync.store import StateStore, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SyncedField(Generic[T]):
    """
    One named slot of user state, held in memory and mirrored to a store.

    The in-memory value is authoritative for the session: assignments apply
    immediately, and once the initial read has finished every change is
    followed by exactly one fire-and-forget write of the whole value.
    Changes made before that read finishes are kept in memory but never
    written, so the default value cannot overwrite what the store holds.
    Store failures are logged and otherwise ignored.

    Use `SyncedField.create()` (or `FieldRegistry.field()`) from inside a
    running event loop; it schedules the initial read.
    """

    def __init__(self, key: str, initial: T, store: StateStore) -> None:
        self.key = key
        self.store = store
        self._value = initial
        self._loaded = False
        self._loaded_event = asyncio.Event()
        self._tasks: set[asyncio.Task[None]] = set()

    @classmethod
    def create(cls, key: str, initial: T, store: StateStore) -> "SyncedField[T]":
        field = cls(key, initial, store)
        field._schedule(field._load())
        return field

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value

        if not self._loaded:
            logger.debug("Not saving %s before it has loaded", self.key)
            return
        self._schedule(self._save(deepcopy(value)))

    def update(self, change: Callable[[T], T]) -> None:
        self.set(change(self._value))

    async def wait_loaded(self) -> None:
        await self._loaded_event.wait()

    async def drain(self) -> None:
        """Wait for the outstanding read and writes without cancelling them."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    async def _load(self) -> None:
        try:
            snapshot = await self.store.fetch_snapshot()
            if self.key in snapshot:
                self._value = snapshot[self.key]
                logger.debug("Loaded %s from store", self.key)
        except StoreError as e:
            logger.warning("Keeping in-memory %s: %s", self.key, e)
        finally:
            self._loaded = True
            self._loaded_event.set()

    async def _save(self, value: T) -> None:
        try:
            await self.store.put(self.key, value)
            logger.debug("Saved %s", self.key)
        except StoreError as e:
            logger.warning("Could not save %s: %s", self.key, e)

    def _schedule(self, operation: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(operation)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "Unexpected error syncing %s", self.key, exc_info=error
            )
