# SPDX-License-Identifier: MIT

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, TypeVar

from momentum import configuration
from momentum.configuration import Configuration
from momentum.service.board import HabitBoard
from momentum.sync.registry import FieldRegistry
from momentum.sync.store import HttpStateStore, LocalStateStore, StateStore

T = TypeVar("T")


def build_store(config: Configuration) -> StateStore:
    if config["store_url"]:
        return HttpStateStore(config["store_url"], timeout=config["request_timeout"])
    return LocalStateStore(configuration.DATA_STATE_PATH)


@asynccontextmanager
async def open_board(config: Configuration) -> AsyncIterator[HabitBoard]:
    """
    Yield a board whose fields have finished their initial read.

    Outstanding writes are waited for on the way out, so changes made inside
    the block reach the store before the event loop closes.
    """
    registry = FieldRegistry(build_store(config))
    try:
        board = HabitBoard(registry)
        await board.wait_loaded()
        yield board
    finally:
        await registry.close()


def run_with_board(config: Configuration, action: Callable[[HabitBoard], T]) -> T:
    async def run() -> T:
        async with open_board(config) as board:
            return action(board)

    return asyncio.run(run())
