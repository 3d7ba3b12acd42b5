# SPDX-License-Identifier: MIT

from typing import TypedDict


class JournalNote(TypedDict):
    id: int  # creation time in epoch milliseconds
    date: str  # YYYY-MM-DD
    title: str
    body: str
