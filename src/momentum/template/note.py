# SPDX-License-Identifier: MIT

import random

from momentum.model.note import JournalNote
from momentum.time import date_to_str, now_millis, today_local

JOURNAL_PROMPTS = [
    "3 things you're grateful for (be oddly specific).",
    "What made today 1% better than yesterday?",
    "If you had 2 minutes of courage tomorrow, what would you do?",
    "What tugged your energy today: add, delete, or delegate?",
]


def get_random_prompt() -> str:
    return random.choice(JOURNAL_PROMPTS)


def get_note_template() -> JournalNote:
    return {
        "id": now_millis(),
        "date": date_to_str(today_local()),
        "title": "",
        "body": "",
    }
