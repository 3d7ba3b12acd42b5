# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class VideoItem(TypedDict):
    id: str
    title: str
    channel: str
    thumbnail: str
    duration: str  # clock display, e.g. "12:05" or "1:02:03"
    views: int


class VideoPage(TypedDict):
    items: list[VideoItem]
    next_page_token: Optional[str]
