# SPDX-License-Identifier: MIT

import logging
import re
from typing import Any, Optional

import httpx

from momentum.model.video import VideoItem, VideoPage

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"
PAGE_SIZE = 6

_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


class VideoSearchError(Exception):
    """Raised when the video search API rejects a request or cannot be reached."""

    pass


def format_duration(duration: str) -> str:
    """
    Turn an ISO-8601 duration such as "PT1H2M3S" into a clock display.

    "PT1H2M3S" -> "1:02:03", "PT4M5S" -> "4:05", "PT45S" -> "0:45".
    """
    match = _DURATION_PATTERN.match(duration or "")
    if match is None:
        return "0:00"
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return fallback


def _to_video_item(video: dict[str, Any]) -> VideoItem:
    snippet = video["snippet"]
    try:
        views = int(video.get("statistics", {}).get("viewCount", 0))
    except (TypeError, ValueError):
        views = 0
    return {
        "id": video["id"],
        "title": snippet["title"],
        "channel": snippet["channelTitle"],
        "thumbnail": snippet["thumbnails"]["medium"]["url"],
        "duration": format_duration(video["contentDetails"]["duration"]),
        "views": views,
    }


class VideoSearchClient:
    """Searches embeddable, safe-search videos for a routine."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def search(
        self,
        topic: str = "",
        level: str = "",
        query: str = "",
        page_token: Optional[str] = None,
    ) -> VideoPage:
        params = {
            "key": self.api_key,
            "q": f"{topic} {level} {query}".strip(),
            "part": "snippet",
            "maxResults": str(PAGE_SIZE),
            "type": "video",
            "videoEmbeddable": "true",
            "safeSearch": "strict",
        }
        if page_token:
            params["pageToken"] = page_token

        search_data = await self.__get(YOUTUBE_SEARCH_URL, params, "Error searching")
        ids = [
            item["id"]["videoId"]
            for item in search_data.get("items", [])
            if item.get("id", {}).get("videoId")
        ]
        if not ids:
            return {"items": [], "next_page_token": None}

        videos_data = await self.__get(
            YOUTUBE_VIDEOS_URL,
            {
                "key": self.api_key,
                "id": ",".join(ids),
                "part": "snippet,statistics,contentDetails",
            },
            "Error fetching videos",
        )
        try:
            items = [_to_video_item(video) for video in videos_data.get("items", [])]
        except (KeyError, TypeError) as e:
            raise VideoSearchError(f"Unexpected video data: {e!r}") from e
        return {
            "items": items,
            "next_page_token": search_data.get("nextPageToken"),
        }

    async def __get(
        self, url: str, params: dict[str, str], fallback: str
    ) -> dict[str, Any]:
        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise VideoSearchError(f"{fallback}: {e}") from e
        if response.is_error:
            raise VideoSearchError(_error_message(response, fallback))
        try:
            return response.json()
        except ValueError as e:
            raise VideoSearchError(f"{fallback}: {e}") from e

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
