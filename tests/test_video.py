# SPDX-License-Identifier: MIT

import unittest

import httpx

from momentum.service.video import (
    VideoSearchClient,
    VideoSearchError,
    format_duration,
)


class TestFormatDuration(unittest.TestCase):
    def test_minutes_and_seconds(self):
        self.assertEqual(format_duration("PT4M5S"), "4:05")
        self.assertEqual(format_duration("PT10M"), "10:00")
        self.assertEqual(format_duration("PT45S"), "0:45")

    def test_hours_pad_minutes(self):
        self.assertEqual(format_duration("PT1H2M3S"), "1:02:03")
        self.assertEqual(format_duration("PT1H"), "1:00:00")
        self.assertEqual(format_duration("PT2H5S"), "2:00:05")

    def test_zero_hours_are_omitted(self):
        self.assertEqual(format_duration("PT0H7M0S"), "7:00")

    def test_unrecognised_input(self):
        self.assertEqual(format_duration(""), "0:00")
        self.assertEqual(format_duration("P1D"), "0:00")


def _video(video_id: str, duration: str, views: str) -> dict:
    return {
        "id": video_id,
        "snippet": {
            "title": f"Video {video_id}",
            "channelTitle": "Calm Channel",
            "thumbnails": {"medium": {"url": f"https://img.test/{video_id}.jpg"}},
        },
        "statistics": {"viewCount": views},
        "contentDetails": {"duration": duration},
    }


class TestVideoSearchClient(unittest.IsolatedAsyncioTestCase):
    def make_client(self, handler) -> VideoSearchClient:
        self.http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return VideoSearchClient("test-key", client=self.http)

    async def asyncTearDown(self):
        await self.http.aclose()

    async def test_search_returns_formatted_items(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path.endswith("/search"):
                return httpx.Response(
                    200,
                    json={
                        "items": [{"id": {"videoId": "a1"}}, {"id": {"videoId": "b2"}}],
                        "nextPageToken": "NEXT",
                    },
                )
            return httpx.Response(
                200,
                json={"items": [_video("a1", "PT10M3S", "1200"), _video("b2", "PT1H1M", "x")]},
            )

        client = self.make_client(handler)
        page = await client.search("yoga", "beginner", "morning")

        search_params = requests[0].url.params
        self.assertEqual(search_params["q"], "yoga beginner morning")
        self.assertEqual(search_params["maxResults"], "6")
        self.assertEqual(search_params["safeSearch"], "strict")
        self.assertNotIn("pageToken", search_params)
        self.assertEqual(requests[1].url.params["id"], "a1,b2")

        self.assertEqual(page["next_page_token"], "NEXT")
        self.assertEqual(
            page["items"][0],
            {
                "id": "a1",
                "title": "Video a1",
                "channel": "Calm Channel",
                "thumbnail": "https://img.test/a1.jpg",
                "duration": "10:03",
                "views": 1200,
            },
        )
        self.assertEqual(page["items"][1]["duration"], "1:01:00")
        self.assertEqual(page["items"][1]["views"], 0)

    async def test_page_token_is_forwarded(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"items": []})

        client = self.make_client(handler)
        page = await client.search("dance", page_token="NEXT")
        self.assertEqual(requests[0].url.params["pageToken"], "NEXT")
        self.assertEqual(requests[0].url.params["q"], "dance")
        self.assertEqual(page, {"items": [], "next_page_token": None})
        self.assertEqual(len(requests), 1)

    async def test_api_error_message_is_raised(self):
        client = self.make_client(
            lambda request: httpx.Response(
                403, json={"error": {"message": "quotaExceeded"}}
            )
        )
        with self.assertRaises(VideoSearchError) as raised:
            await client.search("meditation")
        self.assertEqual(str(raised.exception), "quotaExceeded")

    async def test_incomplete_video_data_raises_search_error(self):
        video = _video("a1", "PT3M", "10")
        video["snippet"]["thumbnails"] = {"default": {"url": "https://img.test/a1.jpg"}}

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/search"):
                return httpx.Response(200, json={"items": [{"id": {"videoId": "a1"}}]})
            return httpx.Response(200, json={"items": [video]})

        client = self.make_client(handler)
        with self.assertRaises(VideoSearchError) as raised:
            await client.search("yoga")
        self.assertIn("Unexpected video data", str(raised.exception))


if __name__ == "__main__":
    unittest.main()
