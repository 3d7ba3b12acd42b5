# SPDX-License-Identifier: MIT

import logging
import tempfile
from pathlib import Path
from typing import Any, Optional, Protocol

import httpx
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

logger = logging.getLogger(__name__)

STATE_ENDPOINT = "/api/state"


class StoreError(Exception):
    """Raised when the state store cannot be read or written."""

    pass


class StateStore(Protocol):
    """Key/value document store addressed by independent keys."""

    async def fetch_snapshot(self) -> dict[str, Any]: ...

    async def put(self, key: str, value: Any) -> None: ...

    async def close(self) -> None: ...


class HttpStateStore:
    """
    Remote store reached over HTTP.

    `GET /api/state` returns every key with its last written value and
    `POST /api/state` with `{"key": ..., "value": ...}` creates or
    overwrites one key.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def url(self) -> str:
        return f"{self.base_url}{STATE_ENDPOINT}"

    async def fetch_snapshot(self) -> dict[str, Any]:
        try:
            response = await self._client.get(
                self.url, headers={"Cache-Control": "no-store"}
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise StoreError(f"Could not read state from {self.url}: {e}") from e

        if not isinstance(data, dict):
            raise StoreError(f"Unexpected state snapshot from {self.url}")
        return data

    async def put(self, key: str, value: Any) -> None:
        try:
            response = await self._client.post(
                self.url, json={"key": key, "value": value}
            )
            response.raise_for_status()
        except (httpx.HTTPError, TypeError, ValueError) as e:
            raise StoreError(f"Could not write {key} to {self.url}: {e}") from e

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class LocalStateStore:
    """The same key/value contract kept in a single YAML document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __load_data(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        data = load(self.path.read_text(), Loader=Loader)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected state document in {self.path}")
        return data

    async def fetch_snapshot(self) -> dict[str, Any]:
        try:
            return self.__load_data()
        except (OSError, YAMLError) as e:
            raise StoreError(f"Could not read state from {self.path}: {e}") from e

    def __write_data(self, data: dict[str, Any]) -> None:
        text = dump(data, Dumper=Dumper)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Swapped in whole; a failed write leaves the previous document
        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, prefix=f".{self.path.name}.", delete=False
        ) as temp_file:
            temp_path = Path(temp_file.name)
        try:
            temp_path.write_text(text)
            temp_path.replace(self.path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    async def put(self, key: str, value: Any) -> None:
        try:
            data = self.__load_data()
            data[key] = value
            self.__write_data(data)
        except (OSError, YAMLError) as e:
            raise StoreError(f"Could not write {key} to {self.path}: {e}") from e
        logger.debug("Wrote %s to %s", key, self.path)

    async def close(self) -> None:
        pass
