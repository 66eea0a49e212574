# tests/conftest.py
import json
import sys
from pathlib import Path
from typing import AsyncIterator, Callable, Dict, List, Tuple

import httpx
import pytest
import pytest_asyncio

# Додаємо src в sys.path, щоб працював імпорт "waifu_hub.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from waifu_hub.infrastructure.images.image_client import ImageClient  # noqa: E402

Responder = Callable[[httpx.Request], httpx.Response]


class FakeApi:
    """Фейковий транспорт: `host + path` → відповідь; усі запити записуються."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Responder] = {}
        self.requests: List[httpx.Request] = []

    def add(self, url: str, responder: Responder) -> None:
        parsed = httpx.URL(url)
        self.routes[(parsed.host, parsed.path)] = responder

    def add_json(self, url: str, payload: object, status_code: int = 200) -> None:
        body = json.dumps(payload).encode()
        self.add(url, lambda request: httpx.Response(status_code, content=body))

    def add_bytes(self, url: str, body: bytes, status_code: int = 200) -> None:
        self.add(url, lambda request: httpx.Response(status_code, content=body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.routes.get((request.url.host, request.url.path))
        if responder is None:
            return httpx.Response(404, content=b'{"error": "not found"}')
        return responder(request)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest_asyncio.fixture
async def image_client(fake_api: FakeApi) -> AsyncIterator[ImageClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    yield ImageClient(http)
    await http.aclose()
