"""Общие фикстуры для тестов pikks_client."""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

import pytest
import requests

from pikks_client.config import get_settings
from pikks_client.core.storage import MemoryStorage

BASE_URL = "http://api.test"


@dataclass
class RecordedCall:
    """Запрос, переданный в транспорт"""

    method: str
    url: str
    kwargs: Dict[str, Any] = field(default_factory=dict)

    @property
    def headers(self) -> Dict[str, str]:
        return self.kwargs.get("headers", {})


class FakeTransport:
    """Транспорт, который записывает запросы и отдаёт заготовленные ответы"""

    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self.responses: List[Union[requests.Response, Exception]] = []

    def queue(self, response: Union[requests.Response, Exception]) -> None:
        self.responses.append(response)

    def __call__(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append(RecordedCall(method, url, kwargs))
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


ResponseFactory = Callable[..., requests.Response]


@pytest.fixture(autouse=True)
def api_settings(monkeypatch: pytest.MonkeyPatch):
    """Изолированные настройки с тестовым базовым URL (с завершающим слэшем)"""
    monkeypatch.setenv("PIKKS_API_BASE_URL", f"{BASE_URL}/")
    monkeypatch.setenv("PIKKS_API_TIMEOUT", "5")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def make_response() -> ResponseFactory:
    """Фабрика requests.Response с заданным статусом и телом"""

    def factory(
        status: int = 200,
        body: Optional[Any] = None,
        raw: Optional[bytes] = None,
        reason: Optional[str] = None,
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response.reason = reason
        response.encoding = "utf-8"
        if raw is not None:
            response._content = raw
        elif body is not None:
            response._content = json.dumps(body).encode("utf-8")
        else:
            response._content = b""
        return response

    return factory


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


class FixedClock:
    """Управляемые часы в миллисекундах"""

    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(1_700_000_000_000)


@pytest.fixture
def tokens_payload() -> Dict[str, Any]:
    return {
        "access_token": "access-123",
        "refresh_token": "refresh-456",
        "token_type": "Bearer",
        "expires_in": 3600,
    }


@pytest.fixture
def post_payload() -> Dict[str, Any]:
    return {
        "id": "post_1",
        "title": "Sunset",
        "owner_id": "user_1",
        "created_at": "2024-05-01T10:00:00Z",
        "visibility": "public",
        "tags": ["sky", "sea"],
        "description": "Evening at the pier",
        "file_url": "http://cdn.test/files/f1",
    }
