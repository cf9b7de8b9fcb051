"""
Построение запросов к API: URL, заголовки и согласование формата тела.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

import requests

from pikks_client.config import get_settings
from pikks_client.constants import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_OCTET_STREAM,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    TOKEN_TYPE_BEARER,
    UPLOAD_FIELD_FILE,
    UPLOAD_FIELD_FILENAME,
)
from pikks_client.schemas.posts import FileUpload, RawUpload, UploadPayload

logger = logging.getLogger(__name__)

# transport(method, url, headers=..., json=..., data=..., files=...) -> Response
Transport = Callable[..., requests.Response]


@dataclass
class RequestDescriptor:
    """Готовый к отправке запрос"""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Any] = None
    data: Optional[Any] = None
    files: Optional[List[Tuple[str, Tuple[str, bytes, str]]]] = None

    def transport_kwargs(self) -> Dict[str, Any]:
        """Аргументы для транспорта, без незаданных частей тела"""
        kwargs: Dict[str, Any] = {"headers": self.headers}
        for name in ("json", "data", "files"):
            value = getattr(self, name)
            if value is not None:
                kwargs[name] = value
        return kwargs


def _is_omitted(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _iter_pairs(params: Mapping[str, Any]) -> Iterator[Tuple[str, str]]:
    """
    Разворачивает параметры в пары ключ-значение.

    Пустые значения (None, "") пропускаются, последовательности дают по
    одной паре на элемент в исходном порядке.
    """
    for key, value in params.items():
        values = value if isinstance(value, (list, tuple)) else (value,)
        for item in values:
            if _is_omitted(item):
                continue
            yield key, _stringify(item)


def build_url(
    path: str,
    query: Optional[Mapping[str, Any]] = None,
    base_url: Optional[str] = None,
) -> str:
    """
    Построить абсолютный URL для пути API.

    Args:
        path: Путь относительно базового адреса API
        query: Параметры строки запроса (пустые значения не попадают в URL)
        base_url: Базовый адрес (по умолчанию из конфигурации)

    Returns:
        Абсолютный URL
    """
    base = (base_url if base_url is not None else get_settings().api_base_url).rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"

    url = f"{base}{path}"
    pairs = list(_iter_pairs(query or {}))
    if pairs:
        url = f"{url}?{urlencode(pairs)}"
    return url


def auth_headers(access_token: Optional[str]) -> Dict[str, str]:
    """Заголовок Authorization, только если токен передан"""
    if not access_token:
        return {}
    return {HEADER_AUTHORIZATION: f"{TOKEN_TYPE_BEARER} {access_token}"}


def json_request(
    method: str,
    path: str,
    payload: Optional[Any] = None,
    access_token: Optional[str] = None,
    query: Optional[Mapping[str, Any]] = None,
) -> RequestDescriptor:
    """Запрос с JSON телом (или без тела)"""
    headers = {HEADER_ACCEPT: CONTENT_TYPE_JSON}
    if payload is not None:
        headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
    headers.update(auth_headers(access_token))
    return RequestDescriptor(
        method=method,
        url=build_url(path, query),
        headers=headers,
        json=payload,
    )


def upload_request(
    method: str,
    path: str,
    fields: Mapping[str, Any],
    upload: UploadPayload,
    access_token: Optional[str] = None,
) -> RequestDescriptor:
    """
    Запрос с бинарными данными.

    FileUpload отправляется как multipart/form-data: каждое текстовое поле
    отдельной частью, повторяющиеся поля (теги) повторяются. RawUpload и
    отсутствие файла отправляются телом application/octet-stream, а поля
    уходят в строку запроса с теми же правилами повторения.

    Args:
        method: HTTP метод
        path: Путь эндпоинта
        fields: Текстовые поля (значения или списки значений)
        upload: Бинарные данные
        access_token: Токен доступа

    Returns:
        Готовый запрос
    """
    headers = {HEADER_ACCEPT: CONTENT_TYPE_JSON}
    headers.update(auth_headers(access_token))

    if isinstance(upload, FileUpload):
        form = list(_iter_pairs(fields))
        files = [(UPLOAD_FIELD_FILE, (upload.filename, upload.content, upload.content_type))]
        return RequestDescriptor(
            method=method,
            url=build_url(path),
            headers=headers,
            data=form,
            files=files,
        )

    query = dict(fields)
    content = b""
    if isinstance(upload, RawUpload):
        query[UPLOAD_FIELD_FILENAME] = upload.filename
        content = upload.content

    headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_OCTET_STREAM
    return RequestDescriptor(
        method=method,
        url=build_url(path, query),
        headers=headers,
        data=content,
    )


def send(transport: Transport, request: RequestDescriptor) -> requests.Response:
    """
    Выполнить запрос через переданный транспорт.

    Ошибки транспорта (сеть, таймауты) пробрасываются без изменений.
    """
    logger.debug(f"[REQUEST] {request.method} {request.url}")
    response = transport(request.method, request.url, **request.transport_kwargs())
    logger.debug(f"[RESPONSE] {request.method} {request.url} -> {response.status_code}")
    return response
