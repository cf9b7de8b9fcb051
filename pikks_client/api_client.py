"""Операции API: по одной функции на каждую возможность сервера."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from pikks_client.config import get_settings
from pikks_client.constants import (
    ENDPOINT_AUTH_LOGIN,
    ENDPOINT_AUTH_LOGOUT,
    ENDPOINT_AUTH_REFRESH,
    ENDPOINT_AUTH_REGISTER,
    ENDPOINT_HEALTH,
    ENDPOINT_POSTS,
    MSG_USER_INFO_UNAVAILABLE,
)
from pikks_client.core.exceptions import EndpointNotAvailableError
from pikks_client.core.request_builder import Transport, json_request, send, upload_request
from pikks_client.core.responses import handle_response, parse_model
from pikks_client.schemas.auth import (
    AuthTokens,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    UserInfo,
)
from pikks_client.schemas.posts import (
    Comment,
    CommentListResponse,
    CreateCommentRequest,
    CreatePostRequest,
    FileUpload,
    ListCommentsParams,
    ListPostsParams,
    Post,
    PostListResponse,
    PostMetadataPatch,
    UploadPayload,
)
from pikks_client.schemas.responses import HealthResponse

logger = logging.getLogger(__name__)


class HttpTransport:
    """Транспорт на базе requests для боевого окружения."""

    def __init__(
        self,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Args:
            timeout: Таймаут запросов в секундах (по умолчанию из конфигурации)
            session: Сессия requests для переиспользования соединений
        """
        self.timeout = timeout if timeout is not None else get_settings().api_timeout
        self.session = session

    def __call__(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        if self.session is not None:
            return self.session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)


def _post_path(post_id: str) -> str:
    return f"{ENDPOINT_POSTS}/{quote(str(post_id), safe='')}"


def _comments_path(post_id: str) -> str:
    return f"{_post_path(post_id)}/comments"


# ===== POSTS =====

def get_posts(
    transport: Transport,
    params: Optional[ListPostsParams] = None,
    access_token: Optional[str] = None,
) -> PostListResponse:
    """
    Получение ленты публикаций.

    Args:
        transport: Транспорт для выполнения запроса
        params: Пагинация, сортировка и фильтры
        access_token: Токен доступа (опционально)

    Returns:
        Страница публикаций; пустое тело ответа даёт пустую страницу
    """
    params = params or ListPostsParams()
    query = {
        "page": params.page,
        "per_page": params.per_page,
        "sort": params.sort,
        "q": params.q,
        "owner": params.owner,
        "visibility": params.visibility,
    }
    response = send(transport, json_request("GET", ENDPOINT_POSTS, access_token=access_token, query=query))
    return parse_model(response, PostListResponse)


def get_post(
    transport: Transport,
    post_id: str,
    access_token: Optional[str] = None,
) -> Post:
    """Получение публикации по идентификатору"""
    response = send(transport, json_request("GET", _post_path(post_id), access_token=access_token))
    return parse_model(response, Post)


def create_post(
    transport: Transport,
    payload: CreatePostRequest,
    upload: UploadPayload,
    access_token: str,
) -> Post:
    """
    Создание публикации с файлом.

    Args:
        transport: Транспорт для выполнения запроса
        payload: Заголовок, описание, теги и видимость
        upload: FileUpload (multipart) или RawUpload/None (octet-stream)
        access_token: Токен доступа

    Returns:
        Созданная публикация
    """
    fields = {
        "title": payload.title,
        "description": payload.description,
        "tags": payload.tags,
        "visibility": payload.visibility,
    }
    request = upload_request("POST", ENDPOINT_POSTS, fields, upload, access_token)
    return parse_model(send(transport, request), Post)


def update_post_metadata(
    transport: Transport,
    post_id: str,
    patch: PostMetadataPatch,
    access_token: str,
) -> Post:
    """Частичное обновление метаданных публикации"""
    request = json_request(
        "PATCH",
        _post_path(post_id),
        payload=patch.model_dump(exclude_none=True),
        access_token=access_token,
    )
    return parse_model(send(transport, request), Post)


def replace_post_media(
    transport: Transport,
    post_id: str,
    upload: FileUpload,
    access_token: str,
) -> Post:
    """Замена файла публикации"""
    request = upload_request("PUT", _post_path(post_id), {}, upload, access_token)
    return parse_model(send(transport, request), Post)


def delete_post(transport: Transport, post_id: str, access_token: str) -> None:
    response = send(transport, json_request("DELETE", _post_path(post_id), access_token=access_token))
    handle_response(response)


# ===== COMMENTS =====

def get_comments(
    transport: Transport,
    post_id: str,
    params: Optional[ListCommentsParams] = None,
    access_token: Optional[str] = None,
) -> CommentListResponse:
    """
    Получение комментариев к публикации.

    Args:
        transport: Транспорт для выполнения запроса
        post_id: ID публикации
        params: Пагинация
        access_token: Токен доступа (опционально)

    Returns:
        Страница комментариев
    """
    params = params or ListCommentsParams()
    query = {"page": params.page, "per_page": params.per_page}
    request = json_request("GET", _comments_path(post_id), access_token=access_token, query=query)
    return parse_model(send(transport, request), CommentListResponse)


def create_comment(
    transport: Transport,
    post_id: str,
    payload: CreateCommentRequest,
    access_token: str,
) -> Comment:
    """Создание комментария"""
    request = json_request(
        "POST",
        _comments_path(post_id),
        payload=payload.model_dump(),
        access_token=access_token,
    )
    return parse_model(send(transport, request), Comment)


def delete_comment(
    transport: Transport,
    post_id: str,
    comment_id: str,
    access_token: str,
) -> None:
    path = f"{_comments_path(post_id)}/{quote(str(comment_id), safe='')}"
    handle_response(send(transport, json_request("DELETE", path, access_token=access_token)))


# ===== AUTH =====

def register(transport: Transport, payload: RegisterRequest) -> None:
    """Регистрация нового пользователя"""
    request = json_request("POST", ENDPOINT_AUTH_REGISTER, payload=payload.model_dump())
    handle_response(send(transport, request))


def login(transport: Transport, credentials: LoginRequest) -> AuthTokens:
    """
    Вход пользователя.

    Args:
        transport: Транспорт для выполнения запроса
        credentials: Email и пароль

    Returns:
        Токены новой сессии
    """
    request = json_request("POST", ENDPOINT_AUTH_LOGIN, payload=credentials.model_dump())
    return parse_model(send(transport, request), AuthTokens)


def refresh_token(transport: Transport, refresh_token: str) -> AuthTokens:
    """Обновление токенов по refresh_token"""
    payload = RefreshTokenRequest(refresh_token=refresh_token).model_dump()
    request = json_request("POST", ENDPOINT_AUTH_REFRESH, payload=payload)
    return parse_model(send(transport, request), AuthTokens)


def logout(transport: Transport, access_token: Optional[str] = None) -> None:
    """Уведомление сервера о выходе"""
    request = json_request("POST", ENDPOINT_AUTH_LOGOUT, access_token=access_token)
    handle_response(send(transport, request))


def get_user_info(transport: Transport, access_token: str) -> UserInfo:
    """
    Информация о текущем пользователе.

    Raises:
        EndpointNotAvailableError: Эндпоинт на сервере ещё не реализован
    """
    # TODO: вызвать GET /auth/userinfo, когда эндпоинт появится на сервере
    logger.warning("User info requested, but the /auth/userinfo endpoint is not available")
    raise EndpointNotAvailableError(MSG_USER_INFO_UNAVAILABLE)


# ===== SERVICE =====

def get_health(transport: Transport) -> Dict[str, Any]:
    """Проверка состояния API"""
    response = send(transport, json_request("GET", ENDPOINT_HEALTH))
    return parse_model(response, HealthResponse).model_dump()
