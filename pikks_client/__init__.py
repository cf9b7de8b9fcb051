"""Клиент API медиа-сервиса: операции API и хранилище сессии."""

from pikks_client.api_client import (
    HttpTransport,
    create_comment,
    create_post,
    delete_comment,
    delete_post,
    get_comments,
    get_health,
    get_post,
    get_posts,
    get_user_info,
    login,
    logout,
    refresh_token,
    register,
    replace_post_media,
    update_post_metadata,
)
from pikks_client.config import Settings, get_settings
from pikks_client.core.exceptions import ApiError, ClientError, EndpointNotAvailableError, StorageError
from pikks_client.core.session_store import SessionStore, UserStore
from pikks_client.core.storage import FileStorage, MemoryStorage, SessionStorage

__version__ = "0.1.0"

__all__ = [
    # API
    "HttpTransport",
    "create_comment",
    "create_post",
    "delete_comment",
    "delete_post",
    "get_comments",
    "get_health",
    "get_post",
    "get_posts",
    "get_user_info",
    "login",
    "logout",
    "refresh_token",
    "register",
    "replace_post_media",
    "update_post_metadata",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ApiError",
    "ClientError",
    "EndpointNotAvailableError",
    "StorageError",
    # Session
    "SessionStore",
    "UserStore",
    "FileStorage",
    "MemoryStorage",
    "SessionStorage",
]
