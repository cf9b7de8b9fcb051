"""
Core модуль: построение запросов, нормализация ответов, сессия и хранилище
"""

from .exceptions import ApiError, ClientError, EndpointNotAvailableError, StorageError
from .logging_config import ColoredFormatter, JSONFormatter, setup_logging
from .request_builder import RequestDescriptor, Transport, auth_headers, build_url, json_request, send, upload_request
from .responses import handle_response, parse_json, parse_model
from .storage import FileStorage, MemoryStorage, SessionStorage

__all__ = [
    # Exceptions
    "ApiError",
    "ClientError",
    "EndpointNotAvailableError",
    "StorageError",
    # Logging
    "ColoredFormatter",
    "JSONFormatter",
    "setup_logging",
    # Requests
    "RequestDescriptor",
    "Transport",
    "auth_headers",
    "build_url",
    "json_request",
    "send",
    "upload_request",
    # Responses
    "handle_response",
    "parse_json",
    "parse_model",
    # Storage
    "FileStorage",
    "MemoryStorage",
    "SessionStorage",
]
