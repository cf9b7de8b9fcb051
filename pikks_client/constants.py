"""Константы клиента."""

from typing import Final

# ===== HTTP STATUS CODES =====
HTTP_OK: Final[int] = 200
HTTP_CREATED: Final[int] = 201
HTTP_NO_CONTENT: Final[int] = 204
HTTP_MULTIPLE_CHOICES: Final[int] = 300

# ===== CONTENT TYPES =====
CONTENT_TYPE_JSON: Final[str] = "application/json"
CONTENT_TYPE_OCTET_STREAM: Final[str] = "application/octet-stream"

# ===== HEADERS =====
HEADER_ACCEPT: Final[str] = "Accept"
HEADER_AUTHORIZATION: Final[str] = "Authorization"
HEADER_CONTENT_TYPE: Final[str] = "Content-Type"
TOKEN_TYPE_BEARER: Final[str] = "Bearer"

# ===== API ENDPOINTS =====
ENDPOINT_HEALTH: Final[str] = "/health"
ENDPOINT_AUTH_REGISTER: Final[str] = "/auth/register"
ENDPOINT_AUTH_LOGIN: Final[str] = "/auth/login"
ENDPOINT_AUTH_REFRESH: Final[str] = "/auth/refresh"
ENDPOINT_AUTH_LOGOUT: Final[str] = "/auth/logout"
ENDPOINT_POSTS: Final[str] = "/posts"

# ===== UPLOADS =====
UPLOAD_FIELD_FILE: Final[str] = "file"
UPLOAD_FIELD_FILENAME: Final[str] = "filename"

# ===== STORAGE KEYS =====
AUTH_STATE_STORAGE_KEY: Final[str] = "pikks_auth_state"

# ===== DEFAULTS =====
DEFAULT_API_BASE_URL: Final[str] = "http://localhost:8080"
DEFAULT_API_TIMEOUT: Final[int] = 60
DEFAULT_STORAGE_DIR: Final[str] = "~/.pikks"

# ===== MESSAGES =====
MSG_INVALID_SERVER_RESPONSE: Final[str] = "invalid server response"
MSG_USER_INFO_UNAVAILABLE: Final[str] = "The user info endpoint is not available yet"
