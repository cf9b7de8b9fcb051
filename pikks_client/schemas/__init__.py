"""
Schemas модуль с Pydantic моделями
"""

from .auth import AuthState, AuthTokens, LoginRequest, RefreshTokenRequest, RegisterRequest, UserInfo
from .posts import (
    Comment,
    CommentListResponse,
    CreateCommentRequest,
    CreatePostRequest,
    FileUpload,
    ListCommentsParams,
    ListPostsParams,
    PaginatedResponse,
    Post,
    PostListResponse,
    PostMetadataPatch,
    PostSort,
    PostSummary,
    PostVisibility,
    RawUpload,
    UploadPayload,
)
from .responses import ErrorResponse, HealthResponse

__all__ = [
    # auth
    "AuthState",
    "AuthTokens",
    "LoginRequest",
    "RefreshTokenRequest",
    "RegisterRequest",
    "UserInfo",
    # posts
    "Comment",
    "CommentListResponse",
    "CreateCommentRequest",
    "CreatePostRequest",
    "FileUpload",
    "ListCommentsParams",
    "ListPostsParams",
    "PaginatedResponse",
    "Post",
    "PostListResponse",
    "PostMetadataPatch",
    "PostSort",
    "PostSummary",
    "PostVisibility",
    "RawUpload",
    "UploadPayload",
    # responses
    "ErrorResponse",
    "HealthResponse",
]
