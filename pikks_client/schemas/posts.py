"""
Pydantic модели публикаций, комментариев и пагинации
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pikks_client.constants import CONTENT_TYPE_OCTET_STREAM

T = TypeVar("T")


class PostVisibility(str, Enum):
    """Видимость публикации"""
    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class PostSort(str, Enum):
    """Порядок сортировки ленты"""
    CREATED_DESC = "created_desc"
    CREATED_ASC = "created_asc"
    POPULAR = "popular"
    TRENDING = "trending"


class PostSummary(BaseModel):
    """Краткая карточка публикации в ленте"""

    id: str
    title: str
    owner_id: str
    created_at: str
    updated_at: Optional[str] = None
    thumbnail_url: Optional[str] = None
    visibility: PostVisibility
    tags: List[str] = Field(default_factory=list)
    like_count: Optional[int] = None

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class Post(PostSummary):
    """Полная публикация с данными о файле"""

    description: Optional[str] = None
    file_id: Optional[str] = None
    file_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    content_type: Optional[str] = None
    size_bytes: Optional[int] = None
    comment_count: Optional[int] = None


class Comment(BaseModel):
    """Комментарий к публикации"""

    id: str
    post_id: str
    author_id: str
    text: str
    created_at: str

    model_config = ConfigDict(frozen=True)


class PaginatedResponse(BaseModel, Generic[T]):
    """
    Страница результатов списочного эндпоинта.

    Пустое тело ответа соответствует пустой первой странице.
    """

    items: List[T] = Field(default_factory=list)
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_page_size(self) -> "PaginatedResponse[T]":
        if self.per_page and len(self.items) > self.per_page:
            raise ValueError(
                f"page holds {len(self.items)} items, more than per_page={self.per_page}"
            )
        return self


PostListResponse = PaginatedResponse[PostSummary]
CommentListResponse = PaginatedResponse[Comment]


class ListPostsParams(BaseModel):
    """Параметры ленты публикаций"""

    page: Optional[int] = Field(default=None, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1)
    sort: Optional[PostSort] = None
    q: Optional[str] = None
    owner: Optional[str] = None
    visibility: Optional[PostVisibility] = None

    model_config = ConfigDict(use_enum_values=True)


class ListCommentsParams(BaseModel):
    """Параметры списка комментариев"""

    page: Optional[int] = Field(default=None, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1)


class CreateCommentRequest(BaseModel):
    """Тело запроса на создание комментария"""

    text: str


class CreatePostRequest(BaseModel):
    """Текстовые метаданные новой публикации"""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    visibility: Optional[PostVisibility] = None

    model_config = ConfigDict(use_enum_values=True)


class PostMetadataPatch(BaseModel):
    """Частичное обновление метаданных: отправляются только заданные поля"""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    visibility: Optional[PostVisibility] = None

    model_config = ConfigDict(use_enum_values=True)


@dataclass(frozen=True)
class FileUpload:
    """Файл, отправляемый как multipart/form-data"""

    content: bytes
    filename: str
    content_type: str = CONTENT_TYPE_OCTET_STREAM


@dataclass(frozen=True)
class RawUpload:
    """Сырые байты, отправляемые телом application/octet-stream"""

    content: bytes
    filename: Optional[str] = None


UploadPayload = Union[FileUpload, RawUpload, None]
