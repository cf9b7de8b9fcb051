"""
Pydantic модели служебных ответов API
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Структурированное тело ошибки сервера"""

    error: str = Field(description="Машинный код ошибки")
    message: str = Field(description="Человекочитаемое описание")
    request_id: Optional[str] = Field(default=None, description="Идентификатор запроса для поддержки")


class HealthResponse(BaseModel):
    """Ответ GET /health"""

    status: str
