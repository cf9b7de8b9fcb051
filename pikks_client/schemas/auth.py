"""
Схемы для авторизации и работы с сессией
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Тело запроса POST /auth/login"""

    email: str
    password: str


class RegisterRequest(BaseModel):
    """Тело запроса POST /auth/register"""

    email: str
    password: str


class RefreshTokenRequest(BaseModel):
    """Тело запроса POST /auth/refresh"""

    refresh_token: str


class AuthTokens(BaseModel):
    """
    Набор токенов, выданный сервером при login/refresh.

    Attributes:
        access_token: Короткоживущий токен доступа
        refresh_token: Токен для обновления сессии
        token_type: Тип токена (обычно "Bearer")
        expires_in: Время жизни access_token в секундах
    """

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int = Field(ge=0)


class AuthState(AuthTokens):
    """Активная сессия: токены и абсолютный момент истечения (epoch, мс)"""

    expires_at: int


class UserInfo(BaseModel):
    """Информация о текущем пользователе"""

    id: str
    email: str
    name: Optional[str] = None
