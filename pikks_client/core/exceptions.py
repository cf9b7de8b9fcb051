"""
Исключения клиента
"""

from typing import Any, Dict, Optional

from pikks_client.schemas.responses import ErrorResponse


class ClientError(Exception):
    """Базовое исключение клиента"""


class ApiError(ClientError):
    """
    Ошибка обращения к API с HTTP статусом.

    Единственный тип ошибки, которым завершается любой неуспешный ответ:
    как бизнес-ошибка сервера (с телом ErrorResponse), так и нарушение
    протокола (тело не разбирается, data отсутствует).
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        data: Optional[ErrorResponse] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.data = data
        super().__init__(self.message)

    @property
    def error_code(self) -> Optional[str]:
        """Машинный код ошибки из тела ответа"""
        return self.data.error if self.data else None

    @property
    def request_id(self) -> Optional[str]:
        """Идентификатор запроса для обращения в поддержку"""
        return self.data.request_id if self.data else None

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация исключения в словарь для логов"""
        return {
            "status": self.status_code,
            "message": self.message,
            "error": self.error_code,
            "request_id": self.request_id,
        }

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


class StorageError(ClientError):
    """Ошибки при работе с постоянным хранилищем сессии"""


class EndpointNotAvailableError(ClientError, NotImplementedError):
    """Возможность ещё не реализована на сервере"""
