"""
Нормализация ответов API в типизированный результат или ApiError.
"""

import json
import logging
from typing import Any, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from pikks_client.constants import HTTP_MULTIPLE_CHOICES, HTTP_NO_CONTENT, HTTP_OK, MSG_INVALID_SERVER_RESPONSE
from pikks_client.core.exceptions import ApiError
from pikks_client.schemas.responses import ErrorResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_success(response: requests.Response) -> bool:
    return HTTP_OK <= response.status_code < HTTP_MULTIPLE_CHOICES


def parse_json(response: requests.Response) -> Any:
    """
    Разобрать тело ответа как JSON.

    Args:
        response: Ответ от сервера

    Returns:
        Разобранные данные; пустое тело даёт пустой словарь

    Raises:
        ApiError: Тело не читается или не является JSON
    """
    try:
        text = response.text
    except (requests.exceptions.RequestException, OSError) as e:
        logger.error(f"Failed to read response body: {e}")
        raise ApiError(response.status_code, MSG_INVALID_SERVER_RESPONSE) from e

    if not text:
        return {}

    try:
        return json.loads(text)
    except ValueError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        raise ApiError(response.status_code, MSG_INVALID_SERVER_RESPONSE) from e


def _fallback_message(response: requests.Response) -> str:
    return response.reason or f"HTTP {response.status_code}"


def handle_response(response: requests.Response) -> Any:
    """
    Обработка ответа от сервера.

    Args:
        response: Ответ от сервера

    Returns:
        JSON данные, пустой словарь для пустого тела или None для 204

    Raises:
        ApiError: Ответ с ошибкой или нарушение формата ответа
    """
    if is_success(response):
        if response.status_code == HTTP_NO_CONTENT:
            return None
        return parse_json(response)

    error_body: Optional[ErrorResponse] = None
    try:
        error_body = ErrorResponse.model_validate(parse_json(response))
    except (ApiError, ValidationError) as e:
        # Тело ошибки не разобрано, используем статус транспорта
        logger.debug(f"Unstructured error body for status {response.status_code}: {e}")

    message = error_body.message if error_body else _fallback_message(response)
    logger.warning(
        f"API request failed with status {response.status_code}: {message}",
        extra={"request_id": error_body.request_id if error_body else None},
    )
    raise ApiError(response.status_code, message, error_body)


def parse_model(response: requests.Response, model: Type[ModelT]) -> ModelT:
    """
    Нормализовать ответ и провалидировать его ожидаемой моделью.

    Несоответствие формы данных модели считается нарушением протокола.
    """
    data = handle_response(response)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Response does not match {model.__name__}: {e}")
        raise ApiError(response.status_code, MSG_INVALID_SERVER_RESPONSE) from e
