"""
Хранилище сессии авторизации и текущего пользователя.

SessionStore - единственный владелец активной сессии. Постоянное
хранилище служит источником при старте и зеркалом записи, чтения идут
из памяти. Подписчики уведомляются синхронно, в порядке подписки и
только после того, как новое состояние записано в хранилище.
"""

import logging
import time
from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from pikks_client.api_client import HttpTransport, logout as api_logout
from pikks_client.constants import AUTH_STATE_STORAGE_KEY
from pikks_client.core.exceptions import StorageError
from pikks_client.core.request_builder import Transport
from pikks_client.core.storage import SessionStorage
from pikks_client.schemas.auth import AuthState, AuthTokens, UserInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")
Observer = Callable[[T], None]
Clock = Callable[[], int]


def now_ms() -> int:
    """Текущее время в миллисекундах epoch"""
    return int(time.time() * 1000)


class Observable(Generic[T]):
    """Значение с подпиской на изменения"""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Подписаться на изменения.

        Args:
            observer: Вызывается с новым значением после каждого изменения;
                исключение подписчика логируется и не мешает остальным

        Returns:
            Функция отписки
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _publish(self, value: T) -> None:
        self._value = value
        for observer in list(self._observers):
            try:
                observer(value)
            except Exception as e:
                logger.error(f"[SESSION] Observer {observer!r} failed: {e}", exc_info=True)


class SessionStore(Observable[Optional[AuthState]]):
    """Авторитетное хранилище текущей сессии с сохранением между запусками"""

    def __init__(
        self,
        storage: SessionStorage,
        clock: Optional[Clock] = None,
        storage_key: str = AUTH_STATE_STORAGE_KEY,
    ) -> None:
        """
        Args:
            storage: Постоянное хранилище
            clock: Источник времени в миллисекундах (по умолчанию системные часы)
            storage_key: Ключ записи сессии в хранилище
        """
        self.storage = storage
        self.clock = clock or now_ms
        self.storage_key = storage_key
        super().__init__(self._read_from_storage())

    def _read_from_storage(self) -> Optional[AuthState]:
        """Прочитать сохранённую сессию; повреждённая запись считается отсутствующей"""
        try:
            raw = self.storage.get_item(self.storage_key)
        except StorageError as e:
            logger.warning(f"[SESSION] Failed to read auth state from storage: {e}")
            return None

        if not raw:
            return None

        try:
            state = AuthState.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"[SESSION] Failed to parse auth state from storage: {e.error_count()} errors")
            return None

        logger.info("[SESSION] Restored auth state from storage")
        return state

    def current_session(self) -> Optional[AuthState]:
        """Текущая сессия из памяти"""
        return self._value

    def get_access_token(self) -> Optional[str]:
        """Токен доступа текущей сессии, если она есть"""
        return self._value.access_token if self._value else None

    def set_session(self, tokens: AuthTokens) -> AuthState:
        """
        Установить новую сессию (после login или refresh).

        Args:
            tokens: Токены от сервера

        Returns:
            Сохранённое состояние сессии

        Raises:
            StorageError: Не удалось сохранить сессию; состояние в памяти не меняется
        """
        state = AuthState(
            **tokens.model_dump(include=set(AuthTokens.model_fields)),
            expires_at=self.clock() + tokens.expires_in * 1000,
        )
        self.storage.set_item(self.storage_key, state.model_dump_json())
        logger.info(f"[SESSION] Session stored, expires_at={state.expires_at}")
        self._publish(state)
        return state

    def clear(self) -> None:
        """Удалить сессию из памяти и хранилища"""
        try:
            self.storage.remove_item(self.storage_key)
        except StorageError as e:
            logger.error(f"[SESSION] Failed to remove auth state from storage: {e}", exc_info=True)
        logger.info("[SESSION] Session cleared")
        self._publish(None)

    def is_expired(self) -> bool:
        """True, если сессии нет или время истечения наступило"""
        if self._value is None:
            return True
        return self.clock() >= self._value.expires_at

    def logout(self, transport: Optional[Transport] = None) -> None:
        """
        Выход: уведомить сервер (best-effort) и очистить локальную сессию.

        Ошибка удалённого вызова не мешает локальной очистке. Без активной
        сессии удалённый вызов не выполняется.

        Args:
            transport: Транспорт для запроса (по умолчанию HttpTransport из настроек)
        """
        current = self._value
        if current is not None:
            try:
                api_logout(transport or HttpTransport(), current.access_token)
            except Exception as e:
                logger.warning(f"[SESSION] Logout request failed: {e}")
        self.clear()


class UserStore(Observable[Optional[UserInfo]]):
    """Информация о текущем пользователе для UI"""

    def __init__(self) -> None:
        super().__init__(None)

    def current_user(self) -> Optional[UserInfo]:
        return self._value

    def set_user(self, user: UserInfo) -> None:
        self._publish(user)

    def clear(self) -> None:
        self._publish(None)
