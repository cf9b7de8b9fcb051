"""Постоянное хранилище состояния сессии (аналог localStorage)."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from pikks_client.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class SessionStorage(ABC):
    """Строковое key/value хранилище, переживающее перезапуск процесса"""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Прочитать значение или None, если ключа нет"""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Записать значение"""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Удалить значение; отсутствие ключа не является ошибкой"""


class MemoryStorage(SessionStorage):
    """Хранилище в памяти (тесты и серверный рендеринг)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(SessionStorage):
    """
    Файловое хранилище: один JSON файл на ключ.

    Запись атомарна: данные пишутся во временный файл и заменяют
    старый через os.replace.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        """
        Args:
            directory: Каталог для файлов хранилища (создаётся при первой записи)
        """
        self.directory = Path(directory).expanduser()

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    tmp.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug(f"[STORAGE] Saved '{key}' to {path}")

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e
        logger.debug(f"[STORAGE] Removed '{key}' from {self.directory}")
