"""
Реализации хранилища ключ-значение.

Значения хранятся как непрозрачные строки; сериализацией записей
занимаются репозитории прикладного слоя.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from front_desk.application import interfaces as ports


class InMemoryKeyValueStore(ports.IKeyValueStore):
    """Хранилище в памяти, живет пока жив процесс."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Копия всех записей хранилища."""
        return dict(self._data)


class JsonFileKeyValueStore(ports.IKeyValueStore):
    """Хранилище, сохраняющее все ключи в один JSON-файл."""

    def __init__(self, file_path: Union[str, Path]):
        """
        Инициализирует хранилище.

        Args:
            file_path: Путь к JSON-файлу с данными
        """
        self._file_path = Path(file_path)
        self._data: Dict[str, str] = {}
        self._load_data()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _load_data(self) -> None:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            self._data = {}
            return

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            self._data = {}
            return

        self._data = {str(key): str(value) for key, value in json.loads(raw_data).items()}

    def _save_data(self) -> None:
        """Сохраняет данные в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save_data()
