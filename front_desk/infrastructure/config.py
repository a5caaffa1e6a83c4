"""
Настройки стойки регистрации.

Значения по умолчанию можно переопределить переменными окружения
FRONT_DESK_* (в том числе из файла .env).
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from front_desk.domain import PriceTable

ENV_PREFIX = "FRONT_DESK_"

# Переменная окружения -> поле таблицы тарифов
PRICE_ENV_FIELDS: Dict[str, str] = {
    "PRICE_AC": "ac",
    "PRICE_NONAC": "nonac",
    "PRICE_BED": "bed",
    "PRICE_PILLOW": "pillow",
    "TAX_PERCENT": "tax",
    "CURRENCY": "currency",
}


class FrontDeskSettings(BaseModel):
    """Настройки приложения."""

    model_config = ConfigDict(frozen=True)

    total_rooms: int = Field(20, gt=0)
    first_room_number: int = Field(101, gt=0)
    storage_path: Optional[Path] = None
    prices: PriceTable = Field(default_factory=PriceTable)

    @property
    def room_numbers(self) -> range:
        return range(self.first_room_number, self.first_room_number + self.total_rooms)


def _env(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings(dotenv_path: Optional[str] = None) -> FrontDeskSettings:
    """Загружает настройки из окружения, недостающие берутся по умолчанию."""
    load_dotenv(dotenv_path)

    prices = {
        field: _env(name)
        for name, field in PRICE_ENV_FIELDS.items()
        if _env(name) is not None
    }
    values = {
        "total_rooms": _env("TOTAL_ROOMS"),
        "first_room_number": _env("FIRST_ROOM_NUMBER"),
        "storage_path": _env("STORAGE_PATH"),
    }
    return FrontDeskSettings(
        prices=PriceTable(**prices),
        **{key: value for key, value in values.items() if value is not None},
    )
