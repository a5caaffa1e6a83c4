"""
Общее ядро (Shared Kernel) стойки регистрации.

Содержит перечисления, исключения и утилиты, используемые всеми слоями.
"""

from .domain import (
    # Исключения
    DomainException,
    InvalidDateRange,
    MissingGuestName,
    NoRoomSelected,
    NoRoomsAvailable,
    # Перечисления
    PaymentMethod,
    PriceNotCalculated,
    RoomNotFound,
    RoomStatus,
    RoomType,
    # Утилиты
    now,
    today,
)

__all__ = [
    # Перечисления
    "RoomType",
    "RoomStatus",
    "PaymentMethod",
    # Исключения
    "DomainException",
    "InvalidDateRange",
    "MissingGuestName",
    "PriceNotCalculated",
    "NoRoomsAvailable",
    "NoRoomSelected",
    "RoomNotFound",
    # Утилиты
    "now",
    "today",
]
