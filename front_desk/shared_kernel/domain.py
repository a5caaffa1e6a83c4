"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional


# Общие перечисления
class RoomType(str, Enum):
    """Типы номеров в отеле."""

    AC = "ac"
    NON_AC = "nonac"


class RoomStatus(str, Enum):
    """Статусы номеров."""

    AVAILABLE = "available"
    BOOKED = "booked"


class PaymentMethod(str, Enum):
    """Способы оплаты."""

    CASH = "cash"
    ONLINE = "online"


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок.

    Текст исключения предназначен для показа пользователю.
    """

    default_message = "Операция не может быть выполнена."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class InvalidDateRange(DomainException):
    """Дата выезда не позже даты заезда."""

    default_message = "Дата выезда должна быть позже даты заезда."


class MissingGuestName(DomainException):
    """Не указано имя гостя."""

    default_message = "Укажите имя гостя."


class PriceNotCalculated(DomainException):
    """Бронирование подтверждается без предварительного расчета стоимости."""

    default_message = "Рассчитайте стоимость перед подтверждением бронирования."


class NoRoomsAvailable(DomainException):
    """Все номера заняты."""

    default_message = "Все номера в данный момент заняты."


class NoRoomSelected(DomainException):
    """Не выбран номер для выезда."""

    default_message = "Выберите номер для выезда."


class RoomNotFound(DomainException):
    """Номер не найден (или не занят, если речь о выезде)."""

    default_message = "Номер не найден."

    def __init__(self, room_number: Optional[int] = None, message: Optional[str] = None):
        if message is None and room_number is not None:
            message = f"Номер {room_number} не найден."
        super().__init__(message)
        self.room_number = room_number


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now()


def today() -> date:
    """Возвращает текущую дату."""
    return date.today()
