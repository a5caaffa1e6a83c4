"""
Доменная модель стойки регистрации: номера, счетчики и расчет стоимости.
"""

from .counters import DailyCounter
from .pricing import PriceQuote, PriceTable, StayDetails, calculate_price, count_nights
from .room import Room

__all__ = [
    "Room",
    "DailyCounter",
    "PriceTable",
    "StayDetails",
    "PriceQuote",
    "calculate_price",
    "count_nights",
]
