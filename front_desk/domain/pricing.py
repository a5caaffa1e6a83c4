"""
Расчет стоимости проживания.

Чистые функции и значения без состояния: на вход параметры проживания
и таблица тарифов, на выход детализированный расчет.
"""

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from front_desk.shared_kernel import InvalidDateRange, PaymentMethod, RoomType

SECONDS_PER_NIGHT = 24 * 60 * 60


class PriceTable(BaseModel):
    """Таблица тарифов.

    Цены за ночь для типов номеров и дополнительной кровати,
    разовая цена подушки и ставка налога в процентах.
    """

    model_config = ConfigDict(frozen=True)

    ac: Decimal = Field(Decimal("3000"), ge=0)
    nonac: Decimal = Field(Decimal("2000"), ge=0)
    bed: Decimal = Field(Decimal("500"), ge=0)
    pillow: Decimal = Field(Decimal("50"), ge=0)
    tax: Decimal = Field(Decimal("12"), ge=0)
    currency: str = "₹"

    def rate_for(self, room_type: RoomType) -> Decimal:
        """Цена за ночь для типа номера."""
        if room_type == RoomType.AC:
            return self.ac
        return self.nonac


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


class StayDetails(BaseModel):
    """Параметры проживания, по которым считается стоимость."""

    model_config = ConfigDict(frozen=True)

    guest_name: str = ""
    checkin: datetime
    checkout: datetime
    room_type: RoomType
    guests: int = Field(1, ge=0)
    beds: int = Field(0, ge=0)
    pillows: int = Field(0, ge=0)
    payment: PaymentMethod = PaymentMethod.CASH

    @field_validator("checkin", "checkout", mode="before")
    @classmethod
    def date_to_midnight(cls, v):
        # Дата без времени означает полночь
        if isinstance(v, date) and not isinstance(v, datetime):
            return _as_datetime(v)
        return v

    @model_validator(mode="after")
    def same_timezone_awareness(self) -> "StayDetails":
        if (self.checkin.tzinfo is None) != (self.checkout.tzinfo is None):
            raise ValueError(
                "Даты заезда и выезда должны быть обе с часовым поясом или обе без него"
            )
        return self

    def pricing_key(self) -> tuple:
        """Поля, от которых зависит стоимость."""
        return (
            self.checkin,
            self.checkout,
            self.room_type,
            self.beds,
            self.pillows,
            self.payment,
        )


class PriceQuote(BaseModel):
    """Детализированный расчет стоимости.

    Суммы хранятся без округления, до двух знаков они округляются
    только при отображении.
    """

    model_config = ConfigDict(frozen=True)

    stay: StayDetails
    nights: int
    room_charge: Decimal
    bed_charge: Decimal
    pillow_charge: Decimal
    subtotal: Decimal
    tax_percent: Decimal
    tax: Decimal
    total: Decimal


def count_nights(checkin: Union[date, datetime], checkout: Union[date, datetime]) -> int:
    """Количество оплачиваемых ночей.

    Любая неполная ночь округляется вверх, минимум одна ночь.
    Выезд не позже заезда вызывает InvalidDateRange.
    """
    start = _as_datetime(checkin)
    end = _as_datetime(checkout)
    if (start.tzinfo is None) != (end.tzinfo is None):
        raise InvalidDateRange(
            "Даты заезда и выезда должны быть обе с часовым поясом или обе без него."
        )
    if end <= start:
        raise InvalidDateRange()
    seconds = (end - start).total_seconds()
    return max(1, math.ceil(seconds / SECONDS_PER_NIGHT))


def calculate_price(stay: StayDetails, prices: PriceTable) -> PriceQuote:
    """Рассчитывает стоимость проживания.

    Дополнительная кровать оплачивается за каждую ночь,
    подушка оплачивается один раз.
    """
    nights = count_nights(stay.checkin, stay.checkout)

    room_charge = prices.rate_for(stay.room_type) * nights
    bed_charge = prices.bed * stay.beds * nights
    pillow_charge = prices.pillow * stay.pillows
    subtotal = room_charge + bed_charge + pillow_charge
    tax = subtotal * prices.tax / 100

    return PriceQuote(
        stay=stay,
        nights=nights,
        room_charge=room_charge,
        bed_charge=bed_charge,
        pillow_charge=pillow_charge,
        subtotal=subtotal,
        tax_percent=prices.tax,
        tax=tax,
        total=subtotal + tax,
    )
