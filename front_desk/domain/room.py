"""
Доменная модель номера.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from front_desk.shared_kernel import PaymentMethod, RoomStatus, RoomType


class Room(BaseModel):
    """Номер в отеле вместе с данными текущего гостя.

    Хранится в виде записи с ключами в camelCase (``roomNumber``,
    ``guestName`` и т.д.).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_number: int = Field(..., gt=0, frozen=True)
    status: RoomStatus = RoomStatus.AVAILABLE
    guest_name: str = ""
    checkin: Optional[datetime] = None
    checkout: Optional[datetime] = None
    room_type: Optional[RoomType] = None
    guests: int = Field(0, ge=0)
    beds: int = Field(0, ge=0)
    pillows: int = Field(0, ge=0)
    payment: Optional[PaymentMethod] = None

    @model_validator(mode="after")
    def check_guest_fields(self) -> "Room":
        if self.status == RoomStatus.BOOKED and not self.guest_name.strip():
            raise ValueError("Занятый номер должен содержать имя гостя")
        if self.status == RoomStatus.AVAILABLE and self.has_guest_data():
            raise ValueError("Свободный номер не может содержать данные гостя")
        return self

    def has_guest_data(self) -> bool:
        """Проверяет, заполнено ли хотя бы одно поле гостя."""
        return bool(
            self.guest_name
            or self.checkin
            or self.checkout
            or self.room_type
            or self.guests
            or self.beds
            or self.pillows
            or self.payment
        )

    @classmethod
    def vacant(cls, room_number: int) -> Room:
        """Создает свободный номер со сброшенными полями гостя."""
        return cls(room_number=room_number)

    @classmethod
    def booked(
        cls,
        room_number: int,
        guest_name: str,
        checkin: datetime,
        checkout: datetime,
        room_type: RoomType,
        guests: int,
        beds: int,
        pillows: int,
        payment: PaymentMethod,
    ) -> Room:
        """Создает запись занятого номера."""
        return cls(
            room_number=room_number,
            status=RoomStatus.BOOKED,
            guest_name=guest_name,
            checkin=checkin,
            checkout=checkout,
            room_type=room_type,
            guests=guests,
            beds=beds,
            pillows=pillows,
            payment=payment,
        )

    @property
    def is_available(self) -> bool:
        return self.status == RoomStatus.AVAILABLE
