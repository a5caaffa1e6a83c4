"""
Сервисы приложения стойки регистрации.

Координируют расчет стоимости, заселение, выезд и чтение состояния
отеля поверх репозиториев номеров и счетчиков.
"""

from datetime import date
from typing import List, Optional, Union

from pydantic import BaseModel

from front_desk.domain import PriceQuote, PriceTable, StayDetails, calculate_price
from front_desk.shared_kernel import (
    DomainException,
    MissingGuestName,
    NoRoomSelected,
    NoRoomsAvailable,
    PaymentMethod,
    PriceNotCalculated,
    RoomNotFound,
)

from . import interfaces as ports
from .counters import DailyCounterTracker
from .inventory import RoomInventoryManager
from .summary import render_price_line, render_summary

HOTEL_NAME = "Royal Hotel"

# Запрос на бронирование совпадает с параметрами проживания
BookingRequest = StayDetails


# DTO для исходящих данных


class PricePreview(BaseModel):
    """Результат предварительного расчета."""

    quote: PriceQuote
    price_line: str
    summary: str


class BookingConfirmation(BaseModel):
    """Результат подтвержденного бронирования."""

    room_number: int
    guest_name: str
    quote: PriceQuote
    payment_message: str
    summary: str
    message: str


class CheckoutResult(BaseModel):
    """Результат выезда гостя."""

    room_number: int
    guest_name: str
    message: str


class BookedRoomDTO(BaseModel):
    """Занятый номер для списка выезда."""

    room_number: int
    guest_name: str

    @property
    def label(self) -> str:
        return f"Номер {self.room_number} - {self.guest_name}"


class HotelStatusDTO(BaseModel):
    """Сводка по отелю на текущий день."""

    day: date
    total_rooms: int
    available_rooms: int
    booked_rooms: int
    check_ins_today: int
    check_outs_today: int


def payment_message(method: PaymentMethod) -> str:
    """Сообщение об оплате (оплата только имитируется)."""
    if method == PaymentMethod.ONLINE:
        return "Переход к онлайн-оплате (имитация). Оплата прошла успешно!"
    return "Оплатите проживание в отеле при заселении."


# Сервисы приложения


class BookingOrchestrator:
    """Сервис приложения для заселения и выезда гостей.

    Хранит только расчет текущей попытки бронирования; все остальное
    состояние находится в репозиториях.
    """

    def __init__(
        self,
        inventory: RoomInventoryManager,
        counters: DailyCounterTracker,
        prices: PriceTable,
        logger: ports.ILogger,
    ):
        """Инициализирует сервис."""
        self._inventory = inventory
        self._counters = counters
        self._prices = prices
        self._logger = logger
        self._quote: Optional[PriceQuote] = None

    @property
    def current_quote(self) -> Optional[PriceQuote]:
        return self._quote

    def reset(self) -> None:
        """Сбрасывает текущую попытку бронирования."""
        self._quote = None

    def calculate_price(self, request: BookingRequest) -> PricePreview:
        """Рассчитывает стоимость и запоминает расчет для подтверждения."""
        try:
            quote = calculate_price(request, self._prices)
        except DomainException as e:
            self._logger.warning("Расчет стоимости отклонен", error=str(e))
            raise

        self._quote = quote
        self._logger.debug("Стоимость рассчитана", total=quote.total, nights=quote.nights)
        currency = self._prices.currency
        return PricePreview(
            quote=quote,
            price_line=render_price_line(quote, currency),
            summary=render_summary(quote, currency),
        )

    def _validate_booking(self, request: BookingRequest) -> PriceQuote:
        quote = self._quote
        if quote is None or quote.stay.pricing_key() != request.pricing_key():
            raise PriceNotCalculated()
        if not request.guest_name.strip():
            raise MissingGuestName()
        return quote

    def confirm_booking(self, request: BookingRequest) -> BookingConfirmation:
        """Заселяет гостя в первый свободный номер.

        Все проверки выполняются до изменения данных, поэтому при ошибке
        состояние остается прежним.
        """
        try:
            quote = self._validate_booking(request)
            room = self._inventory.find_first_available()
            if room is None:
                raise NoRoomsAvailable()
        except DomainException as e:
            self._logger.warning("Бронирование отклонено", error=str(e))
            raise

        guest_name = request.guest_name.strip()
        paid = payment_message(request.payment)

        self._inventory.assign(
            room_number=room.room_number,
            guest_name=guest_name,
            checkin=request.checkin,
            checkout=request.checkout,
            room_type=request.room_type,
            guests=request.guests,
            beds=request.beds,
            pillows=request.pillows,
            payment=request.payment,
        )
        self._counters.increment_check_ins()
        self._quote = None

        self._logger.info(
            "Бронирование подтверждено",
            room_number=room.room_number,
            guest_name=guest_name,
            total=quote.total,
            payment=request.payment.value,
        )
        final_quote = quote.model_copy(update={"stay": request})
        return BookingConfirmation(
            room_number=room.room_number,
            guest_name=guest_name,
            quote=final_quote,
            payment_message=paid,
            summary=render_summary(
                final_quote, self._prices.currency, room_number=room.room_number
            ),
            message=(
                f"Бронирование подтверждено! Гостю {guest_name} назначен номер "
                f"{room.room_number}. Спасибо, что выбрали {HOTEL_NAME}."
            ),
        )

    @staticmethod
    def _parse_room_number(value: Union[int, str]) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        raise RoomNotFound(message=f"Номер {value} не найден.")

    def checkout_room(self, room_number: Union[int, str, None]) -> CheckoutResult:
        """Выселяет гостя из занятого номера.

        room_number может прийти строкой из списка выбора; пустое значение
        означает, что номер не выбран. Принимаются только целые числа
        и строки из цифр.
        """
        try:
            if room_number is None or not str(room_number).strip():
                raise NoRoomSelected()
            room_number = self._parse_room_number(room_number)
            room = self._inventory.find_booked(room_number)
            if room is None:
                raise RoomNotFound(room_number)
        except DomainException as e:
            self._logger.warning("Выезд отклонен", error=str(e))
            raise

        self._inventory.release(room_number)
        self._counters.increment_check_outs()

        self._logger.info(
            "Гость выехал", room_number=room_number, guest_name=room.guest_name
        )
        return CheckoutResult(
            room_number=room_number,
            guest_name=room.guest_name,
            message=f"Выезд из номера {room_number} оформлен.",
        )


class HotelStatusService:
    """Сервис чтения состояния отеля для отображения."""

    def __init__(self, inventory: RoomInventoryManager, counters: DailyCounterTracker):
        """Инициализирует сервис."""
        self._inventory = inventory
        self._counters = counters

    def get_status(self) -> HotelStatusDTO:
        """Количество номеров и счетчики текущего дня."""
        counter = self._counters.today()
        return HotelStatusDTO(
            day=self._counters.current_day(),
            total_rooms=self._inventory.count_total(),
            available_rooms=self._inventory.count_available(),
            booked_rooms=self._inventory.count_booked(),
            check_ins_today=counter.check_ins,
            check_outs_today=counter.check_outs,
        )

    def booked_rooms(self) -> List[BookedRoomDTO]:
        """Занятые номера для выбора при выезде."""
        return [
            BookedRoomDTO(room_number=room.room_number, guest_name=room.guest_name)
            for room in self._inventory.list_booked()
        ]
