"""
Общие фикстуры для тестов стойки регистрации.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, List, Tuple

import pytest

from front_desk.application.counters import DailyCounterTracker
from front_desk.application.inventory import RoomInventoryManager
from front_desk.application.services import (
    BookingOrchestrator,
    BookingRequest,
    HotelStatusService,
)
from front_desk.domain import PriceTable
from front_desk.infrastructure import InMemoryKeyValueStore
from front_desk.shared_kernel import PaymentMethod, RoomType

ROOM_NUMBERS = range(101, 121)


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


class FixedClock:
    """Часы с управляемой текущей датой."""

    def __init__(self, day: date):
        self.day = day

    def __call__(self) -> date:
        return self.day

    def advance(self, days: int = 1) -> None:
        self.day = self.day + timedelta(days=days)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(date(2026, 10, 19))


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def prices() -> PriceTable:
    return PriceTable(
        ac=Decimal("3000"),
        nonac=Decimal("2000"),
        bed=Decimal("500"),
        pillow=Decimal("50"),
        tax=Decimal("12"),
    )


@pytest.fixture
def inventory(store, logger) -> RoomInventoryManager:
    manager = RoomInventoryManager(store, ROOM_NUMBERS, logger=logger)
    manager.initialize()
    return manager


@pytest.fixture
def counters(store, clock, logger) -> DailyCounterTracker:
    tracker = DailyCounterTracker(store, clock=clock, logger=logger)
    tracker.ensure_today()
    return tracker


@pytest.fixture
def orchestrator(inventory, counters, prices, logger) -> BookingOrchestrator:
    return BookingOrchestrator(inventory, counters, prices, logger=logger)


@pytest.fixture
def status_service(inventory, counters) -> HotelStatusService:
    return HotelStatusService(inventory, counters)


@pytest.fixture
def booking_request() -> BookingRequest:
    """Двое суток в номере с кондиционером, кровать и две подушки."""
    return BookingRequest(
        guest_name="Иван Иванов",
        checkin=datetime(2026, 10, 19, 14, 0),
        checkout=datetime(2026, 10, 21, 12, 0),
        room_type=RoomType.AC,
        guests=2,
        beds=1,
        pillows=2,
        payment=PaymentMethod.ONLINE,
    )
