from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from front_desk.application import interfaces as ports
from front_desk.application.counters import DailyCounterTracker
from front_desk.application.inventory import RoomInventoryManager
from front_desk.application.services import BookingOrchestrator, HotelStatusService
from front_desk.infrastructure import (
    ConsoleLogger,
    FrontDeskSettings,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    load_settings,
)
from front_desk.shared_kernel import today


@dataclass
class FrontDeskApp:
    """Настроенные компоненты приложения."""

    settings: FrontDeskSettings
    store: ports.IKeyValueStore
    inventory: RoomInventoryManager
    counters: DailyCounterTracker
    bookings: BookingOrchestrator
    status: HotelStatusService


def bootstrap_app(
    settings: Optional[FrontDeskSettings] = None,
    store: Optional[ports.IKeyValueStore] = None,
    clock: Callable[[], date] = today,
    logger: Optional[ports.ILogger] = None,
) -> FrontDeskApp:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or load_settings()
    logger = logger or ConsoleLogger()

    # 1. Хранилище: файл, если путь задан в настройках, иначе память
    if store is None:
        if settings.storage_path is not None:
            store = JsonFileKeyValueStore(settings.storage_path)
        else:
            store = InMemoryKeyValueStore()

    # 2. Репозитории и сервисы
    inventory = RoomInventoryManager(store, settings.room_numbers, logger=logger)
    counters = DailyCounterTracker(store, clock=clock, logger=logger)
    bookings = BookingOrchestrator(inventory, counters, settings.prices, logger=logger)
    status = HotelStatusService(inventory, counters)

    # 3. Первый запуск: номера и запись текущего дня
    inventory.initialize()
    counters.ensure_today()

    return FrontDeskApp(
        settings=settings,
        store=store,
        inventory=inventory,
        counters=counters,
        bookings=bookings,
        status=status,
    )
