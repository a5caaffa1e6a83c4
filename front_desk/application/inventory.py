"""
Репозиторий номеров (Room Inventory Manager).

Единственный владелец записи с номерами в хранилище: читает коллекцию
целиком и целиком же записывает ее обратно после каждого изменения.
"""

import json
from datetime import datetime
from typing import Iterable, List, Optional

from front_desk.domain import Room
from front_desk.shared_kernel import PaymentMethod, RoomNotFound, RoomStatus, RoomType

from . import interfaces as ports

ROOMS_KEY = "rooms"


class RoomInventoryManager:
    """Управляет фиксированным набором номеров отеля."""

    def __init__(
        self,
        store: ports.IKeyValueStore,
        room_numbers: Iterable[int],
        logger: ports.ILogger,
    ):
        self._store = store
        self._room_numbers = list(room_numbers)
        self._logger = logger

    def _load(self) -> List[Room]:
        raw_data = self._store.get(ROOMS_KEY)
        if raw_data is None:
            return []
        return [Room.model_validate(item) for item in json.loads(raw_data)]

    def _save(self, rooms: List[Room]) -> None:
        data = [room.model_dump(mode="json", by_alias=True) for room in rooms]
        self._store.set(ROOMS_KEY, json.dumps(data, ensure_ascii=False))

    def _index_of(self, rooms: List[Room], room_number: int) -> int:
        for index, room in enumerate(rooms):
            if room.room_number == room_number:
                return index
        raise RoomNotFound(room_number)

    def initialize(self) -> bool:
        """Создает номера при первом запуске.

        Если коллекция уже есть в хранилище, ничего не делает, каким бы ни
        было ее содержимое. Возвращает True, если номера были созданы.
        """
        if self._store.get(ROOMS_KEY) is not None:
            self._logger.debug("Номера уже инициализированы")
            return False

        self._save([Room.vacant(number) for number in self._room_numbers])
        self._logger.info(
            "Номера инициализированы",
            total=len(self._room_numbers),
            first=self._room_numbers[0] if self._room_numbers else None,
        )
        return True

    def list_rooms(self) -> List[Room]:
        """Все номера в порядке создания (по возрастанию номера)."""
        return self._load()

    def list_booked(self) -> List[Room]:
        return [room for room in self._load() if room.status == RoomStatus.BOOKED]

    def count_total(self) -> int:
        return len(self._load())

    def count_available(self) -> int:
        return sum(1 for room in self._load() if room.is_available)

    def count_booked(self) -> int:
        return len(self.list_booked())

    def find_first_available(self) -> Optional[Room]:
        """Первый свободный номер в порядке списка или None."""
        return next((room for room in self._load() if room.is_available), None)

    def find_booked(self, room_number: int) -> Optional[Room]:
        """Номер с указанным числом, если он сейчас занят."""
        for room in self._load():
            if room.room_number == room_number and room.status == RoomStatus.BOOKED:
                return room
        return None

    def assign(
        self,
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
        """Заселяет гостя в номер.

        Доступность номера здесь не проверяется: вызывающий код должен
        передать номер, который только что был найден свободным. Занятый
        номер будет перезаписан.
        """
        rooms = self._load()
        index = self._index_of(rooms, room_number)

        room = Room.booked(
            room_number=room_number,
            guest_name=guest_name,
            checkin=checkin,
            checkout=checkout,
            room_type=room_type,
            guests=guests,
            beds=beds,
            pillows=pillows,
            payment=payment,
        )
        rooms[index] = room
        self._save(rooms)
        return room

    def release(self, room_number: int) -> Room:
        """Освобождает номер и возвращает его прежнюю запись."""
        rooms = self._load()
        index = self._index_of(rooms, room_number)

        previous = rooms[index]
        rooms[index] = Room.vacant(room_number)
        self._save(rooms)
        return previous
