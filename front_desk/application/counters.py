"""
Репозиторий ежедневных счетчиков (Daily Counter Tracker).

Каждая операция сначала вызывает ensure_today: запись текущего дня
создается при первом обращении, в том числе при чтении.
"""

import json
from datetime import date
from typing import Callable, Dict

from front_desk.domain import DailyCounter
from front_desk.shared_kernel import today as current_date

from . import interfaces as ports

DAILY_DATA_KEY = "dailyData"


def day_key(day: date) -> str:
    """Ключ записи дня в хранилище."""
    return day.isoformat()


class DailyCounterTracker:
    """Ведет счетчики заездов и выездов по дням.

    Записи прошедших дней хранятся бессрочно.
    """

    def __init__(
        self,
        store: ports.IKeyValueStore,
        logger: ports.ILogger,
        clock: Callable[[], date] = current_date,
    ):
        self._store = store
        self._clock = clock
        self._logger = logger

    def _load(self) -> Dict[str, DailyCounter]:
        raw_data = self._store.get(DAILY_DATA_KEY)
        if raw_data is None:
            return {}
        return {
            key: DailyCounter.model_validate(value)
            for key, value in json.loads(raw_data).items()
        }

    def _save(self, counters: Dict[str, DailyCounter]) -> None:
        data = {
            key: counter.model_dump(mode="json", by_alias=True)
            for key, counter in counters.items()
        }
        self._store.set(DAILY_DATA_KEY, json.dumps(data))

    def current_day(self) -> date:
        return self._clock()

    def ensure_today(self) -> DailyCounter:
        """Создает нулевую запись текущего дня, если ее еще нет."""
        counters = self._load()
        key = day_key(self._clock())
        if key not in counters:
            counters[key] = DailyCounter()
            self._save(counters)
            self._logger.info("Создан счетчик дня", day=key)
        return counters[key]

    def _update_today(self, change: Callable[[DailyCounter], DailyCounter]) -> DailyCounter:
        self.ensure_today()
        counters = self._load()
        key = day_key(self._clock())
        counters[key] = change(counters[key])
        self._save(counters)
        return counters[key]

    def increment_check_ins(self) -> DailyCounter:
        return self._update_today(DailyCounter.with_check_in)

    def increment_check_outs(self) -> DailyCounter:
        return self._update_today(DailyCounter.with_check_out)

    def today(self) -> DailyCounter:
        """Счетчики текущего дня (запись создается, если ее нет)."""
        return self.ensure_today()

    def history(self) -> Dict[str, DailyCounter]:
        return self._load()
