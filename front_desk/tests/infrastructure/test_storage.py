"""
Тесты хранилищ ключ-значение и логгера.
"""

import json

from front_desk.application.inventory import RoomInventoryManager
from front_desk.infrastructure import (
    ConsoleLogger,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
)


class TestInMemoryKeyValueStore:
    def test_get_and_set(self):
        store = InMemoryKeyValueStore({"a": "1"})

        store.set("b", "2")

        assert store.get("a") == "1"
        assert store.get("b") == "2"
        assert store.get("missing") is None
        assert store.snapshot() == {"a": "1", "b": "2"}


class TestJsonFileKeyValueStore:
    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "state.json")
        assert store.get("rooms") is None

    def test_values_survive_reopen(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        JsonFileKeyValueStore(path).set("rooms", "[]")

        assert json.loads(path.read_text(encoding="utf-8")) == {"rooms": "[]"}
        assert JsonFileKeyValueStore(path).get("rooms") == "[]"

    def test_blank_file_is_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("  \n", encoding="utf-8")

        assert JsonFileKeyValueStore(path).get("rooms") is None

    def test_rooms_persist_between_runs(self, tmp_path, logger):
        path = tmp_path / "state.json"
        first = RoomInventoryManager(JsonFileKeyValueStore(path), range(1, 4), logger=logger)
        first.initialize()

        second = RoomInventoryManager(JsonFileKeyValueStore(path), range(1, 4), logger=logger)

        assert second.initialize() is False
        assert [room.room_number for room in second.list_rooms()] == [1, 2, 3]


class TestConsoleLogger:
    def test_info_with_context(self, capsys):
        ConsoleLogger().info("Гость выехал", room_number=101)

        out = capsys.readouterr().out
        assert "[INFO] Гость выехал" in out
        assert '"room_number": 101' in out

    def test_warning_goes_to_stderr(self, capsys):
        ConsoleLogger().warning("Выезд отклонен")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[WARNING] Выезд отклонен" in captured.err

    def test_debug_only_when_verbose(self, capsys):
        ConsoleLogger().debug("скрыто")
        ConsoleLogger(verbose=True).debug("видно")

        out = capsys.readouterr().out
        assert "скрыто" not in out
        assert "[DEBUG] видно" in out
