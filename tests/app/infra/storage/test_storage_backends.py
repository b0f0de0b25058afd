"""Testes dos backends de armazenamento durável.

Cobre MemoryStorage, FileStorage (arquivo JSON real em tmp_path) e
RedisStorage (cliente Redis mockado).
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisClientConnectionError

from app.infra.storage import DEFAULT_KEY_PREFIX, FileStorage, MemoryStorage, RedisStorage
from utils.errors import RedisConnectionError, StorageUnavailableError


class TestMemoryStorage:
    def test_get_set_remove_roundtrip(self) -> None:
        storage = MemoryStorage()
        assert storage.get_item("theme") is None

        storage.set_item("theme", "dark")
        assert storage.get_item("theme") == "dark"
        assert storage.keys() == ["theme"]

        assert storage.remove_item("theme") is True
        assert storage.remove_item("theme") is False
        assert storage.snapshot() == {}

    def test_initial_content_is_copied(self) -> None:
        initial = {"sidebarCollapsed": "true"}
        storage = MemoryStorage(initial)
        initial["sidebarCollapsed"] = "false"
        assert storage.get_item("sidebarCollapsed") == "true"


class TestFileStorage:
    def test_survives_new_instance(self, tmp_path) -> None:
        path = tmp_path / "nested" / "storage.json"
        FileStorage(path).set_item("theme", "dark")

        reopened = FileStorage(path)
        assert reopened.get_item("theme") == "dark"
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
        assert not path.with_suffix(".json.tmp").exists()

    def test_remove_item(self, tmp_path) -> None:
        storage = FileStorage(tmp_path / "storage.json")
        storage.set_item("user", "{}")
        storage.set_item("theme", "light")

        assert storage.remove_item("user") is True
        assert storage.remove_item("user") is False
        assert storage.keys() == ["theme"]

    def test_missing_file_reads_as_empty(self, tmp_path) -> None:
        storage = FileStorage(tmp_path / "absent.json")
        assert storage.get_item("user") is None
        assert storage.keys() == []

    def test_unreadable_file_is_treated_as_empty(self, tmp_path, caplog) -> None:
        path = tmp_path / "storage.json"
        path.write_text("{nao é json", encoding="utf-8")
        storage = FileStorage(path)

        with caplog.at_level("WARNING"):
            assert storage.get_item("theme") is None

        assert any(getattr(r, "fallback_used", False) for r in caplog.records)

        storage.set_item("theme", "dark")
        assert storage.get_item("theme") == "dark"

    def test_non_object_json_is_treated_as_empty(self, tmp_path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert FileStorage(path).keys() == []

    def test_write_failure_raises_storage_unavailable(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("arquivo, não diretório", encoding="utf-8")
        storage = FileStorage(blocker / "storage.json")

        with pytest.raises(StorageUnavailableError):
            storage.set_item("theme", "dark")


class TestRedisStorage:
    def test_keys_are_namespaced_and_values_decoded(self) -> None:
        client = MagicMock()
        client.get.return_value = b"dark"
        storage = RedisStorage(client)

        assert storage.get_item("theme") == "dark"
        client.get.assert_called_once_with(f"{DEFAULT_KEY_PREFIX}theme")

        storage.set_item("theme", "light")
        client.set.assert_called_once_with(f"{DEFAULT_KEY_PREFIX}theme", "light")

    def test_absent_key_returns_none(self) -> None:
        client = MagicMock()
        client.get.return_value = None
        assert RedisStorage(client, key_prefix="t:").get_item("user") is None

    def test_remove_item_reports_existence(self) -> None:
        client = MagicMock()
        client.delete.side_effect = [1, 0]
        storage = RedisStorage(client, key_prefix="t:")

        assert storage.remove_item("user") is True
        assert storage.remove_item("user") is False
        client.delete.assert_called_with("t:user")

    def test_keys_strip_prefix(self) -> None:
        client = MagicMock()
        client.scan_iter.return_value = iter([b"t:user", b"t:theme"])
        assert RedisStorage(client, key_prefix="t:").keys() == ["user", "theme"]
        client.scan_iter.assert_called_once_with(match="t:*")

    @pytest.mark.parametrize("method", ["get", "set", "delete"])
    def test_redis_errors_become_connection_errors(self, method: str) -> None:
        client = MagicMock()
        getattr(client, method).side_effect = RedisClientConnectionError("down")
        storage = RedisStorage(client)

        with pytest.raises(RedisConnectionError):
            if method == "get":
                storage.get_item("theme")
            elif method == "set":
                storage.set_item("theme", "dark")
            else:
                storage.remove_item("theme")

    def test_connection_error_is_storage_unavailable(self) -> None:
        assert issubclass(RedisConnectionError, StorageUnavailableError)
