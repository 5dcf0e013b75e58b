"""Tests for JsonRecordStore against real files in a temp directory."""

import json

import pytest

from shopfront.domain.exceptions import StorageError
from shopfront.infrastructure.persistence.json_record_store import JsonRecordStore

RECORDS = [
    {"id": 2, "name": "b", "nested": {"tags": ["x", "y"]}, "price": 1.5},
    {"id": 1, "name": "a", "extra": None},
]


class TestLazyInitialization:

    async def test_missing_file_is_created_empty(self, tmp_path):
        path = tmp_path / "deep" / "dir" / "things.json"
        store = JsonRecordStore(path)

        assert await store.load() == []
        assert json.loads(path.read_text(encoding="utf-8")) == []

    async def test_replace_creates_parents(self, tmp_path):
        path = tmp_path / "new" / "things.json"
        await JsonRecordStore(path).replace([{"id": 1}])
        assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 1}]

    async def test_existing_file_is_not_reinitialized(self, tmp_path):
        path = tmp_path / "things.json"
        path.write_text(json.dumps(RECORDS), encoding="utf-8")

        assert await JsonRecordStore(path).load() == RECORDS

    async def test_file_created_after_existence_check_is_kept(self, tmp_path, monkeypatch):
        # Another writer creates the file between the check and the create.
        path = tmp_path / "things.json"
        path.write_text(json.dumps(RECORDS), encoding="utf-8")
        monkeypatch.setattr(type(path), "exists", lambda self: False)

        assert await JsonRecordStore(path).load() == RECORDS

    async def test_zero_length_file_reads_as_empty(self, tmp_path):
        # Created but not yet written by a concurrent initializer.
        path = tmp_path / "things.json"
        path.touch()

        store = JsonRecordStore(path)
        assert await store.load() == []
        await store.replace([{"id": 1}])
        assert await store.load() == [{"id": 1}]


class TestRoundTrip:

    async def test_load_after_replace_returns_same_records(self, tmp_path):
        store = JsonRecordStore(tmp_path / "things.json")
        await store.replace(RECORDS)
        assert await store.load() == RECORDS

    async def test_replace_of_load_is_a_noop(self, tmp_path):
        path = tmp_path / "things.json"
        store = JsonRecordStore(path)
        await store.replace(RECORDS)
        before = path.read_text(encoding="utf-8")

        await store.replace(await store.load())

        assert path.read_text(encoding="utf-8") == before

    async def test_loaded_records_are_independent_copies(self, tmp_path):
        store = JsonRecordStore(tmp_path / "things.json")
        await store.replace(RECORDS)

        first = await store.load()
        first[0]["name"] = "changed"

        assert (await store.load())[0]["name"] == "b"

    async def test_no_caching_between_calls(self, tmp_path):
        path = tmp_path / "things.json"
        store = JsonRecordStore(path)
        await store.replace([{"id": 1}])

        path.write_text(json.dumps([{"id": 9}]), encoding="utf-8")

        assert await store.load() == [{"id": 9}]


class TestFailures:

    async def test_malformed_json_raises_storage_error(self, tmp_path):
        path = tmp_path / "things.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError, match="Malformed JSON"):
            await JsonRecordStore(path).load()

    async def test_non_array_raises_storage_error(self, tmp_path):
        path = tmp_path / "things.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(StorageError, match="JSON array"):
            await JsonRecordStore(path).load()

    async def test_failed_write_keeps_previous_content(self, tmp_path):
        path = tmp_path / "things.json"
        store = JsonRecordStore(path)
        await store.replace([{"id": 1}])

        with pytest.raises(StorageError, match="Cannot serialize"):
            await store.replace([{"id": 2, "bad": object()}])

        assert await store.load() == [{"id": 1}]

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    async def test_non_finite_numbers_are_not_written(self, tmp_path, value):
        path = tmp_path / "things.json"
        store = JsonRecordStore(path)
        await store.replace([{"id": 1}])

        with pytest.raises(StorageError, match="Cannot serialize"):
            await store.replace([{"x": value}])

        assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 1}]

    async def test_no_temporary_files_left_behind(self, tmp_path):
        store = JsonRecordStore(tmp_path / "things.json")
        await store.replace(RECORDS)
        await store.replace([])
        assert [p.name for p in tmp_path.iterdir()] == ["things.json"]

    async def test_unwritable_target_raises_storage_error(self, tmp_path):
        # A directory where the file should be makes the rename fail.
        path = tmp_path / "things.json"
        path.mkdir()
        (path / "keep").write_text("x", encoding="utf-8")
        with pytest.raises(StorageError):
            await JsonRecordStore(path).replace([])
