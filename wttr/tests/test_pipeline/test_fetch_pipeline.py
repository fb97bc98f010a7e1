"""Tests for the fetch pipeline with a mocked client and in-memory store."""

import json
from unittest.mock import MagicMock

import pytest

from wttr.errors import CacheIoError, ExtractionFailed, FetchFailed, MalformedRecord
from wttr.ingest.wttr_client import WttrClient
from wttr.pipeline.fetch_pipeline import FetchPipeline


@pytest.fixture
def client(london_payload: dict) -> MagicMock:
    mock = MagicMock(spec=WttrClient)
    mock.get_current.return_value = london_payload
    return mock


class TestFetchPipeline:
    def test_cold_start_fetches_and_caches(
        self, client: MagicMock, memory_store, london_record_dict: dict
    ):
        record = FetchPipeline(client, memory_store).run()

        assert client.get_current.call_count == 1
        assert len(memory_store.writes) == 1
        assert json.loads(memory_store.writes[0]) == london_record_dict
        assert record.area == "London"

    def test_fresh_cache_skips_network(
        self, client: MagicMock, memory_store, london_record_dict: dict
    ):
        memory_store.content = json.dumps(dict(london_record_dict, area="Cached Town"))

        record = FetchPipeline(client, memory_store).run()

        assert record.area == "Cached Town"
        client.get_current.assert_not_called()
        assert memory_store.writes == []

    def test_no_cache_bypasses_store(
        self, client: MagicMock, memory_store, london_record_dict: dict
    ):
        memory_store.content = json.dumps(dict(london_record_dict, area="Cached Town"))

        record = FetchPipeline(client, memory_store, no_cache=True).run()

        assert record.area == "London"
        assert client.get_current.call_count == 1
        assert memory_store.reads == 0
        assert memory_store.writes == []

    def test_cache_write_failure_still_returns_record(
        self, client: MagicMock, memory_store, caplog
    ):
        memory_store.write = MagicMock(side_effect=CacheIoError("disk full"))

        record = FetchPipeline(client, memory_store).run()

        assert record.area == "London"
        assert "Could not update cache" in caplog.text

    def test_cache_read_failure_is_fatal(self, client: MagicMock, memory_store):
        memory_store.read_if_fresh = MagicMock(side_effect=CacheIoError("EACCES"))

        with pytest.raises(CacheIoError):
            FetchPipeline(client, memory_store).run()
        client.get_current.assert_not_called()

    def test_fetch_failure(self, client: MagicMock, memory_store):
        client.get_current.side_effect = FetchFailed("offline")

        with pytest.raises(FetchFailed):
            FetchPipeline(client, memory_store).run()
        assert memory_store.writes == []

    def test_extraction_failure_not_cached(self, client: MagicMock, memory_store):
        client.get_current.return_value = {"current_condition": []}

        with pytest.raises(ExtractionFailed):
            FetchPipeline(client, memory_store).run()
        assert memory_store.writes == []

    def test_corrupt_cache_is_refetched(self, client: MagicMock, memory_store, caplog):
        memory_store.content = "{truncated"

        record = FetchPipeline(client, memory_store).run()

        assert record.area == "London"
        assert client.get_current.call_count == 1
        assert json.loads(memory_store.writes[0])["area"] == "London"
        assert "Ignoring unreadable cache" in caplog.text

    def test_cache_with_unknown_code_is_refetched(
        self, client: MagicMock, memory_store, london_record_dict: dict
    ):
        memory_store.content = json.dumps(dict(london_record_dict, code=999))

        record = FetchPipeline(client, memory_store).run()

        assert record.condition_code == 113
        assert len(memory_store.writes) == 1

    def test_unknown_code_from_provider(
        self, client: MagicMock, memory_store, london_payload: dict
    ):
        london_payload["current_condition"][0]["weatherCode"] = "999"

        with pytest.raises(MalformedRecord):
            FetchPipeline(client, memory_store).run()
        assert memory_store.writes == []
