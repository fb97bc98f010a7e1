"""Fetch pipeline: reuse the cached record or fetch, extract and cache a fresh one."""

import logging

from wttr.errors import CacheIoError, MalformedRecord
from wttr.ingest.extraction import extract_record
from wttr.ingest.wttr_client import WttrClient
from wttr.models.weather import WeatherRecord
from wttr.storage.cache_store import CacheStore

logger = logging.getLogger(__name__)


class FetchPipeline:
    def __init__(self, client: WttrClient, store: CacheStore, no_cache: bool = False):
        self.client = client
        self.store = store
        self.no_cache = no_cache

    def run(self) -> WeatherRecord:
        """Return the current weather record.

        With no_cache the store is neither read nor written. A failed cache
        write is logged and the fetched record is still returned. Fetched data
        is only cached once it parses; an unreadable cached record is
        refetched and overwritten.
        """
        cached = None if self.no_cache else self.store.read_if_fresh()
        if cached is not None:
            try:
                return WeatherRecord.from_json(cached)
            except MalformedRecord as e:
                logger.warning("Ignoring unreadable cache: %s", e)

        body = self._fetch()
        record = WeatherRecord.from_json(body)
        if not self.no_cache:
            try:
                self.store.write(body)
            except CacheIoError as e:
                logger.warning("Could not update cache: %s", e)
        return record

    def _fetch(self) -> str:
        raw = self.client.get_current()
        return extract_record(raw)
