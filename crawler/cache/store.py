"""
In-memory page cache with a freshness window.

Entries are keyed by the raw request URL. An entry older than the TTL is
stale: it stays in the map until overwritten or cleared, but a cached read
ignores it and fetches again.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import httpx

from crawler.core.config import settings
from crawler.fetch import scraper
from crawler.fetch.user_agents import IdentityPool, default_pool
from crawler.schemas import CacheStats


@dataclass
class CacheEntry:
    url: str
    content: str
    fetched_at: float  # clock() value at write time

class FetchCache:
    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        identity: IdentityPool = default_pool,
        clock: Callable[[], float] = time.monotonic,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.ttl_seconds = settings.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self.identity = identity
        self.clock = clock
        self.client = client
        self._entries: Dict[str, CacheEntry] = {}

    def is_fresh(self, entry: CacheEntry) -> bool:
        return self.clock() - entry.fetched_at < self.ttl_seconds

    def get_entry(self, url: str) -> Optional[CacheEntry]:
        """Stored entry for url, fresh or stale"""
        return self._entries.get(url)

    async def fetch_with_status(self, url: str, use_cache: bool = True) -> Tuple[str, bool]:
        """
        Return (content, hit) for url.

        With use_cache and a fresh entry, the stored content is returned and
        no request is made. Otherwise the page is fetched and the entry for
        url is replaced, also when use_cache is False. Concurrent misses for
        the same url each go to the network; the last one to finish wins.
        """
        if use_cache:
            entry = self._entries.get(url)
            if entry is not None and self.is_fresh(entry):
                return entry.content, True

        content = await scraper.fetch_html(url, identity=self.identity, client=self.client)
        self._entries[url] = CacheEntry(url=url, content=content, fetched_at=self.clock())
        return content, False

    async def fetch(self, url: str, use_cache: bool = True) -> str:
        content, _ = await self.fetch_with_status(url, use_cache=use_cache)
        return content

    def clear(self):
        self._entries.clear()

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), urls=list(self._entries.keys()))
