"""Fetch Cache - stale-while-revalidate request cache keyed by endpoint path.

Invariants:
    - Keys are normalized (trailing "/" dropped): "/api/admin/posts/" and
      "/api/admin/posts" are the same entry
    - Concurrent load() calls for one key share a single in-flight fetch
    - A fresh entry (fetched within dedupe_interval, not invalidated) is served
      without a request
    - invalidate() keeps the last data for display but forces the next load()
      to refetch; a load() that finds an in-flight fetch from before the
      invalidation waits for it, then fetches again for the current generation
    - Errors are stored, not retried; the next load() tries again
    - In-flight fetches are never cancelled

Design Decisions:
    - Generation counter per entry instead of cancelling tasks: the result of a
      pre-write fetch is kept for display but is never returned as the answer
      to a load() issued after the write
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[Any]]

DEFAULT_DEDUPE_INTERVAL = 2.0


def normalize_key(key: str) -> str:
    return key.rstrip("/") or "/"


@dataclass
class FetchState:
    """Snapshot of one cache entry as a page sees it."""
    data: Any = None
    error: Exception | None = None
    is_loading: bool = False
    is_validating: bool = False


@dataclass
class _Entry:
    data: Any = None
    error: Exception | None = None
    fetched_at: float | None = None
    stale: bool = True
    generation: int = 0
    task: "asyncio.Task | None" = None
    task_generation: int = 0
    fetcher: Fetcher | None = None


class FetchCache:
    """Client-side request deduplication and revalidation."""

    def __init__(
        self,
        dedupe_interval: float = DEFAULT_DEDUPE_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.dedupe_interval = dedupe_interval
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def peek(self, key: str) -> FetchState:
        entry = self._entries.get(normalize_key(key))
        if entry is None:
            return FetchState(is_loading=True)
        in_flight = entry.task is not None
        return FetchState(
            data=entry.data,
            error=entry.error,
            is_loading=in_flight and entry.data is None,
            is_validating=in_flight,
        )

    async def load(self, key: str, fetcher: Fetcher) -> FetchState:
        """Return cached data when fresh, else fetch (sharing any in-flight request)."""
        key = normalize_key(key)
        entry = self._entries.setdefault(key, _Entry())
        entry.fetcher = fetcher
        while True:
            if entry.task is None and not self._is_fresh(entry):
                entry.task_generation = entry.generation
                entry.task = asyncio.create_task(
                    self._run(key, entry, fetcher, entry.generation),
                )
            if entry.task is None:
                break
            started_for = entry.task_generation
            await entry.task
            if started_for == entry.generation:
                break
        return self.peek(key)

    async def revalidate(self, key: str) -> FetchState:
        """Refetch now with the last fetcher used for this key."""
        key = normalize_key(key)
        entry = self._entries.get(key)
        if entry is None or entry.fetcher is None:
            return self.peek(key)
        self.invalidate(key)
        return await self.load(key, entry.fetcher)

    def invalidate(self, key: str) -> None:
        entry = self._entries.get(normalize_key(key))
        if entry is None:
            return
        entry.stale = True
        entry.generation += 1
        logger.debug("Cache entry invalidated", extra={"endpoint": key})

    def _is_fresh(self, entry: _Entry) -> bool:
        if entry.stale or entry.fetched_at is None:
            return False
        return self._clock() - entry.fetched_at < self.dedupe_interval

    async def _run(
        self, key: str, entry: _Entry, fetcher: Fetcher, generation: int,
    ) -> None:
        try:
            data = await fetcher(key)
        except Exception as e:
            logger.warning(f"Fetch failed: {e}", extra={"endpoint": key})
            entry.error = e
            entry.stale = True
        else:
            entry.data = data
            entry.error = None
            entry.fetched_at = self._clock()
            entry.stale = generation != entry.generation
        finally:
            entry.task = None
