"""
Single-slot, time-bounded cache for the current status rows.

The slot is either empty or holds one CacheEntry. An entry is stale once
`now > expires_at`; staleness is only evaluated on read. Entries are
replaced whole, never mutated, and a failed refresh leaves the previous
state untouched.

Refreshes are single-flight: endpoints run on a thread pool, so a lock
makes concurrent misses wait for one loader call instead of each
querying the database.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Generic, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fixed; not configurable per request
CACHE_TTL = timedelta(minutes=10)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    expires_at: datetime
    rows: Tuple[T, ...]

    def is_fresh(self, now: datetime) -> bool:
        return not now > self.expires_at


class RecencyCache(Generic[T]):
    def __init__(
        self,
        loader: Callable[[], Sequence[T]],
        clock: Callable[[], datetime] = utc_now,
        ttl: timedelta = CACHE_TTL
    ):
        self._loader = loader
        self._clock = clock
        self._ttl = ttl
        self._entry: Optional[CacheEntry[T]] = None
        self._refresh_lock = threading.Lock()
        self._stats_lock = threading.Lock()
        self._refreshes = 0
        self._hits = 0

    @property
    def entry(self) -> Optional[CacheEntry[T]]:
        return self._entry

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def _record_hit(self) -> None:
        with self._stats_lock:
            self._hits += 1

    def _fresh_entry(self) -> Optional[CacheEntry[T]]:
        entry = self._entry
        if entry is not None and entry.is_fresh(self._clock()):
            return entry
        return None

    def get_entry(self) -> CacheEntry[T]:
        """
        Return the cached entry, refreshing it first if it is missing or stale.

        Raises:
            Whatever the loader raises; no entry is installed in that case.
        """
        entry = self._fresh_entry()
        if entry is not None:
            self._record_hit()
            return entry

        with self._refresh_lock:
            # Another thread may have refreshed while we waited
            entry = self._fresh_entry()
            if entry is not None:
                self._record_hit()
                return entry

            rows = tuple(self._loader())
            entry = CacheEntry(expires_at=self._clock() + self._ttl, rows=rows)
            self._entry = entry
            self._refreshes += 1
            logger.debug(
                f"Recency cache refreshed: {len(rows)} rows, "
                f"expires at {entry.expires_at.isoformat()}"
            )
            return entry

    def get(self) -> Tuple[T, ...]:
        return self.get_entry().rows

    def stats(self) -> dict:
        entry = self._entry
        return {
            "has_entry": entry is not None,
            "fresh": entry is not None and entry.is_fresh(self._clock()),
            "expires_at": entry.expires_at if entry else None,
            "refreshes": self._refreshes,
            "hits": self._hits,
            "ttl_seconds": int(self._ttl.total_seconds()),
        }
