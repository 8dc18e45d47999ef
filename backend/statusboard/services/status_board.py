"""
Composition of the query layer, formatter and recency cache.

One StatusBoard is built per application and exposes the two read
operations the pages and the JSON API consume.
"""
import logging
from datetime import datetime
from typing import Callable, List, Tuple

from sqlalchemy.orm import sessionmaker

from statusboard.config import Settings
from statusboard.db import session_scope
from statusboard.schemas.status import CurrentStatusRow, HistoryRow
from statusboard.services.recency_cache import CacheEntry, RecencyCache, utc_now
from statusboard.services.row_formatter import (
    format_current_status_rows,
    format_history_rows,
    resolve_timezone,
)
from statusboard.services.state_queries import fetch_current_status, fetch_history

logger = logging.getLogger(__name__)


class StatusBoard:
    def __init__(
        self,
        session_factory: sessionmaker,
        settings: Settings,
        clock: Callable[[], datetime] = utc_now
    ):
        self.session_factory = session_factory
        self.excluded_service_id = settings.excluded_service_id
        self.tz = resolve_timezone(settings.display_timezone)
        self.clock = clock
        self.cache: RecencyCache[CurrentStatusRow] = RecencyCache(
            self._load_current_status, clock=clock
        )

    def get_history_rows(self) -> List[HistoryRow]:
        """
        Last 100 state transitions, newest first. Never cached.

        Raises:
            DatabaseConnectionError: the query failed
            UnknownStatusCodeError: a row carries a state outside 0..3
        """
        with session_scope(self.session_factory) as db:
            events = fetch_history(db, self.excluded_service_id)
        return format_history_rows(events, self.clock(), self.tz)

    def get_current_status_rows(self) -> Tuple[CurrentStatusRow, ...]:
        return self.cache.get()

    def get_current_status_entry(self) -> CacheEntry[CurrentStatusRow]:
        return self.cache.get_entry()

    def _load_current_status(self) -> List[CurrentStatusRow]:
        with session_scope(self.session_factory) as db:
            events = fetch_current_status(db, self.excluded_service_id)
        logger.info(f"Loaded current status for {len(events)} services")
        return format_current_status_rows(events, self.clock())
