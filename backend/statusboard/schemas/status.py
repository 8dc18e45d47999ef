"""
View rows handed to the templates and the JSON API.

Rows are frozen: once formatted they are only read.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class HistoryRow(BaseModel):
    service: str
    status: str  # 'OK' | 'WARNING' | 'CRITICAL' | 'UNKNOWN'
    bs_class: str = Field(serialization_alias="bsClass")
    duration: str  # e.g. "an hour"
    date_time: str = Field(serialization_alias="dateTime")  # e.g. "14 November 2023, 22:13:20 +00:00"

    class Config:
        frozen = True


class CurrentStatusRow(BaseModel):
    service: str
    status: str  # 'LINES AVAILABLE' | 'SOME ISSUES' | 'LINES DOWN' | 'UNKNOWN'
    bs_class: str = Field(serialization_alias="bsClass")
    last_check: str = Field(serialization_alias="lastCheck")  # e.g. "3 hours ago"

    class Config:
        frozen = True


class HistoryResponse(BaseModel):
    rows: List[HistoryRow]


class CurrentStatusResponse(BaseModel):
    rows: List[CurrentStatusRow]
    expires_at: Optional[datetime] = Field(default=None, serialization_alias="expiresAt")


class CacheStats(BaseModel):
    has_entry: bool
    fresh: bool
    expires_at: Optional[datetime] = None
    refreshes: int
    hits: int
    ttl_seconds: int


class HealthResponse(BaseModel):
    status: str
    cache: Optional[CacheStats] = None
