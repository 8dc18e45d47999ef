"""
Turns StateEvents into view rows.

Formatting is pure: the only inputs are the events, the display timezone
and, for relative times, the current instant. Output order always
matches input order.
"""
import math
from datetime import datetime, timezone, tzinfo
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from statusboard.schemas.status import CurrentStatusRow, HistoryRow
from statusboard.services.state_queries import StateEvent
from statusboard.services.status_vocabulary import (
    LabelSet,
    status_class,
    status_label,
)

SECONDS_PER_DAY = 86400
DAYS_PER_MONTH = 146097 / 4800  # average Gregorian month


def resolve_timezone(name: Optional[str]) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def humanize_seconds(seconds: float) -> str:
    """
    Approximate human duration, e.g. "a few seconds", "an hour", "3 days".

    Every unit is rounded independently and the first threshold that
    matches wins, so 3661 seconds reads as "an hour".
    """
    seconds = abs(seconds)
    secs = _round_half_up(seconds)
    minutes = _round_half_up(seconds / 60)
    hours = _round_half_up(seconds / 3600)
    days_exact = seconds / SECONDS_PER_DAY
    days = _round_half_up(days_exact)
    months = _round_half_up(days_exact / DAYS_PER_MONTH)
    years = _round_half_up(days_exact / DAYS_PER_MONTH / 12)

    if secs < 45:
        return "a few seconds"
    if minutes <= 1:
        return "a minute"
    if minutes < 45:
        return f"{minutes} minutes"
    if hours <= 1:
        return "an hour"
    if hours < 22:
        return f"{hours} hours"
    if days <= 1:
        return "a day"
    if days < 26:
        return f"{days} days"
    if months <= 1:
        return "a month"
    if months < 11:
        return f"{months} months"
    if years <= 1:
        return "a year"
    return f"{years} years"


def duration_between(start_time: int, end_time: int) -> str:
    return humanize_seconds(end_time - start_time)


def time_since(start_time: int, now: datetime) -> str:
    delta = now.timestamp() - start_time
    if delta < 0:
        return f"in {humanize_seconds(delta)}"
    return f"{humanize_seconds(delta)} ago"


def format_timestamp(unix_time: int, tz: tzinfo = timezone.utc) -> str:
    """Render as "14 November 2023, 22:13:20 +00:00"."""
    moment = datetime.fromtimestamp(unix_time, tz)
    offset = moment.strftime("%z")
    return moment.strftime("%d %B %Y, %H:%M:%S ") + f"{offset[:3]}:{offset[3:]}"


def format_history_rows(
    events: Sequence[StateEvent],
    now: datetime,
    tz: tzinfo = timezone.utc
) -> List[HistoryRow]:
    """
    Rows for the history page.

    The duration spans start_time to end_time; an event that is still open
    is measured up to `now`.

    Raises:
        UnknownStatusCodeError: if any event has a state outside 0..3
    """
    now_ts = int(now.timestamp())
    rows = []
    for event in events:
        end_time = event.end_time if event.end_time is not None else now_ts
        rows.append(HistoryRow(
            service=event.description,
            status=status_label(event.state, LabelSet.GENERIC),
            bs_class=status_class(event.state),
            duration=duration_between(event.start_time, end_time),
            date_time=format_timestamp(event.start_time, tz),
        ))
    return rows


def format_current_status_rows(
    events: Sequence[StateEvent],
    now: datetime
) -> List[CurrentStatusRow]:
    return [
        CurrentStatusRow(
            service=event.description,
            status=status_label(event.state, LabelSet.LINES),
            bs_class=status_class(event.state),
            last_check=time_since(event.start_time, now),
        )
        for event in events
    ]
