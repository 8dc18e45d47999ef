"""
Read-only queries against the monitoring storage schema.

Both queries resolve service_id to the service description and return
rows in database order (newest transition first). Any SQLAlchemy error is
re-raised as DatabaseConnectionError; nothing is retried here.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from statusboard.exceptions import DatabaseConnectionError
from statusboard.models.centreon import Service, ServiceStateEvent

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 100


@dataclass(frozen=True)
class StateEvent:
    start_time: int
    end_time: Optional[int]
    state: int
    description: str


def _state_events(db: Session, excluded_service_id: Optional[int]) -> Query:
    query = db.query(
        ServiceStateEvent.start_time,
        ServiceStateEvent.end_time,
        ServiceStateEvent.state,
        Service.description,
    ).join(Service, ServiceStateEvent.service_id == Service.service_id)
    if excluded_service_id is not None:
        query = query.filter(ServiceStateEvent.service_id != excluded_service_id)
    return query


def _to_event(row) -> StateEvent:
    return StateEvent(
        start_time=int(row.start_time),
        # open events carry NULL or 0 depending on the broker version
        end_time=int(row.end_time) if row.end_time else None,
        state=row.state,
        description=row.description,
    )


def _run(query: Query, name: str) -> List[StateEvent]:
    try:
        return [_to_event(row) for row in query.all()]
    except SQLAlchemyError as e:
        raise DatabaseConnectionError(f"Error running {name} query: {e}") from e


def fetch_history(
    db: Session,
    excluded_service_id: Optional[int] = None,
    limit: int = HISTORY_LIMIT
) -> List[StateEvent]:
    """
    Latest state transitions across every service except the excluded one.

    Args:
        db: Database session
        excluded_service_id: Service hidden from the results (None hides nothing)
        limit: Maximum number of rows

    Returns:
        StateEvents ordered by start_time descending
    """
    query = _state_events(db, excluded_service_id).order_by(
        ServiceStateEvent.start_time.desc()
    ).limit(limit)
    events = _run(query, "history")
    logger.debug(f"History query returned {len(events)} rows")
    return events


def fetch_current_status(
    db: Session,
    excluded_service_id: Optional[int] = None
) -> List[StateEvent]:
    """Current state of every actively checked service."""
    query = _state_events(db, excluded_service_id).filter(
        ServiceStateEvent.last_update == 1,
        Service.active_checks == 1,
    ).order_by(ServiceStateEvent.start_time.desc())
    events = _run(query, "current status")
    logger.debug(f"Current status query returned {len(events)} rows")
    return events
