from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from statusboard.config import Settings
from statusboard.db import Base, build_session_factory
from statusboard.models.centreon import Service, ServiceStateEvent

T0 = 1700000000  # 14 November 2023, 22:13:20 UTC


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime.fromtimestamp(T0 + 4 * 3600, timezone.utc))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        excluded_service_id=3,
        display_timezone="UTC",
        _env_file=None,
    )


def add_service(db, service_id, description, active_checks=1):
    db.add(Service(service_id=service_id, host_id=1, description=description,
                   active_checks=active_checks))


def add_event(db, service_id, start_time, end_time=None, state=0, last_update=0):
    db.add(ServiceStateEvent(
        host_id=1,
        service_id=service_id,
        start_time=start_time,
        end_time=end_time,
        state=state,
        last_update=last_update,
    ))


@pytest.fixture
def seeded(db_session):
    """
    Three lines plus the excluded service 3.

    Line 1 went OK -> CRITICAL -> OK; Line 2 is WARNING; Line 4 is not
    actively checked.
    """
    add_service(db_session, 1, "Line 1")
    add_service(db_session, 2, "Line 2")
    add_service(db_session, 3, "Poller heartbeat")
    add_service(db_session, 4, "Line 4", active_checks=0)

    add_event(db_session, 1, T0 - 7200, T0 - 3600, state=0)
    add_event(db_session, 1, T0 - 3600, T0, state=2)
    add_event(db_session, 1, T0, None, state=0, last_update=1)
    add_event(db_session, 2, T0 + 600, 0, state=1, last_update=1)
    add_event(db_session, 3, T0 + 1200, None, state=2, last_update=1)
    add_event(db_session, 4, T0 + 1800, None, state=3, last_update=1)
    db_session.commit()
    return db_session
