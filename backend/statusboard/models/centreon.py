"""
Mapping of the monitoring storage tables read by the status board.

Only the columns the queries touch are declared. The tables are owned by
the monitoring engine; this service never writes to them.
"""
from sqlalchemy import Column, Integer, String, SmallInteger

from statusboard.db import Base


class Service(Base):
    __tablename__ = "services"

    service_id = Column(Integer, primary_key=True)
    host_id = Column(Integer, nullable=True)
    description = Column(String(255), nullable=False)
    active_checks = Column(SmallInteger, nullable=True)


class ServiceStateEvent(Base):
    __tablename__ = "servicestateevents"

    servicestateevent_id = Column(Integer, primary_key=True, autoincrement=True)
    host_id = Column(Integer, nullable=True)
    service_id = Column(Integer, nullable=False, index=True)
    start_time = Column(Integer, nullable=False)
    end_time = Column(Integer, nullable=True)
    state = Column(SmallInteger, nullable=False)
    # 1 on the row holding the service's current state
    last_update = Column(SmallInteger, nullable=True)
    in_downtime = Column(SmallInteger, nullable=True)
    ack_time = Column(Integer, nullable=True)
