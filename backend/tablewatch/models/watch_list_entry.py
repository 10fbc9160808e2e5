"""
Watched venue: one Resy venue plus the search window we book into. Each row gets
its own cron job; reservation_details_json is filled once a booking succeeds.
"""
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from tablewatch.db.base import Base


class WatchListEntry(Base):
    __tablename__ = "watched_venues"

    id = Column(Integer, primary_key=True, index=True)
    venue_id = Column(Integer, nullable=False, index=True)
    venue_name = Column(String(255), nullable=False)
    party_size = Column(Integer, nullable=False, default=2)
    interval_days = Column(Integer, nullable=False, default=1)  # 1 = today, 2 = tomorrow, ...
    min_time = Column(String(8), nullable=False)  # HH:MM or HH:MM:SS
    max_time = Column(String(8), nullable=False)
    preferred_time = Column(String(8), nullable=True)
    cron = Column(String(64), nullable=False)  # crontab expression, e.g. "*/5 9-23 * * *"
    reservation_details_json = Column(Text, nullable=True)  # null until booked
    booked_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
