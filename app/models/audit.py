import datetime

from sqlalchemy import Column, DateTime, Integer, text

LIVE_ROWS = text("deleted_at IS NULL")


class AuditColumns:
    """id, created/updated timestamps and the soft-delete marker shared by every table."""

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow, nullable=False
    )
    deleted_at = Column(DateTime, nullable=True, index=True)
