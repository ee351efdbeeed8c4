from sqlalchemy import Column, Index, String

from app.db.session import Base
from app.models.audit import LIVE_ROWS, AuditColumns


class User(AuditColumns, Base):
    __tablename__ = "users"
    __table_args__ = (
        # uniqueness only holds among rows that are not soft-deleted
        Index("uq_users_email_live", "email", unique=True, postgresql_where=LIVE_ROWS, sqlite_where=LIVE_ROWS),
        Index("uq_users_username_live", "username", unique=True, postgresql_where=LIVE_ROWS, sqlite_where=LIVE_ROWS),
    )

    username = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash, never plaintext
    first_name = Column(String(150), nullable=True)
    last_name = Column(String(150), nullable=True)
