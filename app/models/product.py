from sqlalchemy import CheckConstraint, Column, Float, Index, Integer, String, Text

from app.db.session import Base
from app.models.audit import LIVE_ROWS, AuditColumns


class Product(AuditColumns, Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("uq_products_name_live", "name", unique=True, postgresql_where=LIVE_ROWS, sqlite_where=LIVE_ROWS),
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False)
