from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.db.session import Base
from app.models.audit import AuditColumns


class Order(AuditColumns, Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_orders_quantity_positive"),
        CheckConstraint("total_price >= 0", name="ck_orders_total_price_non_negative"),
    )

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False)

    # no cascade: an order outlives whatever happens to its user or product
    user = relationship("User", backref="orders")
    product = relationship("Product", backref="orders")
