from sqlalchemy import Column, Integer, ForeignKey, DateTime, Numeric, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from app.data.database import Base
from app.data.models.enums import OrderStatus


def _now():
    return datetime.now(timezone.utc)


class OrderModel(Base):
    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_orders_quantity_positive"),
    )

    id = Column(Integer, primary_key=True)
    buyer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False)

    # ilosc i cena z chwili zakupu, cena ksiazki moze sie pozniej zmienic
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    status = Column(
        Enum(OrderStatus, values_callable=lambda e: [m.value for m in e], name="order_status"),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)

    book = relationship("BookModel")
    buyer = relationship("UserModel", foreign_keys=[buyer_id])
    seller = relationship("UserModel", foreign_keys=[seller_id])
