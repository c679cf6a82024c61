from datetime import datetime, timezone

from sqlalchemy import Column, Integer, ForeignKey, String, Text, Numeric, DateTime, CheckConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


class BookModel(Base):
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_books_stock_non_negative"),
    )

    id = Column(Integer, primary_key=True)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    image_url = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    seller = relationship("UserModel", back_populates="books")
