# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal
from app.data.models import BookModel, Role, UserModel
from app.utils.security import hash_password
from app.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PASSWORD = "demo1234"


def seed(session_factory=SessionLocal) -> bool:
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(UserModel).first():
            return False

        seller = UserModel(
            role=Role.SELLER,
            name="Demo Seller",
            email="seller@demo.com",
            password=hash_password(DEMO_PASSWORD),
        )
        buyer = UserModel(
            role=Role.BUYER,
            name="Demo Buyer",
            email="buyer@demo.com",
            password=hash_password(DEMO_PASSWORD),
        )
        db.add_all([seller, buyer])
        db.flush()

        db.add_all([
            BookModel(seller_id=seller.id, title="The Pragmatic Programmer",
                      description="From journeyman to master", price=Decimal("39.99"), stock=5),
            BookModel(seller_id=seller.id, title="Clean Code",
                      description="A handbook of agile software craftsmanship", price=Decimal("29.50"), stock=3),
        ])
        db.commit()
        logger.info("Seeded demo seller, buyer and books")
        return True
    finally:
        db.close()
