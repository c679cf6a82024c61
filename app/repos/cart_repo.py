# app/repos/cart_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, joinedload

from app.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_item(self, buyer_id: int, book_id: int, lock: bool = False) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.buyer_id == buyer_id,
            CartItemModel.book_id == book_id,
        )
        if lock:
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalars().first()

    def list_for_buyer(self, buyer_id: int, lock: bool = False) -> list[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.buyer_id == buyer_id)
            .order_by(CartItemModel.id)
        )
        if lock:
            # FOR UPDATE nie moze isc z outer join, ksiazki dociagamy osobno
            stmt = stmt.with_for_update()
        else:
            stmt = stmt.options(joinedload(CartItemModel.book))
        return list(self.db.execute(stmt).scalars())

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_items(self, item_ids: list[int]) -> int:
        # tylko zablokowane linie, dodane w miedzyczasie zostaja w koszyku
        result = self.db.execute(
            delete(CartItemModel)
            .where(CartItemModel.id.in_(item_ids))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
