# app/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from app.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def get_order_for_seller(self, order_id: int, seller_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel)
            .where(OrderModel.id == order_id, OrderModel.seller_id == seller_id)
            .with_for_update()
        ).scalar_one_or_none()

    def list_for_seller(self, seller_id: int) -> list[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .options(joinedload(OrderModel.book), joinedload(OrderModel.buyer))
                .where(OrderModel.seller_id == seller_id)
                .order_by(OrderModel.id)
            ).scalars()
        )

    def list_for_buyer(self, buyer_id: int) -> list[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .options(joinedload(OrderModel.book), joinedload(OrderModel.seller))
                .where(OrderModel.buyer_id == buyer_id)
                .order_by(OrderModel.id)
            ).scalars()
        )

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
