# app/repos/book_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session, joinedload

from app.data.models.book import BookModel


class BookRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_book(self, book_id: int) -> BookModel | None:
        return self.db.get(BookModel, book_id)

    def get_stock(self, book_id: int) -> int | None:
        return self.db.execute(
            select(BookModel.stock).where(BookModel.id == book_id)
        ).scalar_one_or_none()

    def list_all(self) -> list[BookModel]:
        return list(
            self.db.execute(
                select(BookModel).options(joinedload(BookModel.seller)).order_by(BookModel.id)
            ).scalars()
        )

    def list_by_seller(self, seller_id: int) -> list[BookModel]:
        return list(
            self.db.execute(
                select(BookModel)
                .options(joinedload(BookModel.seller))
                .where(BookModel.seller_id == seller_id)
                .order_by(BookModel.id)
            ).scalars()
        )

    def create_book(self, book: BookModel) -> BookModel:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def decrement_stock(self, book_id: int, quantity: int) -> bool:
        # compare-and-swap, warunek stock >= q sprawdzany przez baze w tym samym UPDATE
        # UPDATE books SET stock = stock - q WHERE id = ? AND stock >= q
        result = self.db.execute(
            update(BookModel)
            .where(BookModel.id == book_id, BookModel.stock >= quantity)
            .values(stock=BookModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
