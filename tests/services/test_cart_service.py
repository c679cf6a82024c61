"""
Unit Tests: CartService

- add() accumulates quantity per (buyer, book)
- add() rejects unknown books and non-positive quantities
"""
import pytest

from app.domain.errors import BookNotFoundError, ValidationError
from app.services.cart_service import CartService


class TestAddToCart:

    def test_first_add_creates_line(self, db, buyer, seller, make_book):
        book = make_book(seller)

        item = CartService(db).add(buyer.id, book.id)

        assert item.buyer_id == buyer.id
        assert item.book_id == book.id
        assert item.quantity == 1

    def test_repeat_add_accumulates(self, db, buyer, seller, make_book):
        book = make_book(seller)
        service = CartService(db)

        for quantity in (2, 3, 1):
            service.add(buyer.id, book.id, quantity)

        items = service.list(buyer.id)
        assert len(items) == 1
        assert items[0].quantity == 6

    def test_no_stock_check_at_add_time(self, db, buyer, seller, make_book):
        book = make_book(seller, stock=1)

        item = CartService(db).add(buyer.id, book.id, 5)

        assert item.quantity == 5

    def test_unknown_book(self, db, buyer):
        with pytest.raises(BookNotFoundError) as exc_info:
            CartService(db).add(buyer.id, 9999)

        assert exc_info.value.book_id == 9999

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity(self, db, buyer, seller, make_book, quantity):
        book = make_book(seller)

        with pytest.raises(ValidationError):
            CartService(db).add(buyer.id, book.id, quantity)


class TestListCart:

    def test_list_is_scoped_to_buyer(self, db, buyer, seller, make_book):
        from app.data.models import Role
        from app.services.user_service import UserService

        other, _ = UserService(db).signup(Role.BUYER, "Other", "other@mail.com", "secret123")
        book = make_book(seller)
        service = CartService(db)
        service.add(buyer.id, book.id, 2)
        service.add(other.id, book.id, 1)

        items = service.list(buyer.id)
        assert [(i.book_id, i.quantity) for i in items] == [(book.id, 2)]
        assert items[0].book.title == "Dune"
