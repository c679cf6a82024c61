"""
Unit Tests: CatalogService

Covers parsing of textual price/stock and the seller/buyer listings.
"""
from decimal import Decimal

import pytest

from app.domain.errors import ValidationError
from app.services.catalog_service import CatalogService, parse_price, parse_stock


class TestParsing:

    @pytest.mark.parametrize("raw, expected", [
        ("12.5", Decimal("12.50")),
        (" 0 ", Decimal("0.00")),
        (7, Decimal("7.00")),
        ("3.999", Decimal("4.00")),
        ("99999999.99", Decimal("99999999.99")),
    ])
    def test_parse_price(self, raw, expected):
        assert parse_price(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "inf", "-1", "1e30", "100000000"])
    def test_parse_price_rejects(self, raw):
        with pytest.raises(ValidationError):
            parse_price(raw)

    def test_parse_stock(self):
        assert parse_stock("10") == 10
        assert parse_stock(str(2**31 - 1)) == 2**31 - 1

    @pytest.mark.parametrize("raw", ["ten", "1.5", "-3", "", "99999999999999999999", str(2**31)])
    def test_parse_stock_rejects(self, raw):
        with pytest.raises(ValidationError):
            parse_stock(raw)


class TestCatalog:

    def test_create_book(self, db, seller):
        book = CatalogService(db).create(seller.id, "Dune", "Spice", "9.99", "4")

        assert book.id is not None
        assert book.seller_id == seller.id
        assert book.price == Decimal("9.99")
        assert book.stock == 4
        assert book.image_url is None

    def test_create_requires_title(self, db, seller):
        with pytest.raises(ValidationError):
            CatalogService(db).create(seller.id, "   ", "", "1", "1")

    def test_invalid_numbers_do_not_insert(self, db, seller):
        service = CatalogService(db)
        with pytest.raises(ValidationError):
            service.create(seller.id, "Dune", "", "not-a-price", "1")

        assert service.list_mine(seller.id) == []

    def test_list_mine_is_scoped_to_seller(self, db, seller, other_seller, make_book):
        make_book(seller, title="Mine")
        make_book(other_seller, title="Theirs")

        service = CatalogService(db)
        assert [b.title for b in service.list_mine(seller.id)] == ["Mine"]
        assert [b.title for b in service.list_all()] == ["Mine", "Theirs"]

    def test_list_all_embeds_seller(self, db, seller, make_book):
        make_book(seller)

        books = CatalogService(db).list_all()
        assert books[0].seller.name == "Sam Seller"
