# app/services/catalog_service.py
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from app.data.models.book import BookModel
from app.domain.errors import ValidationError
from app.repos.book_repo import BookRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

_CENT = Decimal("0.01")
# granice kolumn: Numeric(10, 2) i INTEGER
MAX_PRICE = Decimal("99999999.99")
MAX_STOCK = 2**31 - 1


def parse_price(raw: str | int | float | Decimal) -> Decimal:
    try:
        price = Decimal(str(raw).strip())
        if not price.is_finite():
            raise ValidationError("Price must be a number", details={"price": raw})
        price = price.quantize(_CENT)
    except (InvalidOperation, ValueError):
        raise ValidationError("Price must be a number", details={"price": raw})

    if price < 0:
        raise ValidationError("Price cannot be negative", details={"price": raw})
    if price > MAX_PRICE:
        raise ValidationError(f"Price cannot exceed {MAX_PRICE}", details={"price": raw})
    return price


def parse_stock(raw: str | int) -> int:
    try:
        stock = int(str(raw).strip())
    except ValueError:
        raise ValidationError("Stock must be a whole number", details={"stock": raw})

    if stock < 0:
        raise ValidationError("Stock cannot be negative", details={"stock": raw})
    if stock > MAX_STOCK:
        raise ValidationError(f"Stock cannot exceed {MAX_STOCK}", details={"stock": raw})
    return stock


class CatalogService:
    """
    Book listings.

    Buyers see the whole catalog, sellers see and create their own books.
    Stock is changed only by order placement.
    """

    def __init__(self, db: Session):
        self.repo = BookRepo(db)

    #query
    def list_all(self) -> list[BookModel]:
        return self.repo.list_all()

    def list_mine(self, seller_id: int) -> list[BookModel]:
        return self.repo.list_by_seller(seller_id)

    #command
    def create(
        self,
        seller_id: int,
        title: str,
        description: str | None,
        price: str | int | float | Decimal,
        stock: str | int,
        image_url: str | None = None,
    ) -> BookModel:
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required")

        book = BookModel(
            seller_id=seller_id,
            title=title,
            description=(description or "").strip(),
            price=parse_price(price),
            stock=parse_stock(stock),
            image_url=image_url,
        )
        created = self.repo.create_book(book)

        logger.info(f"Seller {seller_id} listed book {created.id} (stock {created.stock})")
        return created
