from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.domain.errors import BookNotFoundError, ValidationError
from app.repos.book_repo import BookRepo
from app.repos.cart_repo import CartRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk kupujacego: jedna linia na pare (buyer, book).
    commands (add) modyfikuja stan, query (list) tylko odczyt.
    Stan magazynu sprawdzany dopiero przy skladaniu zamowienia.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.books = BookRepo(db)

    #query - odczyt
    def list(self, buyer_id: int) -> list[CartItemModel]:
        return self.repo.list_for_buyer(buyer_id)

    #commands
    def add(self, buyer_id: int, book_id: int, quantity: int = 1) -> CartItemModel:
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0", details={"quantity": quantity})

        book = self.books.get_book(book_id)
        if not book:
            raise BookNotFoundError(book_id)

        try:
            existing = self.repo.get_cart_item(buyer_id, book_id, lock=True)

            if existing:
                logger.info(
                    f"Book {book_id} already in cart of buyer {buyer_id}, quantity "
                    f"{existing.quantity} -> {existing.quantity + quantity}"
                )
                existing.quantity += quantity
                item = existing
            else:
                logger.info(f"Adding book {book_id} x{quantity} to cart of buyer {buyer_id}")
                item = self.repo.add_cart_item(
                    CartItemModel(buyer_id=buyer_id, book_id=book_id, quantity=quantity)
                )

            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        return item
