# app/services/order_service.py
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, IntegrityError, DataError
from sqlalchemy.orm import Session

from app.data.models.enums import OrderStatus
from app.data.models.order import OrderModel
from app.domain.errors import (
    EmptyCartError,
    InsufficientStockError,
    InvalidStatusError,
    InvalidTransitionError,
    OrderAlreadyFinalError,
    OperationTimeoutError,
    OrderNotFoundOrForbiddenError,
    OrderPlacementFailedError,
)
from app.domain.order_state_machine import can_transition, is_final
from app.repos.book_repo import BookRepo
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.notification_service import NotificationService
from app.utils.retry import db_retry
from app.utils.settings import ORDER_LOCK_TIMEOUT_MS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Skladanie zamowienia z koszyka (command) i listy/status dla sprzedawcy i kupujacego.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.db = db
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.books = BookRepo(db)
        self.notification_service = notification_service or NotificationService()

    # =====================================================
    # COMMANDS
    # =====================================================
    def place_order(self, buyer_id: int) -> list[OrderModel]:
        """
        Use Case: zamiana calego koszyka na zamowienia.

        1. Pusty koszyk -> EmptyCartError
        2. Dla kazdej linii: warunkowe zmniejszenie stanu (stock >= q) i nowe zamowienie
        3. Usuniecie koszyka
        4. Commit jednej transakcji, potem powiadomienia

        Kazdy blad w trakcie = rollback calosci, stan i koszyk bez zmian.
        """
        try:
            orders = self._place_order_in_transaction(buyer_id)
        except OperationalError as e:
            logger.error(f"Order placement for buyer {buyer_id} gave up after retries: {e}")
            raise OperationTimeoutError("Order placement")

        logger.info(
            f"Buyer {buyer_id} placed {len(orders)} order(s): {[o.id for o in orders]}"
        )

        for order in orders:
            self.notification_service.notify_order_placed(order.id, order.seller_id, order.buyer_id)

        return orders

    @db_retry()
    def _place_order_in_transaction(self, buyer_id: int) -> list[OrderModel]:
        try:
            self._apply_lock_timeout()

            items = self.carts.list_for_buyer(buyer_id, lock=True)
            if not items:
                raise EmptyCartError()

            orders = []
            for item in items:
                orders.append(self._order_cart_line(buyer_id, item.book_id, item.quantity))

            self.carts.delete_items([item.id for item in items])
            self.db.commit()
            return orders

        except (EmptyCartError, OrderPlacementFailedError) as e:
            self.db.rollback()
            logger.warning(f"Order placement rejected for buyer {buyer_id}: {e}")
            raise
        except Exception:
            self.db.rollback()
            raise

    def _order_cart_line(self, buyer_id: int, book_id: int, quantity: int) -> OrderModel:
        book = self.books.get_book(book_id)
        if book is None:
            raise OrderPlacementFailedError(book_id, f"Book {book_id} is no longer available")

        try:
            if not self.books.decrement_stock(book_id, quantity):
                available = self.books.get_stock(book_id) or 0
                raise InsufficientStockError(book_id, requested=quantity, available=available)

            return self.repo.add_order(
                OrderModel(
                    buyer_id=buyer_id,
                    seller_id=book.seller_id,
                    book_id=book_id,
                    quantity=quantity,
                    unit_price=book.price,
                    status=OrderStatus.PENDING,
                )
            )
        except (IntegrityError, DataError) as e:
            logger.error(f"Database rejected order line for book {book_id}: {e}")
            raise OrderPlacementFailedError(book_id)

    def _apply_lock_timeout(self):
        # sqlite: busy timeout ustawiony na polaczeniu
        if self.db.get_bind().dialect.name == "postgresql":
            self.db.execute(text(f"SET LOCAL lock_timeout = '{int(ORDER_LOCK_TIMEOUT_MS)}ms'"))

    def update_status(self, seller_id: int, order_id: int, new_status: str) -> OrderModel:
        """
        Use Case: zmiana statusu przez sprzedawce.
        Istnienie i wlasnosc sprawdzane razem, obcy sprzedawca dostaje ten sam 404.
        """
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise InvalidStatusError(new_status)

        try:
            order = self.repo.get_order_for_seller(order_id, seller_id)
            if not order:
                raise OrderNotFoundOrForbiddenError(order_id)

            current = order.status
            if current == target:
                self.repo.rollback()
                return order

            if is_final(current):
                raise OrderAlreadyFinalError(order_id, current.value, target.value)
            if not can_transition(current, target):
                raise InvalidTransitionError(order_id, current.value, target.value)

            order.status = target
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Order {order_id} status {current.value} -> {target.value} by seller {seller_id}")
        self.notification_service.notify_status_changed(order.id, order.buyer_id, target.value)
        return order

    # =====================================================
    # QUERY
    # =====================================================
    def list_for_seller(self, seller_id: int) -> list[OrderModel]:
        return self.repo.list_for_seller(seller_id)

    def list_for_buyer(self, buyer_id: int) -> list[OrderModel]:
        return self.repo.list_for_buyer(buyer_id)
