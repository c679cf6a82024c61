"""
Unit Tests: OrderService status management and listings.
"""
from unittest.mock import MagicMock

import pytest

from app.data.models import OrderStatus
from app.domain.errors import (
    InvalidStatusError,
    InvalidTransitionError,
    OrderAlreadyFinalError,
    OrderNotFoundOrForbiddenError,
)
from app.domain.order_state_machine import can_transition, is_final
from app.services.cart_service import CartService
from app.services.order_service import OrderService


@pytest.fixture
def placed_order(db, buyer, seller, make_book):
    book = make_book(seller, stock=5)
    CartService(db).add(buyer.id, book.id, 1)
    return OrderService(db, MagicMock()).place_order(buyer.id)[0]


class TestStateMachine:

    @pytest.mark.parametrize("current, target, allowed", [
        (OrderStatus.PENDING, OrderStatus.SHIPPED, True),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED, True),
        (OrderStatus.PENDING, OrderStatus.DELIVERED, False),
        (OrderStatus.DELIVERED, OrderStatus.PENDING, False),
        (OrderStatus.SHIPPED, OrderStatus.PENDING, False),
    ])
    def test_transitions(self, current, target, allowed):
        assert can_transition(current, target) is allowed

    def test_delivered_is_final(self):
        assert is_final(OrderStatus.DELIVERED)
        assert not is_final(OrderStatus.PENDING)


class TestUpdateStatus:

    def test_ship_then_deliver(self, db, seller, placed_order):
        notifier = MagicMock()
        service = OrderService(db, notifier)

        service.update_status(seller.id, placed_order.id, "shipped")
        order = service.update_status(seller.id, placed_order.id, "delivered")

        assert order.status is OrderStatus.DELIVERED
        assert notifier.notify_status_changed.call_count == 2
        notifier.notify_status_changed.assert_called_with(placed_order.id, placed_order.buyer_id, "delivered")

    def test_invalid_status(self, db, seller, placed_order):
        with pytest.raises(InvalidStatusError):
            OrderService(db, MagicMock()).update_status(seller.id, placed_order.id, "lost")

    def test_other_seller_gets_not_found(self, db, other_seller, placed_order):
        with pytest.raises(OrderNotFoundOrForbiddenError):
            OrderService(db, MagicMock()).update_status(other_seller.id, placed_order.id, "shipped")

    def test_missing_order_gets_same_error(self, db, seller):
        with pytest.raises(OrderNotFoundOrForbiddenError) as exc_info:
            OrderService(db, MagicMock()).update_status(seller.id, 424242, "shipped")

        assert exc_info.value.message == "Order not found or not authorized"

    def test_skipping_a_step_is_rejected(self, db, seller, placed_order):
        with pytest.raises(InvalidTransitionError) as exc_info:
            OrderService(db, MagicMock()).update_status(seller.id, placed_order.id, "delivered")

        assert exc_info.value.current == "pending"
        assert exc_info.value.requested == "delivered"

    def test_moving_backwards_is_rejected(self, db, seller, placed_order):
        service = OrderService(db, MagicMock())
        service.update_status(seller.id, placed_order.id, "shipped")

        with pytest.raises(InvalidTransitionError):
            service.update_status(seller.id, placed_order.id, "pending")

        db.expire_all()
        assert service.repo.get_order(placed_order.id).status is OrderStatus.SHIPPED

    def test_delivered_order_is_final(self, db, seller, placed_order):
        service = OrderService(db, MagicMock())
        service.update_status(seller.id, placed_order.id, "shipped")
        service.update_status(seller.id, placed_order.id, "delivered")

        with pytest.raises(OrderAlreadyFinalError) as exc_info:
            service.update_status(seller.id, placed_order.id, "shipped")

        assert exc_info.value.kind == "invalid_transition"
        assert exc_info.value.message == f"Order {placed_order.id} is already delivered"

    def test_same_status_is_a_no_op(self, db, seller, placed_order):
        notifier = MagicMock()
        order = OrderService(db, notifier).update_status(seller.id, placed_order.id, "pending")

        assert order.status is OrderStatus.PENDING
        notifier.notify_status_changed.assert_not_called()


class TestListings:

    def test_seller_and_buyer_see_same_status(self, db, buyer, seller, placed_order):
        service = OrderService(db, MagicMock())
        service.update_status(seller.id, placed_order.id, "shipped")
        db.expire_all()

        seller_view = service.list_for_seller(seller.id)
        buyer_view = service.list_for_buyer(buyer.id)

        assert [o.status for o in seller_view] == [OrderStatus.SHIPPED]
        assert [o.status for o in buyer_view] == [OrderStatus.SHIPPED]
        assert seller_view[0].buyer.id == buyer.id
        assert buyer_view[0].seller.id == seller.id

    def test_listings_are_scoped(self, db, buyer, other_seller, placed_order):
        service = OrderService(db, MagicMock())

        assert service.list_for_seller(other_seller.id) == []
        assert service.list_for_buyer(other_seller.id) == []
