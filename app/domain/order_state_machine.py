"""
Allowed order status transitions.

Orders only move forward, one step at a time:

    pending -> shipped -> delivered

Re-applying the current status is accepted and changes nothing. Backward
moves and skipped steps are rejected.
"""
from app.data.models.enums import OrderStatus

VALID_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.SHIPPED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),  # final
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in VALID_TRANSITIONS[current]


def is_final(status: OrderStatus) -> bool:
    return not VALID_TRANSITIONS[status]
