"""
Domain errors of the bookstore API.

Every error carries a machine-readable ``kind`` and the HTTP status it maps
to; the handlers in ``app.main`` turn them into
``{"success": false, "error": kind, "message": ...}`` responses.
"""


class BookstoreError(Exception):
    """
    Base exception for all bookstore errors.

    Attributes:
        message: Human-readable error message
        details: Optional dict with additional context (entity IDs, amounts)
    """

    kind = "internal"
    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


class UnauthenticatedError(BookstoreError):
    """Missing, malformed, expired or otherwise unusable bearer token."""

    kind = "unauthenticated"
    status_code = 401

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message)


class InvalidCredentialsError(UnauthenticatedError):
    def __init__(self):
        super().__init__("Invalid credentials")


class ForbiddenError(BookstoreError):
    kind = "forbidden"
    status_code = 403

    def __init__(self, message: str = "Only sellers can perform this action"):
        super().__init__(message)


class NotFoundError(BookstoreError):
    kind = "not_found"
    status_code = 404


class UserNotFoundError(NotFoundError):
    def __init__(self, email: str | None = None):
        super().__init__("User not found", details={"email": email} if email else None)


class BookNotFoundError(NotFoundError):
    def __init__(self, book_id: int):
        super().__init__("Book not found", details={"bookId": book_id})
        self.book_id = book_id


class OrderNotFoundOrForbiddenError(NotFoundError):
    """
    Raised when no order with the id is owned by the calling seller.

    Existence and ownership are checked together, the message is the same
    for both cases.
    """

    def __init__(self, order_id: int):
        super().__init__("Order not found or not authorized", details={"orderId": order_id})
        self.order_id = order_id


class ValidationError(BookstoreError):
    kind = "validation_error"
    status_code = 400


class InvalidStatusError(ValidationError):
    def __init__(self, status: str):
        super().__init__(f"Invalid status: {status!r}", details={"status": status})
        self.status = status


class InvalidTransitionError(BookstoreError):
    kind = "invalid_transition"
    status_code = 400

    def __init__(self, order_id: int, current: str, requested: str, message: str | None = None):
        super().__init__(
            message or f"Order {order_id} cannot move from '{current}' to '{requested}'",
            details={"orderId": order_id, "current": current, "requested": requested},
        )
        self.order_id = order_id
        self.current = current
        self.requested = requested


class OrderAlreadyFinalError(InvalidTransitionError):
    """Order reached its final status, no further change is possible."""

    def __init__(self, order_id: int, current: str, requested: str):
        super().__init__(order_id, current, requested, f"Order {order_id} is already {current}")


class ConflictError(BookstoreError):
    kind = "conflict"
    status_code = 400

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class EmptyCartError(BookstoreError):
    kind = "empty_cart"
    status_code = 400

    def __init__(self):
        super().__init__("Cart is empty")


class OrderPlacementFailedError(BookstoreError):
    """Placement aborted on a cart line; nothing from the attempt was committed."""

    kind = "order_placement_failed"
    status_code = 409

    def __init__(self, book_id: int, message: str | None = None, details: dict | None = None):
        super().__init__(
            message or f"Order placement failed on book {book_id}",
            details={"bookId": book_id, **(details or {})},
        )
        self.book_id = book_id


class InsufficientStockError(OrderPlacementFailedError):
    kind = "insufficient_stock"

    def __init__(self, book_id: int, requested: int, available: int):
        super().__init__(
            book_id,
            f"Insufficient stock for book {book_id}: requested {requested}, available {available}",
            details={"requested": requested, "available": available},
        )
        self.requested = requested
        self.available = available


class OperationTimeoutError(BookstoreError):
    kind = "timeout"
    status_code = 504

    def __init__(self, operation: str):
        super().__init__(f"{operation} timed out, please retry", details={"operation": operation})
