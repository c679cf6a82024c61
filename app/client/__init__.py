from app.client.bookstore_client import ApiError, BookstoreClient

__all__ = ["ApiError", "BookstoreClient"]
